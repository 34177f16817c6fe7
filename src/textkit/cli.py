"""CLI entrypoint.

Commands:
- `textkit tokenize --config configs/tokenize.yaml [--input docs.jsonl] [--output tokens.jsonl]`

Flags given on the command line override the config file. Exit status is 1
when any document failed to tokenize.
"""

from __future__ import annotations
import argparse
import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config import TokenizeOptions, load_yaml
from .granularity import Granularity
from .logging_ import setup_logging
from .pipeline.tokenize import tokenize_batch
from .sources.local_jsonl import LocalJSONLSource
from .storage.writer import write_manifest, write_tokens_jsonl
from .tools.summary_report import render_summary, summarize

log = logging.getLogger("textkit.cli")


def resolve_run_id(cfg: Dict[str, Any]) -> str:
    """Explicit run.run_id, else tokenize_<UTC timestamp>."""
    explicit = (cfg.get("run") or {}).get("run_id")
    if explicit is not None and str(explicit).strip():
        return str(explicit).strip()
    return "tokenize_" + datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="textkit")
    sub = p.add_subparsers(dest="cmd", required=True)

    pt = sub.add_parser("tokenize", help="Tokenize JSONL documents")
    pt.add_argument("--config", help="YAML config with tokenize/input/output/run sections")
    pt.add_argument("--input", help="JSONL file, directory or glob (overrides input.dataset)")
    pt.add_argument("--output", help="Output JSONL path (overrides output.path)")
    pt.add_argument("--granularity", choices=[g.value for g in Granularity])
    pt.add_argument("--workers", type=int, help="Worker threads (overrides run.workers)")
    pt.add_argument("--log-dir", help="Also write logs to <log-dir>/<run_id>.log")
    pt.add_argument("--strict", action="store_true", help="Fail on unknown tokenize options")
    pt.add_argument("--progress", action="store_true", help="Show a progress bar")
    pt.add_argument("--summary", action="store_true", help="Print a per-document summary table")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    cfg = load_yaml(args.config) if args.config else {}
    run = cfg.get("run") or {}
    inp = cfg.get("input") or {}

    run_id = resolve_run_id(cfg)
    setup_logging(run_id=run_id, log_dir=args.log_dir or run.get("log_dir"))

    options = TokenizeOptions.from_dict(cfg.get("tokenize") or {}, strict=args.strict)
    options = options.override(granularity=args.granularity)

    dataset = args.input or inp.get("dataset")
    if not dataset:
        p.error("no input: pass --input or set input.dataset in the config")
    out_path = args.output or (cfg.get("output") or {}).get("path") or "tokens.jsonl"
    workers = args.workers or int(run.get("workers", 1))

    src = LocalJSONLSource(dataset, text_field=inp.get("text_field", "text"), name_field=inp.get("name_field", "id"))
    log.info(f"Run {run_id}: reading {src.metadata()['file_count']} file(s) from {dataset}")
    batch = src.read_batch()

    t0 = time.time()
    result = tokenize_batch(batch, options, workers=workers, verbose=bool(run.get("verbose", True)), progress=args.progress)
    elapsed = time.time() - t0

    n = write_tokens_jsonl(out_path, result)
    manifest_path = os.path.splitext(out_path)[0] + ".manifest.json"
    write_manifest(manifest_path, {
        "run_id": run_id,
        "input": src.metadata()["files"],
        "output": out_path,
        "options": options.to_dict(),
        "workers": workers,
        "elapsed_s": round(elapsed, 3),
        **summarize(result),
    })
    log.info(f"Wrote {n} documents to {out_path} (manifest: {manifest_path})")

    if args.summary:
        render_summary(result)
    return 1 if result.failures else 0
