"""JSONL writers.

- `<out>.jsonl`: one line per document, `{"name", "tokens"}` or, for a
  document that failed, `{"name", "error"}`
- manifest: options, counts and timings of the run
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List
import json
import os

from ..pipeline.context import TokenizedBatch


def token_rows(batch: TokenizedBatch) -> Iterator[Dict[str, Any]]:
    for name, toks in zip(batch.names, batch.documents):
        if toks is None:
            yield {"name": name, "error": batch.failure(name).reason}
        else:
            yield {"name": name, "tokens": list(toks)}


def append_jsonl(path: str, rows: List[Dict[str, Any]]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")


def write_tokens_jsonl(path: str, batch: TokenizedBatch) -> int:
    """Overwrite `path` with the batch; returns the number of lines written."""
    if os.path.exists(path):
        os.remove(path)
    rows = list(token_rows(batch))
    append_jsonl(path, rows)
    return len(rows)


def write_manifest(path: str, manifest: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
