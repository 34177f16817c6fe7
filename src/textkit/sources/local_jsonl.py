"""Local JSONL document source.

Each line should be JSON with at least:
- text (configurable via text_field)
Optional:
- id (configurable via name_field), used as the document name

Supports multiple input formats:
- Single file: "path/to/file.jsonl"
- Multiple files: ["path/to/file1.jsonl", "path/to/file2.jsonl"]
- Directory: "path/to/directory/" (processes all .jsonl files)
- Glob pattern: "path/to/*.jsonl" or "path/to/**/*.jsonl"
"""

from __future__ import annotations
import glob
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from ..pipeline.context import Document, DocumentBatch

log = logging.getLogger("textkit.sources.local_jsonl")


class LocalJSONLSource:
    def __init__(self, dataset: Union[str, List[str]], text_field: str = "text", name_field: str = "id"):
        self.text_field = text_field
        self.name_field = name_field
        self.files = self._resolve_files(dataset)

    def _resolve_files(self, dataset: Union[str, List[str]]) -> List[str]:
        """Resolve a dataset argument to a list of file paths."""
        files = []

        if isinstance(dataset, list):
            for item in dataset:
                files.extend(self._resolve_files(item))
            return files

        dataset = str(dataset)
        path = Path(dataset)

        if '*' in dataset or '?' in dataset or '[' in dataset:
            matched_files = glob.glob(dataset, recursive=True)
            return sorted(f for f in matched_files if os.path.isfile(f) and f.endswith('.jsonl'))

        if path.is_dir():
            return sorted(str(f) for f in path.glob("**/*.jsonl") if f.is_file())

        # Single file (missing files are reported by stream())
        return [dataset]

    def metadata(self) -> Dict[str, Any]:
        return {
            "kind": "local_jsonl",
            "files": self.files,
            "file_count": len(self.files),
            "total_size_bytes": sum(os.path.getsize(f) for f in self.files if os.path.exists(f)),
        }

    def stream(self) -> Iterable[Document]:
        """Stream documents from all configured JSONL files."""
        for file_path in self.files:
            if not os.path.exists(file_path):
                log.warning(f"File not found: {file_path}, skipping")
                continue

            # undecodable bytes become lone surrogates; tokenize reports them per document
            with open(file_path, "r", encoding="utf-8", errors="surrogateescape") as f:
                for line_num, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        ex = json.loads(line)
                    except json.JSONDecodeError as e:
                        log.warning(f"Invalid JSON in {file_path}:{line_num}: {e}")
                        continue
                    name = ex.get(self.name_field)
                    yield Document(
                        name=str(name) if name is not None else f"{Path(file_path).stem}_{line_num}",
                        text=ex.get(self.text_field, "") or "",
                    )

    def read_batch(self) -> DocumentBatch:
        return DocumentBatch(tuple(self.stream()))
