import json
import logging
from pathlib import Path

import pytest

from textkit.config import get_docname_base, set_docname_base


@pytest.fixture(autouse=True)
def _isolate_root_logging():
    # CLI tests call setup_logging(), which attaches process-wide root handlers;
    # detach them after each test so later tests see a clean root logger.
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def tweets():
    return {
        "text1": "This is $10 in 999 different ways,\n up and down; left and right!",
        "text2": "@kenbenoit working: on #quanteda 2day\t4ever, http://textasdata.com?page=123.",
    }

@pytest.fixture
def restore_docname_base():
    base = get_docname_base()
    yield
    set_docname_base(base)

@pytest.fixture
def jsonl_corpus(tmp_path: Path) -> Path:
    path = tmp_path / "docs.jsonl"
    rows = [
        {"id": "d1", "text": "Prof. Plum killed Mrs. Peacock."},
        {"id": "d2", "text": "#textanalysis is great, @myhandle!"},
        {"id": "d3", "text": ""},
    ]
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n", encoding="utf-8")
    return path
