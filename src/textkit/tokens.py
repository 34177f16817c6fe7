"""Helpers for token batches built outside of `tokenize()`."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from .config import get_docname_base
from .errors import InvalidArgument
from .pipeline.context import TokenizedBatch


def is_tokenized_texts(x: Any) -> bool:
    return isinstance(x, TokenizedBatch)


def as_tokenized_texts(x: Any) -> TokenizedBatch:
    """Wrap already-tokenized texts as a TokenizedBatch.

    Accepts a TokenizedBatch (returned as is), a list of token lists (named
    `text1`, `text2`, ...) or a mapping of name -> token list.
    """
    if isinstance(x, TokenizedBatch):
        return x
    if isinstance(x, Mapping):
        names = list(x.keys())
        docs = list(x.values())
        if not all(isinstance(n, str) for n in names):
            raise InvalidArgument("document names must be strings")
    elif isinstance(x, (list, tuple)):
        base = get_docname_base()
        names = [f"{base}{i}" for i in range(1, len(x) + 1)]
        docs = list(x)
    else:
        raise InvalidArgument(f"input must be a list or mapping of token lists, got {type(x).__name__}")

    out = []
    for name, toks in zip(names, docs):
        if isinstance(toks, str) or not isinstance(toks, (list, tuple)) or not all(isinstance(t, str) for t in toks):
            raise InvalidArgument(f"{name}: input must be a list of character types")
        out.append(tuple(toks))
    return TokenizedBatch(names=tuple(names), documents=tuple(out), granularity="user")
