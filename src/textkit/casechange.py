"""Case conversion for texts and token batches.

`keep_acronyms` leaves whole-word runs of two or more uppercase letters
(NATO, USA) untouched when lowercasing.
"""

from __future__ import annotations
import regex

from .pipeline.context import TokenizedBatch

ACRONYM_RE = regex.compile(r"\b\p{Lu}{2,}\b")


def char_tolower(text: str, keep_acronyms: bool = False) -> str:
    if not keep_acronyms:
        return text.lower()
    out = []
    pos = 0
    for m in ACRONYM_RE.finditer(text):
        out.append(text[pos:m.start()].lower())
        out.append(m.group())
        pos = m.end()
    out.append(text[pos:].lower())
    return "".join(out)


def char_toupper(text: str) -> str:
    return text.upper()


def tokens_tolower(batch: TokenizedBatch, keep_acronyms: bool = False) -> TokenizedBatch:
    return batch.with_documents(
        None if toks is None else tuple(char_tolower(t, keep_acronyms) for t in toks)
        for toks in batch.documents
    )


def tokens_toupper(batch: TokenizedBatch) -> TokenizedBatch:
    return batch.with_documents(
        None if toks is None else tuple(t.upper() for t in toks)
        for toks in batch.documents
    )
