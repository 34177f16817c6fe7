"""Unicode character-class helpers shared by the stages.

The standard `re` module has no `\\p{..}` classes, so everything here is
compiled with the `regex` package.
"""

from __future__ import annotations
import regex

from ..pipeline.context import SpanKind

# best-effort http(s) URL matcher; not RFC 3986
URL_RE = regex.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-z]{2,4}\b([-a-zA-Z0-9@:%_\+.~#?&/=]*)"
)

# a dash with a word character on each side, e.g. self-storage
INTRAWORD_DASH_RE = regex.compile(r"(?<=\w)\p{Pd}(?=\w)")

NUMBER_TOKEN_RE = regex.compile(r"\d+")
NUMBER_WORD_RE = regex.compile(r"\b\d+\b")
WHITESPACE_RUN_RE = regex.compile(r"\p{White_Space}+")
NEWLINE_RE = regex.compile(r"\r\n|[\n\r\x85\u2028\u2029]")
SINGLE_SEPARATOR_RE = regex.compile(r"\p{Z}")
PUNCT_RE = regex.compile(r"\p{P}")
SYMBOL_RE = regex.compile(r"\p{S}")

_WORDISH_RE = regex.compile(r"[\p{L}\p{N}_]")
_IGNORABLE_RE = regex.compile(r"[\p{M}\p{Cf}]")
_ALL_SPACE_RE = regex.compile(r"[\p{White_Space}\p{Z}]+")
_ALL_PUNCT_RE = regex.compile(r"\p{P}+")
_ALL_SYMBOL_RE = regex.compile(r"\p{S}+")


def classify_span(text: str, connector: str = "") -> SpanKind:
    """Word-break status of a segmented span.

    Spans holding a letter, digit, underscore or the placeholder connector are
    words (or numbers when purely digits); everything else is classified by its
    non-combining characters.
    """
    if NUMBER_TOKEN_RE.fullmatch(text):
        return SpanKind.NUMBER
    if _WORDISH_RE.search(text) or (connector and connector in text):
        return SpanKind.WORD
    if not text or _ALL_SPACE_RE.fullmatch(text):
        return SpanKind.SEPARATOR
    core = _IGNORABLE_RE.sub("", text)
    if core and _ALL_PUNCT_RE.fullmatch(core):
        return SpanKind.PUNCT
    if core and _ALL_SYMBOL_RE.fullmatch(core):
        return SpanKind.SYMBOL
    return SpanKind.OTHER


def punct_pattern(exempt: str = "") -> "regex.Pattern":
    """`\\p{P}` minus the characters in `exempt`."""
    if not exempt:
        return PUNCT_RE
    return regex.compile(r"(?![" + regex.escape(exempt) + r"])\p{P}")


def strip_urls(text: str) -> str:
    return URL_RE.sub("", text)
