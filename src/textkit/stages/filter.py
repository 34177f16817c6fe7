"""Filter stages.

- StripUrls: drop http(s) URLs from the raw text (URLs cannot be rebuilt
  once split into fragments, so this runs before anything else)
- PruneFast: one regex pass removing numbers / punctuation / symbols from the
  whole text before the whitespace and fixed-delimiter splitters
- Filter: post-segmentation removal, class-specific per granularity

Word spans arrive already classified by the segmenter, so the word filter only
looks at `Span.kind`.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Callable, Dict, FrozenSet, List
import regex

from ..config import TokenizeOptions
from ..granularity import Granularity
from ..pipeline.context import Span, SpanKind, WorkItem
from ..utils.text import (
    NUMBER_WORD_RE,
    PUNCT_RE,
    SINGLE_SEPARATOR_RE,
    SYMBOL_RE,
    classify_span,
    punct_pattern,
    strip_urls,
)
from .base import Stage


class StripUrls(Stage):
    name = "strip_urls"
    layer = "filter"

    def apply(self, item: WorkItem) -> None:
        item.text = strip_urls(item.text)
        item.transform_chain.append("strip_urls_v1")


@lru_cache(maxsize=64)
def _prune_re(numbers: bool, punct: bool, symbols: bool, exempt: str) -> "regex.Pattern":
    parts = []
    if numbers:
        parts.append(NUMBER_WORD_RE.pattern)
    if punct:
        parts.append(punct_pattern(exempt).pattern)
    if symbols:
        parts.append(SYMBOL_RE.pattern)
    return regex.compile("|".join(parts))


class PruneFast(Stage):
    """Whole-text removal pass for the regex-split granularities.

    `_` and the placeholder connector always survive the punctuation pass;
    `@` and `#` survive it too while Twitter tags are preserved.
    """
    name = "prune_fast"
    layer = "filter"

    def __init__(self, options: TokenizeOptions):
        self.numbers = options.remove_numbers
        self.punct = options.remove_punct
        self.symbols = options.remove_symbols
        self.exempt = "_" + ("@#" if options.preserve_twitter_tags else "")

    def apply(self, item: WorkItem) -> None:
        exempt = self.exempt + (item.placeholders.connector if item.placeholders else "")
        pattern = _prune_re(self.numbers, self.punct, self.symbols, exempt)
        item.text = pattern.sub("", item.text)
        item.transform_chain.append("prune_fast_v1")


class SpanFilter:
    """Post-segmentation filter for one granularity.

    Calling it on its own output removes nothing further.
    """

    def __init__(self, options: TokenizeOptions):
        self.options = options
        self.granularity = options.granularity
        self.dropped_kinds = self._dropped_kinds(options)
        handlers: Dict[Granularity, Callable[[List[Span], str], List[Span]]] = {
            Granularity.WORD: self._by_kind,
            Granularity.WHITESPACE: self._by_kind,
            Granularity.FIXED_DELIMITER: self._by_kind,
            Granularity.CHARACTER: self._characters,
            Granularity.SENTENCE: self._sentences,
        }
        self._handler = handlers[self.granularity]

    @staticmethod
    def _dropped_kinds(o: TokenizeOptions) -> FrozenSet[SpanKind]:
        kinds = set()
        if o.remove_numbers:
            kinds.add(SpanKind.NUMBER)
        if o.remove_separators or (o.remove_punct and o.granularity is Granularity.WORD):
            kinds.add(SpanKind.SEPARATOR)
        if o.granularity is Granularity.WORD:
            # the fast splitters already stripped these characters before splitting
            if o.remove_punct:
                kinds.add(SpanKind.PUNCT)
            if o.remove_symbols:
                kinds.add(SpanKind.SYMBOL)
            if o.remove_punct or o.remove_symbols:
                kinds.add(SpanKind.OTHER)
        return frozenset(kinds)

    def __call__(self, spans: List[Span], connector: str = "") -> List[Span]:
        return self._handler(spans, connector)

    def _by_kind(self, spans: List[Span], connector: str) -> List[Span]:
        return [s for s in spans if s.text and s.kind not in self.dropped_kinds]

    def _characters(self, spans: List[Span], connector: str) -> List[Span]:
        o = self.options
        out = []
        for s in spans:
            text = s.text
            if o.remove_punct:
                text = PUNCT_RE.sub("", text)
            if o.remove_symbols:
                text = SYMBOL_RE.sub("", text)
            if not text:
                continue
            if o.remove_separators and SINGLE_SEPARATOR_RE.fullmatch(text):
                continue
            kind = s.kind if text == s.text else classify_span(text, connector)
            if o.remove_numbers and kind is SpanKind.NUMBER:
                continue
            out.append(Span(text, kind))
        return out

    def _sentences(self, spans: List[Span], connector: str) -> List[Span]:
        return [s for s in spans if s.text.strip()]


class Filter(Stage):
    name = "filter"
    layer = "filter"

    def __init__(self, options: TokenizeOptions):
        self.rules = SpanFilter(options)

    def apply(self, item: WorkItem) -> None:
        connector = item.placeholders.connector if item.placeholders else ""
        before = len(item.spans)
        item.spans = self.rules(item.spans, connector)
        item.transform_chain.append(f"filter_v1:{before - len(item.spans)}")
