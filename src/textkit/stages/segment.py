"""Segmenters: one per Granularity.

- word        UAX #29 word boundaries, spans classified at split time
- sentence    UAX #29 sentence boundaries on newline-collapsed text
- character   UAX #29 extended grapheme clusters
- whitespace  runs of White_Space characters
- fixed       the ASCII space only (fastest, least correct)

Boundary analysis comes from `uniseg`; character classes from `regex`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List

from uniseg.graphemecluster import grapheme_clusters
from uniseg.sentencebreak import sentences
from uniseg.wordbreak import words

from ..granularity import Granularity
from ..pipeline.context import Span, SpanKind, WorkItem
from ..utils.text import NEWLINE_RE, WHITESPACE_RUN_RE, classify_span
from .base import Stage


class Segmenter(ABC):
    granularity: Granularity

    @abstractmethod
    def split(self, text: str, connector: str = "") -> List[Span]:
        raise NotImplementedError


class WordSegmenter(Segmenter):
    granularity = Granularity.WORD

    def split(self, text: str, connector: str = "") -> List[Span]:
        return [Span(w, classify_span(w, connector)) for w in words(text) if w]


class SentenceSegmenter(Segmenter):
    granularity = Granularity.SENTENCE

    def split(self, text: str, connector: str = "") -> List[Span]:
        # a bare newline is a hard sentence break in UAX #29
        text = NEWLINE_RE.sub(" ", text)
        out = []
        for s in sentences(text):
            s = s.rstrip()
            if s:
                out.append(Span(s, SpanKind.WORD))
        return out


class CharacterSegmenter(Segmenter):
    granularity = Granularity.CHARACTER

    def split(self, text: str, connector: str = "") -> List[Span]:
        return [Span(g, classify_span(g, connector)) for g in grapheme_clusters(text) if g]


class WhitespaceSegmenter(Segmenter):
    granularity = Granularity.WHITESPACE

    def split(self, text: str, connector: str = "") -> List[Span]:
        return [Span(t, classify_span(t, connector)) for t in WHITESPACE_RUN_RE.split(text) if t]


class FixedDelimiterSegmenter(Segmenter):
    granularity = Granularity.FIXED_DELIMITER
    delimiter = " "

    def split(self, text: str, connector: str = "") -> List[Span]:
        # consecutive delimiters give empty spans; Filter drops them
        return [Span(t, classify_span(t, connector)) for t in text.split(self.delimiter)]


SEGMENTERS: Dict[Granularity, Segmenter] = {
    s.granularity: s
    for s in (
        WordSegmenter(),
        SentenceSegmenter(),
        CharacterSegmenter(),
        WhitespaceSegmenter(),
        FixedDelimiterSegmenter(),
    )
}


class Segment(Stage):
    name = "segment"
    layer = "segmentation"

    def __init__(self, granularity: Granularity):
        self.segmenter = SEGMENTERS[granularity]

    def apply(self, item: WorkItem) -> None:
        connector = item.placeholders.connector if item.placeholders else ""
        item.spans = self.segmenter.split(item.text, connector)
        item.transform_chain.append(f"segment_{self.segmenter.granularity.value}_v1")
