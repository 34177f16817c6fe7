"""Segmentation units.

A closed set: every value has exactly one segmenter registered in
`textkit.stages.segment.SEGMENTERS`.
"""

from __future__ import annotations
from enum import Enum
from typing import Union

from .errors import UnsupportedGranularity


class Granularity(str, Enum):
    WORD = "word"
    SENTENCE = "sentence"
    CHARACTER = "character"
    WHITESPACE = "whitespace"
    FIXED_DELIMITER = "fixed-delimiter"

    @property
    def word_like(self) -> bool:
        return self in (Granularity.WORD, Granularity.WHITESPACE, Granularity.FIXED_DELIMITER)

    @property
    def fast(self) -> bool:
        """Regex-split granularities that filter before splitting."""
        return self in (Granularity.WHITESPACE, Granularity.FIXED_DELIMITER)

    @classmethod
    def parse(cls, value: Union[str, "Granularity"]) -> "Granularity":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = _ALIASES.get(key, key)
            for g in cls:
                if g.value == key:
                    return g
        raise UnsupportedGranularity(value, [g.value for g in cls])


# names used by the older word-splitting API
_ALIASES = {
    "fasterword": "whitespace",
    "fastestword": "fixed-delimiter",
    "fixed_delimiter": "fixed-delimiter",
}
