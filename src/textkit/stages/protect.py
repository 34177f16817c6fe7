"""Protector / Restorer stages.

Some characters must survive steps that would otherwise destroy them:

- `#` and `@` (Twitter sigils) would be split off by word segmentation
- intra-word dashes (self-storage) would be stripped as punctuation
- the period of `Mr.`, `Prof.`, ... would end a sentence

Before segmentation they are swapped for placeholders; afterwards `Restore`
swaps them back. Placeholders are spelled with a *connector* character: a
connector-punctuation codepoint that the Unicode word-break rules treat as
ExtendNumLet, so `‿ht‿tag` stays one word the same way `snake_case` does.

    #          -> ‿ht‿
    @          -> ‿as‿
    Mr.        -> Mr‿pd‿
    self-care  -> self‿hy002d‿care   (codepoint of the dash, lowercase hex)

The connector is chosen per document among those absent from its text, so
restoring never rewrites characters that were in the input.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
import regex

from ..errors import ProtectionError
from ..pipeline.context import Span, WorkItem
from ..utils.text import INTRAWORD_DASH_RE
from .base import Stage

CONNECTORS = ("\u203f", "\u2040", "\u2054", "\ufe33", "\ufe34", "\ufe4d", "\ufe4e", "\ufe4f", "\uff3f")

ABBREVIATIONS = ("Mr", "Mrs", "Ms", "Dr", "Jr", "Prof", "Ph.D", "M", "MM", "St", "etc")

_SIGILS = {"ht": "#", "as": "@", "pd": "."}

ABBREVIATION_RE = regex.compile(
    r"\b(" + "|".join(regex.escape(a) for a in sorted(ABBREVIATIONS, key=len, reverse=True)) + r")\."
)


@lru_cache(maxsize=None)
def _placeholder_re(connector: str) -> "regex.Pattern":
    c = regex.escape(connector)
    return regex.compile(c + r"(ht|as|pd|hy([0-9a-f]{4,6}))" + c)


@dataclass(frozen=True)
class PlaceholderTable:
    connector: str = CONNECTORS[0]

    @classmethod
    def for_text(cls, text: str, name: str = "") -> "PlaceholderTable":
        for c in CONNECTORS:
            if c not in text:
                return cls(c)
        raise ProtectionError(name, "every placeholder connector already occurs in the text")

    @property
    def hashtag(self) -> str:
        return f"{self.connector}ht{self.connector}"

    @property
    def at(self) -> str:
        return f"{self.connector}as{self.connector}"

    @property
    def period(self) -> str:
        return f"{self.connector}pd{self.connector}"

    def dash(self, ch: str) -> str:
        return f"{self.connector}hy{ord(ch):04x}{self.connector}"

    def protect_twitter(self, text: str) -> str:
        return text.replace("#", self.hashtag).replace("@", self.at)

    def protect_dashes(self, text: str) -> str:
        return INTRAWORD_DASH_RE.sub(lambda m: self.dash(m.group()), text)

    def protect_abbreviations(self, text: str) -> str:
        return ABBREVIATION_RE.sub(lambda m: m.group(1) + self.period, text)

    def restore(self, token: str) -> str:
        if self.connector not in token:
            return token
        # one left-to-right pass: each connector closes exactly one placeholder
        return _placeholder_re(self.connector).sub(self._original, token)

    @staticmethod
    def _original(m) -> str:
        code = m.group(1)
        if code.startswith("hy"):
            return chr(int(m.group(2), 16))
        return _SIGILS[code]


class AssignPlaceholders(Stage):
    name = "assign_placeholders"
    layer = "protection"

    def apply(self, item: WorkItem) -> None:
        item.placeholders = PlaceholderTable.for_text(item.text, item.name)
        item.transform_chain.append(f"placeholders_u{ord(item.placeholders.connector):04x}")


class ProtectTwitter(Stage):
    name = "protect_twitter"
    layer = "protection"

    def apply(self, item: WorkItem) -> None:
        item.text = item.placeholders.protect_twitter(item.text)
        item.transform_chain.append("protect_twitter_v1")


class GuardHyphens(Stage):
    """Intra-word dashes: keep them inside the word, or split the word in two."""
    name = "guard_hyphens"
    layer = "protection"

    def __init__(self, split: bool):
        self.split = bool(split)

    def apply(self, item: WorkItem) -> None:
        if self.split:
            # not restored: the halves become separate tokens
            item.text = INTRAWORD_DASH_RE.sub(" ", item.text)
            item.transform_chain.append("split_hyphens_v1")
        else:
            item.text = item.placeholders.protect_dashes(item.text)
            item.transform_chain.append("protect_hyphens_v1")


class GuardAbbreviations(Stage):
    name = "guard_abbreviations"
    layer = "protection"

    def apply(self, item: WorkItem) -> None:
        item.text = item.placeholders.protect_abbreviations(item.text)
        item.transform_chain.append("protect_abbreviations_v1")


class Restore(Stage):
    name = "restore"
    layer = "protection"

    def apply(self, item: WorkItem) -> None:
        table = item.placeholders
        item.spans = [Span(table.restore(s.text), s.kind) for s in item.spans]
        item.transform_chain.append("restore_v1")
