"""Stage registry.

The stage list is derived from TokenizeOptions once per tokenize call:

    strip_urls -> assign_placeholders -> protect_twitter -> guard_hyphens
      -> guard_abbreviations -> prune_fast -> segment -> filter -> restore

Stages that an option combination does not need are left out, so a plain
`tokenize(x)` on word granularity runs only placeholder assignment, Twitter
protection, segmentation, filtering and restoring.
"""

from __future__ import annotations
from typing import List

from ..config import TokenizeOptions
from ..granularity import Granularity
from .base import Stage
from .filter import Filter, PruneFast, StripUrls
from .protect import AssignPlaceholders, GuardAbbreviations, GuardHyphens, ProtectTwitter, Restore
from .segment import Segment


def needs_placeholders(o: TokenizeOptions) -> bool:
    g = o.granularity
    if g is Granularity.SENTENCE:
        return True
    if g is Granularity.WORD and o.preserve_twitter_tags:
        return True
    return g.word_like and o.remove_punct and not o.remove_hyphens


def make_stages(options: TokenizeOptions) -> List[Stage]:
    g = options.granularity
    stages: List[Stage] = []

    if options.remove_url:
        stages.append(StripUrls())

    protect = needs_placeholders(options)
    if protect:
        stages.append(AssignPlaceholders())
    # the regex splitters never break at sigils; PruneFast exempts them instead
    if g is Granularity.WORD and options.preserve_twitter_tags:
        stages.append(ProtectTwitter())
    if g.word_like:
        if options.remove_hyphens:
            stages.append(GuardHyphens(split=True))
        elif options.remove_punct:
            stages.append(GuardHyphens(split=False))
    if g is Granularity.SENTENCE:
        stages.append(GuardAbbreviations())
    if g.fast and (options.remove_numbers or options.remove_punct or options.remove_symbols):
        stages.append(PruneFast(options))

    stages.append(Segment(g))
    stages.append(Filter(options))

    if protect:
        stages.append(Restore())
    return stages
