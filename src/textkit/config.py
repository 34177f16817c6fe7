"""Tokenizer configuration.

Options live in a frozen `TokenizeOptions` value that is built once per call
and shared read-only by every per-document task. Config files are YAML:

    tokenize:   # TokenizeOptions fields
      granularity: word
      remove_punct: true
    input:      # LocalJSONLSource settings
      dataset: data/*.jsonl
    output:
      path: out/tokens.jsonl
    run:
      workers: 4

Unknown option keys are reported with `InvalidArgumentWarning` and ignored,
or raise `InvalidArgument` when `strict` is set.
"""

from __future__ import annotations
import warnings
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Mapping, Tuple
import yaml

from .errors import InvalidArgument, InvalidArgumentWarning
from .granularity import Granularity

_DOCNAME_BASE = "text"


def set_docname_base(base: str) -> None:
    """Set the process-wide prefix used to name unnamed documents (`text1`, `text2`, ...)."""
    global _DOCNAME_BASE
    if not isinstance(base, str) or not base:
        raise InvalidArgument("docname base must be a non-empty string")
    _DOCNAME_BASE = base


def get_docname_base() -> str:
    return _DOCNAME_BASE


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def report_unknown(keys: Iterable[str], strict: bool) -> None:
    keys = sorted(keys)
    if not keys:
        return
    msg = f"Argument{'s' if len(keys) > 1 else ''} {', '.join(keys)} not used."
    if strict:
        raise InvalidArgument(msg)
    warnings.warn(msg, InvalidArgumentWarning, stacklevel=3)


def int_tuple(value: Any, label: str, minimum: int) -> Tuple[int, ...]:
    if isinstance(value, bool):
        raise InvalidArgument(f"{label} must be integers, got {value!r}")
    if isinstance(value, int):
        items = [value]
    elif isinstance(value, (set, frozenset)):
        items = sorted(value)
    elif isinstance(value, (list, tuple, range)):
        items = list(value)
    else:
        raise InvalidArgument(f"{label} must be an int or a collection of ints, got {type(value).__name__}")
    out = []
    for v in items:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgument(f"{label} must be integers, got {v!r}")
        if v < minimum:
            raise InvalidArgument(f"{label} must be >= {minimum}, got {v}")
        if v not in out:
            out.append(v)
    if not out:
        raise InvalidArgument(f"{label} must not be empty")
    return tuple(out)


@dataclass(frozen=True)
class TokenizeOptions:
    granularity: Granularity = Granularity.WORD
    remove_numbers: bool = False
    remove_punct: bool = False
    remove_symbols: bool = False
    remove_separators: bool = True
    preserve_twitter_tags: bool = True
    remove_hyphens: bool = False
    remove_url: bool = False
    ngram_sizes: Tuple[int, ...] = (1,)
    skips: Tuple[int, ...] = (0,)
    concatenator: str = "_"

    def __post_init__(self):
        # normalize in place so equal configurations compare equal
        object.__setattr__(self, "granularity", Granularity.parse(self.granularity))
        object.__setattr__(self, "ngram_sizes", int_tuple(self.ngram_sizes, "ngram_sizes", 1))
        object.__setattr__(self, "skips", int_tuple(self.skips, "skips", 0))
        self.validate()

    def validate(self) -> None:
        """Raise InvalidArgument for values of the wrong type."""
        if not isinstance(self.concatenator, str):
            raise InvalidArgument(f"concatenator must be a string, got {type(self.concatenator).__name__}")
        for f in fields(self):
            if f.type in ("bool", bool) and not isinstance(getattr(self, f.name), bool):
                raise InvalidArgument(f"{f.name} must be True or False, got {getattr(self, f.name)!r}")

    @property
    def unigrams_only(self) -> bool:
        return self.ngram_sizes == (1,)

    @property
    def effective_concatenator(self) -> str:
        return "" if self.unigrams_only else self.concatenator

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], strict: bool = False) -> "TokenizeOptions":
        d = dict(d or {})
        known = set(cls.field_names())
        report_unknown(set(d) - known, strict)
        return cls(**{k: v for k, v in d.items() if k in known})

    def override(self, **changes) -> "TokenizeOptions":
        """Copy with non-None values replaced (CLI flags on top of a config file)."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["granularity"] = self.granularity.value
        out["ngram_sizes"] = list(self.ngram_sizes)
        out["skips"] = list(self.skips)
        return out
