"""Core pipeline data model.

Document / DocumentBatch are the inputs, WorkItem is the mutable per-document
record flowing through stages, and TokenizedBatch is the immutable result.

Design goal:
- Keep TokenizedBatch stable so downstream code (dfm construction, readability,
  classifiers) can build on it without churn.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union, TYPE_CHECKING

from ..config import get_docname_base
from ..errors import InvalidArgument, TextkitError

if TYPE_CHECKING:
    from ..stages.protect import PlaceholderTable

Text = Union[str, bytes]


class SpanKind(str, Enum):
    WORD = "word"
    NUMBER = "number"
    PUNCT = "punct"
    SYMBOL = "symbol"
    SEPARATOR = "separator"
    OTHER = "other"


class Span(NamedTuple):
    text: str
    kind: SpanKind = SpanKind.WORD


@dataclass(frozen=True)
class Document:
    name: Optional[str]
    text: Text


@dataclass(frozen=True)
class DocumentBatch:
    documents: Tuple[Document, ...]

    def __post_init__(self):
        seen = set()
        dups = []
        for d in self.documents:
            if d.name is None:
                raise InvalidArgument("DocumentBatch requires named documents; use DocumentBatch.from_input()")
            if d.name in seen:
                dups.append(d.name)
            seen.add(d.name)
        if dups:
            raise InvalidArgument(f"Duplicate document names: {', '.join(sorted(set(dups)))}")

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __getitem__(self, i: int) -> Document:
        return self.documents[i]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self.documents)

    @classmethod
    def from_input(cls, x) -> "DocumentBatch":
        """Coerce a text, a list of texts/Documents or a name -> text mapping into a batch.

        Unnamed entries get `<base><i>` with i the 1-based position.
        """
        if isinstance(x, DocumentBatch):
            return x
        if isinstance(x, (Document, str, bytes, bytearray)):
            items: Iterable = [x]
        elif isinstance(x, Mapping):
            items = []
            for k, v in x.items():
                if not isinstance(k, str):
                    raise InvalidArgument(f"Document names must be strings, got {type(k).__name__}")
                items.append(Document(k, v))
        elif isinstance(x, Iterable):
            items = x
        else:
            raise InvalidArgument(f"Cannot tokenize object of type {type(x).__name__}")

        base = get_docname_base()
        docs: List[Document] = []
        for i, item in enumerate(items, start=1):
            if isinstance(item, Document):
                doc = item if item.name is not None else Document(f"{base}{i}", item.text)
            elif isinstance(item, (str, bytes, bytearray)):
                doc = Document(f"{base}{i}", bytes(item) if isinstance(item, bytearray) else item)
            else:
                raise InvalidArgument(f"Document {i} is a {type(item).__name__}, expected str or bytes")
            docs.append(doc)
        return cls(tuple(docs))


@dataclass
class WorkItem:
    """Per-document state threaded through the stages of one tokenize call."""
    name: str
    text: str
    placeholders: Optional["PlaceholderTable"] = None
    spans: List[Span] = field(default_factory=list)
    transform_chain: List[str] = field(default_factory=list)

    @property
    def tokens(self) -> List[str]:
        return [s.text for s in self.spans]


@dataclass(frozen=True)
class DocumentFailure:
    name: str
    reason: str
    error: TextkitError = field(compare=False, repr=False)


@dataclass(frozen=True)
class TokenizedBatch(Mapping):
    """Ordered mapping of document name -> tuple of tokens.

    Failed documents keep their slot so len() always equals the input length;
    reading one re-raises the error that failed it.
    """
    names: Tuple[str, ...]
    documents: Tuple[Optional[Tuple[str, ...]], ...]
    granularity: str
    ngrams: Tuple[int, ...] = (1,)
    concatenator: str = ""
    failures: Tuple[DocumentFailure, ...] = ()

    def __post_init__(self):
        if len(self.names) != len(self.documents):
            raise InvalidArgument(f"{len(self.names)} names for {len(self.documents)} documents")
        index = {n: i for i, n in enumerate(self.names)}
        if len(index) != len(self.names):
            raise InvalidArgument("Duplicate document names in TokenizedBatch")
        object.__setattr__(self, "_index", index)

    def __getitem__(self, name: str) -> Tuple[str, ...]:
        toks = self.documents[self._index[name]]
        if toks is None:
            raise self.failure(name).error
        return toks

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __str__(self) -> str:
        n = len(self)
        lines = [f"TokenizedBatch from {n} document{'s' if n != 1 else ''}."]
        for name, toks in zip(self.names, self.documents):
            lines.append(f"${name}")
            lines.append("  <failed>" if toks is None else f"  {list(toks)}")
        return "\n".join(lines)

    def failure(self, name: str) -> Optional[DocumentFailure]:
        for f in self.failures:
            if f.name == name:
                return f
        return None

    @property
    def ok(self) -> bool:
        return not self.failures

    def succeeded(self) -> Dict[str, Tuple[str, ...]]:
        return {n: t for n, t in zip(self.names, self.documents) if t is not None}

    def raise_for_failures(self) -> None:
        if self.failures:
            raise self.failures[0].error

    def flatten(self) -> List[str]:
        self.raise_for_failures()
        return [tok for toks in self.documents for tok in toks]

    def with_documents(self, documents: Iterable[Optional[Tuple[str, ...]]], **changes) -> "TokenizedBatch":
        """New batch with the same names/failures and replaced token tuples."""
        return replace(self, documents=tuple(documents), **changes)
