"""textkit

Unicode-aware tokenization for text analysis.

Public API surface:
- textkit.tokenize : tokenize texts into a TokenizedBatch (or a flat list)
- textkit.tokens_ngrams / textkit.ngrams.expand : n-grams and skip-grams
- textkit.as_tokenized_texts : wrap pre-tokenized texts
- textkit.tokens_tolower / tokens_toupper / char_tolower / char_toupper
- textkit.cli.main : CLI entrypoint (`textkit tokenize ...`)
"""
from .casechange import char_tolower, char_toupper, tokens_tolower, tokens_toupper
from .config import TokenizeOptions, get_docname_base, set_docname_base
from .errors import (
    EncodingError,
    InvalidArgument,
    InvalidArgumentWarning,
    ProtectionError,
    TextkitError,
    UnsupportedGranularity,
)
from .granularity import Granularity
from .ngrams import tokens_ngrams, tokens_skipgrams
from .pipeline.context import Document, DocumentBatch, DocumentFailure, TokenizedBatch
from .pipeline.tokenize import tokenize, tokenize_batch
from .tokens import as_tokenized_texts, is_tokenized_texts

tokenise = tokenize

__all__ = [
    "__version__",
    "tokenize",
    "tokenise",
    "tokenize_batch",
    "tokens_ngrams",
    "tokens_skipgrams",
    "as_tokenized_texts",
    "is_tokenized_texts",
    "char_tolower",
    "char_toupper",
    "tokens_tolower",
    "tokens_toupper",
    "TokenizeOptions",
    "get_docname_base",
    "set_docname_base",
    "Granularity",
    "Document",
    "DocumentBatch",
    "DocumentFailure",
    "TokenizedBatch",
    "TextkitError",
    "UnsupportedGranularity",
    "InvalidArgument",
    "InvalidArgumentWarning",
    "EncodingError",
    "ProtectionError",
]
__version__ = "0.1.0"
