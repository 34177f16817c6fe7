"""Error taxonomy.

- UnsupportedGranularity: caller error, raised before any document is touched
- InvalidArgument: bad or unknown configuration (warning by default, see strict)
- EncodingError / ProtectionError: per-document failures; recorded on the
  TokenizedBatch instead of aborting sibling documents
"""

from __future__ import annotations


class TextkitError(Exception):
    """Base class for all textkit errors."""


class UnsupportedGranularity(TextkitError, ValueError):
    def __init__(self, granularity: object, supported=()):
        self.granularity = granularity
        msg = f"Unsupported granularity: {granularity!r}"
        if supported:
            msg += f" (expected one of: {', '.join(supported)})"
        super().__init__(msg)


class InvalidArgument(TextkitError, ValueError):
    pass


class InvalidArgumentWarning(UserWarning):
    """Emitted for unrecognized configuration keys when not running strict."""


class EncodingError(TextkitError, UnicodeError):
    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"document {name!r}: {detail}")


class ProtectionError(TextkitError):
    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"document {name!r}: {detail}")
