"""Stage interface.

Stages must:
- accept a WorkItem
- rewrite its `text` (before segmentation) or `spans` (after)
- emit a transform_chain entry (for auditability)
- raise a TextkitError subclass for per-document failures

Stages hold only read-only configuration, so one stage list is shared by
every worker of a tokenize call.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from ..pipeline.context import WorkItem


class Stage(ABC):
    name: str = "stage"
    layer: str = "preprocessing"

    @abstractmethod
    def apply(self, item: WorkItem) -> None:
        ...
