"""Per-issue tracking of fork points and merged commits.

- models: IssueTracking, TrackingDocument
- store: TrackingStore (load/save of .mob/tracking.json)
"""

from mob.tracking.models import (
    IssueTracking,
    TrackingDocument,
)
from mob.tracking.store import TrackingStore


__all__ = [
    "IssueTracking",
    "TrackingDocument",
    "TrackingStore",
]
