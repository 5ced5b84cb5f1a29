from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union
import time
from datetime import datetime, timezone

from notifier_queue.core.errors import UnknownEventKindError

def utc_stamp() -> str:
    """Wall-clock UTC with millisecond precision, as written to log records."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")

# --- event kinds ---
class EventKind(Enum):
    """Membership changes a NotifierQueue publishes."""
    ITEM_QUEUED = "item_queued"
    ITEM_DEQUEUED = "item_dequeued"

    @classmethod
    def coerce(cls, kind: Union["EventKind", str]) -> "EventKind":
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError:
            raise UnknownEventKindError(kind) from None

# Plain-string names, for callers that subscribe by name
ITEM_QUEUED = EventKind.ITEM_QUEUED.value
ITEM_DEQUEUED = EventKind.ITEM_DEQUEUED.value

# --- event record ---
@dataclass(frozen=True)
class QueueEvent:
    """One published notification, as seen by the structured log."""
    kind: EventKind
    item: Any
    length: int                                  # queue length after the mutation
    t_mono: float = field(default_factory=time.perf_counter)
    t_utc: Optional[str] = None                  # lazy; materialized on serialize

    def to_record(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "item": repr(self.item),
            "length": self.length,
            "t_utc": self.t_utc or utc_stamp(),
            "t_mono": self.t_mono,
        }
