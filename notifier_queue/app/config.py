from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class QueueConfig:
    # handler failures: False -> propagate to the mutating call, True -> log and keep going
    isolate_handler_errors: bool = False

    # debug-log every published notification as a QueueEvent record
    log_events: bool = False
