# notifier_queue/core/event_bus.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union
import structlog

from notifier_queue.core.events import EventKind

log = structlog.get_logger()

Handler = Callable[[Any], Any]


@dataclass
class _Registration:
    handler: Handler
    once: bool = False


class EventBus:
    """
    Synchronous publish/subscribe keyed by EventKind.

    publish() calls handlers in registration order, in-line, with exactly one
    argument. It works on a snapshot of the handler list: handlers added or
    removed while a publish is running take effect from the next publish.
    """
    def __init__(self, isolate_errors: bool = False):
        self.isolate_errors = isolate_errors
        self._handlers: Dict[EventKind, List[_Registration]] = {kind: [] for kind in EventKind}

    def subscribe(self, kind: Union[EventKind, str], handler: Handler) -> Handler:
        self._handlers[EventKind.coerce(kind)].append(_Registration(handler))
        return handler

    def once(self, kind: Union[EventKind, str], handler: Handler) -> Handler:
        self._handlers[EventKind.coerce(kind)].append(_Registration(handler, once=True))
        return handler

    def unsubscribe(self, kind: Union[EventKind, str], handler: Handler) -> bool:
        """Drop the most recent registration of handler; False if there was none."""
        regs = self._handlers[EventKind.coerce(kind)]
        for i in range(len(regs) - 1, -1, -1):
            if regs[i].handler == handler:
                del regs[i]
                return True
        return False

    def listener_count(self, kind: Union[EventKind, str]) -> int:
        return len(self._handlers[EventKind.coerce(kind)])

    def clear(self, kind: Optional[Union[EventKind, str]] = None) -> None:
        if kind is None:
            for regs in self._handlers.values():
                regs.clear()
        else:
            self._handlers[EventKind.coerce(kind)].clear()

    def publish(self, kind: Union[EventKind, str], payload: Any) -> int:
        kind = EventKind.coerce(kind)
        regs = self._handlers[kind]
        called = 0
        for reg in list(regs):
            if reg.once:
                self._discard(regs, reg)
            called += 1
            if not self.isolate_errors:
                reg.handler(payload)
                continue
            try:
                reg.handler(payload)
            except Exception as e:
                log.warning("event_bus.handler.error", kind=kind.value, handler=_name(reg.handler), err=str(e))
        return called

    @staticmethod
    def _discard(regs: List[_Registration], reg: _Registration) -> None:
        # identity, not equality: the same handler may be registered twice
        for i, r in enumerate(regs):
            if r is reg:
                del regs[i]
                return


def _name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
