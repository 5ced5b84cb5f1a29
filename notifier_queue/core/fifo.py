# notifier_queue/core/fifo.py
from __future__ import annotations
from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union
import structlog

from notifier_queue.app.config import QueueConfig
from notifier_queue.core.errors import DirectConstructionError, InvalidSeekResultError
from notifier_queue.core.event_bus import EventBus, Handler
from notifier_queue.core.events import EventKind, QueueEvent
from notifier_queue.core.option import Some

log = structlog.get_logger()

T = TypeVar("T")
R = TypeVar("R")

_MAKE = object()


class NotifierQueue(Generic[T]):
    """
    FIFO queue that publishes ITEM_QUEUED / ITEM_DEQUEUED on membership changes.

    - Events fire synchronously, after `length`/`is_empty` are updated.
    - Initial contents passed to make() are not announced.
    - dequeue() takes from the head; peek() looks at the tail.
    - seek() removes the first element its callback answers Some(...) for.
    """
    def __init__(
        self,
        items: Deque[T],
        bus: EventBus,
        config: QueueConfig,
        _token: object = None,
    ):
        if _token is not _MAKE:
            raise DirectConstructionError("use NotifierQueue.make() to create a queue")
        self._items = items
        self.bus = bus
        self.cfg = config
        self._set_length_and_is_empty()

    @classmethod
    def make(
        cls,
        initial_values: Iterable[T] = (),
        *,
        bus: Optional[EventBus] = None,
        config: Optional[QueueConfig] = None,
    ) -> "NotifierQueue[T]":
        cfg = config or QueueConfig()
        if bus is None:
            bus = EventBus(isolate_errors=cfg.isolate_handler_errors)
        return cls(deque(initial_values), bus, cfg, _token=_MAKE)

    # ---- mutations ----

    def enqueue(self, item: T) -> None:
        self._items.append(item)
        self._set_length_and_is_empty()
        self._emit(EventKind.ITEM_QUEUED, item)

    def dequeue(self) -> Optional[Some[T]]:
        if not self._items:
            return None
        item = self._items.popleft()
        self._set_length_and_is_empty()
        self._emit(EventKind.ITEM_DEQUEUED, item)
        return Some(item)

    def seek(self, process: Callable[[T], Optional[Some[R]]]) -> Optional[Some[R]]:
        # scan a snapshot: process() may itself mutate the queue
        for item in tuple(self._items):
            res = process(item)
            if res is None:
                continue
            if not isinstance(res, Some):
                raise InvalidSeekResultError(res)
            i = self._index_of(item)
            if i is not None:
                del self._items[i]
                self._set_length_and_is_empty()
                self._emit(EventKind.ITEM_DEQUEUED, item)
            return res
        return None

    # ---- reads ----

    def contains(self, predicate: Callable[[T], Any]) -> bool:
        return any(predicate(item) for item in tuple(self._items))

    def peek(self) -> Optional[Some[T]]:
        if not self._items:
            return None
        return Some(self._items[-1])

    @property
    def items(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"NotifierQueue({list(self._items)!r})"

    # ---- subscriptions (delegate to the bus) ----

    def on(self, kind: Union[EventKind, str], handler: Handler) -> Handler:
        return self.bus.subscribe(kind, handler)

    def once(self, kind: Union[EventKind, str], handler: Handler) -> Handler:
        return self.bus.once(kind, handler)

    def off(self, kind: Union[EventKind, str], handler: Handler) -> bool:
        return self.bus.unsubscribe(kind, handler)

    def listener_count(self, kind: Union[EventKind, str]) -> int:
        return self.bus.listener_count(kind)

    # ---- internals ----

    def _set_length_and_is_empty(self) -> None:
        self.length = len(self._items)
        self.is_empty = self.length == 0

    def _emit(self, kind: EventKind, item: T) -> None:
        if self.cfg.log_events:
            log.debug("queue.event", **QueueEvent(kind=kind, item=item, length=self.length).to_record())
        self.bus.publish(kind, item)

    def _index_of(self, item: T) -> Optional[int]:
        # identity, not equality: equal duplicates elsewhere must stay put
        for j, x in enumerate(self._items):
            if x is item:
                return j
        return None
