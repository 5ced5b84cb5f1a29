from __future__ import annotations


class NotifierQueueError(Exception):
    """Base class for every error raised by this package."""


class DirectConstructionError(NotifierQueueError, TypeError):
    """NotifierQueue was instantiated directly instead of through make()."""


class InvalidSeekResultError(NotifierQueueError, TypeError):
    """A seek callback returned something other than Some(...) or None."""

    def __init__(self, result: object):
        self.result = result
        super().__init__(
            f"seek callback must return Some(...) or None, got {type(result).__name__}"
        )


class UnknownEventKindError(NotifierQueueError, ValueError):
    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"unknown event kind: {kind!r}")
