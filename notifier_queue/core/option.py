# notifier_queue/core/option.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Some(Generic[T]):
    """
    A present result. Lets callers tell "no value" apart from a value that is
    itself None, 0, "" or False.
    """
    value: T


def unwrap_or(option: Optional[Some[T]], default: T) -> T:
    return default if option is None else option.value
