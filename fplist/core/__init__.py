"""Frequency priority list core."""

from .errors import (
    ConcurrentModificationError,
    ElementRequiredError,
    InvalidArgumentError,
    InvalidStateError,
    NoMoreElementsError,
    OutOfRangeError,
    PriorityListError,
    UnorderedCollectionError,
)
from .iterator import PriorityListIterator
from .priority_list import FrequencyPriorityList
from .snapshot import EntrySnapshot, ListSnapshot
from .types import AutomaticPosition, Entry, LogicalPosition, ManualPosition

__all__ = [
    "FrequencyPriorityList",
    "PriorityListIterator",
    "Entry",
    "EntrySnapshot",
    "ListSnapshot",
    "LogicalPosition",
    "ManualPosition",
    "AutomaticPosition",
    "PriorityListError",
    "ElementRequiredError",
    "OutOfRangeError",
    "InvalidStateError",
    "ConcurrentModificationError",
    "InvalidArgumentError",
    "UnorderedCollectionError",
    "NoMoreElementsError",
]
