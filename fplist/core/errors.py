"""Error types raised by the frequency priority list."""

from __future__ import annotations


class PriorityListError(Exception):
    """Base class for every error raised by :mod:`fplist.core`."""


class ElementRequiredError(PriorityListError, TypeError):
    """An operation received ``None`` where a concrete element is required."""

    def __init__(self, message: str = "FrequencyPriorityList does not permit None elements") -> None:
        super().__init__(message)


class OutOfRangeError(PriorityListError, IndexError):
    """A logical position outside ``[0, len(list))`` was requested."""


class InvalidStateError(PriorityListError, RuntimeError):
    """The list or iterator is not in a state that allows the operation."""


class ConcurrentModificationError(InvalidStateError):
    """The list changed structurally behind an iterator's back."""


class InvalidArgumentError(PriorityListError, ValueError):
    """An argument is not acceptable for the requested operation."""


class UnorderedCollectionError(InvalidArgumentError):
    """A collection without a defined iteration order was supplied."""


# Also a StopIteration so ``for`` loops over an iterator end cleanly.
class NoMoreElementsError(PriorityListError, StopIteration):
    """Iteration stepped past either end of the list."""


__all__ = [
    "PriorityListError",
    "ElementRequiredError",
    "OutOfRangeError",
    "InvalidStateError",
    "ConcurrentModificationError",
    "InvalidArgumentError",
    "UnorderedCollectionError",
    "NoMoreElementsError",
]
