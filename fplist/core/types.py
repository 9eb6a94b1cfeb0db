"""Lightweight data structures shared by the priority list internals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import ElementRequiredError, InvalidArgumentError

E = TypeVar("E")


class Entry(Generic[E]):
    """One element held by a :class:`FrequencyPriorityList` and its usage count.

    Callers only ever see an ``Entry`` as a handle: :meth:`FrequencyPriorityList.retrieve`
    hands one out (the list forgets it) and :meth:`FrequencyPriorityList.load` takes it
    back. Two entries are equal when their elements are equal, whatever their counts.
    """

    __slots__ = ("element", "count")

    def __init__(self, element: E, count: int = 1) -> None:
        if element is None:
            raise ElementRequiredError()
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidArgumentError(f"Entry count must be a positive integer, got {count!r}")
        self.element = element
        self.count = count

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Entry):
            return self.element == other.element
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Entry(element={self.element!r}, count={self.count})"


@dataclass(frozen=True)
class ManualPosition(Generic[E]):
    """The element occupies the manual slot (logical index 0)."""

    entry: Entry[E]

    @property
    def logical_index(self) -> int:
        return 0


@dataclass(frozen=True)
class AutomaticPosition(Generic[E]):
    """The element sits at ``index`` inside the count-sorted automatic region."""

    index: int
    entry: Entry[E]
    offset: int = 0

    @property
    def logical_index(self) -> int:
        return self.index + self.offset


LogicalPosition = Union[ManualPosition[E], AutomaticPosition[E]]


__all__ = ["Entry", "ManualPosition", "AutomaticPosition", "LogicalPosition"]
