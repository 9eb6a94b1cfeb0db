"""Bidirectional iterator over a :class:`~fplist.core.priority_list.FrequencyPriorityList`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, TypeVar

from .errors import ConcurrentModificationError, InvalidStateError, NoMoreElementsError

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .priority_list import FrequencyPriorityList

E = TypeVar("E")

_FORWARD = 1
_BACKWARD = -1
_NONE = 0


class PriorityListIterator(Iterator[E]):
    """Walk a priority list in logical order, manual element first.

    The cursor sits between elements: ``next_index()`` is the logical index the next
    forward step yields and ``previous_index()`` the one a backward step yields.
    ``remove()`` deletes whichever element the last step returned, and may only be
    called once per step.
    """

    def __init__(self, owner: "FrequencyPriorityList[E]") -> None:
        self._owner = owner
        self._cursor = 0
        self._last_move = _NONE
        self._expected_modcount = owner._modcount

    def __iter__(self) -> "PriorityListIterator[E]":
        return self

    def has_next(self) -> bool:
        return self._cursor < len(self._owner)

    def has_previous(self) -> bool:
        return self._cursor > 0

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def __next__(self) -> E:
        self._check_for_comodification()
        if not self.has_next():
            raise NoMoreElementsError("The end of the list has been reached")
        element = self._owner.get(self._cursor)
        self._cursor += 1
        self._last_move = _FORWARD
        return element

    def previous(self) -> E:
        self._check_for_comodification()
        if not self.has_previous():
            raise NoMoreElementsError("The beginning of the list has been reached")
        self._cursor -= 1
        self._last_move = _BACKWARD
        return self._owner.get(self._cursor)

    def remove(self) -> None:
        """Delete the element returned by the last ``next``/``previous`` call."""

        if self._last_move == _NONE:
            raise InvalidStateError(
                "remove() requires a preceding call to next() or previous() since the last removal"
            )
        self._check_for_comodification()
        if self._last_move == _FORWARD:
            # The cursor is one past the element that was just returned.
            self._cursor -= 1
        self._owner._remove_at(self._cursor)
        self._expected_modcount = self._owner._modcount
        self._last_move = _NONE

    def _check_for_comodification(self) -> None:
        if self._owner._modcount != self._expected_modcount:
            raise ConcurrentModificationError("The list was structurally modified during iteration")


__all__ = ["PriorityListIterator"]
