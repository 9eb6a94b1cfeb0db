"""Frequency ordered list with a single manually pinned slot."""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Container, Iterable, Mapping, Sequence, Set
from typing import Any, Generic, List, Optional, TypeVar, Union

from .errors import (
    ElementRequiredError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
    UnorderedCollectionError,
)
from .iterator import PriorityListIterator
from .snapshot import EntrySnapshot, ListSnapshot
from .types import AutomaticPosition, Entry, LogicalPosition, ManualPosition

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _descending(entry: Entry[Any]) -> int:
    return -entry.count


class FrequencyPriorityList(Generic[E]):
    """A list that orders its elements by how often each one has been added.

    Adding an element that is already present does not store a second copy; it
    increases that element's count instead. Elements with higher counts sit closer to
    the front, and among equal counts the most recently inserted or promoted element
    comes first. Adding ``1``, ``2`` and ``2`` therefore yields ``[2, 1]``.

    One element at a time may be pinned to the *manual slot*. The pinned element is
    always reported at index 0 regardless of its count and keeps counting further
    additions, which take effect once it is returned to automatic ordering.

    Parameters
    ----------
    items:
        Optional ordered collection used to seed the list. Each occurrence counts as
        one addition and every element starts out in automatic ordering. Unordered
        collections such as ``set`` are rejected.
    """

    def __init__(self, items: Optional[Iterable[E]] = None) -> None:
        self._manual: Optional[Entry[E]] = None
        self._automatic: List[Entry[E]] = []
        # Bumped on every structural change so live iterators can fail fast.
        self._modcount = 0
        if items is not None:
            self.add_all(items)

    # ------------------------------------------------------------------ queries

    def __len__(self) -> int:
        return len(self._automatic) + (1 if self._manual is not None else 0)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def contains(self, element: object) -> bool:
        return self._locate(element) is not None

    def contains_in_automatic(self, element: object) -> bool:
        """Return ``True`` if ``element`` is held in the count-ordered region."""

        return isinstance(self._locate(element), AutomaticPosition)

    def contains_in_manual(self, element: object) -> bool:
        """Return ``True`` if ``element`` currently occupies the manual slot."""

        _require(element)
        return self._manual is not None and self._manual.element == element

    def contains_all(self, items: Iterable[object]) -> bool:
        return all(self.contains(item) for item in items)

    def index_of(self, element: object) -> int:
        """Return the logical index of ``element``, or -1 if it is not held."""

        position = self._locate(element)
        if position is None:
            return -1
        return position.logical_index

    def get(self, index: int) -> E:
        """Return the element at logical position ``index``.

        Index 0 is the manual element when one is pinned; every automatic element is
        then shifted back by one.
        """

        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= len(self):
            raise OutOfRangeError(f"Index {index} out of range for list of size {len(self)}")
        if self._manual is not None:
            if index == 0:
                return self._manual.element
            index -= 1
        return self._automatic[index].element

    def __getitem__(self, index: int) -> E:
        return self.get(index)

    # ------------------------------------------------------------------ adding

    def add(self, element: E) -> bool:
        """Count one more addition of ``element`` without changing its region.

        A pinned element stays pinned (the call returns ``False`` since nothing moves);
        anything else goes through :meth:`add_to_automatic`.
        """

        if self.contains_in_manual(element):
            self.add_to_manual(element)
            return False
        return self.add_to_automatic(element)

    def add_to_automatic(self, element: E) -> bool:
        """Ensure ``element`` is held in automatic ordering, counting the addition.

        Returns ``True`` if the order of elements changed. A pinned element is moved
        back into the automatic region by its current count; the move itself is the
        only effect, its count is not increased.
        """

        position = self._locate(element)
        if isinstance(position, AutomaticPosition):
            entry = position.entry
            entry.count += 1
            target = self._find_location(entry.count)
            if target == position.index:
                return False
            del self._automatic[position.index]
            self._automatic.insert(target, entry)
        elif isinstance(position, ManualPosition):
            self._demote_manual()
        else:
            self._insert_automatic(Entry(element))
        self._modcount += 1
        return True

    def add_to_manual(self, element: E) -> bool:
        """Ensure ``element`` is the pinned element, counting the addition.

        Returns ``False`` only when ``element`` was already pinned, in which case just
        its count grows. Otherwise any previous occupant is demoted into automatic
        ordering by its own count and ``element`` takes the slot.
        """

        position = self._locate(element)
        if isinstance(position, ManualPosition):
            position.entry.count += 1
            return False
        if isinstance(position, AutomaticPosition):
            entry = self._automatic.pop(position.index)
            entry.count += 1
        else:
            entry = Entry(element)
        self._install_manual(entry)
        return True

    def add_all(self, items: Iterable[E]) -> bool:
        """Apply :meth:`add` to every item in order; return ``True`` if any changed order."""

        staged = self._stage(items)
        changed = False
        for item in staged:
            if self.add(item):
                changed = True
        return changed

    # -------------------------------------------------------------- relocation

    def relocate_automatic_to_manual(self, element: E) -> None:
        """Pin ``element`` without touching any counts.

        Raises
        ------
        InvalidArgumentError
            If ``element`` is not currently in the automatic region.
        """

        position = self._locate(element)
        if not isinstance(position, AutomaticPosition):
            raise InvalidArgumentError(
                "Element must be set to automatic priority in order to relocate it to manual priority"
            )
        entry = self._automatic.pop(position.index)
        self._install_manual(entry)

    def relocate_manual_to_automatic(self) -> None:
        """Return the pinned element to automatic ordering; afterwards nothing is pinned."""

        if self._manual is None:
            raise InvalidStateError("No element is set to manual priority")
        self._demote_manual()
        self._modcount += 1

    # ----------------------------------------------------------------- removal

    def remove(self, element: object) -> bool:
        position = self._locate(element)
        if position is None:
            return False
        self._detach(position)
        return True

    def remove_all(self, items: Iterable[object]) -> bool:
        staged = self._stage(items, require_order=False)
        changed = False
        for item in staged:
            if self.remove(item):
                changed = True
        return changed

    def retain_all(self, items: Iterable[object]) -> bool:
        """Keep only the elements also found in ``items``."""

        if not isinstance(items, Container):
            items = list(items)
        changed = False
        iterator = self.iterator()
        for element in iterator:
            if element not in items:
                iterator.remove()
                changed = True
        return changed

    def clear(self) -> None:
        self._manual = None
        self._automatic.clear()
        self._modcount += 1

    # ------------------------------------------------------- entry transplant

    def retrieve(self, element: E) -> Entry[E]:
        """Remove ``element`` and hand back its :class:`Entry`, count included.

        The entry can be loaded into this or another list later with :meth:`load`.
        """

        position = self._locate(element)
        if position is None:
            raise InvalidArgumentError("The requested item is not contained in this list")
        self._detach(position)
        return position.entry

    def load(self, entry: Entry[E], to_manual: bool = False) -> None:
        """Put a previously retrieved entry back, keeping its count.

        With ``to_manual`` the entry takes the manual slot and the current occupant is
        demoted; otherwise it is placed in automatic ordering where its count dictates.
        """

        if not isinstance(entry, Entry):
            raise InvalidArgumentError("Only Entry instances can be loaded into FrequencyPriorityList")
        if self._manual is not None or self._automatic:
            current_type = type(self.get(0))
            if type(entry.element) is not current_type:
                raise InvalidArgumentError(
                    f"Cannot load a {type(entry.element).__name__} element into a list of "
                    f"{current_type.__name__} elements"
                )
        if self.contains(entry.element):
            raise InvalidArgumentError("The loaded entry's element is already contained in the list")
        if to_manual:
            self._install_manual(entry)
        else:
            self._insert_automatic(entry)
            self._modcount += 1

    # ---------------------------------------------------------------- snapshot

    def snapshot(self) -> ListSnapshot[E]:
        """Export the manual entry and the automatic region (front to back) with counts."""

        manual = EntrySnapshot.from_entry(self._manual) if self._manual is not None else None
        return ListSnapshot(
            manual=manual,
            automatic=[EntrySnapshot.from_entry(entry) for entry in self._automatic],
        )

    @classmethod
    def from_snapshot(cls, snapshot: Union[ListSnapshot[E], Mapping[str, Any]]) -> "FrequencyPriorityList[E]":
        """Rebuild a list from :meth:`snapshot` output, manual flag included."""

        if isinstance(snapshot, Mapping):
            snapshot = ListSnapshot.model_validate(snapshot)
        elif not isinstance(snapshot, ListSnapshot):
            raise InvalidArgumentError(
                f"Expected a ListSnapshot or mapping, got {type(snapshot).__name__}"
            )
        restored: FrequencyPriorityList[E] = cls()
        # Loading back to front keeps equal-count entries in their exported order.
        for item in reversed(snapshot.automatic):
            restored.load(item.to_entry())
        if snapshot.manual is not None:
            restored.load(snapshot.manual.to_entry(), to_manual=True)
        logger.debug("Restored priority list with %d elements", len(restored))
        return restored

    @classmethod
    def from_elements(cls, items: Iterable[E]) -> "FrequencyPriorityList[E]":
        """Build a list in automatic ordering; repeated items accumulate counts."""

        restored: FrequencyPriorityList[E] = cls()
        for item in restored._stage(items):
            restored.add_to_automatic(item)
        return restored

    # --------------------------------------------------------------- iteration

    def iterator(self) -> PriorityListIterator[E]:
        return PriorityListIterator(self)

    def __iter__(self) -> PriorityListIterator[E]:
        return self.iterator()

    def to_list(self) -> List[E]:
        return [element for element in self]

    def to_array(self, into: Optional[List[Any]] = None) -> List[Any]:
        """Copy the elements in logical order, reusing ``into`` when it is large enough.

        A reused list longer than the result gets ``None`` right after the last copied
        element; the slots after that keep whatever they held.
        """

        ordered = self.to_list()
        if into is None or len(into) < len(ordered):
            return ordered
        into[: len(ordered)] = ordered
        if len(into) > len(ordered):
            into[len(ordered)] = None
        return into

    def __repr__(self) -> str:
        manual = repr(self._manual.element) if self._manual is not None else None
        automatic = [entry.element for entry in self._automatic]
        return f"{type(self).__name__}(manual={manual}, automatic={automatic!r})"

    # ---------------------------------------------------------------- internal

    def _locate(self, element: object) -> Optional[LogicalPosition[E]]:
        _require(element)
        if self._manual is not None and self._manual.element == element:
            return ManualPosition(self._manual)
        offset = 1 if self._manual is not None else 0
        for index, entry in enumerate(self._automatic):
            if entry.element == element:
                return AutomaticPosition(index, entry, offset)
        return None

    def _find_location(self, count: int) -> int:
        """Index before which every automatic entry has a count strictly above ``count``."""

        return bisect_left(self._automatic, -count, key=_descending)

    def _insert_automatic(self, entry: Entry[E]) -> None:
        self._automatic.insert(self._find_location(entry.count), entry)

    def _demote_manual(self) -> None:
        entry = self._manual
        self._manual = None
        self._insert_automatic(entry)
        logger.debug("Demoted %r to automatic ordering with count %d", entry.element, entry.count)

    def _install_manual(self, entry: Entry[E]) -> None:
        if self._manual is not None:
            self._demote_manual()
        self._manual = entry
        self._modcount += 1
        logger.debug("Pinned %r to manual priority with count %d", entry.element, entry.count)

    def _detach(self, position: LogicalPosition[E]) -> None:
        if isinstance(position, ManualPosition):
            self._manual = None
        else:
            del self._automatic[position.index]
        self._modcount += 1

    def _remove_at(self, index: int) -> None:
        if self._manual is not None:
            if index == 0:
                self._detach(ManualPosition(self._manual))
                return
            index -= 1
        self._detach(AutomaticPosition(index, self._automatic[index]))

    def _stage(self, items: Iterable[Any], require_order: bool = True) -> List[Any]:
        """Validate a bulk argument up front so a rejected call changes nothing."""

        if items is self:
            raise InvalidArgumentError("FrequencyPriorityList cannot take itself as a bulk argument")
        if require_order and isinstance(items, Set) and not isinstance(items, Sequence):
            raise UnorderedCollectionError(
                "FrequencyPriorityList does not support addition of unordered collections"
            )
        staged = list(items)
        for item in staged:
            _require(item)
        return staged


def _require(element: object) -> None:
    if element is None:
        raise ElementRequiredError()


__all__ = ["FrequencyPriorityList"]
