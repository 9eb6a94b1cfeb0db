"""Domain services for the fplist API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Type, TypeVar, Union

from .core import (
    ElementRequiredError,
    FrequencyPriorityList,
    InvalidArgumentError,
    ListSnapshot,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


@dataclass(frozen=True)
class RankedEntry(Generic[E]):
    """One row of the ranking: position, element, usage count and manual flag."""

    rank: int
    element: E
    count: int
    manual: bool


class IdentifierIndex(Generic[E]):
    """Elements keyed by an identifier string and ranked by a :class:`FrequencyPriorityList`.

    ``key`` derives the identifier from an element. An element whose identifier is
    already known is resolved to the stored element, so the ranking never holds two
    elements under one identifier.
    """

    def __init__(
        self,
        key: Callable[[E], str],
        items: Optional[Iterable[E]] = None,
        element_type: Optional[Type[E]] = None,
    ) -> None:
        self._key = key
        self._element_type = element_type
        self._orderer: FrequencyPriorityList[E] = FrequencyPriorityList.from_elements(items or [])
        self._by_identifier: Dict[str, E] = self._index(self._orderer)
        self._changed = False

    # ------------------------------------------------------------------ lookup

    def __len__(self) -> int:
        return len(self._orderer)

    def __iter__(self) -> Iterator[E]:
        return iter(self._orderer)

    def contains(self, identifier: str) -> bool:
        return identifier in self._by_identifier

    def get(self, identifier: str) -> Optional[E]:
        """Return the element stored under ``identifier``, or ``None``."""

        return self._by_identifier.get(identifier)

    def get_at(self, position: int) -> E:
        return self._orderer.get(position)

    def default(self) -> Optional[E]:
        """Return the highest ranked element (the pinned one if any)."""

        if self._orderer.is_empty():
            return None
        return self._orderer.get(0)

    def is_manual(self, identifier: str) -> bool:
        element = self._by_identifier.get(identifier)
        return element is not None and self._orderer.contains_in_manual(element)

    def ranking(self) -> List[RankedEntry[E]]:
        """Return every element in rank order with its count and manual flag."""

        snapshot = self._orderer.snapshot()
        rows: List[RankedEntry[E]] = []
        if snapshot.manual is not None:
            rows.append(RankedEntry(0, snapshot.manual.element, snapshot.manual.count, True))
        for item in snapshot.automatic:
            rows.append(RankedEntry(len(rows), item.element, item.count, False))
        return rows

    def ranked(self, identifier: str) -> RankedEntry[E]:
        """Return the ranking row for ``identifier``; ``KeyError`` if unknown."""

        element = self._require_known(identifier)
        for row in self.ranking():
            if row.element == element:
                return row
        raise KeyError(identifier)  # pragma: no cover - map and list are kept in step

    # -------------------------------------------------------------- mutations

    def add(self, element: E, to_manual: bool = False) -> bool:
        """Record one use of ``element`` in the requested ordering.

        Returns whether the ranking order changed.
        """

        if element is None:
            raise ElementRequiredError()
        identifier = self._key(element)
        element = self._by_identifier.get(identifier, element)
        if to_manual:
            moved = self._orderer.add_to_manual(element)
        else:
            moved = self._orderer.add_to_automatic(element)
        self._by_identifier.setdefault(identifier, element)
        self._changed = True
        logger.info("Recorded use of %s (manual=%s, reordered=%s)", identifier, to_manual, moved)
        return moved

    def set_ordering(self, identifier: str, to_manual: bool) -> bool:
        """Move ``identifier`` to manual or automatic ordering without counting a use.

        Returns ``False`` when the element already sits in the requested ordering.
        """

        element = self._require_known(identifier)
        pinned = self._orderer.contains_in_manual(element)
        if to_manual and not pinned:
            self._orderer.relocate_automatic_to_manual(element)
        elif not to_manual and pinned:
            self._orderer.relocate_manual_to_automatic()
        else:
            return False
        self._changed = True
        logger.info("Moved %s to %s ordering", identifier, "manual" if to_manual else "automatic")
        return True

    def remove(self, identifier: str) -> bool:
        element = self._by_identifier.pop(identifier, None)
        if element is None:
            return False
        self._orderer.remove(element)
        self._changed = True
        logger.info("Removed %s", identifier)
        return True

    def clear(self) -> None:
        self._orderer.clear()
        self._by_identifier.clear()
        self._changed = True

    # ------------------------------------------------------------ persistence

    def export(self) -> ListSnapshot[E]:
        return self._orderer.snapshot()

    def reload(self, data: Union[ListSnapshot[E], Mapping[str, Any], Iterable[E]]) -> None:
        """Replace the ranking with ``data``.

        ``data`` is either a snapshot (restoring counts and the pinned element) or an
        ordered collection of elements, whose repeats accumulate counts. Nothing
        changes if ``data`` is rejected.
        """

        if isinstance(data, Mapping) and self._element_type is not None:
            data = ListSnapshot[self._element_type].model_validate(data)  # type: ignore[name-defined]
        if isinstance(data, (ListSnapshot, Mapping)):
            orderer = FrequencyPriorityList.from_snapshot(data)
        else:
            orderer = FrequencyPriorityList.from_elements(data)
        by_identifier = self._index(orderer)
        self._orderer = orderer
        self._by_identifier = by_identifier
        self._changed = True
        logger.info("Reloaded ranking with %d elements", len(orderer))

    @property
    def has_changed(self) -> bool:
        """Whether the ranking changed since construction or the last :meth:`mark_saved`."""

        return self._changed

    def mark_saved(self) -> None:
        self._changed = False

    # ---------------------------------------------------------------- helpers

    def _require_known(self, identifier: str) -> E:
        element = self._by_identifier.get(identifier)
        if element is None:
            raise KeyError(identifier)
        return element

    def _index(self, orderer: FrequencyPriorityList[E]) -> Dict[str, E]:
        mapping: Dict[str, E] = {}
        for element in orderer:
            identifier = self._key(element)
            if identifier in mapping:
                raise InvalidArgumentError(f"Identifier {identifier!r} maps to more than one element")
            mapping[identifier] = element
        return mapping


__all__ = ["IdentifierIndex", "RankedEntry"]
