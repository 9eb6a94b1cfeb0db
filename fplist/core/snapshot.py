"""Serializable snapshot of a priority list's internal ordering state."""

from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from .types import Entry

E = TypeVar("E")


class EntrySnapshot(BaseModel, Generic[E]):
    """An element together with the number of times it has been added."""

    element: E
    count: int = Field(default=1, ge=1)

    @field_validator("element", mode="before")
    @classmethod
    def _reject_none(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("snapshot entries require an element")
        return value

    @classmethod
    def from_entry(cls, entry: Entry[E]) -> "EntrySnapshot[E]":
        return cls(element=entry.element, count=entry.count)

    def to_entry(self) -> Entry[E]:
        return Entry(self.element, self.count)


class ListSnapshot(BaseModel, Generic[E]):
    """Full ordering state: the pinned entry (if any) and the automatic region front to back."""

    manual: Optional[EntrySnapshot[E]] = None
    automatic: List[EntrySnapshot[E]] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.automatic) + (1 if self.manual is not None else 0)

    def elements(self) -> List[E]:
        """Return the snapshot's elements in logical order."""

        ordered = [item.element for item in self.automatic]
        if self.manual is not None:
            ordered.insert(0, self.manual.element)
        return ordered


__all__ = ["EntrySnapshot", "ListSnapshot"]
