"""fplist package: frequency priority list and the identifier index built on it."""

from .core import (
    Entry,
    EntrySnapshot,
    FrequencyPriorityList,
    ListSnapshot,
    PriorityListIterator,
)
from .services import IdentifierIndex
from .storage import SnapshotStore
from .app import app as _app, create_app


app = _app

__all__ = [
    "FrequencyPriorityList",
    "PriorityListIterator",
    "Entry",
    "EntrySnapshot",
    "ListSnapshot",
    "IdentifierIndex",
    "SnapshotStore",
    "create_app",
    "app",
]
