"""JSON persistence for priority list snapshots."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Type, Union

from pydantic import ValidationError

from .core.snapshot import ListSnapshot

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SnapshotStore:
    """Read and write a single :class:`ListSnapshot` as a JSON file."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, snapshot: ListSnapshot[Any]) -> None:
        """Persist ``snapshot``, creating parent directories."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Saved snapshot with %d elements to %s", len(snapshot), self.path)

    def load(self, element_type: Type[Any] = Any) -> Optional[ListSnapshot[Any]]:
        """Return the stored snapshot, or ``None`` when the file is missing or unreadable.

        Parameters
        ----------
        element_type:
            Type the snapshot's elements are validated as (``Any`` keeps raw JSON values).
        """

        if not self.exists():
            return None
        model = ListSnapshot[element_type]  # type: ignore[valid-type]
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                payload = json.load(fp)
            snapshot = model.model_validate(payload)
        except json.JSONDecodeError:
            logger.warning("Snapshot file %s is not valid JSON; ignoring it", self.path, exc_info=True)
            return None
        except (UnicodeDecodeError, OSError):
            logger.warning("Snapshot file %s could not be read; ignoring it", self.path, exc_info=True)
            return None
        except ValidationError:
            logger.warning("Snapshot file %s does not match the snapshot schema; ignoring it", self.path, exc_info=True)
            return None
        logger.info("Loaded snapshot with %d elements from %s", len(snapshot), self.path)
        return snapshot

    def clear(self) -> None:
        """Delete the snapshot file if present."""

        self.path.unlink(missing_ok=True)


__all__ = ["SnapshotStore"]
