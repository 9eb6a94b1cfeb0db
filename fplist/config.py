"""Runtime settings for the fplist service (environment driven).

Recognised variables:
- FPLIST_SNAPSHOT_PATH: JSON file the service loads on start and saves to (unset: no persistence)
- FPLIST_LOG_LEVEL: level name for the ``fplist`` loggers (default INFO)
- FPLIST_AUTOSAVE: save the snapshot after every mutating request (default false)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _get_path(name: str) -> Optional[Path]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    snapshot_path: Optional[Path] = None
    log_level: str = "INFO"
    autosave: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            snapshot_path=_get_path("FPLIST_SNAPSHOT_PATH"),
            log_level=(os.getenv("FPLIST_LOG_LEVEL") or cls.log_level).strip().upper(),
            autosave=_get_bool("FPLIST_AUTOSAVE", cls.autosave),
        )


def configure_logging(level: str) -> None:
    """Apply ``level`` to the ``fplist`` logger hierarchy, falling back to INFO."""

    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        logging.getLogger(__name__).warning("Unknown log level %r; using INFO", level)
        resolved = logging.INFO
    logging.getLogger("fplist").setLevel(resolved)


__all__ = ["Settings", "configure_logging"]
