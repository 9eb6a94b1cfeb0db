"""Tests for environment driven settings."""

import logging
from pathlib import Path

import pytest

from fplist.config import Settings, configure_logging


@pytest.fixture(autouse=True)
def restore_fplist_logger():
    logger = logging.getLogger("fplist")
    level = logger.level
    yield
    logger.setLevel(level)


def test_defaults_without_environment(monkeypatch) -> None:
    for name in ("FPLIST_SNAPSHOT_PATH", "FPLIST_LOG_LEVEL", "FPLIST_AUTOSAVE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.snapshot_path is None
    assert settings.log_level == "INFO"
    assert settings.autosave is False


def test_values_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FPLIST_SNAPSHOT_PATH", str(tmp_path / "ranking.json"))
    monkeypatch.setenv("FPLIST_LOG_LEVEL", " debug ")
    monkeypatch.setenv("FPLIST_AUTOSAVE", "yes")

    settings = Settings.from_env()

    assert settings.snapshot_path == tmp_path / "ranking.json"
    assert settings.log_level == "DEBUG"
    assert settings.autosave is True


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("nope", False)])
def test_autosave_parsing(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("FPLIST_AUTOSAVE", raw)

    assert Settings.from_env().autosave is expected


def test_blank_snapshot_path_means_no_persistence(monkeypatch) -> None:
    monkeypatch.setenv("FPLIST_SNAPSHOT_PATH", "   ")

    assert Settings.from_env().snapshot_path is None


def test_configure_logging_sets_package_level() -> None:
    configure_logging("warning")

    assert logging.getLogger("fplist").level == logging.WARNING
    assert logging.getLogger("fplist.core.priority_list").getEffectiveLevel() == logging.WARNING


def test_configure_logging_falls_back_to_info(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="fplist.config")

    configure_logging("chatty")

    assert logging.getLogger("fplist").level == logging.INFO
    assert "Unknown log level" in caplog.text
