"""Shared pytest fixtures for civiltime tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from civiltime.config.settings import CivilTimeSettings

LA = "America/Los_Angeles"
NY = "America/New_York"
KOLKATA = "Asia/Kolkata"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user config files and CIVILTIME_* env vars out of every test."""
    for var in (
        "CIVILTIME_CONFIG",
        "CIVILTIME_ZONE__DEFAULT",
        "CIVILTIME_SEARCH__DEFAULT_RANGE",
        "CIVILTIME_SEARCH__SHOW_WEEKLY_TOTALS",
        "CIVILTIME_RECENT__SCOPE",
        "CIVILTIME_QUIET",
        "CIVILTIME_VERBOSE",
        "CIVILTIME_JSON_OUTPUT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> CivilTimeSettings:
    """Default settings with no config file in reach."""
    return CivilTimeSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def la_settings(tmp_path: Path) -> CivilTimeSettings:
    """Settings whose default zone is Los Angeles."""
    return CivilTimeSettings.from_cli(start_dir=tmp_path, tz=LA)


@pytest.fixture
def write_entries(tmp_path: Path) -> Callable[..., Path]:
    """Write entry records as a JSON array and return the file path."""

    def _write(records: list[dict[str, Any]], name: str = "entries.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Entries spread over two Los Angeles weeks around the 2025 fall-back.

    Week of 2025-10-26: a timed entry, a manual entry, and an entry whose
    explicit duration overrides its instants. Week of 2025-11-02: a timed
    entry on the transition day and an active entry.
    """
    return [
        {
            "id": 1,
            "site": "clinic",
            "events": ["Consult"],
            "start_utc": "2025-10-30T04:31:00.000Z",
            "stop_utc": "2025-10-30T05:31:00.000Z",
            "start_local_date": "2025-10-29",
        },
        {
            "id": 2,
            "site": "remote",
            "events": ["Charting"],
            "start_local_date": "2025-10-28",
            "duration_min": 30,
        },
        {
            "id": 3,
            "site": "clinic",
            "events": ["Consult", "Charting"],
            "start_utc": "2025-10-31T16:00:00.000Z",
            "stop_utc": "2025-10-31T17:00:00.000Z",
            "duration_min": 45,
        },
        {
            "id": 4,
            "site": "clinic",
            "events": ["Consult"],
            "start_utc": "2025-11-02T11:30:00.000Z",
            "stop_utc": "2025-11-02T13:00:00.000Z",
        },
        {
            "id": 5,
            "site": "remote",
            "events": [],
            "start_utc": "2025-11-03T17:00:00.000Z",
        },
    ]
