"""Tests for ConvertService."""

from __future__ import annotations

import pytest

from civiltime.config.settings import CivilTimeSettings
from civiltime.services.convert import ConvertService

LA = "America/Los_Angeles"


class TestToUtc:
    def test_converts_in_given_zone(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_utc("2025-11-02", "03:30", tz=LA)
        assert result.ok
        assert result.op == "to_utc"
        assert result.data["instant"] == "2025-11-02T11:30:00.000Z"
        assert result.data["zone"] == LA
        assert result.data["offset_minutes"] == -480
        assert result.data["offset"] == "-08:00"

    def test_falls_back_to_default_zone(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_utc("2025-10-29", "21:31")
        assert result.data["instant"] == "2025-10-29T21:31:00.000Z"
        assert result.data["zone"] == "UTC"
        assert result.data["offset"] == "+00:00"

    def test_configured_default_zone(self, la_settings: CivilTimeSettings) -> None:
        result = ConvertService(la_settings).to_utc("2025-10-29", "21:31")
        assert result.data["instant"] == "2025-10-30T04:31:00.000Z"

    def test_half_hour_offset(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_utc("2025-10-29", "21:31", tz="Asia/Kolkata")
        assert result.data["instant"] == "2025-10-29T16:01:00.000Z"
        assert result.data["offset"] == "+05:30"

    @pytest.mark.parametrize(
        ("day", "clock", "tz", "code"),
        [
            ("2025-10-29", "21:31", "Mars/Base", "INVALID_ZONE"),
            ("2025-02-30", "21:31", LA, "INVALID_DATE"),
            ("2025-10-29", "9pm", LA, "INVALID_TIME"),
        ],
    )
    def test_invalid_input(
        self, settings: CivilTimeSettings, day: str, clock: str, tz: str, code: str
    ) -> None:
        result = ConvertService(settings).to_utc(day, clock, tz=tz)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == code
        assert result.error.detail["value"] in (day, clock, tz)

    def test_echoes_canonical_date_and_time(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_utc(" 2025-10-29 ", "9:05", tz=LA)
        assert result.ok
        assert (result.data["date"], result.data["time"]) == ("2025-10-29", "09:05")
        assert result.data["instant"] == "2025-10-29T16:05:00.000Z"

    def test_last_representable_day_fails_cleanly(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_utc("9999-12-31", "23:59", tz=LA)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"


class TestToLocal:
    def test_projects_instant(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_local("2025-10-30T04:31:00.000Z", tz=LA)
        assert result.ok
        assert (result.data["date"], result.data["time"]) == ("2025-10-29", "21:31")
        assert result.data["offset_minutes"] == -420

    def test_naive_instant_rejected(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).to_local("2025-10-30T04:31:00", tz=LA)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_INSTANT"


class TestOffset:
    def test_offset_before_and_after_fall_back(self, settings: CivilTimeSettings) -> None:
        svc = ConvertService(settings)
        assert svc.offset("2025-11-02T08:59:00Z", tz=LA).data["offset"] == "-07:00"
        assert svc.offset("2025-11-02T09:00:00Z", tz=LA).data["offset"] == "-08:00"

    def test_unknown_zone(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).offset("2025-11-02T08:59:00Z", tz="Atlantis")
        assert result.error is not None
        assert result.error.code == "INVALID_ZONE"


class TestDayBounds:
    def test_fall_back_day(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).day_bounds("2025-11-02", tz=LA)
        assert result.ok
        assert result.data["start"] == "2025-11-02T07:00:00.000Z"
        assert result.data["end"] == "2025-11-03T08:00:00.000Z"

    def test_invalid_date(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).day_bounds("11/02/2025", tz=LA)
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"

    def test_echoes_canonical_date(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).day_bounds(" 2025-10-29", tz=LA)
        assert result.data["date"] == "2025-10-29"

    def test_last_representable_day(self, settings: CivilTimeSettings) -> None:
        result = ConvertService(settings).day_bounds("9999-12-31", tz="UTC")
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"
