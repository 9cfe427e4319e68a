"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, civiltime.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from civiltime.domain.ranges import (
    DEFAULT_RECENT_SCOPE,
    DEFAULT_SEARCH_RANGE,
    RecentScope,
    SearchRange,
)
from civiltime.domain.zones import DEFAULT_ZONE, resolve_zone


class ZoneConfig(BaseModel):
    """[zone] section."""

    model_config = {"frozen": True}

    default: str = DEFAULT_ZONE

    @field_validator("default")
    @classmethod
    def _known_zone(cls, value: str) -> str:
        resolve_zone(value)
        return value


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    default_range: SearchRange = DEFAULT_SEARCH_RANGE
    show_weekly_totals: bool = True


class RecentConfig(BaseModel):
    """[recent] section."""

    model_config = {"frozen": True}

    scope: RecentScope = DEFAULT_RECENT_SCOPE

