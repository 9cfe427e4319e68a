"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs   (CLI flags passed by Click, ``--tz``)
  2. Env vars      (``CIVILTIME_*``, nested with ``__``: ``CIVILTIME_ZONE__DEFAULT``)
  3. TOML file     (``civiltime.toml`` located by :func:`find_config`)
  4. Code defaults (baked into the section models)

The resolved ``zone.default`` is what callers pass to the core when a
user record carries no zone of its own.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from civiltime.config.discovery import find_config
from civiltime.config.models import RecentConfig, SearchConfig, ZoneConfig

# The TOML path is chosen per invocation, but pydantic-settings asks for
# sources on the class; hand it over through thread-local state.
_tls = threading.local()


class CivilTimeSettings(BaseSettings):
    """Settings for the civiltime CLI, stored on ``click.Context.obj``.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CIVILTIME_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    zone: ZoneConfig = Field(default_factory=ZoneConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    recent: RecentConfig = Field(default_factory=RecentConfig)

    @property
    def default_zone(self) -> str:
        return self.zone.default

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then the discovered TOML file."""
        toml_path: Path | None = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        tz: str | None = None,
        **cli_flags: Any,
    ) -> CivilTimeSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers a config file
        from *start_dir*. ``--tz`` overrides ``[zone] default``. A missing
        or malformed file and invalid values all surface as
        :class:`click.ClickException`.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(start_dir)

        overrides: dict[str, Any] = dict(cli_flags)
        if tz:
            overrides["zone"] = {"default": tz}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            msg = f"Invalid configuration: {problems}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
