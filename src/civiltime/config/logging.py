"""structlog setup for civiltime.

Everything goes to stderr so stdout stays clean for piping results:
console rendering by default, JSON lines with ``--log-json``.

Domain code never logs. Services use ``logging.getLogger(__name__)`` and
the CLI uses ``structlog.get_logger``; one ProcessorFormatter renders both.
Each invocation binds the zone in effect, so every line says which zone
its dates were computed in.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "civiltime"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib records through a single stderr handler.

    The ``civiltime`` logger runs at DEBUG when *verbose*, WARNING
    otherwise; third-party loggers stay at WARNING. Safe to call more
    than once: the root handler is replaced, not stacked.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_invocation(*, zone: str, config_path: str | None = None) -> None:
    """Attach the invocation's zone and config file to all later log lines."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(zone=zone, config_path=config_path)
