"""BaseService — shared foundation for civiltime services.

Every service receives the resolved settings at construction time. The
settings supply the fallback zone; services never read an ambient zone
from the process environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civiltime.config.settings import CivilTimeSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ConvertService(BaseService):
            def to_utc(self, day: str, clock: str, *, tz: str | None = None) -> ServiceResult:
                zone = self._zone(tz)
                ...
    """

    def __init__(self, settings: CivilTimeSettings) -> None:
        self._settings = settings

    def _zone(self, tz: str | None) -> str:
        """Explicit *tz* if given, else the configured default zone.

        The returned name is not validated here; the domain call that
        consumes it raises ``InvalidZoneError`` for unknown names.
        """
        if tz:
            return tz
        logger.debug("No zone supplied, using default %s", self._settings.default_zone)
        return self._settings.default_zone
