# hoyoplay_launch/services/launch_service.py

"""Starts games by handing their deep link to the HoYoPlay protocol handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hoyoplay_launch.utils.i18n import t
from hoyoplay_launch.utils.open_url import open_uri

if TYPE_CHECKING:
    from hoyoplay_launch.core.catalog_session import CatalogSession
    from hoyoplay_launch.core.game import GameRecord

__all__ = ["LaunchService"]

logger = logging.getLogger("hoyoplay.launch_service")


class LaunchService:
    """Launch games of a catalog session.

    Args:
        session: Session providing the deployment's URI scheme.
    """

    def __init__(self, session: CatalogSession) -> None:
        self._session = session

    def launch(self, record: GameRecord) -> bool:
        """Invoke the launcher for ``record``.

        The started process is not tracked.

        Args:
            record: Game to start.

        Returns:
            True if the protocol handler was invoked.
        """
        uri = self._session.launch_uri(record)
        logger.info(t("logs.launch.starting", title=record.title, uri=uri))
        if open_uri(uri):
            return True
        logger.error(t("logs.launch.failed", title=record.title, uri=uri))
        return False
