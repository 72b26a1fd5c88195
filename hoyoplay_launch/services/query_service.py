# hoyoplay_launch/services/query_service.py

"""Turns a search query into result rows for a launcher host.

A host (e.g. a run-box plugin) shows each QueryResult and calls its action
when the user picks it. The reload command yields a single row that
rescans the catalog; any other query lists the matching games.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from hoyoplay_launch.services.search_service import SearchService
from hoyoplay_launch.utils.i18n import t

if TYPE_CHECKING:
    from hoyoplay_launch.core.catalog_session import CatalogSession
    from hoyoplay_launch.core.game import GameRecord
    from hoyoplay_launch.services.launch_service import LaunchService

__all__ = ["QueryResult", "QueryService", "RELOAD_ICON"]

logger = logging.getLogger("hoyoplay.query_service")

RELOAD_ICON = "icon.ico"


@dataclass(frozen=True)
class QueryResult:
    """One selectable row.

    Args:
        title: Main text.
        subtitle: Secondary text.
        icon_path: Icon file to display.
        action: Called when the row is chosen; returns True on success.
        record: The game behind the row, None for the reload row.
    """

    title: str
    subtitle: str
    icon_path: Path
    action: Callable[[], bool]
    record: GameRecord | None = None


class QueryService:
    """Answer host queries from the session's current snapshot.

    Args:
        session: Catalog session to read from and reload.
        launcher: Service used by the rows' launch actions.
        icons_dir: Host directory holding the icon files.
    """

    def __init__(self, session: CatalogSession, launcher: LaunchService, icons_dir: Path) -> None:
        self._session = session
        self._launcher = launcher
        self._icons_dir = icons_dir

    def query(self, text: str) -> list[QueryResult]:
        """Build result rows for ``text``.

        Args:
            text: Raw query typed by the user.

        Returns:
            The reload row for a reload command, otherwise one row per
            matching game in catalog order.
        """
        if SearchService.is_reload_command(text):
            return [
                QueryResult(
                    title=t("query.reload.title"),
                    subtitle=t("query.reload.subtitle"),
                    icon_path=self._icons_dir / RELOAD_ICON,
                    action=self._session.reload,
                )
            ]

        records = SearchService.filter_records(self._session.records, text)
        return [self._to_result(record) for record in records]

    def _to_result(self, record: GameRecord) -> QueryResult:
        return QueryResult(
            title=record.title,
            subtitle=t("query.launch.subtitle"),
            icon_path=self._icons_dir / record.icon_ref,
            action=lambda: self._launcher.launch(record),
            record=record,
        )
