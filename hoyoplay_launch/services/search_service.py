# hoyoplay_launch/services/search_service.py

"""Search over the cached game catalog.

Supports plain case-insensitive substring search on the title, regex search
(query prefixed with ``/``) and the reload command that asks for a rescan.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hoyoplay_launch.core.game import GameRecord

logger = logging.getLogger("hoyoplay.search_service")

__all__ = ["RELOAD_COMMANDS", "SearchService"]

_REGEX_PREFIX = "/"

RELOAD_COMMANDS: frozenset[str] = frozenset({"reload", "r"})


class SearchService:
    """Stateless helpers for matching queries against game records."""

    @staticmethod
    def is_reload_command(query: str) -> bool:
        """Checks if the query asks for a catalog rescan.

        Args:
            query: Raw query text.

        Returns:
            True for 'reload' or 'r' in any casing.
        """
        return query.strip().lower() in RELOAD_COMMANDS

    @staticmethod
    def filter_records(records: Sequence[GameRecord], query: str) -> list[GameRecord]:
        """Filters records by title.

        - Empty query: returns all records.
        - Regex mode: query starts with ``/`` (e.g. ``/^honkai``).
        - Plain text: case-insensitive substring match on the title.

        Args:
            records: Records to filter, order is preserved.
            query: The search string.

        Returns:
            Matching records.
        """
        query = query.strip()
        if not query:
            return list(records)

        if query.startswith(_REGEX_PREFIX) and len(query) > 1:
            return SearchService._filter_regex(records, query[1:])

        lower_query = query.lower()
        return [r for r in records if lower_query in r.title.lower()]

    @staticmethod
    def _filter_regex(records: Sequence[GameRecord], pattern: str) -> list[GameRecord]:
        try:
            compiled = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            logger.warning("Invalid regex pattern '%s': %s", pattern, exc)
            return []

        return [r for r in records if compiled.search(r.title)]
