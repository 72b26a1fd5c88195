"""Resolve scanned registry entries into launchable games.

Resolution runs in two tiers: an exact lookup of the key in the identity
table, then a prefix match against the multi-region families. Keys that
match neither are not HoYoPlay games we know and are dropped. Resolution
never raises; a family member with an unrecognised region is still listed,
with the raw key in its title so it can be reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from hoyoplay_launch.core.game import GameRecord, RawEntry
from hoyoplay_launch.integrations.hoyoplay.game_table import (
    EXACT_GAMES,
    FAMILIES,
    GameFamily,
    GameTemplate,
)
from hoyoplay_launch.utils.i18n import t

__all__ = ["GameResolver", "resolve"]

logger = logging.getLogger("hoyoplay.resolver")


class GameResolver:
    """Maps RawEntry values to GameRecord values using static tables.

    Args:
        exact_games: Key -> template table for single-edition titles.
        families: Multi-region families, checked in order.
    """

    def __init__(
        self,
        exact_games: Mapping[str, GameTemplate] = EXACT_GAMES,
        families: tuple[GameFamily, ...] = FAMILIES,
    ) -> None:
        self._exact_games = dict(exact_games)
        self._families = families

    def resolve(self, entries: Iterable[RawEntry]) -> list[GameRecord]:
        """Resolve entries in order, dropping unknown keys.

        Args:
            entries: Installed entries from the catalog scanner.

        Returns:
            One record per recognised entry.
        """
        records: list[GameRecord] = []
        for entry in entries:
            record = self.resolve_key(entry.namespace_key)
            if record is None:
                logger.debug(t("logs.resolver.unknown_key", name=entry.namespace_key))
                continue
            records.append(record)
        return records

    def resolve_key(self, key: str) -> GameRecord | None:
        """Resolve a single namespace key.

        Args:
            key: Child key name from the configuration store.

        Returns:
            The matching record, or None if the key is not recognised.
        """
        template = self._exact_games.get(key)
        if template is not None:
            return GameRecord(
                title=template.title,
                game_biz=template.game_biz,
                icon_ref=template.icon_ref,
            )

        for family in self._families:
            if key.startswith(family.prefix):
                return self._resolve_family_member(family, key)
        return None

    @staticmethod
    def _resolve_family_member(family: GameFamily, key: str) -> GameRecord:
        lower_key = key.lower()
        for rule in family.rules:
            if rule.matches(lower_key):
                title = family.title + rule.suffix
                package = rule.package
                break
        else:
            logger.warning(t("logs.resolver.unknown_region", name=key, title=family.title))
            title = f"{family.title} (Unknown Region: {key})"
            package = family.default_package

        return GameRecord(
            title=title,
            game_biz=family.game_biz,
            icon_ref=family.icon_ref,
            package=package,
        )


_default_resolver = GameResolver()


def resolve(entries: Iterable[RawEntry]) -> list[GameRecord]:
    """Resolve entries with the built-in HoYoPlay tables.

    Args:
        entries: Installed entries from the catalog scanner.

    Returns:
        One record per recognised entry.
    """
    return _default_resolver.resolve(entries)
