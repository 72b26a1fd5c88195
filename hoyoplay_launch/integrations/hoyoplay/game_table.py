"""Static identity tables for HoYoPlay titles.

EXACT_GAMES maps a registry key to exactly one game. Honkai Impact 3rd is
published as several regional clients that all share one game_biz and
differ only by package; its keys are matched by prefix and then classified
with an ordered list of region rules.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "BH3_GLOBAL_FAMILY",
    "EXACT_GAMES",
    "FAMILIES",
    "GameFamily",
    "GameTemplate",
    "RegionRule",
]


@dataclass(frozen=True)
class GameTemplate:
    """Fixed identity of a single-edition title."""

    title: str
    game_biz: str
    icon_ref: str


@dataclass(frozen=True)
class RegionRule:
    """Maps a region token found in a key to a title suffix and package.

    Args:
        tokens: Lower-case substrings; any one of them selects this rule.
        suffix: Text appended to the family title, e.g. ' (SEA)'.
        package: Package id passed to the launcher.
    """

    tokens: tuple[str, ...]
    suffix: str
    package: str

    def matches(self, lower_key: str) -> bool:
        return any(token in lower_key for token in self.tokens)


@dataclass(frozen=True)
class GameFamily:
    """A title whose regional clients share one registry key prefix.

    Args:
        prefix: Key prefix identifying the family (case-sensitive).
        title: Base display title.
        game_biz: Identifier shared by every regional client.
        icon_ref: Icon shared by every regional client.
        default_package: Package used when no region rule matches.
        rules: Region rules, checked in this order. The first hit wins, so
            specific tokens must precede generic ones.
    """

    prefix: str
    title: str
    game_biz: str
    icon_ref: str
    default_package: str
    rules: tuple[RegionRule, ...]


EXACT_GAMES: dict[str, GameTemplate] = {
    "hk4e_global": GameTemplate("Genshin Impact", "hk4e_global", "icon_ys.ico"),
    "hkrpg_global": GameTemplate("Honkai: Star Rail", "hkrpg_global", "icon_sr.ico"),
    "nap_global": GameTemplate("Zenless Zone Zero", "nap_global", "icon_zzz.ico"),
    # Mainland China launcher
    "hk4e_cn": GameTemplate("Genshin Impact (CN)", "hk4e_cn", "icon_ys.ico"),
    "hkrpg_cn": GameTemplate("Honkai: Star Rail (CN)", "hkrpg_cn", "icon_sr.ico"),
    "nap_cn": GameTemplate("Zenless Zone Zero (CN)", "nap_cn", "icon_zzz.ico"),
    "bh3_cn": GameTemplate("Honkai Impact 3rd (CN)", "bh3_cn", "icon_bh3.ico"),
}

BH3_GLOBAL_FAMILY = GameFamily(
    prefix="bh3_global",
    title="Honkai Impact 3rd",
    game_biz="bh3_global",
    icon_ref="icon_bh3.ico",
    default_package="glb_official",
    rules=(
        RegionRule(("overseas",), " (SEA)", "overseas_official"),
        RegionRule(("jp",), " (Japan)", "jp_official"),
        RegionRule(("kr",), " (Korea)", "kr_official"),
        RegionRule(("asia", "tw"), " (TW/HK/MO)", "asia_official"),
        RegionRule(("glb", "global"), " (Global)", "glb_official"),
    ),
)

FAMILIES: tuple[GameFamily, ...] = (BH3_GLOBAL_FAMILY,)
