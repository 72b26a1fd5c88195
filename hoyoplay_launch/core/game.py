# hoyoplay_launch/core/game.py

"""Data model for discovered HoYoPlay games.

RawEntry is what the catalog scanner reads from the configuration store,
GameRecord is the resolved, display-ready game. The launch URI is derived
from a record on demand and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

__all__ = [
    "GameRecord",
    "KNOWN_GAME_BIZ",
    "RawEntry",
    "build_launch_uri",
]

# Business identifiers accepted by the HoYoPlay launch protocol.
KNOWN_GAME_BIZ: frozenset[str] = frozenset(
    {
        "hk4e_global",
        "hkrpg_global",
        "nap_global",
        "bh3_global",
        "hk4e_cn",
        "hkrpg_cn",
        "nap_cn",
        "bh3_cn",
    }
)


@dataclass(frozen=True)
class RawEntry:
    """One child key of the launcher's configuration namespace.

    Args:
        namespace_key: Name of the child key under the root namespace.
        install_path: Value of the install marker. Only installed entries
            are ever emitted, so this is never blank.
    """

    namespace_key: str
    install_path: str


@dataclass(frozen=True)
class GameRecord:
    """An installed game, ready to be listed and launched.

    Args:
        title: Display name, possibly with a region suffix.
        game_biz: Launch protocol identifier, one of KNOWN_GAME_BIZ.
        icon_ref: File name of the icon under the icons directory.
        package: Regional client build, only set for multi-region titles.

    Raises:
        ValueError: If game_biz is unknown or icon_ref is empty.
    """

    title: str
    game_biz: str
    icon_ref: str
    package: str | None = None

    def __post_init__(self) -> None:
        if self.game_biz not in KNOWN_GAME_BIZ:
            raise ValueError(f"Unknown game_biz: {self.game_biz!r}")
        if not self.icon_ref:
            raise ValueError(f"GameRecord {self.title!r} has no icon_ref")

    def launch_uri(self, scheme: str) -> str:
        """Build the deep link that starts this game through HoYoPlay.

        Args:
            scheme: Protocol registered by the launcher (e.g. 'hyp-global').

        Returns:
            The launch URI.
        """
        return build_launch_uri(scheme, self.game_biz, self.package)


def build_launch_uri(scheme: str, game_biz: str, package: str | None = None) -> str:
    """Build ``<scheme>://launchgame?gamebiz=..&openGame=true[&package=..]``.

    Values are percent-encoded even though the known identifiers never
    need it, because callers may pass arbitrary strings.

    Args:
        scheme: Protocol identifier of the deployment.
        game_biz: Business identifier of the game.
        package: Optional regional package id.

    Returns:
        The launch URI.
    """
    uri = f"{scheme}://launchgame?gamebiz={quote(game_biz, safe='')}&openGame=true"
    if package:
        uri += f"&package={quote(package, safe='')}"
    return uri
