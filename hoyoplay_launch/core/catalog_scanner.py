# hoyoplay_launch/core/catalog_scanner.py

"""Scanner for HoYoPlay installation markers.

Every game the launcher knows about appears as a child key of the root
namespace. A game counts as installed when its key carries a non-blank
install path value; whether that path still exists on disk is not checked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hoyoplay_launch.core.config_store import join_path
from hoyoplay_launch.core.game import RawEntry
from hoyoplay_launch.utils.i18n import t

if TYPE_CHECKING:
    from hoyoplay_launch.core.config_store import ConfigStore

__all__ = ["DEFAULT_MARKER_VALUE", "scan"]

logger = logging.getLogger("hoyoplay.catalog_scanner")

DEFAULT_MARKER_VALUE = "GameInstallPath"


def scan(
    store: ConfigStore,
    root_namespace: str,
    marker_name: str = DEFAULT_MARKER_VALUE,
) -> list[RawEntry]:
    """Collect all installed entries below ``root_namespace``.

    A missing root is a normal state (nothing installed yet) and yields an
    empty list. Children whose key vanished, whose marker is missing, not a
    string, or blank are skipped.

    Args:
        store: Configuration store to read from.
        root_namespace: Path of the launcher's game namespace.
        marker_name: Name of the value holding the install path.

    Returns:
        Installed entries in the order the store enumerates them.

    Raises:
        ConfigAccessError: If the root or a child key cannot be opened for
            a reason other than not existing.
    """
    child_names = store.subkey_names(root_namespace)
    if child_names is None:
        logger.info(t("logs.scanner.root_missing", path=root_namespace))
        return []

    entries: list[RawEntry] = []
    for child in child_names:
        marker = store.read_value(join_path(root_namespace, child), marker_name)
        if not isinstance(marker, str) or not marker.strip():
            logger.debug(t("logs.scanner.not_installed", name=child))
            continue
        entries.append(RawEntry(namespace_key=child, install_path=marker))

    logger.debug(t("logs.scanner.found", count=len(entries), total=len(child_names)))
    return entries
