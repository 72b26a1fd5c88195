# hoyoplay_launch/core/catalog_session.py

"""Long-lived owner of the installed-games catalog.

The session keeps the last good scan as an immutable CatalogSnapshot.
reload() builds a complete new snapshot and publishes it with a single
reference assignment, so readers always see either the old or the new
catalog and never wait for a scan. A failed scan leaves the previous
snapshot in place.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from hoyoplay_launch.core.catalog_scanner import DEFAULT_MARKER_VALUE, scan
from hoyoplay_launch.core.config_store import ConfigAccessError
from hoyoplay_launch.integrations.hoyoplay.resolver import GameResolver
from hoyoplay_launch.utils.i18n import t

if TYPE_CHECKING:
    from hoyoplay_launch.core.config_store import ConfigStore
    from hoyoplay_launch.core.game import GameRecord

__all__ = ["CatalogSession", "CatalogSnapshot"]

logger = logging.getLogger("hoyoplay.catalog_session")


@dataclass(frozen=True)
class CatalogSnapshot:
    """Result of one complete scan.

    Args:
        records: Resolved games in scan order.
        root_namespace: Namespace the scan read from.
        scanned_at: Completion time, None for the initial empty snapshot.
    """

    records: tuple[GameRecord, ...] = ()
    root_namespace: str = ""
    scanned_at: datetime | None = None

    def __len__(self) -> int:
        return len(self.records)


class CatalogSession:
    """Scans the configuration store and caches the resolved games.

    Args:
        store: Configuration store holding HoYoPlay's install markers.
        root_namespace: Path of the launcher's game namespace.
        uri_scheme: Protocol of the deployment's launch handler.
        marker_name: Name of the install path value.
        resolver: Resolver to use, defaults to the built-in tables.
    """

    def __init__(
        self,
        store: ConfigStore,
        root_namespace: str,
        uri_scheme: str,
        marker_name: str = DEFAULT_MARKER_VALUE,
        resolver: GameResolver | None = None,
    ) -> None:
        self._store = store
        self.root_namespace = root_namespace
        self.uri_scheme = uri_scheme
        self.marker_name = marker_name
        self._resolver = resolver or GameResolver()
        self._snapshot = CatalogSnapshot(root_namespace=root_namespace)
        self._reload_lock = threading.Lock()
        self.last_error: ConfigAccessError | None = None

    @property
    def snapshot(self) -> CatalogSnapshot:
        """The most recent successfully built snapshot."""
        return self._snapshot

    @property
    def records(self) -> tuple[GameRecord, ...]:
        return self._snapshot.records

    @property
    def is_stale(self) -> bool:
        """True when the last reload failed and an older snapshot is served."""
        return self.last_error is not None

    def reload(self) -> bool:
        """Rescan the store and replace the cached snapshot.

        Concurrent reloads run one after another; readers are never blocked.
        Errors other than ConfigAccessError propagate and leave the previous
        snapshot published.

        Returns:
            True if a new snapshot was published, False if the scan failed
            and the previous snapshot was kept.
        """
        with self._reload_lock:
            try:
                entries = scan(self._store, self.root_namespace, self.marker_name)
            except ConfigAccessError as e:
                self.last_error = e
                logger.error(t("logs.session.reload_failed", error=e, count=len(self._snapshot)))
                return False

            snapshot = CatalogSnapshot(
                records=tuple(self._resolver.resolve(entries)),
                root_namespace=self.root_namespace,
                scanned_at=datetime.now(),
            )
            self._snapshot = snapshot
            self.last_error = None

        logger.info(t("logs.session.reloaded", count=len(snapshot), path=self.root_namespace))
        return True

    def launch_uri(self, record: GameRecord) -> str:
        """Build the launch URI of ``record`` for this deployment.

        Args:
            record: A record from the current snapshot.

        Returns:
            The deep link for the launcher's protocol handler.
        """
        return record.launch_uri(self.uri_scheme)
