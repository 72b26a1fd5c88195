#!/usr/bin/env python3
"""HoYoPlay Quick Launch - command line entry point.

Usage:
    hoyoplay-launch [QUERY]            list installed games matching QUERY
    hoyoplay-launch --launch QUERY     start the first matching game
    hoyoplay-launch reload             rescan and report the number of games
"""

from __future__ import annotations

import sys

from hoyoplay_launch.config import Config, config
from hoyoplay_launch.core.catalog_session import CatalogSession
from hoyoplay_launch.core.config_store import ConfigStore, WindowsRegistryStore
from hoyoplay_launch.core.logging import logger, setup_logging
from hoyoplay_launch.services.launch_service import LaunchService
from hoyoplay_launch.services.query_service import QueryService
from hoyoplay_launch.services.search_service import SearchService
from hoyoplay_launch.utils.i18n import init_i18n, t
from hoyoplay_launch.version import __app_name__, __version__

__all__ = ["build_session", "main"]

_LAUNCH_FLAG = "--launch"


def build_session(cfg: Config, store: ConfigStore) -> CatalogSession:
    """Create a catalog session for the configured deployment.

    Args:
        cfg: Application configuration.
        store: Configuration store to scan.

    Returns:
        A session that has not been loaded yet.
    """
    return CatalogSession(
        store=store,
        root_namespace=cfg.root_namespace,
        uri_scheme=cfg.uri_scheme,
        marker_name=cfg.MARKER_VALUE,
    )


def main(argv: list[str] | None = None, store: ConfigStore | None = None) -> int:
    """Main application execution flow.

    Args:
        argv: Command line arguments without the program name.
        store: Store to scan, defaults to the Windows registry.

    Returns:
        Exit code (0 = success, 1 = failure).
    """
    args = sys.argv[1:] if argv is None else argv
    launch = _LAUNCH_FLAG in args
    query = " ".join(a for a in args if a != _LAUNCH_FLAG)

    # 1. Initialize language and logging
    init_i18n(config.UI_LANGUAGE)
    setup_logging(log_file=config.LOG_FILE)
    logger.info(t("logs.main.startup", app=__app_name__, version=__version__, deployment=config.variant.name))

    # 2. Open the configuration store
    if store is None:
        if not WindowsRegistryStore.is_available():
            logger.error(t("logs.main.registry_unavailable"))
            return 1
        store = WindowsRegistryStore(config.REGISTRY_HIVE)

    # 3. Initial scan
    session = build_session(config, store)
    if not session.reload():
        print(t("cli.catalog_unavailable", error=session.last_error))
        return 1

    # 4. Answer the query
    service = QueryService(session, LaunchService(session), config.ICONS_DIR)
    results = service.query(query)
    if not results:
        print(t("cli.no_match", query=query))
        return 1

    if SearchService.is_reload_command(query):
        if not results[0].action():
            print(t("cli.catalog_unavailable", error=session.last_error))
            return 1
        print(t("cli.reloaded", count=len(session.records)))
        return 0

    if launch:
        return 0 if results[0].action() else 1

    for result in results:
        print(f"{result.title}\t{session.launch_uri(result.record)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
