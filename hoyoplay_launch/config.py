"""
Configuration - deployment variants and user settings.
Selects which HoYoPlay installation (global or mainland China) is scanned
and which protocol handler launches its games.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("hoyoplay.config")


__all__ = ["Config", "DEPLOYMENTS", "DeploymentVariant", "config"]


@dataclass(frozen=True)
class DeploymentVariant:
    """Where one HoYoPlay edition keeps its games and how it is launched."""

    name: str
    uri_scheme: str
    root_namespace: str


DEPLOYMENTS: dict[str, DeploymentVariant] = {
    "global": DeploymentVariant("global", "hyp-global", r"Software\Cognosphere\HYP\1_0"),
    "cn": DeploymentVariant("cn", "hyp-cn", r"Software\miHoYo\HYP\1_1"),
}

DEFAULT_DEPLOYMENT = "global"


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages paths, the deployment variant and UI settings.
    """

    APP_DIR: Path = Path(__file__).parent.parent
    DATA_DIR: Path = APP_DIR / "data"
    RESOURCES_DIR: Path = Path(__file__).parent / "resources"
    # Icon files are supplied by the host; point icons_dir at its image folder
    ICONS_DIR: Path = RESOURCES_DIR / "icons"

    SETTINGS_FILE: Path = DATA_DIR / "settings.json"

    # Default values
    UI_LANGUAGE: str = "en"
    DEPLOYMENT: str = DEFAULT_DEPLOYMENT

    # Overrides for older launcher schema versions; None = use the variant preset
    ROOT_NAMESPACE: str | None = None
    URI_SCHEME: str | None = None

    REGISTRY_HIVE: str = "HKEY_CURRENT_USER"
    MARKER_VALUE: str = "GameInstallPath"

    LOG_FILE: Path | None = None

    def __post_init__(self):
        """Load settings file and environment overrides after instantiation."""
        self._load_settings()

        load_dotenv()
        self.DEPLOYMENT = os.getenv("HOYOPLAY_DEPLOYMENT", self.DEPLOYMENT)
        self.ROOT_NAMESPACE = os.getenv("HOYOPLAY_ROOT_NAMESPACE", self.ROOT_NAMESPACE)
        self.URI_SCHEME = os.getenv("HOYOPLAY_URI_SCHEME", self.URI_SCHEME)

        icons_dir = os.getenv("HOYOPLAY_ICONS_DIR")
        if icons_dir:
            self.ICONS_DIR = Path(icons_dir)

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        # Local import to avoid circular dependency
        from hoyoplay_launch.utils.i18n import t

        if not self.SETTINGS_FILE.exists():
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(t("logs.config.load_error", error=e))
            return

        self.UI_LANGUAGE = data.get("ui_language", self.UI_LANGUAGE)
        self.DEPLOYMENT = data.get("deployment", self.DEPLOYMENT)
        self.ROOT_NAMESPACE = data.get("root_namespace") or self.ROOT_NAMESPACE
        self.URI_SCHEME = data.get("uri_scheme") or self.URI_SCHEME
        self.REGISTRY_HIVE = data.get("registry_hive", self.REGISTRY_HIVE)
        self.MARKER_VALUE = data.get("marker_value", self.MARKER_VALUE)

        icons_dir = data.get("icons_dir")
        if icons_dir:
            self.ICONS_DIR = Path(icons_dir)

        log_file = data.get("log_file")
        if log_file:
            self.LOG_FILE = Path(log_file)

    def save(self) -> None:
        """Save current configuration to JSON file."""
        from hoyoplay_launch.utils.i18n import t

        data = {
            "ui_language": self.UI_LANGUAGE,
            "deployment": self.DEPLOYMENT,
            "root_namespace": self.ROOT_NAMESPACE or "",
            "uri_scheme": self.URI_SCHEME or "",
            "registry_hive": self.REGISTRY_HIVE,
            "marker_value": self.MARKER_VALUE,
            "icons_dir": str(self.ICONS_DIR),
            "log_file": str(self.LOG_FILE) if self.LOG_FILE else "",
        }

        try:
            self.SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
            with open(self.SETTINGS_FILE, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(t("logs.config.save_error", error=e))

    @property
    def variant(self) -> DeploymentVariant:
        """The selected deployment preset, global if the name is unknown."""
        variant = DEPLOYMENTS.get(self.DEPLOYMENT)
        if variant is None:
            from hoyoplay_launch.utils.i18n import t

            logger.warning(t("logs.config.unknown_deployment", name=self.DEPLOYMENT, default=DEFAULT_DEPLOYMENT))
            return DEPLOYMENTS[DEFAULT_DEPLOYMENT]
        return variant

    @property
    def root_namespace(self) -> str:
        return self.ROOT_NAMESPACE or self.variant.root_namespace

    @property
    def uri_scheme(self) -> str:
        return self.URI_SCHEME or self.variant.uri_scheme


# Global instance
config = Config()
