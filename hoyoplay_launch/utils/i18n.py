"""
Message catalog for log lines and user-facing text.

Strings live in JSON files under resources/i18n/:
1. Shared files in the i18n root (locale-independent, e.g. logs.json)
2. Per-locale files in resources/i18n/{locale}/
English is always loaded first and acts as the fallback for missing keys.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["I18n", "available_locales", "get_language", "init_i18n", "t"]

logger = logging.getLogger("hoyoplay.i18n")

_FALLBACK_LOCALE = "en"


def _i18n_root() -> Path:
    return Path(__file__).resolve().parent.parent / "resources" / "i18n"


def _merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``update`` into a copy of ``base``."""
    result = base.copy()
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_json_dir(directory: Path) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    if not directory.is_dir():
        return merged
    for file_path in sorted(directory.glob("*.json")):
        try:
            merged = _merge(merged, json.loads(file_path.read_text(encoding="utf-8")))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading i18n file %s: %s", file_path.name, e)
    return merged


def available_locales() -> list[str]:
    """Return the locale codes that have a directory under resources/i18n/.

    Returns:
        Sorted list of locale codes (e.g. ['de', 'en']).
    """
    root = _i18n_root()
    if not root.is_dir():
        return [_FALLBACK_LOCALE]
    return sorted(p.name for p in root.iterdir() if p.is_dir())


class I18n:
    """Translation lookup for one locale with English fallback.

    Args:
        locale: Locale code matching a directory in resources/i18n/.
    """

    def __init__(self, locale: str = _FALLBACK_LOCALE) -> None:
        self.locale = locale
        root = _i18n_root()
        shared = _load_json_dir(root)
        self.fallback_translations = _merge(shared, _load_json_dir(root / _FALLBACK_LOCALE))
        if locale == _FALLBACK_LOCALE:
            self.translations = self.fallback_translations
        else:
            self.translations = _merge(self.fallback_translations, _load_json_dir(root / locale))

    def t(self, key: str, **kwargs: Any) -> str:
        """Look up a string by dot-notation key and format it.

        Args:
            key: Dot-separated key path (e.g. 'logs.scanner.found').
            **kwargs: Format arguments for string interpolation.

        Returns:
            The translated string, or '[key]' if it does not exist.
        """
        value: Any = self.translations
        for part in key.split("."):
            if not isinstance(value, dict):
                return f"[{key}]"
            value = value.get(part)

        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value
        return value


_i18n_instance: I18n | None = None


def init_i18n(locale: str = _FALLBACK_LOCALE) -> I18n:
    """Initialize the process-wide catalog.

    Unknown locales fall back to English with a warning.

    Args:
        locale: The locale code to use.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    if locale not in available_locales():
        logger.warning("Unknown UI language '%s', using '%s'", locale, _FALLBACK_LOCALE)
        locale = _FALLBACK_LOCALE
    _i18n_instance = I18n(locale)
    return _i18n_instance


def get_language() -> str:
    """Return the active locale code."""
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.locale


def t(key: str, **kwargs: Any) -> str:
    """Translate ``key`` with the process-wide catalog.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Translated string, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
