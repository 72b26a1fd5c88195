# hoyoplay_launch/core/config_store.py

"""Read-only access to the key-value configuration store.

HoYoPlay records every installed game as a child key of a per-deployment
registry path. ConfigStore hides how that tree is read so the catalog
scanner can run against the Windows registry or any other hierarchical
store with the same shape.
"""

from __future__ import annotations

import logging
import platform
from abc import ABC, abstractmethod

# Import winreg only on Windows
if platform.system() == "Windows":
    import winreg
else:
    winreg = None

__all__ = ["ConfigAccessError", "ConfigStore", "WindowsRegistryStore", "join_path"]

logger = logging.getLogger("hoyoplay.config_store")

_SEPARATOR = "\\"


class ConfigAccessError(Exception):
    """A key exists but could not be opened (e.g. access denied).

    Args:
        path: Path of the key that failed to open.
        reason: Human-readable cause reported by the store.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot open configuration key '{path}': {reason}")
        self.path = path
        self.reason = reason


def join_path(parent: str, child: str) -> str:
    """Join two registry-style path segments with a backslash.

    Args:
        parent: Parent key path.
        child: Child key name.

    Returns:
        The combined path.
    """
    if not parent:
        return child
    return parent.rstrip(_SEPARATOR) + _SEPARATOR + child


class ConfigStore(ABC):
    """Hierarchical key-value store with named string values per key."""

    @abstractmethod
    def subkey_names(self, path: str) -> list[str] | None:
        """List the immediate child keys of ``path``.

        Args:
            path: Key path relative to the store root.

        Returns:
            Child key names in store order, or None if the key does not exist.

        Raises:
            ConfigAccessError: If the key exists but cannot be opened.
        """

    @abstractmethod
    def read_value(self, path: str, name: str) -> object | None:
        """Read one named value of the key at ``path``.

        Args:
            path: Key path relative to the store root.
            name: Value name.

        Returns:
            The stored value, or None if the key or the value does not exist.

        Raises:
            ConfigAccessError: If the key exists but cannot be opened.
        """


class WindowsRegistryStore(ConfigStore):
    """ConfigStore backed by one hive of the Windows registry.

    Args:
        hive: Name of the winreg hive constant (HoYoPlay writes to HKCU).
    """

    def __init__(self, hive: str = "HKEY_CURRENT_USER") -> None:
        if winreg is None:
            raise RuntimeError("The Windows registry is only available on Windows")
        self.hive_name = hive
        self._hive = getattr(winreg, hive)

    @staticmethod
    def is_available() -> bool:
        """Check whether the registry can be read on this system.

        Returns:
            True on Windows.
        """
        return winreg is not None

    def subkey_names(self, path: str) -> list[str] | None:
        try:
            with winreg.OpenKey(self._hive, path, 0, winreg.KEY_READ) as key:
                subkey_count, _, _ = winreg.QueryInfoKey(key)
                return [winreg.EnumKey(key, i) for i in range(subkey_count)]
        except FileNotFoundError:
            logger.debug("Registry key not found: %s\\%s", self.hive_name, path)
            return None
        except OSError as e:
            raise ConfigAccessError(path, str(e)) from e

    def read_value(self, path: str, name: str) -> object | None:
        try:
            with winreg.OpenKey(self._hive, path, 0, winreg.KEY_READ) as key:
                value, _value_type = winreg.QueryValueEx(key, name)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ConfigAccessError(path, str(e)) from e
        return value
