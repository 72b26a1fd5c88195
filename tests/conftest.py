# tests/conftest.py
from __future__ import annotations

import pytest

from hoyoplay_launch.core.config_store import ConfigAccessError, ConfigStore, join_path

GLOBAL_ROOT = r"Software\Cognosphere\HYP\1_0"


class FakeConfigStore(ConfigStore):
    """In-memory ConfigStore.

    Keys are full backslash paths mapped to their named values. Paths in
    ``denied`` raise ConfigAccessError like a key without read permission.
    """

    def __init__(self, keys: dict[str, dict[str, object]] | None = None, denied: set[str] | None = None) -> None:
        self.keys: dict[str, dict[str, object]] = dict(keys or {})
        self.denied: set[str] = set(denied or ())
        self.reads: list[str] = []

    def add_game(self, root: str, name: str, install_path: object | None = "C:\\Games") -> None:
        values = {} if install_path is None else {"GameInstallPath": install_path}
        self.keys.setdefault(root, {})
        self.keys[join_path(root, name)] = values

    def _check(self, path: str) -> None:
        if path in self.denied:
            raise ConfigAccessError(path, "Access is denied")

    def subkey_names(self, path: str) -> list[str] | None:
        self._check(path)
        if path not in self.keys:
            return None
        prefix = path + "\\"
        return [k[len(prefix):] for k in self.keys if k.startswith(prefix) and "\\" not in k[len(prefix):]]

    def read_value(self, path: str, name: str) -> object | None:
        self.reads.append(path)
        self._check(path)
        values = self.keys.get(path)
        if values is None:
            return None
        return values.get(name)


@pytest.fixture
def fake_store() -> FakeConfigStore:
    """Empty fake store with the global HoYoPlay root present."""
    return FakeConfigStore({GLOBAL_ROOT: {}})


@pytest.fixture
def scenario_store() -> FakeConfigStore:
    """Genshin and HI3 SEA installed, Star Rail registered but not installed."""
    store = FakeConfigStore({GLOBAL_ROOT: {}})
    store.add_game(GLOBAL_ROOT, "hk4e_global", r"D:\HoYoPlay\games\Genshin Impact game")
    store.add_game(GLOBAL_ROOT, "hkrpg_global", "")
    store.add_game(GLOBAL_ROOT, "bh3_global_overseas", r"D:\HoYoPlay\games\Honkai Impact 3rd game")
    return store


@pytest.fixture
def store_factory() -> type[FakeConfigStore]:
    """The FakeConfigStore class, for tests that build their own tree."""
    return FakeConfigStore
