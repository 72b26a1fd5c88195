"""Tests for Config deployment selection and settings persistence."""

from __future__ import annotations

import json

import pytest

from hoyoplay_launch.config import DEPLOYMENTS, Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("HOYOPLAY_DEPLOYMENT", "HOYOPLAY_ROOT_NAMESPACE", "HOYOPLAY_URI_SCHEME", "HOYOPLAY_ICONS_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "data" / "settings.json"


class TestConfig:
    def test_defaults_to_global_deployment(self, settings_file):
        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.variant is DEPLOYMENTS["global"]
        assert cfg.root_namespace == r"Software\Cognosphere\HYP\1_0"
        assert cfg.uri_scheme == "hyp-global"
        assert cfg.MARKER_VALUE == "GameInstallPath"

    def test_cn_deployment(self, settings_file):
        cfg = Config(SETTINGS_FILE=settings_file, DEPLOYMENT="cn")

        assert cfg.uri_scheme == "hyp-cn"
        assert cfg.root_namespace == r"Software\miHoYo\HYP\1_1"

    def test_unknown_deployment_falls_back_to_global(self, settings_file):
        cfg = Config(SETTINGS_FILE=settings_file, DEPLOYMENT="moon")

        assert cfg.variant.name == "global"

    def test_overrides_win_over_preset(self, settings_file):
        cfg = Config(SETTINGS_FILE=settings_file, ROOT_NAMESPACE=r"Software\Cognosphere\HYP\1_1", URI_SCHEME="hyp-x")

        assert cfg.root_namespace == r"Software\Cognosphere\HYP\1_1"
        assert cfg.uri_scheme == "hyp-x"

    def test_environment_overrides(self, settings_file, monkeypatch):
        monkeypatch.setenv("HOYOPLAY_DEPLOYMENT", "cn")
        monkeypatch.setenv("HOYOPLAY_URI_SCHEME", "hyp-test")

        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.DEPLOYMENT == "cn"
        assert cfg.uri_scheme == "hyp-test"
        assert cfg.root_namespace == r"Software\miHoYo\HYP\1_1"

    def test_load_settings_file(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(
            json.dumps(
                {
                    "ui_language": "de",
                    "deployment": "cn",
                    "root_namespace": "",
                    "uri_scheme": "",
                    "log_file": "/tmp/hoyoplay.log",
                }
            ),
            encoding="utf-8",
        )

        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.UI_LANGUAGE == "de"
        assert cfg.DEPLOYMENT == "cn"
        assert cfg.ROOT_NAMESPACE is None
        assert cfg.LOG_FILE is not None and cfg.LOG_FILE.name == "hoyoplay.log"

    def test_corrupt_settings_file_is_ignored(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{not json", encoding="utf-8")

        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.DEPLOYMENT == "global"

    def test_save_round_trip(self, settings_file):
        cfg = Config(SETTINGS_FILE=settings_file, DEPLOYMENT="cn", URI_SCHEME="hyp-custom")
        cfg.save()

        reloaded = Config(SETTINGS_FILE=settings_file)

        assert settings_file.exists()
        assert reloaded.DEPLOYMENT == "cn"
        assert reloaded.uri_scheme == "hyp-custom"
        assert reloaded.ROOT_NAMESPACE is None

    def test_icons_dir_defaults_to_resources(self, settings_file):
        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.ICONS_DIR == cfg.RESOURCES_DIR / "icons"

    def test_icons_dir_from_settings(self, settings_file, tmp_path):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"icons_dir": str(tmp_path / "Images")}), encoding="utf-8")

        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.ICONS_DIR == tmp_path / "Images"

    def test_icons_dir_from_environment(self, settings_file, tmp_path, monkeypatch):
        monkeypatch.setenv("HOYOPLAY_ICONS_DIR", str(tmp_path / "host-icons"))

        cfg = Config(SETTINGS_FILE=settings_file)

        assert cfg.ICONS_DIR == tmp_path / "host-icons"
