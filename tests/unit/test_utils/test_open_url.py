"""Tests for the launcher URI opener."""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from hoyoplay_launch.utils import open_url

URI = "hyp-global://launchgame?gamebiz=hk4e_global&openGame=true"


@pytest.fixture(autouse=True)
def _not_frozen(monkeypatch):
    monkeypatch.delenv("APPIMAGE", raising=False)
    monkeypatch.delattr(sys, "frozen", raising=False)


class TestOpenUri:
    """Tests for open_uri() dispatch."""

    def test_uses_qt_when_application_running(self):
        with (
            patch.object(open_url, "QGuiApplication") as mock_app,
            patch.object(open_url, "QDesktopServices") as mock_services,
        ):
            mock_app.instance.return_value = MagicMock()
            mock_services.openUrl.return_value = True

            assert open_url.open_uri(URI) is True

        mock_services.openUrl.assert_called_once()
        assert mock_services.openUrl.call_args[0][0].toString() == URI

    def test_windows_shell_without_qt_app(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        with (
            patch.object(open_url, "QGuiApplication") as mock_app,
            patch("os.startfile", create=True) as mock_startfile,
        ):
            mock_app.instance.return_value = None

            assert open_url.open_uri(URI) is True

        mock_startfile.assert_called_once_with(URI)

    def test_windows_shell_error(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        with (
            patch.object(open_url, "QGuiApplication") as mock_app,
            patch("os.startfile", create=True, side_effect=OSError("no association")),
        ):
            mock_app.instance.return_value = None

            assert open_url.open_uri(URI) is False

    def test_xdg_open_without_qt_app(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        with (
            patch.object(open_url, "QGuiApplication") as mock_app,
            patch.object(open_url.subprocess, "Popen") as mock_popen,
        ):
            mock_app.instance.return_value = None

            assert open_url.open_uri(URI) is True

        assert mock_popen.call_args[0][0] == ["xdg-open", URI]

    def test_frozen_build_restores_library_path(self, monkeypatch):
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setenv("LD_LIBRARY_PATH", "/tmp/_MEI123")
        monkeypatch.setenv("LD_LIBRARY_PATH_ORIG", "/usr/lib")
        monkeypatch.setenv("LD_PRELOAD", "/tmp/_MEI123/libx.so")
        monkeypatch.delenv("LD_PRELOAD_ORIG", raising=False)

        with patch.object(open_url.subprocess, "Popen") as mock_popen:
            assert open_url.open_uri(URI) is True

        env = mock_popen.call_args.kwargs["env"]
        assert env["LD_LIBRARY_PATH"] == "/usr/lib"
        assert "LD_PRELOAD" not in env

    def test_missing_xdg_open_falls_back_to_webbrowser(self, monkeypatch):
        monkeypatch.setenv("APPIMAGE", "/apps/hoyoplay.AppImage")
        with (
            patch.object(open_url.subprocess, "Popen", side_effect=FileNotFoundError),
            patch("webbrowser.open", return_value=True) as mock_browser,
        ):
            assert open_url.open_uri(URI) is True

        mock_browser.assert_called_once_with(URI)
