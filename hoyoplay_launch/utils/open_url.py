# hoyoplay_launch/utils/open_url.py

"""Cross-environment opener for launcher deep links.

HoYoPlay registers its protocol (e.g. ``hyp-global://``) with the OS shell,
so starting a game only means handing the URI to the shell. Inside a running
Qt application Qt's desktop services do that; otherwise the platform opener
is used directly. Frozen/AppImage builds restore the original library path
before calling xdg-open.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices, QGuiApplication

logger = logging.getLogger("hoyoplay.open_url")

__all__ = ["open_uri"]


def open_uri(uri: str) -> bool:
    """Hands a URI to the system's registered protocol handler.

    Args:
        uri: The URI to open.

    Returns:
        True if the handler was invoked, False otherwise.
    """
    if getattr(sys, "frozen", False) or os.environ.get("APPIMAGE"):
        return _open_uri_clean_env(uri)

    if QGuiApplication.instance() is not None:
        return QDesktopServices.openUrl(QUrl(uri))

    if sys.platform == "win32":
        return _open_uri_shell(uri)
    return _open_uri_clean_env(uri)


def _open_uri_shell(uri: str) -> bool:
    """Opens a URI through the Windows shell (ShellExecute).

    Args:
        uri: The URI to open.

    Returns:
        True if the shell accepted the URI.
    """
    try:
        os.startfile(uri)
        return True
    except OSError as e:
        logger.error("Failed to open URI %s: %s", uri, e)
        return False


def _open_uri_clean_env(uri: str) -> bool:
    """Opens a URI with xdg-open using an unmodified library path.

    PyInstaller saves the original LD_LIBRARY_PATH/LD_PRELOAD as ``*_ORIG``;
    those are restored so xdg-open does not load the bundled libraries.

    Args:
        uri: The URI to open.

    Returns:
        True if a handler was launched, False on error.
    """
    env = os.environ.copy()
    for key in ("LD_LIBRARY_PATH", "LD_PRELOAD"):
        orig_key = f"{key}_ORIG"
        if orig_key in env:
            env[key] = env[orig_key]
        elif key in env:
            del env[key]

    try:
        subprocess.Popen(
            ["xdg-open", uri],
            env=env,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        return True
    except FileNotFoundError:
        logger.warning("xdg-open not found, falling back to webbrowser module")
    except OSError as e:
        logger.warning("xdg-open failed: %s", e)

    import webbrowser

    return webbrowser.open(uri)
