"""HoYoPlay Quick Launch: find installed HoYoPlay games and launch them."""

from __future__ import annotations

from hoyoplay_launch.version import __app_name__, __version__

__all__ = ["__app_name__", "__version__"]
