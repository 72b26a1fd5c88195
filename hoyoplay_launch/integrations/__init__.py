from __future__ import annotations

__all__: list[str] = ["GameResolver", "resolve"]

from hoyoplay_launch.integrations.hoyoplay import GameResolver, resolve
