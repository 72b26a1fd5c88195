from __future__ import annotations

from hoyoplay_launch.integrations.hoyoplay.resolver import GameResolver, resolve

__all__: list[str] = ["GameResolver", "resolve"]
