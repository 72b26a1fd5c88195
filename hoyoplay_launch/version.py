"""
Central version management for HoYoPlay Quick Launch.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__license__"]

__app_name__ = "HoYoPlay Quick Launch"
__version__ = "1.2.0"
__release_date__ = "2026-10-19"
__license__ = "MIT"
