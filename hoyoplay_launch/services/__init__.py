from __future__ import annotations

from hoyoplay_launch.services.launch_service import LaunchService
from hoyoplay_launch.services.query_service import QueryResult, QueryService
from hoyoplay_launch.services.search_service import SearchService

__all__: list[str] = [
    "LaunchService",
    "QueryResult",
    "QueryService",
    "SearchService",
]
