"""Resolution of the active routes of a transit mode."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mbta_departures.domain.ports import RouteRepository

logger = logging.getLogger(__name__)


def join_route_ids(route_ids: Iterable[str]) -> str:
    """Build the comma-separated route filter value."""
    return ",".join(route_ids)


class RouteResolver:
    """Service for looking up which routes to show on the board."""

    def __init__(self, route_repository: RouteRepository) -> None:
        """Initialize with a route repository."""
        self._route_repository = route_repository

    async def resolve_routes(self, route_type: int) -> list[str]:
        """Get the active route ids for a transit mode.

        Order is as returned by the API. An empty list means there is nothing
        to display and is not an error.
        """
        route_ids = await self._route_repository.get_route_ids(route_type)

        seen: set[str] = set()
        unique_ids: list[str] = []
        for route_id in route_ids:
            if route_id in seen:
                continue
            seen.add(route_id)
            unique_ids.append(route_id)

        if not unique_ids:
            logger.warning(f"No active routes returned for route type {route_type}")
        else:
            logger.debug(f"Resolved {len(unique_ids)} route(s): {join_route_ids(unique_ids)}")
        return unique_ids
