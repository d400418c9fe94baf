"""MBTA route repository adapter."""

import logging

from mbta_departures.adapters.mbta_api.constants import ROUTES_PATH
from mbta_departures.adapters.mbta_api.http_client import MbtaHttpClient
from mbta_departures.adapters.mbta_api.response_parser import MbtaResponseParser
from mbta_departures.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)


class MbtaRouteRepository(RouteRepository):
    """Adapter for the MBTA /routes endpoint."""

    def __init__(self, http_client: MbtaHttpClient) -> None:
        """Initialize with an MBTA HTTP client."""
        self._http_client = http_client

    async def get_route_ids(self, route_type: int) -> list[str]:
        """Get the ids of all routes of a route type."""
        document = await self._http_client.get_json(ROUTES_PATH, {"type": str(route_type)})
        route_ids = MbtaResponseParser.parse_route_ids(document)
        logger.debug(f"Fetched {len(route_ids)} route(s) for route type {route_type}")
        return route_ids
