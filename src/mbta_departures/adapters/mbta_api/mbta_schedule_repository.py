"""MBTA schedule repository adapter."""

import logging

from mbta_departures.adapters.mbta_api.constants import SCHEDULE_INCLUDES, SCHEDULES_PATH
from mbta_departures.adapters.mbta_api.http_client import MbtaHttpClient
from mbta_departures.adapters.mbta_api.response_parser import MbtaResponseParser
from mbta_departures.domain.models import ScheduleResponse
from mbta_departures.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)


class MbtaScheduleRepository(ScheduleRepository):
    """Adapter for the MBTA /schedules endpoint."""

    def __init__(self, http_client: MbtaHttpClient, max_time: str = "24:00") -> None:
        """Initialize the repository.

        Args:
            http_client: MBTA HTTP client.
            max_time: Latest schedule time of the service day to include.
        """
        self._http_client = http_client
        self._max_time = max_time

    async def get_schedules(self, route_ids: list[str]) -> ScheduleResponse:
        """Get scheduled stops for routes in a single request, with related entities included."""
        params = {
            "filter[route]": ",".join(route_ids),
            "filter[max_time]": self._max_time,
            "include": SCHEDULE_INCLUDES,
        }
        document = await self._http_client.get_json(SCHEDULES_PATH, params)
        response = MbtaResponseParser.parse_schedule_response(document)
        logger.debug(
            f"Fetched {len(response.data)} scheduled stop(s) and "
            f"{len(response.included)} included entities"
        )
        return response
