"""Schedule repository port."""

from typing import Protocol

from mbta_departures.domain.models.schedule_response import ScheduleResponse


class ScheduleRepository(Protocol):
    """Port for retrieving scheduled stops with their related entities."""

    async def get_schedules(self, route_ids: list[str]) -> ScheduleResponse:
        """Get scheduled stops for routes, with routes, stops, trips and predictions included."""
        ...
