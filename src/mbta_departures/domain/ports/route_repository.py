"""Route repository port."""

from typing import Protocol


class RouteRepository(Protocol):
    """Port for retrieving the active routes of a transit mode."""

    async def get_route_ids(self, route_type: int) -> list[str]:
        """Get route ids for a transit mode, in API order."""
        ...
