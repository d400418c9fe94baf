"""Protocols for the services a board load is composed of."""

from datetime import datetime
from typing import Protocol

from mbta_departures.domain.models.reconciliation_result import ReconciliationResult


class RouteResolverProtocol(Protocol):
    """Protocol for resolving the active routes of a transit mode."""

    async def resolve_routes(self, route_type: int) -> list[str]:
        """Get active route ids, in API order."""
        ...


class ScheduleReconcilerProtocol(Protocol):
    """Protocol for fetching and reconciling schedules of routes."""

    async def load(
        self, route_ids: list[str], as_of: datetime | None = None
    ) -> ReconciliationResult:
        """Fetch schedules for routes and reconcile them into records."""
        ...
