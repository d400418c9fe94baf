"""Domain layer - core business logic and models."""

from mbta_departures.domain.errors import (
    ReconciliationError,
    StaleResponseDiscarded,
    TransportError,
)
from mbta_departures.domain.models import (
    BoardSnapshot,
    DepartureRecord,
    ScheduleResponse,
)
from mbta_departures.domain.ports import (
    RouteRepository,
    ScheduleRepository,
)

__all__ = [
    "BoardSnapshot",
    "DepartureRecord",
    "ReconciliationError",
    "RouteRepository",
    "ScheduleRepository",
    "ScheduleResponse",
    "StaleResponseDiscarded",
    "TransportError",
]
