"""Ports (interfaces) for the ports-and-adapters architecture."""

from mbta_departures.domain.ports.route_repository import RouteRepository
from mbta_departures.domain.ports.schedule_repository import ScheduleRepository

__all__ = [
    "RouteRepository",
    "ScheduleRepository",
]
