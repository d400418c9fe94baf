"""MBTA v3 API adapters."""

from mbta_departures.adapters.mbta_api.http_client import MbtaHttpClient
from mbta_departures.adapters.mbta_api.mbta_route_repository import MbtaRouteRepository
from mbta_departures.adapters.mbta_api.mbta_schedule_repository import MbtaScheduleRepository
from mbta_departures.adapters.mbta_api.response_parser import MbtaResponseParser

__all__ = [
    "MbtaHttpClient",
    "MbtaResponseParser",
    "MbtaRouteRepository",
    "MbtaScheduleRepository",
]
