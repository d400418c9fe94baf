"""Adapters layer - external system integrations."""

from mbta_departures.adapters.board import BoardLoader, BoardState, DepartureTable, StateUpdater
from mbta_departures.adapters.config import AppConfig
from mbta_departures.adapters.mbta_api import (
    MbtaHttpClient,
    MbtaRouteRepository,
    MbtaScheduleRepository,
)

__all__ = [
    "AppConfig",
    "BoardLoader",
    "BoardState",
    "DepartureTable",
    "MbtaHttpClient",
    "MbtaRouteRepository",
    "MbtaScheduleRepository",
    "StateUpdater",
]
