"""Contracts between the board's collaborators."""

from mbta_departures.domain.contracts.board_loader import BoardLoaderProtocol
from mbta_departures.domain.contracts.board_services import (
    RouteResolverProtocol,
    ScheduleReconcilerProtocol,
)
from mbta_departures.domain.contracts.state_updater import StateUpdaterProtocol

__all__ = [
    "BoardLoaderProtocol",
    "RouteResolverProtocol",
    "ScheduleReconcilerProtocol",
    "StateUpdaterProtocol",
]
