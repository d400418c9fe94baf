"""Board adapters: loading, state and table view."""

from mbta_departures.adapters.board.board_loader import BoardLoader
from mbta_departures.adapters.board.board_state import BoardState
from mbta_departures.adapters.board.departure_table import DepartureTable, TablePage
from mbta_departures.adapters.board.state_updater import StateUpdater

__all__ = [
    "BoardLoader",
    "BoardState",
    "DepartureTable",
    "StateUpdater",
    "TablePage",
]
