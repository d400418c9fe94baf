"""Updater for board state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mbta_departures.adapters.board.board_state import (
    BoardState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from mbta_departures.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from mbta_departures.domain.models import BoardSnapshot

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Publishes snapshots into the board state."""

    def __init__(self, board_state: BoardState) -> None:
        """Initialize the state updater.

        Args:
            board_state: The BoardState instance to update.
        """
        self.board_state = board_state

    def publish(self, snapshot: BoardSnapshot) -> None:
        """Replace the current snapshot.

        Args:
            snapshot: Snapshot of the newest load generation.
        """
        current = self.board_state.snapshot
        if snapshot.generation < current.generation:
            logger.debug(
                f"Ignoring snapshot of generation {snapshot.generation}, "
                f"state already at generation {current.generation}"
            )
            return
        self.board_state.snapshot = snapshot
        logger.debug(
            f"Published generation {snapshot.generation}: {snapshot.status}, "
            f"{len(snapshot.records)} record(s)"
        )
