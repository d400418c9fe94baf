"""Protocol for updating board state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mbta_departures.domain.models.board_snapshot import BoardSnapshot


class StateUpdaterProtocol(Protocol):
    """Protocol for publishing board snapshots."""

    def publish(self, snapshot: "BoardSnapshot") -> None:
        """Replace the current snapshot.

        Args:
            snapshot: The snapshot of the newest load generation.
        """
        ...
