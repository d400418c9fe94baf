"""Protocol for loading the board."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mbta_departures.domain.models.board_snapshot import BoardSnapshot


class BoardLoaderProtocol(Protocol):
    """Protocol for running one full resolve-and-reconcile cycle."""

    async def load(self) -> "BoardSnapshot | None":
        """Load the board; returns None when the result was superseded."""
        ...

    async def stop(self) -> None:
        """Cancel any in-flight load."""
        ...
