"""Board state holder."""

from dataclasses import dataclass, field

from mbta_departures.domain.models import BoardSnapshot


@dataclass
class BoardState:
    """Latest published snapshot of the departure board.

    The snapshot is replaced as a whole, so readers never see records from
    two load generations at once.
    """

    snapshot: BoardSnapshot = field(default_factory=BoardSnapshot)
