"""Board snapshot domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from mbta_departures.domain.models.departure_record import DepartureRecord
from mbta_departures.domain.models.error_details import ErrorDetails

LoadStatus = Literal["pending", "error", "ready"]


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything the presentation layer needs from one load generation."""

    generation: int = 0
    status: LoadStatus = "pending"
    records: tuple[DepartureRecord, ...] = ()
    dropped_count: int = 0
    error: ErrorDetails | None = None
    loaded_at: datetime | None = None
