"""Departure record domain model."""

from dataclasses import dataclass
from datetime import datetime

from mbta_departures.domain.models.display_time import DisplayTime


@dataclass(frozen=True)
class DepartureRecord:
    """A display-ready row of the departure board."""

    train_number: str
    stop_name: str
    route_name: str
    display_time: DisplayTime
    status: str
    sort_time: datetime
    arrival_instant: datetime | None = None
    departure_instant: datetime | None = None
    is_last_stop: bool = False
