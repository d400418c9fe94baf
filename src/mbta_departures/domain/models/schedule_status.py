"""Schedule status domain model."""

from dataclasses import dataclass
from datetime import datetime

from mbta_departures.domain.models.display_time import DisplayTime


@dataclass(frozen=True)
class ScheduleStatus:
    """Status of one leg (arrival or departure) of a scheduled stop.

    All fields are None when the leg does not apply, e.g. the departure of the
    last stop on a trip.
    """

    display_time: DisplayTime | None = None
    instant: datetime | None = None
    status_text: str | None = None

    @property
    def applies(self) -> bool:
        """Whether the leg has a scheduled time."""
        return self.instant is not None
