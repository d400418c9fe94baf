"""Normalized schedule response domain model."""

from dataclasses import dataclass

from mbta_departures.domain.models.raw_entity import RawEntity
from mbta_departures.domain.models.scheduled_stop import ScheduledStop


@dataclass(frozen=True)
class ScheduleResponse:
    """Scheduled stops plus the related entities they reference by id."""

    data: tuple[ScheduledStop, ...] = ()
    included: tuple[RawEntity, ...] = ()
