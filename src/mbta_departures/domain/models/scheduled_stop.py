"""Scheduled stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduledStop:
    """One scheduled arrival/departure of a trip at a stop.

    Times are kept as the raw ISO-8601 strings returned by the API. A missing
    departure time marks the last stop of the trip.
    """

    id: str
    route_id: str | None
    stop_id: str | None
    trip_id: str | None
    prediction_id: str | None = None
    arrival_time: str | None = None
    departure_time: str | None = None
