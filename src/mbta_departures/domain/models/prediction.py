"""Prediction domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prediction:
    """Real-time update for a scheduled stop."""

    id: str
    arrival_time: str | None = None
    departure_time: str | None = None
