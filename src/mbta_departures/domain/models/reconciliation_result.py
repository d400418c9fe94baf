"""Reconciliation result domain model."""

from dataclasses import dataclass

from mbta_departures.domain.models.departure_record import DepartureRecord


@dataclass(frozen=True)
class ReconciliationResult:
    """Records produced by one reconciliation and the number of stops dropped."""

    records: tuple[DepartureRecord, ...] = ()
    dropped_count: int = 0
