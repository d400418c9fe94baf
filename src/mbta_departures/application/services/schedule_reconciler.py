"""Reconciliation of scheduled stops with their related entities and predictions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from mbta_departures.application.services.included_index import IncludedIndex
from mbta_departures.domain.errors import ReconciliationError
from mbta_departures.domain.models import (
    DepartureRecord,
    ReconciliationResult,
    ScheduledStop,
    ScheduleResponse,
)

if TYPE_CHECKING:
    from mbta_departures.application.services.schedule_status import ScheduleStatusCalculator
    from mbta_departures.domain.ports import ScheduleRepository

logger = logging.getLogger(__name__)

LAST_STOP_PREFIX = "Last stop: "


class ScheduleReconciler:
    """Turns a normalized schedule response into flat departure records."""

    def __init__(
        self,
        schedule_repository: ScheduleRepository,
        status_calculator: ScheduleStatusCalculator,
    ) -> None:
        """Initialize the reconciler.

        Args:
            schedule_repository: Source of scheduled stops and included entities.
            status_calculator: Computes per-leg status and display time.
        """
        self._schedule_repository = schedule_repository
        self._status_calculator = status_calculator

    async def reconcile(
        self, route_ids: list[str], as_of: datetime | None = None
    ) -> list[DepartureRecord]:
        """Fetch schedules for routes and return their departure records in API order."""
        result = await self.load(route_ids, as_of)
        return list(result.records)

    async def load(
        self, route_ids: list[str], as_of: datetime | None = None
    ) -> ReconciliationResult:
        """Fetch schedules for routes and reconcile them.

        Args:
            route_ids: Routes to fetch; an empty list performs no request.
            as_of: Load instant, used only to report how many departures are upcoming.

        Returns:
            Records plus the number of stops dropped for unresolved relationships.
        """
        if not route_ids:
            logger.info("No route ids to load, board is empty")
            return ReconciliationResult()

        response = await self._schedule_repository.get_schedules(route_ids)
        result = self.reconcile_response(response)

        upcoming = ""
        if as_of is not None:
            count = sum(1 for r in result.records if r.sort_time > as_of)
            upcoming = f", {count} upcoming"
        logger.info(
            f"Reconciled {len(result.records)} departures for {len(route_ids)} route(s)"
            f"{upcoming}, dropped {result.dropped_count}"
        )
        return result

    def reconcile_response(self, response: ScheduleResponse) -> ReconciliationResult:
        """Reconcile every scheduled stop of a response.

        A stop with an unresolvable route, stop or trip is dropped and counted;
        the rest of the response is still processed.
        """
        index = IncludedIndex.build(response.included)
        records: list[DepartureRecord] = []
        dropped = 0

        for scheduled_stop in response.data:
            try:
                record = self._reconcile_stop(scheduled_stop, index)
            except ReconciliationError as e:
                logger.warning(f"Dropping scheduled stop: {e}")
                dropped += 1
                continue

            if record is None:
                logger.debug(f"Scheduled stop {scheduled_stop.id!r} has no times, skipping")
                continue
            records.append(record)

        return ReconciliationResult(records=tuple(records), dropped_count=dropped)

    def _reconcile_stop(
        self, scheduled_stop: ScheduledStop, index: IncludedIndex
    ) -> DepartureRecord | None:
        """Build the record for one stop, or None when it has no time at all."""
        trip = index.require("trip", scheduled_stop.trip_id, scheduled_stop.id)
        route = index.require("route", scheduled_stop.route_id, scheduled_stop.id)
        stop = index.require("stop", scheduled_stop.stop_id, scheduled_stop.id)
        prediction = index.prediction(scheduled_stop.prediction_id)

        arrival = self._status_calculator.compute_status(
            scheduled_stop.arrival_time,
            prediction.arrival_time if prediction else None,
        )
        departure = self._status_calculator.compute_status(
            scheduled_stop.departure_time,
            prediction.departure_time if prediction else None,
        )

        if departure.applies:
            primary = departure
            status = departure.status_text
            is_last_stop = False
        elif arrival.applies:
            # No departure means the trip ends here
            primary = arrival
            status = f"{LAST_STOP_PREFIX}{arrival.status_text}"
            is_last_stop = True
        else:
            return None

        return DepartureRecord(
            train_number=str(trip.attribute("name") or trip.id),
            stop_name=str(stop.attribute("name") or stop.id),
            route_name=route.id,
            display_time=primary.display_time,
            status=status,
            sort_time=primary.instant,
            arrival_instant=arrival.instant,
            departure_instant=departure.instant,
            is_last_stop=is_last_stop,
        )
