"""Tests for ScheduleReconciler."""

from datetime import UTC, datetime

import pytest

from mbta_departures.adapters.mbta_api import MbtaResponseParser
from mbta_departures.application.services import ScheduleReconciler, ScheduleStatusCalculator
from mbta_departures.domain.models import (
    AdjustedTime,
    PlainTime,
    RawEntity,
    ScheduledStop,
    ScheduleResponse,
)
from tests.mbta_documents import fitchburg_document, included_item, schedule_item


class MockScheduleRepository:
    """Mock schedule repository for testing."""

    def __init__(self, response: ScheduleResponse) -> None:
        """Initialize with the response to return."""
        self.response = response
        self.requested: list[list[str]] = []

    async def get_schedules(self, route_ids: list[str]) -> ScheduleResponse:
        """Record the request and return the configured response."""
        self.requested.append(route_ids)
        return self.response


INCLUDED = (
    RawEntity("route", "CR-Fitchburg", {"long_name": "Fitchburg Line"}),
    RawEntity("route", "CR-Lowell", {"long_name": "Lowell Line"}),
    RawEntity("stop", "place-portr", {"name": "Porter"}),
    RawEntity("stop", "place-north", {"name": "North Station"}),
    RawEntity("stop", "place-WML-0442", {"name": "Wachusett"}),
    RawEntity("trip", "CR-Weekday-101", {"name": "101"}),
    RawEntity("trip", "CR-Weekday-305", {"name": "305"}),
    RawEntity(
        "prediction",
        "prediction-101-porter",
        {"arrival_time": "2024-01-01T08:05:00Z", "departure_time": "2024-01-01T08:05:00Z"},
    ),
)


def stop(schedule_id: str, **overrides: str | None) -> ScheduledStop:
    """A scheduled stop of train 101 at Porter, departing 08:00Z unless overridden."""
    fields: dict[str, str | None] = {
        "route_id": "CR-Fitchburg",
        "stop_id": "place-portr",
        "trip_id": "CR-Weekday-101",
        "prediction_id": None,
        "arrival_time": "2024-01-01T08:00:00Z",
        "departure_time": "2024-01-01T08:00:00Z",
    }
    fields.update(overrides)
    return ScheduledStop(id=schedule_id, **fields)  # type: ignore[arg-type]


@pytest.fixture
def reconciler() -> ScheduleReconciler:
    """Reconciler formatting in UTC with an empty repository."""
    return ScheduleReconciler(
        MockScheduleRepository(ScheduleResponse()), ScheduleStatusCalculator("UTC")
    )


def test_fitchburg_train_reported_late(reconciler: ScheduleReconciler) -> None:
    """Given train 101 predicted 5 minutes late at Porter, when reconciling, then it reads Late 5 minutes."""
    response = MbtaResponseParser.parse_schedule_response(fitchburg_document())

    result = reconciler.reconcile_response(response)

    assert len(result.records) == 1
    record = result.records[0]
    assert record.train_number == "101"
    assert record.stop_name == "Porter"
    assert record.route_name == "CR-Fitchburg"
    assert record.status == "Late 5 minutes"
    assert record.sort_time == datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
    assert record.display_time == AdjustedTime("08:05:00 AM", "08:00:00 AM")
    assert result.dropped_count == 0


def test_every_resolvable_stop_yields_one_record(reconciler: ScheduleReconciler) -> None:
    """Given resolvable stops, when reconciling, then one record per stop is returned in order."""
    response = ScheduleResponse(
        data=(
            stop("s1", departure_time="2024-01-01T09:00:00Z", arrival_time=None),
            stop("s2", route_id="CR-Lowell", stop_id="place-north", trip_id="CR-Weekday-305"),
            stop("s3", departure_time="2024-01-01T07:00:00Z", arrival_time=None),
        ),
        included=INCLUDED,
    )

    result = reconciler.reconcile_response(response)

    assert [r.train_number for r in result.records] == ["101", "305", "101"]
    assert [r.sort_time.hour for r in result.records] == [9, 8, 7]


@pytest.mark.parametrize("relationship", ["route_id", "stop_id", "trip_id"])
def test_unresolvable_relationship_drops_only_that_record(
    reconciler: ScheduleReconciler, relationship: str
) -> None:
    """Given one stop with an unknown route, stop or trip, when reconciling, then only it is dropped."""
    response = ScheduleResponse(
        data=(
            stop("s1"),
            stop("s2", **{relationship: "unknown-id"}),
            stop("s3", stop_id="place-north"),
        ),
        included=INCLUDED,
    )

    result = reconciler.reconcile_response(response)

    assert [r.stop_name for r in result.records] == ["Porter", "North Station"]
    assert result.dropped_count == 1


def test_missing_relationship_id_drops_record(reconciler: ScheduleReconciler) -> None:
    """Given a stop whose trip relationship is null, when reconciling, then it is dropped and counted."""
    response = ScheduleResponse(data=(stop("s1", trip_id=None),), included=INCLUDED)

    result = reconciler.reconcile_response(response)

    assert result.records == ()
    assert result.dropped_count == 1


def test_last_stop_uses_arrival(reconciler: ScheduleReconciler) -> None:
    """Given a stop without departure, when reconciling, then arrival status is used with a Last stop prefix."""
    response = ScheduleResponse(
        data=(
            stop(
                "s1",
                stop_id="place-WML-0442",
                arrival_time="2024-01-01T09:40:00Z",
                departure_time=None,
            ),
        ),
        included=INCLUDED,
    )

    record = reconciler.reconcile_response(response).records[0]

    assert record.status == "Last stop: On Time"
    assert record.is_last_stop is True
    assert record.sort_time == datetime(2024, 1, 1, 9, 40, tzinfo=UTC)
    assert record.departure_instant is None
    assert record.display_time == PlainTime("09:40:00 AM")


def test_last_stop_with_late_arrival_prediction(reconciler: ScheduleReconciler) -> None:
    """Given a terminus with a late arrival prediction, when reconciling, then status reads Last stop: Late."""
    response = ScheduleResponse(
        data=(
            stop(
                "s1",
                prediction_id="prediction-101-porter",
                arrival_time="2024-01-01T08:00:00Z",
                departure_time=None,
            ),
        ),
        included=INCLUDED,
    )

    record = reconciler.reconcile_response(response).records[0]

    assert record.status == "Last stop: Late 5 minutes"


def test_first_stop_without_arrival_is_normal(reconciler: ScheduleReconciler) -> None:
    """Given a stop with only a departure, when reconciling, then it is an ordinary departure."""
    response = ScheduleResponse(data=(stop("s1", arrival_time=None),), included=INCLUDED)

    record = reconciler.reconcile_response(response).records[0]

    assert record.status == "On Time"
    assert record.is_last_stop is False
    assert record.arrival_instant is None
    assert record.sort_time == record.departure_instant


def test_stop_without_any_time_is_excluded(reconciler: ScheduleReconciler) -> None:
    """Given a stop with neither time, when reconciling twice, then it is never included."""
    response = ScheduleResponse(
        data=(stop("s1"), stop("s2", arrival_time=None, departure_time=None)),
        included=INCLUDED,
    )

    first = reconciler.reconcile_response(response)
    second = reconciler.reconcile_response(response)

    assert len(first.records) == 1
    assert first == second
    assert first.dropped_count == 0


def test_unknown_prediction_id_is_treated_as_no_prediction(
    reconciler: ScheduleReconciler,
) -> None:
    """Given a prediction id missing from included, when reconciling, then the stop is On Time."""
    response = ScheduleResponse(
        data=(stop("s1", prediction_id="prediction-gone"),), included=INCLUDED
    )

    record = reconciler.reconcile_response(response).records[0]

    assert record.status == "On Time"
    assert record.display_time == PlainTime("08:00:00 AM")


def test_non_string_times_do_not_abort_reconciliation(reconciler: ScheduleReconciler) -> None:
    """Given numeric time attributes, when reconciling, then only those times are ignored."""
    document = {
        "data": [
            schedule_item("s1", departure_time="2024-01-01T08:00:00Z"),
            schedule_item("s2", prediction_id="pr", departure_time="2024-01-01T08:10:00Z"),
            schedule_item("s3", departure_time=1704096300),  # type: ignore[arg-type]
        ],
        "included": [
            included_item("route", "CR-Fitchburg"),
            included_item("stop", "place-portr", name="Porter"),
            included_item("trip", "CR-Weekday-101", name="101"),
            included_item("prediction", "pr", departure_time=1704096300),
        ],
    }

    result = reconciler.reconcile_response(MbtaResponseParser.parse_schedule_response(document))

    assert len(result.records) == 2
    assert [r.status for r in result.records] == ["On Time", "On Time"]
    assert result.records[1].display_time == PlainTime("08:10:00 AM")
    assert result.dropped_count == 0


def test_trip_without_name_falls_back_to_id(reconciler: ScheduleReconciler) -> None:
    """Given a trip without a name attribute, when reconciling, then the trip id is the train number."""
    response = ScheduleResponse(
        data=(stop("s1", trip_id="CR-Weekday-999"),),
        included=(*INCLUDED, RawEntity("trip", "CR-Weekday-999", {})),
    )

    record = reconciler.reconcile_response(response).records[0]

    assert record.train_number == "CR-Weekday-999"


@pytest.mark.asyncio
async def test_reconcile_fetches_and_returns_records() -> None:
    """Given route ids, when reconciling, then schedules are fetched once and records returned."""
    repository = MockScheduleRepository(
        MbtaResponseParser.parse_schedule_response(fitchburg_document())
    )
    reconciler = ScheduleReconciler(repository, ScheduleStatusCalculator("UTC"))

    records = await reconciler.reconcile(
        ["CR-Fitchburg"], as_of=datetime(2024, 1, 1, 7, 0, tzinfo=UTC)
    )

    assert repository.requested == [["CR-Fitchburg"]]
    assert [r.status for r in records] == ["Late 5 minutes"]


@pytest.mark.asyncio
async def test_empty_route_list_skips_request() -> None:
    """Given no route ids, when reconciling, then no request is made and no records returned."""
    repository = MockScheduleRepository(
        MbtaResponseParser.parse_schedule_response(fitchburg_document())
    )
    reconciler = ScheduleReconciler(repository, ScheduleStatusCalculator("UTC"))

    result = await reconciler.load([])

    assert result.records == ()
    assert repository.requested == []
