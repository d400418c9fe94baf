"""Tests for IncludedIndex."""

import pytest

from mbta_departures.application.services import IncludedIndex
from mbta_departures.domain.errors import ReconciliationError
from mbta_departures.domain.models import Prediction, RawEntity


@pytest.fixture
def index() -> IncludedIndex:
    """Index over one entity of each type, with a stop and route sharing an id."""
    return IncludedIndex.build(
        [
            RawEntity("route", "CR-Fitchburg", {"long_name": "Fitchburg Line"}),
            RawEntity("stop", "CR-Fitchburg", {"name": "Same id, different type"}),
            RawEntity("stop", "place-portr", {"name": "Porter"}),
            RawEntity("trip", "CR-Weekday-101", {"name": "101"}),
            RawEntity(
                "prediction",
                "prediction-1",
                {"arrival_time": None, "departure_time": "2024-01-01T08:05:00Z"},
            ),
        ]
    )


def test_entities_are_keyed_by_type_and_id(index: IncludedIndex) -> None:
    """Given entities sharing an id, when looking up by type, then each type resolves separately."""
    route = index.get("route", "CR-Fitchburg")
    stop = index.get("stop", "CR-Fitchburg")

    assert route is not None and route.attribute("long_name") == "Fitchburg Line"
    assert stop is not None and stop.attribute("name") == "Same id, different type"
    assert len(index) == 5


def test_get_returns_none_for_missing_or_null_id(index: IncludedIndex) -> None:
    """Given unknown or null ids, when looking up, then None is returned."""
    assert index.get("stop", "place-unknown") is None
    assert index.get("stop", None) is None


def test_require_raises_for_unresolvable_relationship(index: IncludedIndex) -> None:
    """Given an unknown trip id, when requiring it, then ReconciliationError names the schedule."""
    with pytest.raises(ReconciliationError) as excinfo:
        index.require("trip", "CR-Weekday-999", "schedule-1")

    assert excinfo.value.schedule_id == "schedule-1"
    assert excinfo.value.kind == "trip"
    assert excinfo.value.entity_id == "CR-Weekday-999"


def test_prediction_is_converted_to_domain_model(index: IncludedIndex) -> None:
    """Given a prediction id, when resolving it, then a Prediction with its times is returned."""
    assert index.prediction("prediction-1") == Prediction(
        id="prediction-1", arrival_time=None, departure_time="2024-01-01T08:05:00Z"
    )


def test_missing_prediction_is_not_an_error(index: IncludedIndex) -> None:
    """Given absent or unknown prediction ids, when resolving, then None is returned."""
    assert index.prediction(None) is None
    assert index.prediction("prediction-unknown") is None


def test_first_duplicate_wins() -> None:
    """Given duplicate (type, id) entities, when building, then the first one is kept."""
    index = IncludedIndex.build(
        [
            RawEntity("stop", "place-portr", {"name": "Porter"}),
            RawEntity("stop", "place-portr", {"name": "Porter Square"}),
        ]
    )

    entity = index.get("stop", "place-portr")
    assert entity is not None and entity.attribute("name") == "Porter"
    assert len(index) == 1
