"""Domain models for MBTA departures."""

from mbta_departures.domain.models.board_snapshot import BoardSnapshot, LoadStatus
from mbta_departures.domain.models.departure_record import DepartureRecord
from mbta_departures.domain.models.display_time import AdjustedTime, DisplayTime, PlainTime
from mbta_departures.domain.models.error_details import ErrorDetails
from mbta_departures.domain.models.prediction import Prediction
from mbta_departures.domain.models.raw_entity import RawEntity
from mbta_departures.domain.models.reconciliation_result import ReconciliationResult
from mbta_departures.domain.models.schedule_response import ScheduleResponse
from mbta_departures.domain.models.schedule_status import ScheduleStatus
from mbta_departures.domain.models.scheduled_stop import ScheduledStop

__all__ = [
    "AdjustedTime",
    "BoardSnapshot",
    "DepartureRecord",
    "DisplayTime",
    "ErrorDetails",
    "LoadStatus",
    "PlainTime",
    "Prediction",
    "RawEntity",
    "ReconciliationResult",
    "ScheduleResponse",
    "ScheduleStatus",
    "ScheduledStop",
]
