"""Application services (use cases) for the departure board."""

from mbta_departures.application.services.included_index import IncludedIndex
from mbta_departures.application.services.route_resolver import RouteResolver, join_route_ids
from mbta_departures.application.services.schedule_reconciler import ScheduleReconciler
from mbta_departures.application.services.schedule_status import ScheduleStatusCalculator

__all__ = [
    "IncludedIndex",
    "RouteResolver",
    "ScheduleReconciler",
    "ScheduleStatusCalculator",
    "join_route_ids",
]
