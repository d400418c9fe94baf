"""Parser for MBTA v3 JSON:API documents."""

import logging
from typing import Any

from mbta_departures.domain.models import RawEntity, ScheduledStop, ScheduleResponse

logger = logging.getLogger(__name__)


class MbtaResponseParser:
    """Parses MBTA JSON:API documents into domain objects.

    Malformed entries are skipped with a warning rather than failing the
    whole document.
    """

    @staticmethod
    def _items(document: dict[str, Any], key: str) -> list[dict[str, Any]]:
        """Return the object entries of a top-level array."""
        items = document.get(key) or []
        if not isinstance(items, list):
            logger.warning(f"Expected '{key}' to be a list, got {type(items).__name__}")
            return []
        return [item for item in items if isinstance(item, dict)]

    @staticmethod
    def _identifier(value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @staticmethod
    def parse_route_ids(document: dict[str, Any]) -> list[str]:
        """Parse route ids from a /routes document, in API order."""
        route_ids = []
        for item in MbtaResponseParser._items(document, "data"):
            item_type = item.get("type", "route")
            route_id = MbtaResponseParser._identifier(item.get("id"))
            if item_type != "route" or route_id is None:
                logger.warning(f"Skipping malformed route entry: {item!r:.200}")
                continue
            route_ids.append(route_id)
        return route_ids

    @staticmethod
    def _relationship_id(item: dict[str, Any], kind: str) -> str | None:
        """Extract relationships.<kind>.data.id; None when missing or null."""
        relationships = item.get("relationships")
        if not isinstance(relationships, dict):
            return None
        relationship = relationships.get(kind)
        if not isinstance(relationship, dict):
            return None
        data = relationship.get("data")
        if not isinstance(data, dict):
            return None
        return MbtaResponseParser._identifier(data.get("id"))

    @staticmethod
    def _attributes(item: dict[str, Any]) -> dict[str, Any]:
        attributes = item.get("attributes")
        return attributes if isinstance(attributes, dict) else {}

    @staticmethod
    def _parse_scheduled_stop(item: dict[str, Any]) -> ScheduledStop | None:
        """Parse a single schedule entry."""
        schedule_id = MbtaResponseParser._identifier(item.get("id"))
        if schedule_id is None:
            logger.warning(f"Skipping schedule entry without id: {item!r:.200}")
            return None

        attributes = MbtaResponseParser._attributes(item)
        return ScheduledStop(
            id=schedule_id,
            route_id=MbtaResponseParser._relationship_id(item, "route"),
            stop_id=MbtaResponseParser._relationship_id(item, "stop"),
            trip_id=MbtaResponseParser._relationship_id(item, "trip"),
            prediction_id=MbtaResponseParser._relationship_id(item, "prediction"),
            arrival_time=attributes.get("arrival_time") or None,
            departure_time=attributes.get("departure_time") or None,
        )

    @staticmethod
    def _parse_entity(item: dict[str, Any]) -> RawEntity | None:
        """Parse a single included entity."""
        entity_type = item.get("type")
        entity_id = MbtaResponseParser._identifier(item.get("id"))
        if not isinstance(entity_type, str) or entity_id is None:
            logger.warning(f"Skipping included entity without type or id: {item!r:.200}")
            return None
        return RawEntity(
            type=entity_type,
            id=entity_id,
            attributes=MbtaResponseParser._attributes(item),
        )

    @staticmethod
    def parse_schedule_response(document: dict[str, Any]) -> ScheduleResponse:
        """Parse a /schedules document with included entities."""
        stops = []
        for item in MbtaResponseParser._items(document, "data"):
            scheduled_stop = MbtaResponseParser._parse_scheduled_stop(item)
            if scheduled_stop:
                stops.append(scheduled_stop)

        included = []
        for item in MbtaResponseParser._items(document, "included"):
            entity = MbtaResponseParser._parse_entity(item)
            if entity:
                included.append(entity)

        return ScheduleResponse(data=tuple(stops), included=tuple(included))
