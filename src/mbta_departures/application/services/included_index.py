"""Lookup index over the side-table entities of one schedule response."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mbta_departures.domain.errors import ReconciliationError
from mbta_departures.domain.models import Prediction, RawEntity

logger = logging.getLogger(__name__)


class IncludedIndex:
    """Maps (type, id) to an included entity.

    Built for a single reconciliation and discarded with it, since the entity
    set can change between loads.
    """

    def __init__(self, entities: dict[tuple[str, str], RawEntity]) -> None:
        self._entities = entities

    @classmethod
    def build(cls, included: Iterable[RawEntity]) -> IncludedIndex:
        """Index included entities; on duplicate keys the first one wins."""
        entities: dict[tuple[str, str], RawEntity] = {}
        for entity in included:
            key = (entity.type, entity.id)
            if key in entities:
                logger.debug(f"Duplicate included {entity.type} {entity.id!r} ignored")
                continue
            entities[key] = entity
        return cls(entities)

    def __len__(self) -> int:
        return len(self._entities)

    def get(self, entity_type: str, entity_id: str | None) -> RawEntity | None:
        if entity_id is None:
            return None
        return self._entities.get((entity_type, entity_id))

    def require(self, entity_type: str, entity_id: str | None, schedule_id: str) -> RawEntity:
        """Resolve a required relationship or raise ReconciliationError."""
        entity = self.get(entity_type, entity_id)
        if entity is None:
            raise ReconciliationError(schedule_id, entity_type, entity_id)
        return entity

    def prediction(self, prediction_id: str | None) -> Prediction | None:
        """Resolve an optional prediction."""
        entity = self.get("prediction", prediction_id)
        if entity is None:
            if prediction_id is not None:
                logger.debug(f"Prediction {prediction_id!r} not included, treating as absent")
            return None
        return Prediction(
            id=entity.id,
            arrival_time=entity.attribute("arrival_time"),
            departure_time=entity.attribute("departure_time"),
        )
