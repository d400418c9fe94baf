"""Loader running one resolve-and-reconcile cycle per board load."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mbta_departures.domain.contracts.board_loader import BoardLoaderProtocol
from mbta_departures.domain.contracts.state_updater import (
    StateUpdaterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from mbta_departures.domain.errors import StaleResponseDiscarded, TransportError
from mbta_departures.domain.models import BoardSnapshot, ReconciliationResult

if TYPE_CHECKING:
    from mbta_departures.domain.contracts.board_services import (
        RouteResolverProtocol,
        ScheduleReconcilerProtocol,
    )

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class BoardLoader(BoardLoaderProtocol):
    """Loads routes, then schedules, and publishes the result of the newest load.

    Every load is tagged with a generation number. A load that completes after
    a newer one was issued is discarded instead of published.
    """

    def __init__(
        self,
        route_resolver: RouteResolverProtocol,
        schedule_reconciler: ScheduleReconcilerProtocol,
        state_updater: StateUpdaterProtocol,
        route_type: int,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the loader.

        Args:
            route_resolver: Resolves the routes of the configured mode.
            schedule_reconciler: Fetches and reconciles schedules for those routes.
            state_updater: Receives published snapshots.
            route_type: Transit mode configured at startup.
            clock: Source of the current instant.
        """
        self.route_resolver = route_resolver
        self.schedule_reconciler = schedule_reconciler
        self.state_updater = state_updater
        self.route_type = route_type
        self._clock = clock
        self._generation = 0
        self._task: asyncio.Task[BoardSnapshot | None] | None = None

    @property
    def generation(self) -> int:
        """The most recently issued generation."""
        return self._generation

    def _ensure_current(self, generation: int) -> None:
        if generation != self._generation:
            raise StaleResponseDiscarded(generation, self._generation)

    async def _fetch(self, generation: int) -> ReconciliationResult:
        route_ids = await self.route_resolver.resolve_routes(self.route_type)
        # Skip the schedule request if a newer load was issued meanwhile
        self._ensure_current(generation)
        return await self.schedule_reconciler.load(route_ids, self._clock())

    async def load(self) -> BoardSnapshot | None:
        """Run one full load and publish its snapshot.

        Returns:
            The published snapshot, or None when a newer load superseded this one.
        """
        self._generation += 1
        generation = self._generation
        self.state_updater.publish(BoardSnapshot(generation=generation, status="pending"))
        logger.debug(f"Started load generation {generation}")

        try:
            result = await self._fetch(generation)
            snapshot = BoardSnapshot(
                generation=generation,
                status="ready",
                records=result.records,
                dropped_count=result.dropped_count,
                loaded_at=self._clock(),
            )
        except TransportError as e:
            logger.error(f"Board load failed: {e.reason} (status: {e.status_code}, error: {e})")
            snapshot = BoardSnapshot(
                generation=generation,
                status="error",
                error=e.details,
                loaded_at=self._clock(),
            )
        except StaleResponseDiscarded as e:
            logger.debug(str(e))
            return None

        try:
            self._ensure_current(generation)
        except StaleResponseDiscarded as e:
            logger.debug(str(e))
            return None

        self.state_updater.publish(snapshot)
        logger.info(
            f"Board generation {generation} {snapshot.status}: "
            f"{len(snapshot.records)} departure(s), {snapshot.dropped_count} dropped"
        )
        return snapshot

    def start_load(self, cancel_previous: bool = True) -> asyncio.Task[BoardSnapshot | None]:
        """Schedule a load in the background.

        Args:
            cancel_previous: Cancel a load that is still in flight.
        """
        if cancel_previous and self._task is not None and not self._task.done():
            logger.debug("Cancelling in-flight board load")
            self._task.cancel()
        self._task = asyncio.create_task(self.load())
        return self._task

    async def stop(self) -> None:
        """Cancel the in-flight background load, if any."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Board load cancelled")
