"""Main entry point for the MBTA departure board."""

import asyncio
import logging
import sys

import aiohttp

from mbta_departures.adapters.board import BoardLoader, BoardState, DepartureTable, StateUpdater
from mbta_departures.adapters.config import AppConfig
from mbta_departures.adapters.mbta_api import (
    MbtaHttpClient,
    MbtaRouteRepository,
    MbtaScheduleRepository,
)
from mbta_departures.application.services import (
    RouteResolver,
    ScheduleReconciler,
    ScheduleStatusCalculator,
)
from mbta_departures.domain.models import BoardSnapshot

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_board(
    config: AppConfig, session: aiohttp.ClientSession
) -> tuple[BoardLoader, BoardState]:
    """Wire repositories, services and state into a board loader."""
    http_client = MbtaHttpClient(
        session,
        base_url=config.api_base_url,
        api_key=config.api_key,
        timeout_seconds=config.api_timeout,
        log_requests=config.log_requests,
    )
    route_resolver = RouteResolver(MbtaRouteRepository(http_client))
    schedule_reconciler = ScheduleReconciler(
        MbtaScheduleRepository(http_client, max_time=config.max_time),
        ScheduleStatusCalculator(config.timezone),
    )

    board_state = BoardState()
    loader = BoardLoader(
        route_resolver,
        schedule_reconciler,
        StateUpdater(board_state),
        route_type=config.route_type,
    )
    return loader, board_state


def log_snapshot(config: AppConfig, snapshot: BoardSnapshot) -> None:
    """Log a one-line summary of a published snapshot."""
    if snapshot.status == "error" and snapshot.error is not None:
        logger.error(f"{config.title}: {snapshot.error.message()}")
        return

    table = DepartureTable(snapshot.records, show_past_departures=config.show_past_departures)
    first_page = table.page(page_size=config.page_size)
    logger.info(
        f"{config.title}: {len(snapshot.records)} departure(s), "
        f"{first_page.total_rows} shown over {first_page.page_count} page(s), "
        f"{snapshot.dropped_count} dropped"
    )


async def main() -> BoardSnapshot | None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)
    logger.info(f"Loading {config.mode_name} departures from {config.api_base_url}")

    async with aiohttp.ClientSession() as session:
        loader, board_state = build_board(config, session)
        await loader.load()

    log_snapshot(config, board_state.snapshot)
    return board_state.snapshot


def run() -> None:
    """Synchronous wrapper for console scripts."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
