"""Errors raised while loading the departure board."""

from mbta_departures.domain.models.error_details import ErrorDetails


class TransportError(RuntimeError):
    """A fetch failed: non-2xx response, network failure or timeout."""

    def __init__(self, details: ErrorDetails, url: str | None = None) -> None:
        self.details = details
        self.url = url
        target = f" for {url}" if url else ""
        super().__init__(f"Transit API request failed{target}: {details.message()}")

    @property
    def status_code(self) -> int | None:
        return self.details.status_code

    @property
    def reason(self) -> str:
        return self.details.reason


class ReconciliationError(ValueError):
    """A scheduled stop references a route, stop or trip missing from the response."""

    def __init__(self, schedule_id: str, kind: str, entity_id: str | None) -> None:
        self.schedule_id = schedule_id
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(
            f"Schedule {schedule_id!r} references unknown {kind} {entity_id!r}"
        )


class StaleResponseDiscarded(Exception):
    """A load finished after a newer load had been issued."""

    def __init__(self, generation: int, latest_generation: int) -> None:
        self.generation = generation
        self.latest_generation = latest_generation
        super().__init__(
            f"Discarding generation {generation}; generation {latest_generation} is newer"
        )
