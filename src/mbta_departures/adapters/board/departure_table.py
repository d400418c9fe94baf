"""Table view over departure records: exact-match filters, past-departure toggle, sorting and paging."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from mbta_departures.adapters.config.app_config import PAGE_SIZE_OPTIONS
from mbta_departures.domain.models import DepartureRecord

FILTERABLE_COLUMNS = ("train_number", "stop_name", "route_name")


@dataclass(frozen=True)
class TablePage:
    """One page of table rows."""

    rows: tuple[DepartureRecord, ...]
    page_index: int
    page_count: int
    page_size: int
    total_rows: int

    @property
    def can_previous(self) -> bool:
        return self.page_index > 0

    @property
    def can_next(self) -> bool:
        return self.page_index < self.page_count - 1


class DepartureTable:
    """Filterable, sortable, paginated view of one snapshot's records."""

    def __init__(
        self,
        records: Iterable[DepartureRecord],
        show_past_departures: bool = False,
        descending: bool = False,
    ) -> None:
        self._records = tuple(records)
        self._filters: dict[str, str] = {}
        self.show_past_departures = show_past_departures
        self.descending = descending

    @staticmethod
    def _check_column(column: str) -> None:
        if column not in FILTERABLE_COLUMNS:
            raise ValueError(f"Column {column!r} is not filterable; use one of {FILTERABLE_COLUMNS}")

    def filter_equals(self, column: str, value: str | None) -> None:
        """Keep rows whose column equals value; None or empty clears the filter."""
        self._check_column(column)
        if value:
            self._filters[column] = value
        else:
            self._filters.pop(column, None)

    @property
    def filters(self) -> dict[str, str]:
        return dict(self._filters)

    def column_options(self, column: str) -> list[str]:
        """Distinct values of a column, in first-seen order."""
        self._check_column(column)
        return list(dict.fromkeys(getattr(record, column) for record in self._records))

    def rows(self, now: datetime | None = None) -> list[DepartureRecord]:
        """Filtered rows sorted by sort time."""
        now = now or datetime.now(UTC)
        rows = [
            record
            for record in self._records
            if all(getattr(record, column) == value for column, value in self._filters.items())
            and (self.show_past_departures or record.sort_time > now)
        ]
        return sorted(rows, key=lambda record: record.sort_time, reverse=self.descending)

    def page(
        self, page_index: int = 0, page_size: int = PAGE_SIZE_OPTIONS[0], now: datetime | None = None
    ) -> TablePage:
        """Return one page of rows; an out-of-range index is clamped."""
        if page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page_size must be one of {PAGE_SIZE_OPTIONS}")

        rows = self.rows(now)
        page_count = max(1, math.ceil(len(rows) / page_size))
        page_index = min(max(page_index, 0), page_count - 1)
        start = page_index * page_size
        return TablePage(
            rows=tuple(rows[start : start + page_size]),
            page_index=page_index,
            page_count=page_count,
            page_size=page_size,
            total_rows=len(rows),
        )
