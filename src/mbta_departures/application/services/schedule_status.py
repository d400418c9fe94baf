"""Status of a scheduled arrival or departure against its prediction."""

from mbta_departures.application.services.time_formatting import (
    format_clock_time,
    format_distance,
    parse_instant,
)
from mbta_departures.domain.models import AdjustedTime, PlainTime, ScheduleStatus

ON_TIME = "On Time"


class ScheduleStatusCalculator:
    """Computes display time and on-time/early/late status for one leg of a stop."""

    def __init__(self, timezone: str) -> None:
        """Initialize the calculator.

        Args:
            timezone: IANA timezone used to format clock times.
        """
        self.timezone = timezone

    def compute_status(
        self, scheduled_time: str | None, predicted_time: str | None
    ) -> ScheduleStatus:
        """Compare a scheduled time with an optional predicted time.

        Args:
            scheduled_time: Scheduled ISO 8601 time, absent when the leg does not apply.
            predicted_time: Predicted ISO 8601 time, absent without live tracking.

        Returns:
            The leg's status. The instant is always the scheduled one, so
            predictions never reorder the board.
        """
        scheduled = parse_instant(scheduled_time)
        if scheduled is None:
            return ScheduleStatus()

        original_text = format_clock_time(scheduled, self.timezone)
        predicted = parse_instant(predicted_time)
        if predicted is None:
            return ScheduleStatus(
                display_time=PlainTime(original_text),
                instant=scheduled,
                status_text=ON_TIME,
            )

        if predicted > scheduled:
            status_text = f"Late {format_distance(predicted, scheduled)}"
        elif predicted < scheduled:
            status_text = f"Early {format_distance(predicted, scheduled)}"
        else:
            status_text = ON_TIME

        return ScheduleStatus(
            display_time=AdjustedTime(
                predicted_text=format_clock_time(predicted, self.timezone),
                original_text=original_text,
            ),
            instant=scheduled,
            status_text=status_text,
        )
