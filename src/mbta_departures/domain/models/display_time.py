"""Display time variants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlainTime:
    """A scheduled time shown as-is."""

    text: str


@dataclass(frozen=True)
class AdjustedTime:
    """A predicted time, with the originally scheduled time kept as detail."""

    predicted_text: str
    original_text: str

    @property
    def is_changed(self) -> bool:
        """Whether the prediction differs from the schedule once formatted."""
        return self.predicted_text != self.original_text


DisplayTime = PlainTime | AdjustedTime
