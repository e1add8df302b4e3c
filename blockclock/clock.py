"""
Clockface - Full clock frame for one instant
Lays out the Unix time digits and an ISO-8601 label below them
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from .color import Color
from .digit import NUMBER_HEIGHT, NUMBER_WIDTH, goto, render_digit

LEFT_MARGIN = 0
TOP_MARGIN = 1
STEP = NUMBER_WIDTH + 1  # One blank column between digits

LABEL_ROW = TOP_MARGIN + NUMBER_HEIGHT + 1


def utc_now() -> datetime:
    """Current UTC time truncated to whole seconds"""
    return datetime.now(timezone.utc).replace(microsecond=0)


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).replace(microsecond=0)


def unix_digits(seconds: int) -> List[int]:
    """Decimal digits of a Unix time, most significant first. Empty for seconds <= 0."""
    digits = []
    while seconds > 0:
        digits.append(seconds % 10)
        seconds //= 10
    digits.reverse()
    return digits


def format_label(instant: datetime) -> str:
    """RFC 3339 UTC label with second precision, e.g. 1970-01-01T00:00:00Z"""
    return _as_utc(instant).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class Clockface:
    """A single instant drawn in a single color"""
    instant: datetime
    color: Color

    @classmethod
    def now(cls, color: Color) -> "Clockface":
        return cls(utc_now(), color)

    def render(self) -> str:
        """Render the complete frame: digits, centered label, parked cursor"""
        instant = _as_utc(self.instant)
        digits = unix_digits(int(instant.timestamp()))

        parts = [
            render_digit(d, LEFT_MARGIN + i * STEP, TOP_MARGIN, self.color)
            for i, d in enumerate(digits)
        ]

        label = format_label(instant)
        # Left-align the label when the digit block is narrower than it
        label_column = LEFT_MARGIN + max(0, len(digits) * STEP - len(label)) // 2

        parts.append(goto(label_column, LABEL_ROW))
        parts.append(label)
        parts.append(goto(0, LABEL_ROW + 1))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


def render_clockface(instant: datetime, color: Color) -> str:
    """Render the frame for an instant. Naive datetimes are taken as UTC."""
    return Clockface(instant, color).render()
