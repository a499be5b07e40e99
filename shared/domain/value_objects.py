"""
Common Value Objects

Value objects used across domains:
- Period: A rental time range (start to end) with instant comparisons
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class Period(ValueObject):
    """
    Time range value object

    Represents the rental window of a booking. Both bounds are required
    and ``start`` is strictly before ``end``.

    Comparisons against an instant are strict on both sides, so a booking
    that starts or ends exactly at ``moment`` is neither current, past nor
    future.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start is None or self.end is None:
            raise ValueError("Both start and end are required")
        if self.start >= self.end:
            raise ValueError(f"Start ({self.start}) must be before end ({self.end})")

    def contains(self, moment: datetime) -> bool:
        """Check if ``moment`` lies strictly inside the range"""
        return self.start < moment < self.end

    def is_past(self, moment: datetime) -> bool:
        """Range ended before ``moment``"""
        return self.end < moment

    def is_future(self, moment: datetime) -> bool:
        """Range starts after ``moment``"""
        return self.start > moment

    @property
    def duration(self):
        return self.end - self.start

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"

    def __repr__(self):
        return f"Period({self.start!r}, {self.end!r})"
