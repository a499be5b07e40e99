"""
Booking State Filters

The ``state`` query token narrows a booking listing. Time-based states
(CURRENT, PAST, FUTURE) are computed against a moment; status-based states
(WAITING, REJECTED) look at the stored status.
"""

from datetime import datetime
from enum import Enum
from typing import Iterable

from .entities import Booking, BookingStatus
from .exceptions import UnsupportedStateError


class BookingState(Enum):
    ALL = 'ALL'
    CURRENT = 'CURRENT'      # start < now < end
    PAST = 'PAST'            # end < now
    FUTURE = 'FUTURE'        # start > now
    WAITING = 'WAITING'
    REJECTED = 'REJECTED'

    @classmethod
    def parse(cls, token: str) -> 'BookingState':
        """
        Resolve a raw token into a state

        Tokens are case-sensitive, matching the values above.

        Raises:
            UnsupportedStateError: token is not a known state
        """
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedStateError(token) from None

    def matches(self, booking: Booking, moment: datetime) -> bool:
        if self is BookingState.ALL:
            return True
        if self is BookingState.CURRENT:
            return booking.period.contains(moment)
        if self is BookingState.PAST:
            return booking.period.is_past(moment)
        if self is BookingState.FUTURE:
            return booking.period.is_future(moment)
        if self is BookingState.WAITING:
            return booking.status == BookingStatus.WAITING
        if self is BookingState.REJECTED:
            return booking.status == BookingStatus.REJECTED
        raise AssertionError(f"Unhandled booking state {self!r}")

    def filter(self, bookings: Iterable[Booking], moment: datetime) -> list[Booking]:
        """Keep matching bookings, preserving input order"""
        return [booking for booking in bookings if self.matches(booking, moment)]
