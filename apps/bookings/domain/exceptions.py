"""
Booking Domain Exceptions

Failure kinds raised by the booking lifecycle:
- NotFoundError: a user, item or booking does not exist
- OwnershipError: caller is neither the owner nor the booker where required
- InvalidBookingRequest: a domain validation rule failed
- UnsupportedStateError: unknown state filter token

OwnershipError subclasses NotFoundError. Clients see both as "not found"
(HTTP 404), while code that needs to tell them apart still can.
"""


class BookingError(Exception):
    """Base class for booking lifecycle failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BookingError):
    """Referenced user, item or booking does not exist"""


class OwnershipError(NotFoundError):
    """Caller has no rights on the booking or item"""


class InvalidBookingRequest(BookingError):
    """Request breaks a booking rule (dates, availability, status)"""


class UnsupportedStateError(BookingError):
    """State filter token is not one of the known states"""

    def __init__(self, state: str):
        super().__init__(f"Unknown state: {state}")
        self.state = state
