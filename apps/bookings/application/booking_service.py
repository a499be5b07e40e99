"""
Booking Lifecycle Service

Use cases for the booking domain:
- add: Create a rental request (WAITING)
- approve: Owner approves or rejects a request
- get: Read a booking as its owner or booker
- get_all_by_booker / get_all_by_owner: State-filtered listings

Every failure is logged at WARNING before it is raised.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NoReturn
import logging

from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.domain.exceptions import (
    BookingError,
    InvalidBookingRequest,
    NotFoundError,
    OwnershipError,
)
from apps.bookings.domain.repositories import (
    BookingRepository,
    ItemRepository,
    UserRepository,
)
from apps.bookings.domain.states import BookingState
from shared.domain.value_objects import Period
from shared.infrastructure.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


@dataclass
class BookingInput:
    """Rental request as submitted by the booker"""
    item_id: int
    start: datetime
    end: datetime


class BookingService:
    """
    Booking Lifecycle Manager

    Validates requests against current user, item and booking data, then
    reads or mutates the booking store. No locking: two concurrent
    approvals of the same booking are not guarded against.
    """

    def __init__(
        self,
        booking_repo: BookingRepository,
        user_repo: UserRepository,
        item_repo: ItemRepository,
        clock: Clock | None = None,
    ):
        self.booking_repo = booking_repo
        self.user_repo = user_repo
        self.item_repo = item_repo
        self.clock = clock or SystemClock()

    def add(self, booking_input: BookingInput, booker_id: int) -> Booking:
        """
        Create a rental request

        Returns: Saved Booking in WAITING status

        Raises:
            NotFoundError: booker or item not found
            OwnershipError: booker owns the item
            InvalidBookingRequest: bad period, item unavailable or currently booked
        """
        self._ensure_user_exists(booker_id)

        if (
            booking_input.start is None
            or booking_input.end is None
            or booking_input.start >= booking_input.end
        ):
            self._fail(InvalidBookingRequest("Booking start must be before its end."))

        item = self.item_repo.get_by_id(booking_input.item_id)
        if item is None:
            self._fail(NotFoundError(f"Item with id={booking_input.item_id} not found."))

        if item.is_owned_by(booker_id):
            self._fail(OwnershipError("Item owner cannot book their own item."))

        if not item.available:
            self._fail(InvalidBookingRequest(f"Item with id={item.id} is not available for booking."))

        active = self.booking_repo.find_active_by_item_id(item.id, self.clock.now())
        if any(existing.is_active_at(self.clock.now()) for existing in active):
            self._fail(InvalidBookingRequest(
                f"Item with id={item.id} is currently booked. Try again later."
            ))

        booking = Booking(
            period=Period(booking_input.start, booking_input.end),
            item=item,
            booker_id=booker_id,
            status=BookingStatus.WAITING,
        )
        booking = self.booking_repo.save(booking)

        logger.info(f"Booking request for item {item} was added (booking id={booking.id})")
        return booking

    def approve(self, booking_id: int, owner_id: int, approved: bool) -> Booking:
        """
        Approve or reject a booking as the item owner

        Raises:
            NotFoundError: owner or booking not found
            OwnershipError: caller does not own the item
            InvalidBookingRequest: booking already approved
        """
        self._ensure_user_exists(owner_id)
        booking = self._get_booking(booking_id)

        if not booking.item.is_owned_by(owner_id):
            self._fail(OwnershipError("Only the item owner can approve or reject booking requests."))

        try:
            booking.review(approved)
        except InvalidBookingRequest as error:
            self._fail(error)

        booking = self.booking_repo.save(booking)

        if approved:
            logger.info(f"Booking for item {booking.item} was approved by the owner")
        else:
            logger.info(f"Booking for item {booking.item} was rejected by the owner")
        return booking

    def get(self, booking_id: int, user_id: int) -> Booking:
        """
        Read a booking as its booker or the item owner

        Raises:
            NotFoundError: user or booking not found
            OwnershipError: caller is neither booker nor owner
        """
        self._ensure_user_exists(user_id)
        booking = self._get_booking(booking_id)

        if not booking.is_visible_to(user_id):
            self._fail(OwnershipError(
                "Only the booking author or the item owner can view the booking."
            ))

        logger.info(f"Booking for item {booking.item} was retrieved")
        return booking

    def get_all_by_booker(self, user_id: int, state: str = BookingState.ALL.value) -> list[Booking]:
        """Bookings made by the user, filtered by ``state``, newest start first"""
        self._ensure_user_exists(user_id)
        return self._filter_by_state(self.booking_repo.find_all_by_booker(user_id), state)

    def get_all_by_owner(self, owner_id: int, state: str = BookingState.ALL.value) -> list[Booking]:
        """Bookings of the owner's items, filtered by ``state``, newest start first"""
        self._ensure_user_exists(owner_id)
        return self._filter_by_state(self.booking_repo.find_all_by_owner(owner_id), state)

    def _filter_by_state(self, bookings: list[Booking], state: str) -> list[Booking]:
        try:
            booking_state = BookingState.parse(state)
        except BookingError:
            logger.warning(f"Search by state '{state}' is not supported")
            raise

        return booking_state.filter(bookings, self.clock.now())

    def _get_booking(self, booking_id: int) -> Booking:
        booking = self.booking_repo.get_by_id(booking_id)
        if booking is None:
            self._fail(NotFoundError(f"Booking with id={booking_id} not found."))
        return booking

    def _ensure_user_exists(self, user_id: int) -> None:
        if not self.user_repo.exists(user_id):
            self._fail(NotFoundError(f"User with id={user_id} not found."))

    def _fail(self, error: BookingError) -> NoReturn:
        logger.warning(error.message)
        raise error
