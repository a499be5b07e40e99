"""
Booking Domain Entities

Core business entities for the booking domain:
- Booking: A rental request for an item over a period
- BookingStatus: FSM states for the booking lifecycle
"""

from dataclasses import dataclass
from enum import Enum

from apps.items.domain.entities import Item
from shared.domain.base import Entity
from shared.domain.value_objects import Period

from .exceptions import InvalidBookingRequest


class BookingStatus(Enum):
    """
    Booking Status Finite State Machine

    State transitions (all driven by the item owner):
    - WAITING -> APPROVED (owner accepted the request)
    - WAITING -> REJECTED (owner declined the request)
    - REJECTED -> REJECTED (repeated rejection, allowed)
    - REJECTED -> APPROVED (owner changed their mind)
    - APPROVED -> * is not allowed
    """
    WAITING = 'WAITING'      # Created, waiting for the owner
    APPROVED = 'APPROVED'    # Accepted by the owner
    REJECTED = 'REJECTED'    # Declined by the owner


@dataclass(eq=False, kw_only=True)
class Booking(Entity):
    """
    Booking Entity

    Represents a booker's request to rent an item for a period.

    Key invariants:
    - Period is valid (start < end), enforced by ``Period``
    - New bookings start in WAITING
    - An APPROVED booking cannot be reviewed again
    """

    period: Period
    item: Item
    booker_id: int
    status: BookingStatus = BookingStatus.WAITING

    @property
    def start(self):
        return self.period.start

    @property
    def end(self):
        return self.period.end

    @property
    def item_id(self) -> int | None:
        return self.item.id

    @property
    def owner_id(self) -> int:
        return self.item.owner_id

    def can_be_reviewed(self) -> bool:
        """Only bookings that were not approved yet accept a decision"""
        return self.status != BookingStatus.APPROVED

    def review(self, approved: bool):
        """
        Apply the owner's decision

        WAITING/REJECTED -> APPROVED when ``approved`` is true,
        WAITING/REJECTED -> REJECTED otherwise. The caller logs the
        ``InvalidBookingRequest`` raised for an approved booking.
        """
        if not self.can_be_reviewed():
            raise InvalidBookingRequest(
                f"Booking with id={self.id} was already approved."
            )

        self.status = BookingStatus.APPROVED if approved else BookingStatus.REJECTED

    def is_visible_to(self, user_id: int) -> bool:
        """Booker and item owner may read the booking"""
        return self.item.is_owned_by(user_id) or self.booker_id == user_id

    def is_active_at(self, moment) -> bool:
        """Booking period strictly contains ``moment``"""
        return self.period.contains(moment)

    def __str__(self):
        return f"Booking {self.id} of item {self.item} ({self.status.value})"

    def __repr__(self):
        return (
            f"Booking(id={self.id}, item_id={self.item_id}, booker_id={self.booker_id}, "
            f"status={self.status.value}, period={self.period!r})"
        )
