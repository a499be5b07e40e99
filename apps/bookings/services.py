"""Wiring of the booking lifecycle service with its Django collaborators."""

from __future__ import annotations

from shared.infrastructure.clock import Clock, SystemClock

from .application.booking_service import BookingInput, BookingService
from .repositories import (
    DjangoBookingRepository,
    DjangoItemRepository,
    DjangoUserRepository,
)

__all__ = ["BookingInput", "BookingService", "get_booking_service"]


def get_booking_service(clock: Clock | None = None) -> BookingService:
    """Build a ``BookingService`` backed by the ORM repositories."""

    return BookingService(
        booking_repo=DjangoBookingRepository(),
        user_repo=DjangoUserRepository(),
        item_repo=DjangoItemRepository(),
        clock=clock or SystemClock(),
    )
