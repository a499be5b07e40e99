"""Django ORM implementations of the booking collaborators."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
import logging

from django.utils import timezone  # type: ignore

from apps.items.domain.entities import Item as ItemEntity
from apps.items.models import Item
from apps.users.models import User

from .domain.entities import Booking as BookingEntity
from .domain.exceptions import NotFoundError
from .domain.repositories import BookingRepository, ItemRepository, UserRepository
from .models import Booking

logger = logging.getLogger(__name__)


class DjangoUserRepository(UserRepository):

    def exists(self, user_id: int) -> bool:
        return User.objects.filter(pk=user_id).exists()


class DjangoItemRepository(ItemRepository):

    def get_by_id(self, item_id: int) -> Optional[ItemEntity]:
        item = Item.objects.filter(pk=item_id).first()
        return item.to_entity() if item else None


class DjangoBookingRepository(BookingRepository):
    """Maps ``Booking`` rows to booking entities and back."""

    def _queryset(self):
        return Booking.objects.select_related("item")

    def save(self, booking: BookingEntity) -> BookingEntity:
        if booking.id is None:
            row = Booking.objects.create(
                item_id=booking.item_id,
                booker_id=booking.booker_id,
                start=booking.start,
                end=booking.end,
                status=booking.status.value,
            )
            booking.id = row.pk
            logger.debug(f"Inserted booking {row.pk}")
        else:
            # update() bypasses auto_now
            updated = Booking.objects.filter(pk=booking.id).update(
                start=booking.start,
                end=booking.end,
                status=booking.status.value,
                updated_at=timezone.now(),
            )
            if not updated:
                message = f"Booking with id={booking.id} not found."
                logger.warning(message)
                raise NotFoundError(message)
            logger.debug(f"Updated booking {booking.id}")
        return booking

    def get_by_id(self, booking_id: int) -> Optional[BookingEntity]:
        row = self._queryset().filter(pk=booking_id).first()
        return row.to_entity() if row else None

    def find_active_by_item_id(self, item_id: int, moment: datetime) -> List[BookingEntity]:
        rows = self._queryset().filter(
            item_id=item_id,
            start__lte=moment,
            end__gte=moment,
        )
        return [row.to_entity() for row in rows]

    def find_all_by_booker(self, booker_id: int) -> List[BookingEntity]:
        rows = self._queryset().filter(booker_id=booker_id).order_by("-start")
        return [row.to_entity() for row in rows]

    def find_all_by_owner(self, owner_id: int) -> List[BookingEntity]:
        rows = self._queryset().filter(item__owner_id=owner_id).order_by("-start")
        return [row.to_entity() for row in rows]
