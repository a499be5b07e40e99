"""
Repository Interfaces

Collaborator contracts the booking lifecycle depends on. The Django ORM
implementations live in ``apps.bookings.repositories``.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from apps.items.domain.entities import Item

from .entities import Booking


class UserRepository(ABC):

    @abstractmethod
    def exists(self, user_id: int) -> bool:
        pass


class ItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[Item]:
        pass


class BookingRepository(ABC):

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """
        Persist the booking; assigns ``id`` on first save

        Raises ``NotFoundError`` when a saved booking no longer exists.
        """
        pass

    @abstractmethod
    def get_by_id(self, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    def find_active_by_item_id(self, item_id: int, moment: datetime) -> List[Booking]:
        """
        Bookings of the item whose period may contain ``moment``

        May return a superset; callers apply the strict check.
        """
        pass

    @abstractmethod
    def find_all_by_booker(self, booker_id: int) -> List[Booking]:
        """Bookings made by the user, newest start first"""
        pass

    @abstractmethod
    def find_all_by_owner(self, owner_id: int) -> List[Booking]:
        """Bookings of items owned by the user, newest start first"""
        pass
