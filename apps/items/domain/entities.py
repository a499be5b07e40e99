"""
Item Domain Entities

The booking domain only reads items: it needs the owner, the
availability flag and the name for messages.
"""

from dataclasses import dataclass

from shared.domain.base import Entity


@dataclass(eq=False, kw_only=True)
class Item(Entity):
    """
    Rentable item

    ``available`` is the owner's switch for accepting new rental
    requests; it says nothing about existing bookings.
    """
    name: str
    owner_id: int
    available: bool = True
    description: str = ''

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def __str__(self):
        return f"'{self.name}' (id={self.id})"
