"""
Base Domain Classes

Foundational building blocks shared by the domain layers:
- Entity: Objects with identity assigned by the persistence store
- ValueObject: Immutable objects compared by value
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for all entities

    Entities are mutable and have identity. The identity is assigned by the
    store on first save, so a fresh entity carries ``id=None``.
    Two persisted entities are equal if their IDs are equal.
    """
    id: int | None = None

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
