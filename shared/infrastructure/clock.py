"""
Clock

Single source of "now" for time-dependent domain rules. Services receive
a clock instead of calling ``timezone.now()`` directly, so tests can pin
time with ``FixedClock``.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from django.utils import timezone  # type: ignore


class Clock(ABC):
    """Abstract time source"""

    @abstractmethod
    def now(self) -> datetime:
        """Current aware datetime"""
        pass


class SystemClock(Clock):
    """Wall clock honouring Django's ``USE_TZ`` setting"""

    def now(self) -> datetime:
        return timezone.now()


class FixedClock(Clock):
    """
    Clock frozen at a given instant

    ``advance()`` moves it forward, which is enough to simulate time
    passing between calls.
    """

    def __init__(self, moment: datetime):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def advance(self, delta: timedelta) -> None:
        self._moment = self._moment + delta

    def __repr__(self):
        return f"FixedClock({self._moment!r})"
