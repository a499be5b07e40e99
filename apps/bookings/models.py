"""Booking models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import Period

from .domain.entities import Booking as BookingEntity
from .domain.entities import BookingStatus


class Booking(models.Model):
    """Request to rent an item for a period."""

    class Status(models.TextChoices):
        WAITING = "WAITING", _("Waiting for approval")
        APPROVED = "APPROVED", _("Approved")
        REJECTED = "REJECTED", _("Rejected")

    item = models.ForeignKey(
        "items.Item",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booker = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start = models.DateTimeField()
    end = models.DateTimeField()
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.WAITING,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-start"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end__gt=models.F("start")),
                name="booking_start_before_end",
            ),
        ]
        indexes = [
            models.Index(fields=["item", "start", "end"], name="booking_item_period_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} of item {self.item_id} ({self.status})"

    def to_entity(self) -> BookingEntity:
        return BookingEntity(
            id=self.pk,
            period=Period(self.start, self.end),
            item=self.item.to_entity(),
            booker_id=self.booker_id,
            status=BookingStatus(self.status),
        )
