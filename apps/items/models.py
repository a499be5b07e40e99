"""Item models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.entities import Item as ItemEntity


class Item(models.Model):
    """Thing offered for rent by its owner."""

    owner = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="items",
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    available = models.BooleanField(
        default=True,
        help_text=_("Whether the owner accepts new rental requests."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Item")
        verbose_name_plural = _("Items")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name

    def to_entity(self) -> ItemEntity:
        return ItemEntity(
            id=self.pk,
            name=self.name,
            owner_id=self.owner_id,
            available=self.available,
            description=self.description,
        )
