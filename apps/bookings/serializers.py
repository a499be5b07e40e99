"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .application.booking_service import BookingInput


class BookingInputSerializer(serializers.Serializer):
    """Rental request payload.

    Only the payload shape is checked here. Booking rules (start before end,
    item availability, ownership) are enforced by ``BookingService`` so
    they fail with the domain error kinds.
    """

    itemId = serializers.IntegerField(source="item_id", min_value=1)
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()

    def to_booking_input(self) -> BookingInput:
        return BookingInput(**self.validated_data)


class BookingSerializer(serializers.Serializer):
    """Booking as returned to clients."""

    id = serializers.IntegerField(read_only=True)
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)
    status = serializers.SerializerMethodField()
    item = serializers.SerializerMethodField()
    booker = serializers.SerializerMethodField()

    def get_status(self, booking) -> str:
        return booking.status.value

    def get_item(self, booking) -> dict:
        return {"id": booking.item.id, "name": booking.item.name}

    def get_booker(self, booking) -> dict:
        return {"id": booking.booker_id}
