"""URL configuration for ShareIt project.

Only the Django admin is routed here. Booking HTTP endpoints belong to the
transport layer, which builds on ``apps.bookings.services.get_booking_service``.
"""
from django.contrib import admin  # type: ignore
from django.urls import path  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
]
