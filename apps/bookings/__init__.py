"""Bookings app package.

This app encapsulates the booking lifecycle: rental requests for items,
owner approval or rejection, access-controlled reads and state-filtered
listings. Domain rules live in ``domain`` and ``application``; the Django
model and repositories only store and load bookings.
"""
