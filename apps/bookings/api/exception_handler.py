"""Translate booking domain errors into REST framework responses.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``. Ownership failures
are reported as 404 like missing resources; clients rely on that mapping.
"""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from apps.bookings.domain.exceptions import (
    BookingError,
    InvalidBookingRequest,
    NotFoundError,
    UnsupportedStateError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: tuple[tuple[type[BookingError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidBookingRequest, status.HTTP_400_BAD_REQUEST),
    (UnsupportedStateError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: BookingError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def booking_exception_handler(exc, context):
    """Handle ``BookingError`` here, delegate everything else to DRF."""

    if not isinstance(exc, BookingError):
        return drf_exception_handler(exc, context)

    status_code = status_for(exc)
    logger.debug(f"{exc.__class__.__name__} mapped to HTTP {status_code}")
    return Response({"error": exc.message}, status=status_code)
