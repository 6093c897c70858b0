"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from reservation.services.booking_service import BookingService


def get_booking_service(request: Request) -> BookingService:
    service = getattr(request.app.state, "booking_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Booking service is not initialized",
        )
    return service
