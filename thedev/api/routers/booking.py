from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from ...bookings.ledger import BookingLedger
from ..dependencies import get_booking_ledger


router = APIRouter(prefix="/api/booking", tags=["booking"])


class BookingResponse(BaseModel):
    success: bool
    bookingID: int | float
    message: str
    bookingTime: str


@router.post("")
def create_booking(
    payload: dict[str, Any] | None = Body(default=None),
    ledger: BookingLedger = Depends(get_booking_ledger),
) -> BookingResponse:
    """Append a booking to the Booking tab and return its id.

    Values are written as sent; only the required fields are checked.
    """
    booking = ledger.record_booking(payload or {})
    return BookingResponse(
        success=True,
        bookingID=booking.id,
        message="Booking created",
        bookingTime=booking.bookingTime,
    )
