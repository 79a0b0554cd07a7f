import logging
import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ..errors import ValidationError
from ..sheets.client import GoogleSheetsClient
from ..sheets.models import (
    BOOKING_ID_RANGE,
    BOOKING_REQUIRED_FIELDS,
    BOOKING_TAB,
    Booking,
    sheet_range,
)
from ..timestamps import DEFAULT_TIMEZONE, now_string

logger = logging.getLogger(__name__)


def _parse_id(cell: Any) -> int | float | None:
    """Read a cell as a positive id, or None when it is not one"""
    if cell is None or cell == "":
        return None
    try:
        value = float(cell)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return int(value) if value.is_integer() else value


def next_id_from_column(column: Iterable[list[Any]]) -> int | float:
    """Compute max(id) + 1 over an id column whose first row is the header"""
    ids = []
    for row in list(column)[1:]:
        parsed = _parse_id(row[0] if row else None)
        if parsed is not None:
            ids.append(parsed)
    return max(ids) + 1 if ids else 1


class BookingLedger:
    """Appends bookings to the Booking tab with sequential ids

    Id assignment reads the id column and then appends, with nothing holding
    the two steps together. Two concurrent submissions can get the same id,
    and so can any submission made while the id column cannot be read, since
    that case falls back to id 1.
    """

    def __init__(
        self,
        sheets_client: GoogleSheetsClient,
        timezone: str = DEFAULT_TIMEZONE,
        clock: Callable[[str], str] = now_string,
    ):
        self.sheets_client = sheets_client
        self.timezone = timezone
        self.clock = clock

    def next_booking_id(self) -> int | float:
        """Return one past the largest id in the Booking tab, or 1"""
        try:
            column = self.sheets_client.read_range(BOOKING_ID_RANGE)
        except Exception:
            logger.exception("Failed to read booking ids, falling back to id 1")
            return 1
        return next_id_from_column(column)

    @staticmethod
    def validate(payload: Mapping[str, Any]) -> None:
        missing = [field for field in BOOKING_REQUIRED_FIELDS if not payload.get(field)]
        if missing:
            raise ValidationError(
                "Missing required fields",
                details=f"Required: {', '.join(BOOKING_REQUIRED_FIELDS)} (missing: {', '.join(missing)})",
            )

    def record_booking(self, payload: Mapping[str, Any]) -> Booking:
        """Validate, number and append one booking"""
        self.sheets_client.ensure_configured()
        self.validate(payload)

        booking = Booking(
            id=self.next_booking_id(),
            sessionID=payload["sessionID"],
            studentName=payload["studentName"],
            studentEmail=payload["studentEmail"],
            studentContact=payload["studentContact"],
            studentNumber=payload.get("studentNumber"),
            cost=payload.get("cost"),
            bookingNote=payload.get("bookingNote"),
            bookingTime=self.clock(self.timezone),
        )
        self.sheets_client.append_row(sheet_range(BOOKING_TAB, "A:I"), booking.to_row())
        logger.info(f"Recorded booking {booking.id} for session {booking.sessionID}")
        return booking
