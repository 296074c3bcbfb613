from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from booker.schemas.responses import RoundTripResult


class RestfulBookerError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingDeserializationError(RestfulBookerError):
    pass


class RoundTripMismatchError(Exception):
    def __init__(self, result: RoundTripResult):
        self.result = result
        fields = ", ".join(m.field for m in result.mismatches)
        super().__init__(
            f"Booking {result.bookingid} differs after round-trip: {fields}"
        )
