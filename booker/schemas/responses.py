from pydantic import BaseModel

from booker.schemas.booking import Booking, FieldMismatch


class RoundTripResult(BaseModel):
    bookingid: int
    created: Booking  # echoed by POST /booking
    fetched: Booking  # returned by GET /booking/{id}
    mismatches: list[FieldMismatch] = []

    @property
    def matched(self) -> bool:
        return not self.mismatches
