from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FieldMismatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str  # dotted path, e.g. "bookingdates.checkin"
    expected: str | int | bool | None
    actual: str | int | bool | None


class BookingDates(BaseModel):
    model_config = ConfigDict(frozen=True)

    checkin: str  # YYYY-MM-DD
    checkout: str


class Booking(BaseModel):
    model_config = ConfigDict(frozen=True)

    firstname: str
    lastname: str
    totalprice: int
    depositpaid: bool
    bookingdates: BookingDates
    additionalneeds: str | None = None

    def diff(self, other: Booking) -> list[FieldMismatch]:
        """Field-by-field comparison; nested dates are reported by dotted path."""
        return _diff(self.model_dump(), other.model_dump())


class BookingInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    bookingid: int
    booking: Booking


def _diff(expected: dict, actual: dict, prefix: str = "") -> list[FieldMismatch]:
    mismatches: list[FieldMismatch] = []
    for key, value in expected.items():
        other = actual.get(key)
        path = f"{prefix}{key}"
        if isinstance(value, dict) and isinstance(other, dict):
            mismatches.extend(_diff(value, other, prefix=f"{path}."))
        elif value != other:
            mismatches.append(FieldMismatch(field=path, expected=value, actual=other))
    return mismatches
