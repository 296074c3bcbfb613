import pytest
from pydantic import ValidationError

from booker.fixtures import default_booking
from booker.schemas.booking import Booking, BookingDates, BookingInfo


BOOKING_JSON = {
    "firstname": "John",
    "lastname": "Doe",
    "totalprice": 100,
    "depositpaid": True,
    "bookingdates": {"checkin": "2021-08-31", "checkout": "2021-09-10"},
    "additionalneeds": "Breakfast",
}


def test_dump_uses_wire_field_names():
    assert default_booking().model_dump(mode="json") == BOOKING_JSON


def test_validate_from_wire_json():
    booking = Booking.model_validate(BOOKING_JSON)
    assert booking == default_booking()
    assert booking.bookingdates.checkout == "2021-09-10"


def test_booking_info_wraps_booking():
    info = BookingInfo.model_validate({"bookingid": 42, "booking": BOOKING_JSON})
    assert info.bookingid == 42
    assert info.booking == default_booking()


def test_additionalneeds_optional():
    data = {k: v for k, v in BOOKING_JSON.items() if k != "additionalneeds"}
    assert Booking.model_validate(data).additionalneeds is None


def test_missing_field_rejected():
    data = {k: v for k, v in BOOKING_JSON.items() if k != "bookingdates"}
    with pytest.raises(ValidationError):
        Booking.model_validate(data)


def test_dates_not_checked_for_order():
    """checkin after checkout is accepted; ordering is the server's concern."""
    dates = BookingDates(checkin="2021-09-10", checkout="2021-08-31")
    assert dates.checkin > dates.checkout


def test_frozen():
    booking = default_booking()
    with pytest.raises(ValidationError):
        booking.firstname = "Jane"


def test_fixture_returns_fresh_instances():
    assert default_booking() is not default_booking()
    assert default_booking() == default_booking()


# --- diff ---


def test_diff_equal_bookings():
    assert default_booking().diff(default_booking()) == []


def test_diff_reports_top_level_field():
    other = default_booking().model_copy(update={"totalprice": 150})
    mismatches = default_booking().diff(other)
    assert len(mismatches) == 1
    assert mismatches[0].field == "totalprice"
    assert mismatches[0].expected == 100
    assert mismatches[0].actual == 150


def test_diff_reports_nested_dates_by_path():
    other = default_booking().model_copy(
        update={"bookingdates": BookingDates(checkin="2021-08-30", checkout="2021-09-10")}
    )
    mismatches = default_booking().diff(other)
    assert [m.field for m in mismatches] == ["bookingdates.checkin"]


def test_diff_ignores_key_order():
    reordered = dict(reversed(list(BOOKING_JSON.items())))
    assert Booking.model_validate(reordered).diff(default_booking()) == []
