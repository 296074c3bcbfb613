from booker.schemas.booking import Booking, BookingDates


def default_booking() -> Booking:
    """A fresh copy of the reference booking for each caller."""
    return Booking(
        firstname="John",
        lastname="Doe",
        totalprice=100,
        depositpaid=True,
        bookingdates=BookingDates(checkin="2021-08-31", checkout="2021-09-10"),
        additionalneeds="Breakfast",
    )
