import logging

from booker.exceptions.custom import RoundTripMismatchError
from booker.schemas.booking import Booking, BookingInfo
from booker.schemas.responses import RoundTripResult
from booker.services.restful_booker import RestfulBookerService

logger = logging.getLogger(__name__)


class RoundTripService:
    def __init__(self, booker: RestfulBookerService):
        self._booker = booker

    async def create_booking(self, booking: Booking) -> BookingInfo:
        return await self._booker.create_booking(booking)

    async def verify_round_trip(self, booking: Booking) -> RoundTripResult:
        """POST the booking, GET it back by id and compare with the echoed copy."""
        info = await self.create_booking(booking)
        fetched = await self._booker.get_booking(info.bookingid)

        result = RoundTripResult(
            bookingid=info.bookingid,
            created=info.booking,
            fetched=fetched,
            mismatches=info.booking.diff(fetched),
        )
        if result.matched:
            logger.info("Booking %d round-trip matched", info.bookingid)
        else:
            logger.warning(
                "Booking %d round-trip mismatch on %d field(s)",
                info.bookingid,
                len(result.mismatches),
            )
        return result

    async def assert_round_trip(self, booking: Booking) -> RoundTripResult:
        result = await self.verify_round_trip(booking)
        if not result.matched:
            raise RoundTripMismatchError(result)
        return result
