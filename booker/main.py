import asyncio
import logging
import sys

import httpx

from booker.config import Settings
from booker.exceptions.custom import RestfulBookerError, RoundTripMismatchError
from booker.fixtures import default_booking
from booker.schemas.responses import RoundTripResult
from booker.services.restful_booker import RestfulBookerService
from booker.services.round_trip import RoundTripService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def run(settings: Settings) -> RoundTripResult:
    async with httpx.AsyncClient(timeout=settings.timeout) as client:
        booker = RestfulBookerService(client, settings.base_url)
        return await RoundTripService(booker).assert_round_trip(default_booking())


def main() -> int:
    settings = Settings()
    configure_logging(settings)

    try:
        result = asyncio.run(run(settings))
    except RoundTripMismatchError as exc:
        for mismatch in exc.result.mismatches:
            logger.error(
                "%s: posted %r, fetched %r",
                mismatch.field,
                mismatch.expected,
                mismatch.actual,
            )
        return 1
    except RestfulBookerError as exc:
        logger.error("Round-trip failed: %s (status=%s)", exc.message, exc.status_code)
        return 1

    logger.info("Round-trip OK for booking %d against %s", result.bookingid, settings.base_url)
    return 0
