import logging

import httpx
from pydantic import BaseModel, ValidationError

from booker.exceptions.custom import BookingDeserializationError, RestfulBookerError
from booker.schemas.booking import Booking, BookingInfo

logger = logging.getLogger(__name__)

_JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RestfulBookerService:
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    @property
    def booking_url(self) -> str:
        return f"{self._base_url}/booking"

    async def create_booking(self, booking: Booking) -> BookingInfo:
        resp = await self._send(
            "POST",
            self.booking_url,
            json=booking.model_dump(mode="json", exclude_none=True),
            headers=_JSON_HEADERS,
        )
        info = self._parse(resp, BookingInfo)
        logger.info("Created booking %d for %s %s", info.bookingid, booking.firstname, booking.lastname)
        return info

    async def get_booking(self, booking_id: int) -> Booking:
        resp = await self._send(
            "GET",
            f"{self.booking_url}/{booking_id}",
            headers={"Accept": "application/json"},
        )
        booking = self._parse(resp, Booking)
        logger.info("Fetched booking %d", booking_id)
        return booking

    async def ping(self) -> bool:
        """Health check. restful-booker answers 201 Created when it is up."""
        try:
            resp = await self._client.get(f"{self._base_url}/ping")
        except httpx.HTTPError:
            logger.warning("restful-booker ping failed at %s", self._base_url)
            return False
        return resp.status_code == 201

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise RestfulBookerError(f"{method} {url} failed: {exc}") from exc

        # Anything but exactly 200 is a failure, including other 2xx codes.
        if resp.status_code != 200:
            logger.error("%s %s returned %d", method, url, resp.status_code)
            raise RestfulBookerError(resp.text, status_code=resp.status_code)
        return resp

    @staticmethod
    def _parse(resp: httpx.Response, model: type[BaseModel]) -> BaseModel:
        try:
            return model.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.error("Unexpected %s body: %s", model.__name__, resp.text[:200])
            raise BookingDeserializationError(
                f"Could not read {model.__name__}: {exc.error_count()} error(s)",
                status_code=resp.status_code,
            ) from exc
