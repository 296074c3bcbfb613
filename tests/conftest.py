import httpx
import pytest

from booker.fixtures import default_booking
from booker.services.restful_booker import RestfulBookerService

BASE_URL = "https://booker.test"


@pytest.fixture
def booking():
    return default_booking()


@pytest.fixture
async def client():
    async with httpx.AsyncClient() as c:
        yield c


@pytest.fixture
def booker(client):
    return RestfulBookerService(client, BASE_URL)
