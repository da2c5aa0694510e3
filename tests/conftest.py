from typing import AsyncGenerator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pagedview.services import catalog


@pytest.fixture
def numbers() -> Iterator[range]:
    """Register a 55-item "numbers" collection for the duration of a test."""
    items = range(1, 56)
    catalog.register_collection("numbers", items)
    yield items
    catalog.clear_collections()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from pagedview.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
