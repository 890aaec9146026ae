from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from modules.http.client import reset_http_client


@pytest_asyncio.fixture(autouse=True)
async def clean_http_client():
    """테스트마다 공유 클라이언트를 초기화합니다."""
    await reset_http_client()
    yield
    await reset_http_client()


@pytest.fixture()
def mock_client_session() -> MagicMock:
    """Mock aiohttp.ClientSession instance."""
    mock_client = MagicMock()
    mock_client.close = AsyncMock()
    return mock_client
