"""Pytest fixtures for session tests."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from modules.cookie_store.memory.store import MemoryCookieStoreFactory
from modules.http.client import reset_http_client
from session.tests.fakes import FakeHttpClient, FakeResponse


@pytest.fixture
def fake_client() -> FakeHttpClient:
    """Fake HTTP client for testing."""
    return FakeHttpClient()


@pytest.fixture
def cookie_factory() -> MemoryCookieStoreFactory:
    """Memory cookie factory pre-populated with stored cookies."""
    return MemoryCookieStoreFactory(["a=1", "b=2", "c=3"])


@pytest.fixture
def set_cookie_response() -> FakeResponse:
    """Response issuing two cookies."""
    return FakeResponse(
        status=200,
        body="<html>ok</html>",
        headers=[
            ("Content-Type", "text/html"),
            ("Set-Cookie", "a=1; Path=/; HttpOnly"),
            ("Set-Cookie", "b=2; Expires=Wed, 21 Oct 2026 07:28:00 GMT"),
        ],
    )


async def _echo(request: web.Request) -> web.Response:
    return web.json_response(
        {
            "method": request.method,
            "cookie": request.headers.get("Cookie"),
            "accept": request.headers.get("Accept"),
            "trace": request.headers.get("X-Trace"),
            "body": await request.text(),
        }
    )


async def _latin1(request: web.Request) -> web.Response:
    # charset 선언 없는 non-UTF-8 HTML
    return web.Response(body=b"caf\xe9", content_type="text/html")


async def _login(request: web.Request) -> web.Response:
    response = web.Response(text="<html>welcome</html>", content_type="text/html")
    response.headers.add("Set-Cookie", "a=1; Path=/")
    response.headers.add("Set-Cookie", "b=2; HttpOnly")
    return response


@pytest_asyncio.fixture
async def web_server():
    """요청을 되돌려 주는 실제 aiohttp 테스트 서버."""
    app = web.Application()
    app.router.add_get("/echo", _echo)
    app.router.add_post("/echo", _echo)
    app.router.add_get("/latin1", _latin1)
    app.router.add_post("/login", _login)

    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest_asyncio.fixture
async def shared_http_client():
    """테스트마다 공유 HTTP 클라이언트를 새로 만들고 닫습니다."""
    await reset_http_client()
    yield
    await reset_http_client()
