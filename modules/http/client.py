import asyncio
import logging

import aiohttp

from session.config import HttpClientConfig

logger = logging.getLogger(__name__)

# 모듈 레벨 싱글톤 인스턴스
_client: aiohttp.ClientSession | None = None
_lock: asyncio.Lock | None = None


def _get_lock() -> asyncio.Lock:
    global _lock
    if _lock is None:
        _lock = asyncio.Lock()
    return _lock


def _create_client(config: type[HttpClientConfig]) -> aiohttp.ClientSession:
    """공유 aiohttp 클라이언트를 생성합니다.

    쿠키는 Session 이 직접 Cookie 헤더로 관리하므로 aiohttp 의 cookie jar 는
    DummyCookieJar 로 비활성화합니다.
    """
    timeout = (
        aiohttp.ClientTimeout(total=config.TIMEOUT)
        if config.TIMEOUT is not None
        else None
    )
    kwargs = {"timeout": timeout} if timeout is not None else {}
    client = aiohttp.ClientSession(
        headers={"Accept": config.ACCEPT},
        cookie_jar=aiohttp.DummyCookieJar(),
        **kwargs,
    )
    logger.info(f"Shared HTTP client created (Accept: {config.ACCEPT})")
    return client


async def get_http_client(
    config: type[HttpClientConfig] | None = None,
) -> aiohttp.ClientSession:
    """글로벌 싱글톤 HTTP 클라이언트 반환.

    최초 호출 시에만 클라이언트를 생성하며, 동시에 여러 호출이 들어와도
    단 하나의 인스턴스만 생성됩니다.

    Args:
        config: HttpClientConfig 클래스 (DI 지원, 기본값: HttpClientConfig)

    Returns:
        aiohttp.ClientSession 싱글톤 인스턴스
    """
    global _client
    if _client is not None:
        return _client

    async with _get_lock():
        if _client is None:
            _client = _create_client(config or HttpClientConfig)
    return _client


async def reset_http_client() -> None:
    """싱글톤 인스턴스 리셋 (테스트 및 종료용).

    기존 연결을 닫고 싱글톤 인스턴스를 None으로 초기화합니다.
    """
    global _client, _lock
    client, _client = _client, None
    _lock = None
    if client is not None:
        await client.close()
        logger.info("Shared HTTP client closed")
