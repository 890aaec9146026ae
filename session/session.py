import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from multidict import CIMultiDict, CIMultiDictProxy

from modules.cookie_store.base_store import CookieStore, CookieStoreFactory
from modules.http.client import get_http_client
from session.protocols import HttpClient, HttpResponse
from session.response import SessionResponse

logger = logging.getLogger(__name__)

COOKIE_SEPARATOR = "; "


class Session:
    """
    저장된 쿠키를 재사용하여 로그인된 상태로 요청을 보내는 세션.

    하나의 Session 은 하나의 인증 주체를 나타내며, 쿠키 저장소는 최초 사용 시점에
    로드되어 Session 이 살아있는 동안 캐시됩니다.
    """

    def __init__(
        self,
        cookie_factory: CookieStoreFactory,
        client: HttpClient | None = None,
    ):
        """
        Session 초기화

        Args:
            cookie_factory: CookieStore 를 생성할 팩토리
            client: 사용할 HTTP 클라이언트 (기본값: 공유 aiohttp 클라이언트)
        """
        self.cookie_factory = cookie_factory
        self._client = client
        self._cookies: CookieStore | None = None
        self._cookies_lock = asyncio.Lock()

    async def get_client(self) -> HttpClient:
        """주입된 클라이언트 또는 프로세스 공유 클라이언트를 반환합니다."""
        if self._client is not None:
            return self._client
        return await get_http_client()

    async def get_cookies(self) -> CookieStore:
        """
        이 세션의 CookieStore 를 반환합니다.

        최초 호출 시에만 저장소에서 로드하며, 동시에 여러 호출이 들어와도
        로드는 한 번만 수행됩니다.

        Returns:
            로드된 CookieStore 인스턴스

        Raises:
            로드 실패 시 저장소의 예외를 그대로 전파합니다.
        """
        if self._cookies is not None:
            return self._cookies

        async with self._cookies_lock:
            if self._cookies is None:
                self._cookies = await self.cookie_factory.create_loaded_instance()
        return self._cookies

    async def get(self, url: str, **options: Any) -> SessionResponse:
        """
        이 세션의 쿠키를 붙여 GET 요청을 보냅니다.

        Args:
            url: 요청 URL
            **options: HTTP 클라이언트에 그대로 전달되는 옵션 (headers, params 등)

        Returns:
            SessionResponse 객체
        """
        client = await self.get_client()
        request_options = await self._build_options(options)

        logger.debug(f"GET {url}")
        async with client.get(url, **request_options) as response:
            return await self._wrap_response(response)

    async def post(
        self, url: str, data: Any = None, **options: Any
    ) -> SessionResponse:
        """
        이 세션의 쿠키를 붙여 POST 요청을 보냅니다.

        Args:
            url: 요청 URL
            data: 요청 본문. dict / list 는 JSON 으로, 그 외는 그대로 전송
            **options: HTTP 클라이언트에 그대로 전달되는 옵션

        Returns:
            SessionResponse 객체
        """
        client = await self.get_client()
        request_options = await self._build_options(options)
        if data is not None:
            # data 인자가 본문을 결정하므로 호출자 옵션의 본문은 무시함
            request_options.pop("json", None)
            request_options.pop("data", None)
            body_key = "json" if isinstance(data, (dict, list)) else "data"
            request_options[body_key] = data

        logger.debug(f"POST {url}")
        async with client.post(url, **request_options) as response:
            return await self._wrap_response(response)

    async def save_session_from_cookies(self, cookies: Iterable[str]) -> None:
        """
        세션 쿠키 전체를 주어진 목록으로 교체하고 즉시 저장합니다.

        Args:
            cookies: "name=value" 형식의 쿠키 문자열 목록
        """
        await self._commit(cookies)

    async def remove_session(self) -> None:
        """세션 쿠키를 모두 지우고 빈 상태를 저장합니다 (복구 불가)."""
        await self._commit([])
        logger.info("Session cookies removed")

    async def _commit(self, cookies: Iterable[str]) -> None:
        """
        쿠키 목록을 교체하고 저장합니다. 저장에 실패하면 메모리 상의 목록도
        이전 상태로 되돌린 뒤 예외를 전파합니다.
        """
        session_cookies = await self.get_cookies()
        previous = session_cookies.get()
        session_cookies.set(cookies)
        try:
            await session_cookies.save_config_file()
        except Exception:
            session_cookies.set(previous)
            raise

    async def _build_options(self, options: dict[str, Any]) -> dict[str, Any]:
        if "cookies" in options:
            raise TypeError(
                "'cookies' option is not supported; "
                "the Cookie header is managed by the session"
            )

        cookies = await self.get_cookies()
        headers: CIMultiDict[str] = CIMultiDict(options.get("headers") or {})
        # 호출자가 넘긴 Cookie 헤더는 대소문자와 관계없이 덮어씀
        headers["Cookie"] = COOKIE_SEPARATOR.join(cookies.get())

        return {**options, "headers": headers}

    async def _wrap_response(self, response: HttpResponse) -> SessionResponse:
        # charset 이 없거나 잘못된 응답도 Set-Cookie 를 잃지 않도록 치환 디코딩
        data = await response.text(errors="replace")
        logger.debug(f"Response {response.status} from {response.url}")
        return SessionResponse(
            status=response.status,
            data=data,
            headers=CIMultiDictProxy(CIMultiDict(response.headers)),
            url=str(response.url),
            session=self,
        )
