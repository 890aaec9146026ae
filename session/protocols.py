from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

from multidict import CIMultiDictProxy


class HttpResponse(Protocol):
    """HTTP 응답을 위한 프로토콜."""

    status: int
    headers: CIMultiDictProxy[str]

    @property
    def url(self) -> Any: ...

    async def text(self, errors: str = "strict") -> str: ...


class HttpClient(Protocol):
    """HTTP 클라이언트를 위한 프로토콜 (aiohttp.ClientSession 호환)."""

    def get(
        self,
        url: str,
        *,
        headers: Any = None,
        **kwargs: Any,
    ) -> AbstractAsyncContextManager[HttpResponse]:
        """
        HTTP GET 요청을 수행합니다.

        Args:
            url: 요청 URL
            headers: 요청 헤더
            **kwargs: 클라이언트에 그대로 전달되는 추가 옵션

        Returns:
            응답 객체를 돌려주는 async context manager
        """
        ...

    def post(
        self,
        url: str,
        *,
        data: Any = None,
        json: Any = None,
        headers: Any = None,
        **kwargs: Any,
    ) -> AbstractAsyncContextManager[HttpResponse]:
        """
        HTTP POST 요청을 수행합니다.

        Args:
            url: 요청 URL
            data: 요청 본문 (raw)
            json: 요청 본문 (JSON)
            headers: 요청 헤더
            **kwargs: 클라이언트에 그대로 전달되는 추가 옵션

        Returns:
            응답 객체를 돌려주는 async context manager
        """
        ...
