from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from multidict import CIMultiDictProxy

if TYPE_CHECKING:
    from session.session import Session


@dataclass
class SessionResponse:
    """Session 을 통해 완료된 요청/응답 한 쌍"""

    status: int
    data: str
    headers: CIMultiDictProxy[str]
    url: str
    session: "Session" = field(repr=False, compare=False)

    @property
    def set_cookies(self) -> list[str]:
        """응답의 Set-Cookie 헤더 값 목록 (헤더 순서 유지)"""
        return self.headers.getall("Set-Cookie", [])

    @property
    def location(self) -> str | None:
        """리다이렉트 처리를 위한 Location 헤더 (내부에서는 사용하지 않음)"""
        return self.headers.get("Location")

    async def save_session(self) -> None:
        """
        이 응답의 Set-Cookie 로 세션 쿠키를 교체하고 저장합니다.

        호출 여부와 시점은 호출자가 결정합니다. 로그인 실패 응답이나 중간
        리다이렉트 응답처럼 신뢰할 수 없는 응답이라면 호출하지 않으면 됩니다.
        같은 응답으로 여러 번 호출해도 같은 쿠키 목록이 저장됩니다.

        Raises:
            SetCookieParseError: Set-Cookie 값을 해석할 수 없는 경우
        """
        cookies = self.session.cookie_factory.convert_set_cookies_to_cookie_array(
            self.set_cookies
        )
        await self.session.save_session_from_cookies(cookies)
