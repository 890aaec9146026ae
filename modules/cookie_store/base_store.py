import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

import sentry_sdk

from modules.cookie_store.parser import convert_set_cookies_to_cookie_array

logger = logging.getLogger(__name__)


class CookieStore(ABC):
    """
    하나의 세션이 사용하는 쿠키 목록("name=value" 문자열)을 보관하는 추상 기본 클래스.
    메모리 상의 목록을 소유하고, 영구 저장은 각 구현체의 _load / _save 에 위임합니다.
    """

    def __init__(self) -> None:
        self._cookies: list[str] = []

    def get(self) -> list[str]:
        """
        현재 쿠키 목록을 반환합니다. 저장된 순서를 그대로 유지합니다.

        반환값:
            쿠키 문자열 목록의 복사본
        """
        return list(self._cookies)

    def set(self, cookies: Iterable[str]) -> None:
        """
        쿠키 목록 전체를 교체합니다 (병합하지 않음).

        매개변수:
            cookies: 새 쿠키 문자열 목록

        예외:
            TypeError: 문자열이 아닌 항목이 포함된 경우
        """
        if isinstance(cookies, (str, bytes)):
            raise TypeError("Expected a sequence of cookie strings")
        new_cookies = list(cookies)
        for cookie in new_cookies:
            if not isinstance(cookie, str):
                raise TypeError(f"Cookie must be a string, got {cookie!r}")
        self._cookies = new_cookies

    def empty(self) -> None:
        """쿠키 목록을 비웁니다."""
        self._cookies = []

    async def load_config_file(self) -> None:
        """영구 저장소의 내용으로 메모리 상의 쿠키 목록을 교체합니다."""
        self._cookies = list(await self._load())
        logger.debug(f"Loaded {len(self._cookies)} cookies from {self!r}")

    async def save_config_file(self) -> None:
        """
        현재 쿠키 목록을 영구 저장소에 기록합니다. 기존 내용은 덮어씁니다.

        예외:
            저장 실패 시 구현체의 예외를 그대로 전파합니다.
        """
        try:
            await self._save(list(self._cookies))
        except Exception as e:
            logger.error(f"Failed to save cookies to {self!r}: {e}")
            sentry_sdk.capture_exception(e)
            raise
        logger.debug(f"Saved {len(self._cookies)} cookies to {self!r}")

    @abstractmethod
    async def _load(self) -> list[str]:
        """
        영구 저장소에서 쿠키 목록을 읽어오는 추상 메서드.
        각 구체적인 하위 클래스에서 구현되어야 합니다.
        """
        pass

    @abstractmethod
    async def _save(self, cookies: list[str]) -> None:
        """
        쿠키 목록을 영구 저장소에 기록하는 추상 메서드.
        각 구체적인 하위 클래스에서 구현되어야 합니다.

        매개변수:
            cookies: 기록할 쿠키 문자열 목록
        """
        pass


class CookieStoreFactory(ABC):
    """
    CookieStore 인스턴스를 만들어 주는 팩토리의 추상 기본 클래스.
    Session 은 이 팩토리만 알고 있으므로 저장 방식(파일, 메모리 등)을 바꿔도
    Session 로직은 그대로 유지됩니다.
    """

    @abstractmethod
    def _create_instance(self) -> CookieStore:
        """아직 로드되지 않은 CookieStore 인스턴스를 생성합니다."""
        pass

    async def create_loaded_instance(self) -> CookieStore:
        """
        영구 저장소에서 읽어온 쿠키로 채워진 CookieStore 를 생성합니다.

        반환값:
            로드가 끝난 CookieStore 인스턴스

        예외:
            로드 실패 시 예외를 그대로 전파합니다.
        """
        store = self._create_instance()
        await store.load_config_file()
        return store

    def convert_set_cookies_to_cookie_array(
        self, raw_set_cookie_headers: Iterable[str]
    ) -> list[str]:
        """Set-Cookie 헤더 값 목록을 "name=value" 목록으로 변환합니다."""
        return convert_set_cookies_to_cookie_array(raw_set_cookie_headers)
