from collections.abc import Iterable

from modules.cookie_store.base_store import CookieStore, CookieStoreFactory


class MemoryCookieStore(CookieStore):
    """프로세스 메모리를 영구 저장소로 사용하는 CookieStore 구현체"""

    def __init__(self, backing: list[str]):
        super().__init__()
        # 팩토리가 소유한 목록을 공유하여 저장 내용이 다음 로드에 반영됨
        self._backing = backing

    def __repr__(self) -> str:
        return f"MemoryCookieStore(cookies={len(self._backing)})"

    async def _load(self) -> list[str]:
        return list(self._backing)

    async def _save(self, cookies: list[str]) -> None:
        self._backing[:] = cookies


class MemoryCookieStoreFactory(CookieStoreFactory):
    """MemoryCookieStore 를 생성하는 팩토리"""

    def __init__(self, initial: Iterable[str] | None = None) -> None:
        self.saved: list[str] = list(initial or [])

    def _create_instance(self) -> MemoryCookieStore:
        return MemoryCookieStore(self.saved)
