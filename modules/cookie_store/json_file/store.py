import json
import logging
import os
import tempfile
from pathlib import Path

from asgiref.sync import sync_to_async

from modules.cookie_store.base_store import CookieStore, CookieStoreFactory
from modules.cookie_store.exceptions import CookieFileFormatError
from session.config import CookieStoreConfig

logger = logging.getLogger(__name__)


class JsonFileCookieStore(CookieStore):
    """JSON 파일({"cookies": [...]})에 쿠키를 저장하는 CookieStore 구현체"""

    def __init__(self, path: str | os.PathLike[str]):
        super().__init__()
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileCookieStore(path={str(self.path)!r})"

    async def _load(self) -> list[str]:
        return await sync_to_async(self._read_file, thread_sensitive=False)()

    async def _save(self, cookies: list[str]) -> None:
        await sync_to_async(self._write_file, thread_sensitive=False)(cookies)

    def _read_file(self) -> list[str]:
        """
        쿠키 파일을 읽습니다.

        Returns:
            쿠키 문자열 목록. 파일이 없으면 빈 목록

        Raises:
            CookieFileFormatError: 파일 내용이 올바른 형식이 아닌 경우
            OSError: 파일을 읽을 수 없는 경우
        """
        if not self.path.exists():
            logger.debug(f"Cookie file not found, starting empty: {self.path}")
            return []

        try:
            content = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CookieFileFormatError(
                str(self.path), f"Invalid JSON ({e.msg})"
            ) from e

        if not isinstance(content, dict) or not isinstance(
            content.get("cookies"), list
        ):
            raise CookieFileFormatError(
                str(self.path), "Expected an object with a 'cookies' list"
            )

        cookies = content["cookies"]
        if not all(isinstance(cookie, str) for cookie in cookies):
            raise CookieFileFormatError(
                str(self.path), "Every cookie must be a string"
            )
        return cookies

    def _write_file(self, cookies: list[str]) -> None:
        # 임시 파일에 쓴 뒤 교체하여 중간에 실패해도 기존 파일이 깨지지 않도록 함
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"cookies": cookies}, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise


class JsonFileCookieStoreFactory(CookieStoreFactory):
    """JsonFileCookieStore 를 생성하는 팩토리"""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        config: type[CookieStoreConfig] | None = None,
    ) -> None:
        """
        Args:
            path: 쿠키 파일 경로 (기본값: config.COOKIE_FILE)
            config: CookieStoreConfig 클래스 (DI 지원, 기본값: CookieStoreConfig)
        """
        self.config = config or CookieStoreConfig
        self.path = Path(path if path is not None else self.config.COOKIE_FILE)

    def _create_instance(self) -> JsonFileCookieStore:
        return JsonFileCookieStore(self.path)
