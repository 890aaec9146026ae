class CookieStoreError(Exception):
    """쿠키 저장소 관련 기본 예외"""


class CookieFileFormatError(CookieStoreError):
    """저장된 쿠키 파일 형식이 올바르지 않을 때 발생하는 예외"""

    def __init__(self, path: str, message: str = "Invalid cookie file format"):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class SetCookieParseError(CookieStoreError, ValueError):
    """Set-Cookie 헤더 값을 해석할 수 없을 때 발생하는 예외"""

    def __init__(
        self,
        header: object,
        message: str = "Malformed Set-Cookie header",
    ):
        self.header = header
        self.message = message
        super().__init__(f"{message}: {header!r}")
