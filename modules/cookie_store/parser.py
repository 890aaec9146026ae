import re
from collections.abc import Iterable

from modules.cookie_store.exceptions import SetCookieParseError

# RFC 6265 cookie-name (token) 에 허용되는 문자
COOKIE_NAME_PATTERN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def convert_set_cookies_to_cookie_array(
    raw_set_cookie_headers: Iterable[str],
) -> list[str]:
    """
    Set-Cookie 헤더 값 목록을 "name=value" 문자열 목록으로 변환합니다.

    Path, Expires, HttpOnly 등 속성은 버리고 첫 번째 name=value 쌍만 남깁니다.
    순서는 헤더 순서를 그대로 따르며, 같은 이름이 여러 번 나와도 모두 유지합니다.

    Args:
        raw_set_cookie_headers: 응답의 Set-Cookie 헤더 값 목록

    Returns:
        "name=value" 형식의 쿠키 문자열 목록

    Raises:
        TypeError: 목록 대신 단일 문자열이 전달된 경우
        SetCookieParseError: 해석할 수 없는 헤더 값이 포함된 경우
    """
    if isinstance(raw_set_cookie_headers, (str, bytes)):
        raise TypeError(
            "Expected a sequence of Set-Cookie values, got a single string"
        )

    return [_parse_set_cookie(header) for header in raw_set_cookie_headers]


def _parse_set_cookie(header: str) -> str:
    if not isinstance(header, str):
        raise SetCookieParseError(header, "Set-Cookie value must be a string")

    pair = header.split(";", 1)[0]
    name, sep, value = pair.partition("=")
    name = name.strip()

    if not sep:
        raise SetCookieParseError(header, "Missing '=' in cookie pair")
    if not name:
        raise SetCookieParseError(header, "Empty cookie name")
    if not COOKIE_NAME_PATTERN.match(name):
        raise SetCookieParseError(header, "Invalid cookie name")

    return f"{name}={value.strip()}"
