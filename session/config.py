from pathlib import Path

import environ

env = environ.Env()


class HttpClientConfig:
    """Shared HTTP client configuration."""

    # 모든 요청에 기본으로 붙는 Accept 헤더
    ACCEPT = "text/html"

    # 전체 요청 타임아웃(초). 미설정 시 aiohttp 기본값을 따름
    TIMEOUT = env.float("HTTP_CLIENT_TIMEOUT", default=None)


class CookieStoreConfig:
    """Cookie store configuration."""

    COOKIE_FILE = env("SESSION_COOKIE_FILE", default="cookies.json")


class LogConfig:
    """Logging configuration."""

    LOG_LEVEL = env("SESSION_LOG_LEVEL", default="INFO")
    LOG_DIR = env(
        "SESSION_LOG_DIR",
        default=str(Path(__file__).resolve().parent.parent / "logs"),
    )
    CONSOLE_LEVEL = env("SESSION_LOG_CONSOLE_LEVEL", default="INFO")
    FILE_LEVEL = env("SESSION_LOG_FILE_LEVEL", default="DEBUG")
    # 일 단위 로그 파일 보관 개수
    BACKUP_COUNT = env.int("SESSION_LOG_BACKUP_COUNT", default=30)
