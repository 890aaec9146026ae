import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from session.config import LogConfig

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s - %(name)s - [%(levelname)s] - %(funcName)s:%(lineno)d - %(message)s"
)


def _level(name: str) -> int:
    return getattr(logging, name.upper())


def _build_handlers(
    log_file: Path, config: type[LogConfig]
) -> list[logging.Handler]:
    """콘솔 / 일 단위 회전 파일 핸들러를 설정값에 맞춰 생성합니다."""
    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(config.CONSOLE_LEVEL))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=config.BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(_level(config.FILE_LEVEL))
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))

    return [console_handler, file_handler]


def setup_logger(
    name: str = "session", config: type[LogConfig] | None = None
) -> logging.Logger:
    """Setup logger for session and cookie store modules.

    Args:
        name: 설정할 로거 이름 (기본값: "session")
        config: LogConfig 클래스 (DI 지원, 기본값: LogConfig)

    Returns:
        Configured logger instance
    """
    config = config or LogConfig
    logger = logging.getLogger(name)
    logger.setLevel(_level(config.LOG_LEVEL))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    log_dir = Path(config.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    for handler in _build_handlers(log_dir / f"{name}.log", config):
        logger.addHandler(handler)

    return logger
