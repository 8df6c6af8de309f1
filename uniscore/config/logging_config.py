"""
로깅 설정
모듈별 로거는 setup_logger('<이름>') 으로 생성합니다.
"""
import logging
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER_NAME = "uniscore"


def setup_logging(level: Optional[str] = None) -> None:
    """루트 uniscore 로거에 핸들러/레벨 설정 (중복 핸들러 방지)"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def setup_logger(name: str) -> logging.Logger:
    """uniscore.<name> 로거 반환 (핸들러는 루트 로거 것을 사용)"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


setup_logging()
