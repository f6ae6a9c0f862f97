# -*- coding: utf-8 -*-
import logging
import sys
from pathlib import Path

from quizcert.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(log_dir: Path | None = None) -> None:
    """로깅 설정 (개발: DEBUG 콘솔, 프로덕션: INFO 콘솔 + 파일)"""
    global _configured
    log_level = logging.DEBUG if settings.environment == "development" else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 재호출 시 핸들러 중복 방지
    if _configured:
        return
    _configured = True

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if settings.environment == "production":
        log_dir = log_dir or Path("/app/logs")
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "quizcert.log", encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.INFO)
        root_logger.addHandler(file_handler)

    # 서드파티 라이브러리 로그 소음 줄이기
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)
