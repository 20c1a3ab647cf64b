"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
호스트 앱이 이미 로깅을 구성했다면 호출하지 않아도 됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from valet_location.setup.config import Settings, get_settings

# 재호출 시 팩토리가 중첩되지 않도록 최초 팩토리를 기준으로 감쌈
_base_record_factory = logging.getLogRecordFactory()

# 측위 대기/타이머로 디버그 로그가 많은 라이브러리
NOISY_LOGGERS = ("asyncio",)


def setup_logging(settings: Settings | None = None, level: str | int | None = None) -> None:
    """로깅 설정.

    Args:
        settings: 서비스 메타데이터/로그 레벨 출처 (None이면 환경 변수 기반 싱글톤)
        level: settings.log_level 대신 사용할 레벨
    """
    settings = settings or get_settings()
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level if level is not None else settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _base_record_factory(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_logger.level, logging.WARNING))
