"""Logging 테스트."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import ecs_logging

from valet_location.setup.config import Settings, get_settings
from valet_location.setup.logging import setup_logging


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def setup_method(self) -> None:
        """테스트 전 설정."""
        get_settings.cache_clear()
        self._factory = logging.getLogRecordFactory()

    def teardown_method(self) -> None:
        """테스트 후 정리."""
        # 로깅 상태 복원
        logging.setLogRecordFactory(self._factory)
        logging.getLogger("asyncio").setLevel(logging.NOTSET)
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
        get_settings.cache_clear()

    def test_setup_logging_configures_root_logger(self) -> None:
        """루트 로거 설정 확인."""
        with patch.dict(os.environ, {"VALET_LOCATION_LOG_LEVEL": "DEBUG"}, clear=True):
            setup_logging()

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, ecs_logging.StdlibFormatter)

    def test_setup_logging_adds_service_metadata(self) -> None:
        """서비스 메타데이터 추가 확인."""
        env_vars = {
            "VALET_LOCATION_SERVICE_NAME": "test-location",
            "VALET_LOCATION_SERVICE_VERSION": "1.2.3",
            "VALET_LOCATION_ENVIRONMENT": "test",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            setup_logging()

        record = logging.getLogger("test").makeRecord(
            "test",
            logging.INFO,
            "test.py",
            1,
            "test message",
            (),
            None,
        )

        assert record.service["name"] == "test-location"
        assert record.service["version"] == "1.2.3"
        assert record.service["environment"] == "test"

    def test_setup_logging_replaces_handlers(self) -> None:
        """재호출해도 핸들러는 하나."""
        with patch.dict(os.environ, {}, clear=True):
            setup_logging()
            setup_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_explicit_settings_and_level(self) -> None:
        """명시한 settings/level 우선."""
        settings = Settings(service_name="valet-app", log_level="INFO")

        setup_logging(settings, level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG
        record = logging.getLogger("test").makeRecord(
            "test", logging.INFO, "test.py", 1, "msg", (), None
        )
        assert record.service["name"] == "valet-app"

    def test_reconfigure_uses_latest_settings(self) -> None:
        """재설정하면 마지막 설정의 메타데이터만 적용."""
        setup_logging(Settings(environment="staging"))
        setup_logging(Settings(environment="prod"))

        record = logging.getLogger("test").makeRecord(
            "test", logging.INFO, "test.py", 1, "msg", (), None
        )
        assert record.service["environment"] == "prod"

    def test_asyncio_logger_quieted(self) -> None:
        """asyncio 디버그 로그는 WARNING 이상만."""
        setup_logging(Settings(log_level="DEBUG"))

        assert logging.getLogger("asyncio").level == logging.WARNING
