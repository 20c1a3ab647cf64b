"""Config 테스트."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from valet_location.setup.config import Settings, get_settings


class TestSettings:
    """Settings 테스트."""

    def test_settings_defaults(self) -> None:
        """기본값 확인."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.service_name == "valet-location"
        assert settings.default_timeout_ms == 20_000
        assert settings.default_max_age_ms == 60_000
        assert settings.default_acceptable_accuracy_m == 100.0
        assert settings.default_retry_count == 1
        assert settings.coarse_timeout_ms == 12_000
        assert settings.retry_backoff_ms == 1000
        assert settings.services_probe_timeout_ms == 1000
        assert settings.background_permission_min_api_level == 29
        assert settings.platform_api_level is None
        assert settings.watch_distance_filter_m == 10.0
        assert settings.watch_interval_ms == 5000
        assert settings.watch_fastest_interval_ms == 2000
        assert settings.metrics_enabled is False

    def test_settings_with_custom_values(self) -> None:
        """커스텀 값으로 Settings 생성."""
        settings = Settings(
            default_timeout_ms=5000,
            retry_backoff_ms=250,
            platform_api_level=28,
            environment="prod",
        )

        assert settings.default_timeout_ms == 5000
        assert settings.retry_backoff_ms == 250
        assert settings.platform_api_level == 28
        assert settings.environment == "prod"

    def test_invalid_values_rejected(self) -> None:
        """범위를 벗어난 값은 ValidationError."""
        with pytest.raises(ValidationError):
            Settings(default_timeout_ms=0)
        with pytest.raises(ValidationError):
            Settings(default_retry_count=-1)

    def test_default_options(self) -> None:
        """default_options()는 설정 기본값으로 옵션 생성."""
        settings = Settings(
            default_timeout_ms=8000,
            default_max_age_ms=1000,
            default_acceptable_accuracy_m=50.0,
            default_retry_count=3,
        )

        options = settings.default_options()

        assert options.timeout_ms == 8000
        assert options.max_age_ms == 1000
        assert options.acceptable_accuracy_m == 50.0
        assert options.retry_count == 3
        assert options.request_background is False
        assert options.alert_on_failure is False


class TestGetSettings:
    """get_settings 함수 테스트."""

    def setup_method(self) -> None:
        get_settings.cache_clear()

    def teardown_method(self) -> None:
        get_settings.cache_clear()

    def test_get_settings_from_env(self) -> None:
        """VALET_LOCATION_ 접두사 환경 변수에서 설정 로드."""
        env_vars = {
            "VALET_LOCATION_DEFAULT_TIMEOUT_MS": "15000",
            "VALET_LOCATION_RETRY_BACKOFF_MS": "500",
            "VALET_LOCATION_METRICS_ENABLED": "true",
            "VALET_LOCATION_PLATFORM_API_LEVEL": "33",
            "VALET_LOCATION_LOG_LEVEL": "DEBUG",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            settings = get_settings()

        assert settings.default_timeout_ms == 15000
        assert settings.retry_backoff_ms == 500
        assert settings.metrics_enabled is True
        assert settings.platform_api_level == 33
        assert settings.log_level == "DEBUG"

    def test_unprefixed_env_ignored(self) -> None:
        """접두사 없는 환경 변수는 무시."""
        with patch.dict(os.environ, {"DEFAULT_TIMEOUT_MS": "1"}, clear=True):
            settings = get_settings()

        assert settings.default_timeout_ms == 20_000

    def test_get_settings_cached(self) -> None:
        """설정 캐싱 확인."""
        with patch.dict(os.environ, {}, clear=True):
            settings1 = get_settings()
            settings2 = get_settings()

        assert settings1 is settings2
