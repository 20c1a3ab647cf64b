"""Test fixtures for location tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from valet_location.application.acquisition.dto import AcquisitionOptions
from valet_location.domain.enums import PermissionKind
from valet_location.tests.factories import FakePermissionProvider, FakePositionProvider


@pytest.fixture
def position_provider() -> FakePositionProvider:
    """스크립트 기반 PositionProvider."""
    return FakePositionProvider()


@pytest.fixture
def permission_provider() -> FakePermissionProvider:
    """FINE 권한이 이미 허용된 PermissionProvider."""
    return FakePermissionProvider(granted={PermissionKind.FINE_LOCATION})


@pytest.fixture
def settings_launcher() -> AsyncMock:
    """SettingsLauncher mock."""
    launcher = AsyncMock()
    launcher.open_location_settings = AsyncMock(return_value=None)
    launcher.open_app_settings = AsyncMock(return_value=None)
    return launcher


@pytest.fixture
def fast_options() -> AcquisitionOptions:
    """밀리초 단위로 축소한 테스트용 옵션 (마감 0.5초)."""
    return AcquisitionOptions(
        timeout_ms=500,
        max_age_ms=60_000,
        acceptable_accuracy_m=100.0,
        retry_count=0,
    )
