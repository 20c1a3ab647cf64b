"""Setup - 설정, 로깅, 의존성 조립."""

from valet_location.setup.config import Settings, get_settings
from valet_location.setup.dependencies import build_location_service

__all__ = ["Settings", "build_location_service", "get_settings"]
