"""Location Service Configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from valet_location.application.acquisition.dto import AcquisitionOptions


class Settings(BaseSettings):
    """위치 서브시스템 설정."""

    # Service
    service_name: str = "valet-location"
    service_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # 일회성 획득 기본값 (호출자 옵션이 필드 단위로 덮어씀)
    default_timeout_ms: int = Field(20_000, gt=0, description="전체 경주 마감 시간")
    default_max_age_ms: int = Field(60_000, ge=0, description="캐시 위치 허용 나이")
    default_acceptable_accuracy_m: float = Field(100.0, ge=0, description="즉시 수락 정확도")
    default_retry_count: int = Field(1, ge=0, description="첫 시도 이후 추가 시도 횟수")

    # Race / Retry
    coarse_timeout_ms: int = Field(12_000, gt=0, description="네트워크 전략 제공자 타임아웃 상한")
    retry_backoff_ms: int = Field(1000, ge=0, description="재시도 간 고정 대기")

    # Permission Gate
    services_probe_timeout_ms: int = Field(1000, gt=0, description="위치 서비스 프로브 타임아웃")
    prompt_settings_when_disabled: bool = True
    offer_settings_on_background_denial: bool = True
    background_permission_min_api_level: int = 29
    platform_api_level: int | None = Field(
        None,
        description="디바이스 API 레벨 (None이면 백그라운드 권한이 항상 필요하다고 간주)",
    )

    # Continuous Watch
    watch_distance_filter_m: float = Field(10.0, ge=0)
    watch_interval_ms: int = Field(5000, gt=0)
    watch_fastest_interval_ms: int = Field(2000, gt=0)

    # Observability
    metrics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_prefix="VALET_LOCATION_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    def default_options(self) -> AcquisitionOptions:
        """설정 기반 AcquisitionOptions 기본값."""
        return AcquisitionOptions(
            timeout_ms=self.default_timeout_ms,
            max_age_ms=self.default_max_age_ms,
            acceptable_accuracy_m=self.default_acceptable_accuracy_m,
            retry_count=self.default_retry_count,
        )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
