"""Acquisition Options DTO."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class AcquisitionOptions:
    """일회성 위치 획득 옵션.

    Attributes:
        timeout_ms: 전체 경주 마감 시간이자 정밀 전략의 제공자 타임아웃
        max_age_ms: 허용할 캐시 위치의 최대 나이
        acceptable_accuracy_m: 즉시 수락할 정확도 기준 (미터)
        retry_count: 첫 시도 이후 추가 시도 횟수
        request_background: 포그라운드 확인 후 백그라운드 권한도 요청할지
        alert_on_failure: 실패 시 사용자 안내 문구를 첨부할지
    """

    timeout_ms: int = 20_000
    max_age_ms: int = 60_000
    acceptable_accuracy_m: float = 100.0
    retry_count: int = 1
    request_background: bool = False
    alert_on_failure: bool = False

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise ValueError(f"Invalid timeout_ms: {self.timeout_ms}")
        if self.max_age_ms < 0:
            raise ValueError(f"Invalid max_age_ms: {self.max_age_ms}")
        if self.acceptable_accuracy_m < 0:
            raise ValueError(f"Invalid acceptable_accuracy_m: {self.acceptable_accuracy_m}")
        if self.retry_count < 0:
            raise ValueError(f"Invalid retry_count: {self.retry_count}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def explicit_fields(self) -> dict[str, Any]:
        """클래스 기본값과 다른 필드만 반환합니다."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) != f.default
        }

    def merge(
        self,
        overrides: AcquisitionOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> AcquisitionOptions:
        """기본값 위에 호출자 값을 필드 단위로 덮어씁니다.

        None 값은 "기본값 유지"로 취급합니다.
        옵션 객체는 클래스 기본값과 다른 필드만 덮어씁니다.

        Args:
            overrides: 다른 옵션 객체 또는 필드명 매핑
            **kwargs: 개별 필드 덮어쓰기 (overrides보다 우선)

        Returns:
            병합된 새 AcquisitionOptions

        Raises:
            TypeError: 알 수 없는 필드명
        """
        if isinstance(overrides, AcquisitionOptions):
            values: dict[str, Any] = overrides.explicit_fields()
        else:
            values = dict(overrides or {})
        values.update(kwargs)

        known = {f.name for f in dataclasses.fields(self)}
        unknown = set(values) - known
        if unknown:
            raise TypeError(f"Unknown acquisition option(s): {sorted(unknown)}")

        changes = {name: value for name, value in values.items() if value is not None}
        return dataclasses.replace(self, **changes)
