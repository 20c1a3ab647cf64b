"""Location Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Location:
    """디바이스 위치 (불변).

    위치 제공자 응답으로부터만 생성되며, 요청마다 만들어지고 버려집니다.

    Attributes:
        latitude: 위도
        longitude: 경도
        accuracy: 수평 정확도 반경 (미터, 제공자가 모르면 None)
        timestamp: 측위 시각
    """

    latitude: float
    longitude: float
    accuracy: float | None = None
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")
        if self.accuracy is not None and self.accuracy < 0:
            raise ValueError(f"Invalid accuracy: {self.accuracy}")

    def meets(self, acceptable_accuracy_m: float) -> bool:
        """정확도가 허용 기준 이내인지 확인합니다.

        정확도를 모르는 위치는 기준을 만족하지 않습니다.
        """
        return self.accuracy is not None and self.accuracy <= acceptable_accuracy_m

    def is_more_accurate_than(self, other: Location) -> bool:
        """다른 위치보다 정확한지 비교합니다.

        정확도는 양쪽 모두 있을 때만 비교 가능하며,
        정확도가 있는 쪽이 없는 쪽을 이깁니다.
        """
        if self.accuracy is None:
            return False
        if other.accuracy is None:
            return True
        return self.accuracy < other.accuracy
