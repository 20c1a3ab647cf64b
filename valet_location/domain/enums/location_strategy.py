"""LocationStrategy Enum."""

from enum import Enum


class LocationStrategy(str, Enum):
    """동시에 경주하는 위치 획득 전략."""

    COARSE = "coarse"
    """네트워크 기반 (빠름, 정확도 낮음)."""

    PRECISE = "precise"
    """위성 기반 (느림, 정확도 높음)."""

    @property
    def high_accuracy(self) -> bool:
        return self is LocationStrategy.PRECISE
