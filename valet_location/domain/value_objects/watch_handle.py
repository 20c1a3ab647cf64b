"""WatchHandle Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WatchHandle:
    """연속 위치 구독 식별자.

    ContinuousWatcher가 발급하며, 핸들 하나당 OS 구독 하나에 대응합니다.
    """

    id: int

    def __str__(self) -> str:
        return f"watch-{self.id}"
