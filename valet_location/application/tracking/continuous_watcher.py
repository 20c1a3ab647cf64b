"""Continuous Watcher - 연속 위치 구독 관리.

핸들 하나당 OS 구독 하나를 소비하는 태스크 하나를 둡니다.
일회성 획득의 single-flight 가드와 무관하게 동시에 실행될 수 있습니다.

전달 정책:
- 측위 결과는 그대로 Location으로 on_location에 전달
- 제공자 에러는 재시도/분류 없이 on_error에 전달
- 콜백 예외는 로그만 남기고 구독을 유지
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import TYPE_CHECKING, AsyncIterator, Callable

from valet_location.application.ports.metrics import LocationMetricsPort, NoOpLocationMetrics
from valet_location.application.ports.position_provider import (
    PositionProviderError,
    PositionUpdate,
    ProviderErrorCode,
)
from valet_location.domain.value_objects import Location, WatchHandle

if TYPE_CHECKING:
    from valet_location.application.ports import PositionProvider

logger = logging.getLogger(__name__)

LocationCallback = Callable[[Location], None]
ErrorCallback = Callable[[PositionProviderError], None]

DEFAULT_DISTANCE_FILTER_M = 10.0
DEFAULT_INTERVAL_MS = 5000
DEFAULT_FASTEST_INTERVAL_MS = 2000


class ContinuousWatcher:
    """연속 위치 구독 관리자."""

    def __init__(
        self,
        position_provider: "PositionProvider",
        metrics: LocationMetricsPort | None = None,
        distance_filter_m: float = DEFAULT_DISTANCE_FILTER_M,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        fastest_interval_ms: int = DEFAULT_FASTEST_INTERVAL_MS,
    ) -> None:
        self._provider = position_provider
        self._metrics = metrics or NoOpLocationMetrics()
        self._distance_filter_m = distance_filter_m
        self._interval_ms = interval_ms
        self._fastest_interval_ms = fastest_interval_ms
        self._ids = itertools.count(1)
        self._watches: dict[WatchHandle, asyncio.Task[None]] = {}

    @property
    def active_count(self) -> int:
        return len(self._watches)

    def is_active(self, handle: WatchHandle) -> bool:
        return handle in self._watches

    def watch(
        self,
        on_location: LocationCallback,
        on_error: ErrorCallback,
        high_accuracy: bool = False,
    ) -> WatchHandle:
        """연속 위치 구독을 시작합니다.

        실행 중인 이벤트 루프 안에서 호출해야 합니다.

        Args:
            on_location: 위치 갱신 콜백
            on_error: 제공자 에러 콜백
            high_accuracy: 위성 기반 정확도 모드

        Returns:
            WatchHandle (clear 시 사용)
        """
        handle = WatchHandle(next(self._ids))
        stream = self._provider.watch(
            high_accuracy=high_accuracy,
            distance_filter_m=self._distance_filter_m,
            interval_ms=self._interval_ms,
            fastest_interval_ms=self._fastest_interval_ms,
        )
        task = asyncio.get_running_loop().create_task(
            self._consume(handle, stream, on_location, on_error),
            name=str(handle),
        )
        self._watches[handle] = task
        self._metrics.track_watch_event("started")
        logger.info(
            "location_watch_started",
            extra={"watch": str(handle), "high_accuracy": high_accuracy},
        )
        return handle

    def cancel(self, handle: WatchHandle) -> None:
        """구독을 해제합니다. 이미 해제되었거나 모르는 핸들이면 아무 일도 없습니다."""
        task = self._watches.pop(handle, None)
        if task is None:
            return
        task.cancel()
        self._metrics.track_watch_event("cancelled")
        logger.info("location_watch_cancelled", extra={"watch": str(handle)})

    def cancel_all(self) -> None:
        """모든 구독을 해제합니다."""
        for handle in list(self._watches):
            self.cancel(handle)

    async def aclose(self) -> None:
        """모든 구독을 해제하고 소비 태스크가 끝날 때까지 기다립니다."""
        tasks = list(self._watches.values())
        self.cancel_all()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _consume(
        self,
        handle: WatchHandle,
        stream: AsyncIterator[PositionUpdate],
        on_location: LocationCallback,
        on_error: ErrorCallback,
    ) -> None:
        try:
            async for update in stream:
                if isinstance(update, PositionProviderError):
                    self._deliver_error(handle, on_error, update)
                    continue
                try:
                    location = Location(
                        latitude=update.latitude,
                        longitude=update.longitude,
                        accuracy=update.accuracy,
                        timestamp=update.timestamp,
                    )
                except ValueError as e:
                    error = PositionProviderError(ProviderErrorCode.POSITION_UNAVAILABLE, str(e))
                    self._deliver_error(handle, on_error, error)
                    continue
                self._deliver_location(handle, on_location, location)
        except PositionProviderError as e:
            # 스트림 자체가 실패하면 전달 후 구독 종료
            self._deliver_error(handle, on_error, e)
        except Exception:
            logger.exception("location_watch_stream_failed", extra={"watch": str(handle)})
        finally:
            aclose = getattr(stream, "aclose", None)
            if aclose is not None:
                await aclose()
            if self._watches.get(handle) is asyncio.current_task():
                del self._watches[handle]
                self._metrics.track_watch_event("ended")
                logger.info("location_watch_ended", extra={"watch": str(handle)})

    def _deliver_location(
        self, handle: WatchHandle, callback: LocationCallback, location: Location
    ) -> None:
        self._metrics.track_watch_event("location")
        try:
            callback(location)
        except Exception:
            logger.exception("location_watch_callback_failed", extra={"watch": str(handle)})

    def _deliver_error(
        self, handle: WatchHandle, callback: ErrorCallback, error: PositionProviderError
    ) -> None:
        self._metrics.track_watch_event("error")
        logger.warning(
            "location_watch_error",
            extra={"watch": str(handle), "code": error.code.value, "error": error.message},
        )
        try:
            callback(error)
        except Exception:
            logger.exception("location_watch_callback_failed", extra={"watch": str(handle)})
