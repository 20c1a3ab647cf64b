"""Strategy Racer - 네트워크/위성 측위 경주.

두 전략을 동시에 시작하고 "충분히 좋은" 첫 결과, 또는 마감 시점의
최선 결과로 정착합니다.

정착 규칙 (전략 응답마다 평가):
    1. accuracy <= 허용 기준 → 즉시 정착 (남은 전략은 백그라운드에서 끝나고 버려짐)
    2. 그 외 성공 → best-so-far 갱신
    3. 에러 → 마지막 에러로 기록, 즉시 실패하지 않음
    4. 두 전략 모두 완료 → best-so-far, 없으면 마지막 에러 (없으면 ProviderError)
    5. 전체 마감 타이머 → best-so-far, 없으면 Timeout

정착은 한 번만 일어나며 이후 응답은 기록만 되고 결과를 바꾸지 않습니다.
마감 타이머는 제공자 호출을 취소하지 않습니다 (취소 보장이 없는 OS API).
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from valet_location.application.acquisition.services.error_classifier import (
    classify_provider_error,
)
from valet_location.application.ports.metrics import LocationMetricsPort, NoOpLocationMetrics
from valet_location.application.ports.position_provider import PositionFix, PositionProviderError
from valet_location.domain.enums import LocationStrategy
from valet_location.domain.exceptions import (
    LocationError,
    LocationProviderError,
    LocationTimeoutError,
)
from valet_location.domain.value_objects import Location

if TYPE_CHECKING:
    from valet_location.application.acquisition.dto import AcquisitionOptions
    from valet_location.application.ports import PositionProvider

logger = logging.getLogger(__name__)

DEFAULT_COARSE_TIMEOUT_MS = 12_000


@dataclass
class _RaceState:
    """경주 한 번의 내부 상태."""

    settled: asyncio.Future[Location]
    started_at: float
    pending: int = len(LocationStrategy)
    best: Location | None = None
    last_error: LocationError | None = None


class StrategyRacer:
    """네트워크(coarse) vs 위성(precise) 측위 경주기."""

    def __init__(
        self,
        position_provider: "PositionProvider",
        metrics: LocationMetricsPort | None = None,
        coarse_timeout_ms: int = DEFAULT_COARSE_TIMEOUT_MS,
    ) -> None:
        self._provider = position_provider
        self._metrics = metrics or NoOpLocationMetrics()
        self._coarse_timeout_ms = coarse_timeout_ms
        # 정착 후에도 끝나지 않은 제공자 호출 (GC 방지용 참조)
        self._orphans: set[asyncio.Task[None]] = set()

    @property
    def orphan_count(self) -> int:
        """정착 이후에도 진행 중인 제공자 호출 수."""
        return len(self._orphans)

    async def race(self, options: "AcquisitionOptions") -> Location:
        """두 전략을 경주시켜 위치를 얻습니다.

        Args:
            options: 마감 시간, 캐시 허용 시간, 정확도 기준

        Returns:
            Location

        Raises:
            LocationError: 위치를 하나도 얻지 못함
        """
        loop = asyncio.get_running_loop()
        state = _RaceState(settled=loop.create_future(), started_at=time.monotonic())

        for strategy in LocationStrategy:
            task = loop.create_task(self._run_strategy(strategy, options, state))
            self._orphans.add(task)
            task.add_done_callback(self._orphans.discard)

        deadline = loop.call_later(options.timeout_seconds, self._on_deadline, state)
        try:
            return await state.settled
        finally:
            deadline.cancel()

    async def drain(self) -> None:
        """버려진 제공자 호출이 모두 끝날 때까지 기다립니다."""
        if self._orphans:
            await asyncio.gather(*self._orphans, return_exceptions=True)

    def _provider_timeout_ms(self, strategy: LocationStrategy, options: "AcquisitionOptions") -> int:
        if strategy is LocationStrategy.COARSE:
            return min(self._coarse_timeout_ms, options.timeout_ms)
        return options.timeout_ms

    async def _run_strategy(
        self,
        strategy: LocationStrategy,
        options: "AcquisitionOptions",
        state: _RaceState,
    ) -> None:
        started = time.monotonic()
        try:
            fix = await self._provider.request_once(
                high_accuracy=strategy.high_accuracy,
                timeout_ms=self._provider_timeout_ms(strategy, options),
                max_age_ms=options.max_age_ms,
            )
        except PositionProviderError as e:
            self._on_error(strategy, classify_provider_error(e), state, time.monotonic() - started)
        except Exception as e:
            # 다른 전략은 계속 진행, ProviderError로 기록
            logger.exception("strategy_unexpected_error", extra={"strategy": strategy.value})
            self._on_error(
                strategy, LocationProviderError(str(e)), state, time.monotonic() - started
            )
        else:
            self._on_fix(strategy, fix, options, state, time.monotonic() - started)

    def _on_fix(
        self,
        strategy: LocationStrategy,
        fix: PositionFix,
        options: "AcquisitionOptions",
        state: _RaceState,
        duration: float,
    ) -> None:
        if state.settled.done():
            self._discard(strategy, duration, accuracy=fix.accuracy)
            return

        try:
            location = Location(
                latitude=fix.latitude,
                longitude=fix.longitude,
                accuracy=fix.accuracy,
                timestamp=fix.timestamp,
            )
        except ValueError as e:
            self._on_error(strategy, LocationProviderError(str(e)), state, duration)
            return

        state.pending -= 1
        self._metrics.track_strategy(strategy.value, "success", duration)
        logger.info(
            "strategy_location_received",
            extra={"strategy": strategy.value, "accuracy": fix.accuracy, "duration": duration},
        )

        if location.meets(options.acceptable_accuracy_m):
            self._settle(state, "early_accept", location=location)
            return

        if state.best is None or location.is_more_accurate_than(state.best):
            state.best = location

        if state.pending == 0:
            self._settle_with_best(state, "both_complete")

    def _on_error(
        self,
        strategy: LocationStrategy,
        error: LocationError,
        state: _RaceState,
        duration: float,
    ) -> None:
        if state.settled.done():
            self._discard(strategy, duration, error=error)
            return

        state.pending -= 1
        state.last_error = error
        self._metrics.track_strategy(strategy.value, "error", duration)
        logger.warning(
            "strategy_failed",
            extra={"strategy": strategy.value, "error_kind": error.kind.value, "error": error.message},
        )

        if state.pending == 0:
            self._settle_with_best(state, "both_complete")

    def _on_deadline(self, state: _RaceState) -> None:
        if state.settled.done():
            return
        logger.info("race_deadline_reached", extra={"has_best": state.best is not None})
        if state.best is not None:
            self._settle(state, "deadline", location=state.best)
        else:
            self._settle(state, "deadline", error=LocationTimeoutError())

    def _settle_with_best(self, state: _RaceState, outcome: str) -> None:
        if state.best is not None:
            self._settle(state, outcome, location=state.best)
        else:
            self._settle(state, outcome, error=state.last_error or LocationProviderError())

    def _settle(
        self,
        state: _RaceState,
        outcome: str,
        location: Location | None = None,
        error: LocationError | None = None,
    ) -> None:
        if state.settled.done():
            return
        duration = time.monotonic() - state.started_at
        if location is not None:
            state.settled.set_result(location)
            self._metrics.track_race(outcome, duration)
        else:
            state.settled.set_exception(error or LocationProviderError())
            self._metrics.track_race("rejected", duration)
        logger.info(
            "race_settled",
            extra={
                "outcome": outcome,
                "resolved": location is not None,
                "accuracy": location.accuracy if location else None,
                "duration": duration,
            },
        )

    def _discard(
        self,
        strategy: LocationStrategy,
        duration: float,
        accuracy: float | None = None,
        error: LocationError | None = None,
    ) -> None:
        self._metrics.track_strategy(strategy.value, "discarded", duration)
        logger.debug(
            "strategy_result_discarded",
            extra={
                "strategy": strategy.value,
                "accuracy": accuracy,
                "error_kind": error.kind.value if error else None,
            },
        )
