"""Test Factories.

테스트용 측위 결과/제공자 생성 팩토리.
"""

from __future__ import annotations

import asyncio
from collections import deque
from dataclasses import dataclass
from typing import AsyncIterator

from valet_location.application.ports import (
    PermissionProvider,
    PositionFix,
    PositionProvider,
    PositionProviderError,
    PositionUpdate,
    ProviderErrorCode,
)
from valet_location.domain.enums import PermissionKind


@dataclass
class Step:
    """스크립트된 제공자 응답 한 건.

    delay는 초 단위이며, 요청의 timeout_ms보다 길면
    실제 OS처럼 타임아웃 시점에 TIMEOUT 에러를 냅니다.
    ignore_timeout이면 타임아웃을 무시하고 delay 뒤에 응답합니다.
    """

    delay: float = 0.0
    fix: PositionFix | None = None
    error: Exception | None = None
    ignore_timeout: bool = False


def fix(accuracy: float | None = 30.0, latitude: float = 37.5665, longitude: float = 126.978) -> PositionFix:
    return PositionFix(latitude=latitude, longitude=longitude, accuracy=accuracy)


def error(code: ProviderErrorCode = ProviderErrorCode.TIMEOUT) -> PositionProviderError:
    return PositionProviderError(code)


class FakePositionProvider(PositionProvider):
    """스크립트 기반 PositionProvider.

    - 경주 요청: high_accuracy별 큐에서 Step을 꺼내 응답 (비면 즉시 기본 fix)
    - 위치 서비스 프로브 (max_age_ms == 0, 네트워크 모드): probe_error가 있으면 실패
    - watch: 테스트가 push()로 넣은 항목을 스트림으로 흘려보냄
    """

    def __init__(self) -> None:
        self.steps: dict[bool, deque[Step]] = {False: deque(), True: deque()}
        self.calls: list[dict[str, object]] = []
        self.probe_calls = 0
        self.probe_errors: deque[PositionProviderError | None] = deque()
        self.completed = 0
        self.watch_calls: list[dict[str, object]] = []
        self.watch_queues: list[asyncio.Queue[PositionUpdate | None]] = []
        self.closed_streams = 0

    def script(self, high_accuracy: bool, *steps: Step) -> None:
        self.steps[high_accuracy].extend(steps)

    def coarse(self, *steps: Step) -> None:
        self.script(False, *steps)

    def precise(self, *steps: Step) -> None:
        self.script(True, *steps)

    async def request_once(self, high_accuracy: bool, timeout_ms: int, max_age_ms: int) -> PositionFix:
        if max_age_ms == 0 and not high_accuracy:
            self.probe_calls += 1
            probe_error = self.probe_errors.popleft() if self.probe_errors else None
            if probe_error is not None:
                raise probe_error
            return fix()

        self.calls.append(
            {"high_accuracy": high_accuracy, "timeout_ms": timeout_ms, "max_age_ms": max_age_ms}
        )
        queue = self.steps[high_accuracy]
        step = queue.popleft() if queue else Step(fix=fix())
        try:
            timeout = timeout_ms / 1000
            if step.delay > timeout and not step.ignore_timeout:
                await asyncio.sleep(timeout)
                raise PositionProviderError(ProviderErrorCode.TIMEOUT)
            await asyncio.sleep(step.delay)
            if step.error is not None:
                raise step.error
            assert step.fix is not None
            return step.fix
        finally:
            self.completed += 1

    def watch(
        self,
        high_accuracy: bool,
        distance_filter_m: float,
        interval_ms: int,
        fastest_interval_ms: int,
    ) -> AsyncIterator[PositionUpdate]:
        self.watch_calls.append(
            {
                "high_accuracy": high_accuracy,
                "distance_filter_m": distance_filter_m,
                "interval_ms": interval_ms,
                "fastest_interval_ms": fastest_interval_ms,
            }
        )
        queue: asyncio.Queue[PositionUpdate | None] = asyncio.Queue()
        self.watch_queues.append(queue)
        return self._stream(queue)

    async def _stream(self, queue: asyncio.Queue[PositionUpdate | None]) -> AsyncIterator[PositionUpdate]:
        try:
            while True:
                item = await queue.get()
                if item is None:
                    return
                yield item
        finally:
            self.closed_streams += 1

    async def push(self, index: int, item: PositionUpdate | None) -> None:
        """watch 스트림에 항목을 넣고 소비될 때까지 양보."""
        await self.watch_queues[index].put(item)
        for _ in range(5):
            await asyncio.sleep(0)


class FakePermissionProvider(PermissionProvider):
    """권한 상태를 dict로 들고 있는 PermissionProvider."""

    def __init__(
        self,
        granted: set[PermissionKind] | None = None,
        grant_on_request: set[PermissionKind] | None = None,
    ) -> None:
        self.granted = set(granted or ())
        self.grant_on_request = set(grant_on_request or ())
        self.requested: list[PermissionKind] = []

    async def check(self, kind: PermissionKind) -> bool:
        return kind in self.granted

    async def request(self, kind: PermissionKind) -> bool:
        self.requested.append(kind)
        if kind in self.grant_on_request:
            self.granted.add(kind)
        return kind in self.granted
