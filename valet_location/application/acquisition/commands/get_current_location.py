"""Get Current Location Command.

일회성 위치 획득 진입점.

Workflow:
    1. Single-flight 가드 (진행 중이면 즉시 거부, 권한/경주 미실행)
    2. PermissionGate.ensure()
    3. RetryOrchestrator.run(StrategyRacer.race)
    4. 실패 시 alert_on_failure면 안내 문구 첨부
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from valet_location.application.acquisition.services.failure_prompt import build_failure_prompt
from valet_location.application.ports.metrics import LocationMetricsPort, NoOpLocationMetrics
from valet_location.domain.exceptions import ConcurrentRequestRejectedError, LocationError

if TYPE_CHECKING:
    from valet_location.application.acquisition.dto import AcquisitionOptions
    from valet_location.application.acquisition.services import (
        PermissionGate,
        RetryOrchestrator,
        StrategyRacer,
    )
    from valet_location.domain.value_objects import Location

logger = logging.getLogger(__name__)


class GetCurrentLocationCommand:
    """일회성 위치 획득 Command."""

    def __init__(
        self,
        permission_gate: "PermissionGate",
        racer: "StrategyRacer",
        orchestrator: "RetryOrchestrator",
        metrics: LocationMetricsPort | None = None,
    ) -> None:
        self._gate = permission_gate
        self._racer = racer
        self._orchestrator = orchestrator
        self._metrics = metrics or NoOpLocationMetrics()

    async def execute(self, options: "AcquisitionOptions") -> "Location":
        """현재 위치를 획득합니다.

        Args:
            options: 병합이 끝난 획득 옵션

        Returns:
            Location

        Raises:
            LocationError: 분류된 실패 (alert_on_failure면 prompt 첨부)
        """
        started = time.monotonic()
        try:
            async with self._orchestrator.single_flight():
                await self._gate.ensure(needs_background=options.request_background)
                location = await self._orchestrator.run(self._racer.race, options)
        except ConcurrentRequestRejectedError:
            self._metrics.track_acquisition(
                ConcurrentRequestRejectedError.kind.value, time.monotonic() - started
            )
            raise
        except LocationError as e:
            duration = time.monotonic() - started
            self._metrics.track_acquisition(e.kind.value, duration)
            logger.error(
                "location_acquisition_failed",
                extra={"error_kind": e.kind.value, "error": e.message, "duration": duration},
            )
            if options.alert_on_failure:
                e.prompt = build_failure_prompt(e.kind)
            raise

        duration = time.monotonic() - started
        self._metrics.track_acquisition("success", duration)
        logger.info(
            "location_acquired",
            extra={"accuracy": location.accuracy, "duration": duration},
        )
        return location
