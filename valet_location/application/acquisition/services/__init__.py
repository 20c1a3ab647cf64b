"""Acquisition Services."""

from valet_location.application.acquisition.services.error_classifier import classify_provider_error
from valet_location.application.acquisition.services.failure_prompt import build_failure_prompt
from valet_location.application.acquisition.services.permission_gate import PermissionGate
from valet_location.application.acquisition.services.retry_orchestrator import (
    RetryOrchestrator,
    RetryPolicy,
)
from valet_location.application.acquisition.services.strategy_racer import StrategyRacer

__all__ = [
    "PermissionGate",
    "RetryOrchestrator",
    "RetryPolicy",
    "StrategyRacer",
    "build_failure_prompt",
    "classify_provider_error",
]
