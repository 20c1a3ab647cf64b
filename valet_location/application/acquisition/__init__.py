"""One-shot Location Acquisition."""

from valet_location.application.acquisition.commands import GetCurrentLocationCommand
from valet_location.application.acquisition.dto import AcquisitionOptions
from valet_location.application.acquisition.services import (
    PermissionGate,
    RetryOrchestrator,
    StrategyRacer,
)

__all__ = [
    "AcquisitionOptions",
    "GetCurrentLocationCommand",
    "PermissionGate",
    "RetryOrchestrator",
    "StrategyRacer",
]
