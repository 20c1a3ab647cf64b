"""도메인 예외."""

from valet_location.domain.exceptions.base import DomainError
from valet_location.domain.exceptions.location import (
    ConcurrentRequestRejectedError,
    LocationError,
    LocationProviderError,
    LocationTimeoutError,
    PermissionDeniedError,
    ServicesDisabledError,
    error_for_kind,
)

__all__ = [
    "ConcurrentRequestRejectedError",
    "DomainError",
    "LocationError",
    "LocationProviderError",
    "LocationTimeoutError",
    "PermissionDeniedError",
    "ServicesDisabledError",
    "error_for_kind",
]
