"""Location Metrics - Prometheus 메트릭 및 어댑터."""

from valet_location.infrastructure.metrics.metrics import (
    LOCATION_ACQUISITIONS_TOTAL,
    LOCATION_ACQUISITION_DURATION,
    LOCATION_RACE_DURATION,
    LOCATION_RACES_TOTAL,
    LOCATION_RETRIES_TOTAL,
    LOCATION_STRATEGY_DURATION,
    LOCATION_STRATEGY_RESULTS_TOTAL,
    LOCATION_WATCH_EVENTS_TOTAL,
    LOCATION_WATCHES_ACTIVE,
)
from valet_location.infrastructure.metrics.prometheus_adapter import PrometheusLocationMetrics

__all__ = [
    "LOCATION_ACQUISITIONS_TOTAL",
    "LOCATION_ACQUISITION_DURATION",
    "LOCATION_RACES_TOTAL",
    "LOCATION_RACE_DURATION",
    "LOCATION_RETRIES_TOTAL",
    "LOCATION_STRATEGY_DURATION",
    "LOCATION_STRATEGY_RESULTS_TOTAL",
    "LOCATION_WATCH_EVENTS_TOTAL",
    "LOCATION_WATCHES_ACTIVE",
    "PrometheusLocationMetrics",
]
