"""Location Metrics - Prometheus 메트릭 정의.

라벨:
- strategy: coarse / precise
- outcome: success / error / discarded (전략), early_accept / both_complete / deadline / rejected (경주)
- status: success 또는 ErrorKind 값
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# Strategy Metrics
# ============================================================

LOCATION_STRATEGY_RESULTS_TOTAL = Counter(
    "location_strategy_results_total",
    "Provider responses per acquisition strategy",
    ["strategy", "outcome"],
)

LOCATION_STRATEGY_DURATION = Histogram(
    "location_strategy_duration_seconds",
    "Provider response time per acquisition strategy",
    ["strategy"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 15.0, 20.0, 30.0],
)

# ============================================================
# Race / Retry Metrics
# ============================================================

LOCATION_RACES_TOTAL = Counter(
    "location_races_total",
    "Settled strategy races",
    ["outcome"],
)

LOCATION_RACE_DURATION = Histogram(
    "location_race_duration_seconds",
    "Time from race start to settlement",
    ["outcome"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 15.0, 20.0, 30.0],
)

LOCATION_RETRIES_TOTAL = Counter(
    "location_retries_total",
    "Scheduled acquisition retries",
    ["error_kind"],
)

# ============================================================
# Acquisition Metrics
# ============================================================

LOCATION_ACQUISITIONS_TOTAL = Counter(
    "location_acquisitions_total",
    "One-shot location acquisitions",
    ["status"],
)

LOCATION_ACQUISITION_DURATION = Histogram(
    "location_acquisition_duration_seconds",
    "One-shot location acquisition duration",
    ["status"],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 45.0, 60.0],
)

# ============================================================
# Watch Metrics
# ============================================================

LOCATION_WATCH_EVENTS_TOTAL = Counter(
    "location_watch_events_total",
    "Continuous watch events",
    ["event"],
)

LOCATION_WATCHES_ACTIVE = Gauge(
    "location_watches_active",
    "Currently active continuous watches",
)
