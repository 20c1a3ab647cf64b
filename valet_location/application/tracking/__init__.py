"""Continuous Location Tracking."""

from valet_location.application.tracking.continuous_watcher import (
    ContinuousWatcher,
    ErrorCallback,
    LocationCallback,
)

__all__ = ["ContinuousWatcher", "ErrorCallback", "LocationCallback"]
