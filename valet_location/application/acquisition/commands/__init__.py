"""Acquisition Commands."""

from valet_location.application.acquisition.commands.get_current_location import (
    GetCurrentLocationCommand,
)

__all__ = ["GetCurrentLocationCommand"]
