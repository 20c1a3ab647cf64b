"""Acquisition DTOs."""

from valet_location.application.acquisition.dto.acquisition_options import AcquisitionOptions

__all__ = ["AcquisitionOptions"]
