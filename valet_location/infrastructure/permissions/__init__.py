"""Permission Provider Adapters."""

from valet_location.infrastructure.permissions.unrestricted import UnrestrictedPermissionProvider

__all__ = ["UnrestrictedPermissionProvider"]
