"""Models package.

Re-exports the location record, the mappify.io wire models, the outcome
enumeration and the package errors.
"""

from __future__ import annotations

# Import from submodules - order matters for avoiding circular imports
from mappify_address.models.errors import (
    PACKAGE_NAME,
    MappifyAddressError,
    MappifyConnectionError,
)
from mappify_address.models.enums import QUERY_FIELDS, AddressField, VerificationResult
from mappify_address.models.base import TrackedModel
from mappify_address.models.location import GeoPoint, Location
from mappify_address.models.mappify import (
    ApiPayload,
    Coordinates,
    ResponseObject,
    StreetAddressRecord,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "MappifyAddressError",
    "MappifyConnectionError",
    # Enums and constants
    "AddressField",
    "QUERY_FIELDS",
    "VerificationResult",
    # Location
    "TrackedModel",
    "GeoPoint",
    "Location",
    # Wire models
    "ApiPayload",
    "Coordinates",
    "ResponseObject",
    "StreetAddressRecord",
]
