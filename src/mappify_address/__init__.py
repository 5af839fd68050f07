"""mappify-address: address standardization and geocoding through mappify.io.

Quick Start:
    >>> from mappify_address import Location, MappifyVerifier, VerifierConfig
    >>> verifier = MappifyVerifier(VerifierConfig(api_key="..."))
    >>> location = Location(street1="12 smith st", city="FITZROY", state="VIC")
    >>> result, message = verifier.verify(location)
    >>> result.is_verified, location.street1, location.city
    (True, '12 Smith St', 'Fitzroy')

    # Shared default verifier configured from MAPPIFY_API_KEY
    >>> from mappify_address import verify_location
    >>> result, message = verify_location(location)
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from mappify_address.models import (
    PACKAGE_NAME,
    AddressField,
    ApiPayload,
    Coordinates,
    GeoPoint,
    Location,
    MappifyAddressError,
    MappifyConnectionError,
    ResponseObject,
    StreetAddressRecord,
    VerificationResult,
)
from mappify_address.config import VerifierConfig
from mappify_address.core import build_street_address, title_case
from mappify_address.protocols import VerifierProtocol
from mappify_address.remote import MappifyClient
from mappify_address.verifiers import BaseVerifier, MappifyVerifier, VerifierFactory
from mappify_address.service import get_default_verifier, verify_location

__version__ = "0.1.0"
__package_name__ = "mappify-address"

__all__ = [
    # Version
    "__version__",
    "PACKAGE_NAME",
    # Primary interface
    "MappifyVerifier",
    "VerifierConfig",
    "get_default_verifier",
    "verify_location",
    # Models
    "AddressField",
    "GeoPoint",
    "Location",
    "VerificationResult",
    # Wire models
    "ApiPayload",
    "Coordinates",
    "ResponseObject",
    "StreetAddressRecord",
    # Errors
    "MappifyAddressError",
    "MappifyConnectionError",
    # Extension points
    "BaseVerifier",
    "VerifierFactory",
    "VerifierProtocol",
    # Remote client
    "MappifyClient",
    # Formatting helpers
    "build_street_address",
    "title_case",
]
