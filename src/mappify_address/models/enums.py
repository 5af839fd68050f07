"""Verification outcome enumeration and address field constants."""

from __future__ import annotations

from enum import Enum


class VerificationResult(str, Enum):
    """Terminal outcome of a single verification call.

    GEOCODED implies the standardization was applied as well.
    CONNECTION_ERROR implies none of the address fields were changed.
    """

    NONE = "None"
    STANDARDIZED = "Standardized"
    GEOCODED = "Geocoded"
    CONNECTION_ERROR = "ConnectionError"

    @property
    def is_verified(self) -> bool:
        return self in (VerificationResult.STANDARDIZED, VerificationResult.GEOCODED)


class AddressField(str, Enum):
    """Location fields used to build the remote query, in query order."""

    STREET1 = "street1"
    STREET2 = "street2"
    CITY = "city"
    STATE = "state"
    POSTAL_CODE = "postal_code"


# All query field names as a list, in order
QUERY_FIELDS: list[str] = [f.value for f in AddressField]
