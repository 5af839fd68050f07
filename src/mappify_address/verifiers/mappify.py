"""Address verification and geocoding through mappify.io.

The service's ranking is trusted as-is: only the first candidate is ever
considered, and it is accepted when it is the only candidate or when the
overall confidence reaches the configured threshold.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from mappify_address.config import VerifierConfig
from mappify_address.core.address_formatter import build_street_address, title_case
from mappify_address.models import (
    Location,
    MappifyAddressError,
    MappifyConnectionError,
    ResponseObject,
    StreetAddressRecord,
    VerificationResult,
)
from mappify_address.remote.client import MappifyClient
from mappify_address.verifiers.base import BaseVerifier, Clock

logger = logging.getLogger(__name__)

SERVICE_NAME = "Mappify"

NO_MATCH_MESSAGE = "No match."
NO_API_KEY_MESSAGE = "No mappify.io API key configured."


class MappifyVerifier(BaseVerifier):
    """Standardizes and geocodes a location using the mappify.io service.

    Example:
        >>> verifier = MappifyVerifier(VerifierConfig(api_key="..."))
        >>> location = Location(street1="12 smith st", city="fitzroy", state="VIC")
        >>> result, message = verifier.verify(location)
    """

    def __init__(
        self,
        config: Optional[VerifierConfig] = None,
        *,
        client: Optional[MappifyClient] = None,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(clock)
        self.config = config or VerifierConfig()
        self._client = client or MappifyClient(config=self.config, transport=transport)

    @property
    def name(self) -> str:
        return SERVICE_NAME

    def close(self) -> None:
        self._client.close()

    def _verify_impl(
        self, location: Location, api_key: str | None
    ) -> tuple[VerificationResult, str]:
        api_key = api_key or self.config.api_key
        if not api_key:
            location.add_error("api_key", NO_API_KEY_MESSAGE)
            return VerificationResult.CONNECTION_ERROR, NO_API_KEY_MESSAGE

        street_address = build_street_address(location)

        try:
            response = self._client.autocomplete(street_address, api_key)
        except MappifyConnectionError as exc:
            return VerificationResult.CONNECTION_ERROR, exc.message()
        except MappifyAddressError as exc:
            logger.warning("Unusable response from mappify.io: %s", exc.message())
            location.add_error("response", exc.message(), street_address)
            return (
                VerificationResult.CONNECTION_ERROR,
                f"Invalid response from mappify.io: {exc.message()}",
            )

        return self._apply_response(location, response)

    def _apply_response(
        self, location: Location, response: ResponseObject
    ) -> tuple[VerificationResult, str]:
        address = response.best_match
        if address is None:
            return VerificationResult.NONE, NO_MATCH_MESSAGE

        confidence_percentage = response.confidence_percentage
        street_address = address.street_address or ""
        gnaf_id = address.gnaf_id or ""

        # Recorded even when the match is rejected below
        location.standardize_attempted_result = address.gnaf_id

        if not self.is_acceptable(response):
            return (
                VerificationResult.NONE,
                f"Not verified: mappify.io closest matching address: {street_address} "
                f"with {confidence_percentage}% confidence",
            )

        try:
            geocoded = self.update_location(location, address)
        except MappifyAddressError:
            return (
                VerificationResult.NONE,
                f"Not verified: mappify.io returned a malformed address: {street_address}",
            )

        message = (
            f"Verified with mappify.io to match GNAF: {gnaf_id} with {confidence_percentage}% "
            f"confidence, address standardised to: {street_address}."
        )
        if geocoded:
            return VerificationResult.GEOCODED, f"{message} Coordinates updated."
        return VerificationResult.STANDARDIZED, f"{message} Coordinates NOT updated."

    def is_acceptable(self, response: ResponseObject) -> bool:
        """Whether the first candidate of a response may be applied."""
        if len(response.result) == 1:
            return True
        return (
            response.confidence is not None
            and response.confidence >= self.config.confidence_threshold
        )

    def update_location(self, location: Location, address: StreetAddressRecord) -> bool:
        """Update a location to match a mappify.io street address record.

        Args:
            location: The location to be modified.
            address: The candidate to copy the data from.

        Returns:
            Whether the location was successfully geocoded.

        Raises:
            MappifyAddressError: If the candidate's street address cannot be split
                into the lines it claims to have. The location is left unchanged.
        """
        components = address.address_components()
        if not components or (address.primary and len(components) < 2):
            location.add_error(
                "street_address",
                "Candidate street address has too few components",
                address.street_address,
                context={"primary": address.primary},
                raise_exception=True,
            )

        if address.primary:
            street1, street2 = components[0], components[1]
        else:
            street1, street2 = components[0], ""

        city = title_case(address.suburb) if address.suburb is not None else None

        self._set_field(location, "street1", street1)
        self._set_field(location, "street2", street2)
        self._set_field(location, "city", city)
        self._set_field(location, "state", address.state)
        self._set_field(location, "postal_code", address.post_code)
        location.standardized_date_time = self.now()

        # Geocode only when both coordinates are present
        coordinates = address.location
        if coordinates is None or coordinates.lat is None or coordinates.lon is None:
            return False

        geocoded = location.set_location_point(coordinates.lat, coordinates.lon)
        if geocoded:
            location.geocoded_date_time = self.now()
        else:
            location.add_error(
                "geo_point",
                "Candidate coordinates are out of range",
                f"{coordinates.lat},{coordinates.lon}",
            )
        return geocoded

    @staticmethod
    def _set_field(location: Location, field: str, value: Any) -> None:
        original = getattr(location, field)
        if original != value:
            location.add_cleaning_process(
                field,
                original,
                value,
                "Standardized by mappify.io",
                operation_type="standardization",
            )
        setattr(location, field, value)
