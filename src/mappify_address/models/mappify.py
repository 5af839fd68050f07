"""Wire models for the mappify.io address autocomplete endpoint.

Unknown fields are ignored and JSON nulls are treated as absent, so a null
value always falls back to the field default rather than failing validation.
Numeric values sent for text fields (post codes, identifiers) are kept as
strings. A confidence outside 0..1, or one that is not finite, fails
validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class MappifyModel(BaseModel):
    """Base for mappify.io payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ApiPayload(MappifyModel):
    """Request body for ``address/autocomplete``."""

    street_address: str
    api_key: str
    format_case: bool = True
    include_internal_identifiers: bool = True


class Coordinates(MappifyModel):
    lat: float | None = None
    lon: float | None = None


class StreetAddressRecord(MappifyModel):
    """A single candidate match returned by the service."""

    building_name: str | None = None
    flat_number_prefix: str | None = None
    flat_number: int | None = None
    flat_number_suffix: str | None = None
    level_number: int | None = None
    number_first: int | None = None
    number_last: int | None = None
    street_name: str | None = None
    street_type: str | None = None
    street_suffix_code: str | None = None
    suburb: str | None = None
    state: str | None = None
    post_code: str | None = None
    location: Coordinates | None = None
    primary: bool = False
    street_address: str | None = None
    jurisdiction_id: str | None = None
    gnaf_id: str | None = None

    def address_components(self) -> list[str]:
        """Split the normalized street address on ``", "``, dropping empty segments."""
        return [part for part in (self.street_address or "").split(", ") if part]


class ResponseObject(MappifyModel):
    """Top-level autocomplete response."""

    type: str | None = None
    result: list[StreetAddressRecord] = Field(default_factory=list)
    confidence: float | None = Field(default=None, ge=0, le=1, allow_inf_nan=False)

    @property
    def best_match(self) -> StreetAddressRecord | None:
        """First candidate in service order; the ranking is never re-scored locally."""
        return self.result[0] if self.result else None

    @property
    def confidence_percentage(self) -> int:
        """Confidence as a truncated integer percentage (0 when absent)."""
        return int((self.confidence or 0.0) * 100)
