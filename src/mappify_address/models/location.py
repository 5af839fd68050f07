"""Caller-owned location record that verification reads and updates."""

from __future__ import annotations

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mappify_address.models.base import TrackedModel


class GeoPoint(BaseModel):
    """A WGS84 coordinate pair."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class Location(TrackedModel):
    """Postal address with geocoded point and verification bookkeeping.

    The verifier mutates this record in place: normalized address lines,
    the geocoded point, and the attempted/succeeded timestamps for
    standardization and geocoding.
    """

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
    )

    street1: str | None = Field(default=None, description="First street line")
    street2: str | None = Field(default=None, description="Second street line (unit, level, ...)")
    city: str | None = Field(default=None, description="Suburb or city")
    state: str | None = Field(default=None, description="State or region")
    postal_code: str | None = Field(default=None, description="Postal code")
    country: str | None = Field(default=None, description="Country code")
    geo_point: GeoPoint | None = Field(default=None, description="Geocoded point")

    standardize_attempted_service_type: str | None = None
    standardize_attempted_date_time: datetime | None = None
    standardize_attempted_result: str | None = Field(
        default=None,
        description="External match identifier (GNAF ID) of the last best candidate",
    )
    standardized_date_time: datetime | None = None

    geocode_attempted_service_type: str | None = None
    geocode_attempted_date_time: datetime | None = None
    geocoded_date_time: datetime | None = None

    @property
    def latitude(self) -> float | None:
        return self.geo_point.latitude if self.geo_point else None

    @property
    def longitude(self) -> float | None:
        return self.geo_point.longitude if self.geo_point else None

    def set_location_point(self, latitude: float, longitude: float) -> bool:
        """Set the geocoded point from a latitude/longitude pair.

        Returns:
            True if the point was applied, False if either coordinate is not
            a finite value within range. The existing point is kept on failure.
        """
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            return False
        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            return False

        previous = self.geo_point
        self.geo_point = GeoPoint(latitude=latitude, longitude=longitude)
        self.add_cleaning_process(
            "geo_point",
            f"{previous.latitude},{previous.longitude}" if previous else None,
            f"{latitude},{longitude}",
            "Coordinates set from verified address",
            operation_type="geocoding",
        )
        return True
