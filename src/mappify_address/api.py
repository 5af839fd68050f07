"""Minimal FastAPI service exposing single-address verification."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from fastapi import Depends, FastAPI, Query
from pydantic import BaseModel, ConfigDict

from mappify_address.models import GeoPoint, Location
from mappify_address.service import get_default_verifier
from mappify_address.verifiers import MappifyVerifier

app = FastAPI(title="Mappify Address API", version="0.1.0")


class AddressRequest(BaseModel):
    """Address fields a caller may submit; bookkeeping is set by the verifier only."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    geo_point: Optional[GeoPoint] = None

    def to_location(self) -> Location:
        return Location.model_validate(self.model_dump())


def get_verifier() -> MappifyVerifier:
    return get_default_verifier()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/verify")
def verify_address(
    address: AddressRequest,
    verifier: Annotated[MappifyVerifier, Depends(get_verifier)],
    api_key: Optional[str] = Query(None, min_length=1),
) -> dict[str, Any]:
    """Standardize and geocode one address, returning the updated record."""
    location = address.to_location()
    result, message = verifier.verify(location, api_key)
    return {
        "result": result.value,
        "verified": result.is_verified,
        "message": message,
        "location": location.model_dump(mode="json"),
        "changes": location.audit_log(source="mappify"),
    }


# To run: uvicorn mappify_address.api:app --host 0.0.0.0 --port 8000
