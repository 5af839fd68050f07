"""Address formatting helpers shared by the verifiers."""

from __future__ import annotations

from mappify_address.core.address_formatter import (
    build_street_address,
    compute_street_address_from_parts,
    title_case,
)

__all__ = [
    "build_street_address",
    "compute_street_address_from_parts",
    "title_case",
]
