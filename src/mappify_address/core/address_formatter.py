"""Address formatting utilities.

Builds the single-line query sent to the remote service and normalizes the
casing of place names returned by it.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mappify_address.models.enums import QUERY_FIELDS

if TYPE_CHECKING:
    from mappify_address.models.location import Location

# A word is a run of letters/digits, optionally joined by an apostrophe ("o'connor")
_WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def compute_street_address_from_parts(*parts: str | None) -> str:
    """Join address parts with single spaces, skipping empty ones.

    Parts that are None, empty or whitespace-only are left out entirely, and
    kept parts are stripped, so the result never has doubled or dangling spaces.

    Args:
        *parts: Address parts in output order.

    Returns:
        Single-line address string (empty if every part was empty).
    """
    return " ".join(part.strip() for part in parts if part and part.strip())


def build_street_address(location: Location) -> str:
    """Build the remote query string for a location.

    Uses street1, street2, city, state and postal code in that order.
    """
    return compute_street_address_from_parts(
        *(getattr(location, field) for field in QUERY_FIELDS)
    )


def title_case(value: str) -> str:
    """Lower-case a place name, then capitalize the first letter of each word.

    >>> title_case("BOX HILL NORTH")
    'Box Hill North'
    >>> title_case("st kilda-east")
    'St Kilda-East'
    """
    return _WORD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:], value.lower())
