from __future__ import annotations

from mappify_address.remote.client import AUTOCOMPLETE_PATH, MappifyClient

__all__ = [
    "AUTOCOMPLETE_PATH",
    "MappifyClient",
]
