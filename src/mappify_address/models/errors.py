"""Verification error classes.

These classes provide package-specific error handling for the remote
mappify.io calls and for candidate data that cannot be applied.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "mappify_address"


class MappifyAddressError(PydanticCustomError):
    """Custom exception for mappify_address.

    Inherits from PydanticCustomError to stay compatible with Pydantic's
    error handling; ``type`` names the failure (``remote_parse``,
    ``validation_error``, ...) and ``context`` carries the package name.
    """


class MappifyConnectionError(MappifyAddressError):
    """Raised when the remote service cannot be reached or answers with a non-OK status.

    ``status_code`` is None for network-level failures (connect errors, timeouts).
    """

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> MappifyConnectionError:
        return cls(
            "remote_http_error",
            reason or str(status_code),
            {"package": PACKAGE_NAME, "status": status_code},
        )

    @property
    def status_code(self) -> int | None:
        return (self.context or {}).get("status")
