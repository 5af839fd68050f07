from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mappify_address.models import Location, VerificationResult


@runtime_checkable
class VerifierProtocol(Protocol):
    """Protocol for address verification components.

    Implementations standardize and/or geocode a location in place and
    report how far they got.
    """

    def verify(
        self, location: Location, api_key: str | None = None
    ) -> tuple[VerificationResult, str]:
        """Verify a single location.

        Args:
            location: Location to verify; updated in place.
            api_key: Service API key, overriding the configured one.

        Returns:
            Tuple of the outcome and a human-readable message.
        """
        ...

    @property
    def name(self) -> str:
        """Service identity recorded on the location's attribution fields."""
        ...
