from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Callable
from datetime import datetime, timezone

from mappify_address.models import Location, VerificationResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseVerifier(ABC):
    """Abstract base class for address verification components.

    Provides call counting, logging, and the attribution stamp that every
    verification attempt leaves on the location, whatever its outcome.
    Subclasses must implement the _verify_impl method.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        """Initialize the verifier.

        Args:
            clock: Callable returning the current time; defaults to UTC now.
        """
        self._clock = clock or utc_now
        self._verify_count = 0
        self._outcomes: Counter[VerificationResult] = Counter()
        self._stats_lock = threading.Lock()

    @property
    @abstractmethod
    def name(self) -> str:
        """Service identity recorded on the location (e.g. "Mappify")."""
        ...

    @abstractmethod
    def _verify_impl(
        self, location: Location, api_key: str | None
    ) -> tuple[VerificationResult, str]:
        """Service-specific verification.

        Args:
            location: Location to verify; updated in place.
            api_key: API key passed by the caller, if any.

        Returns:
            Tuple of the outcome and a human-readable message.
        """
        ...

    def now(self) -> datetime:
        return self._clock()

    def verify(
        self, location: Location, api_key: str | None = None
    ) -> tuple[VerificationResult, str]:
        """Standardize and geocode a location in place.

        Args:
            location: Location to verify.
            api_key: Service API key, overriding the configured one.

        Returns:
            Tuple of the outcome and a human-readable message.
        """
        with self._stats_lock:
            self._verify_count += 1
        try:
            result, message = self._verify_impl(location, api_key)
        finally:
            self.stamp_attempt(location)

        with self._stats_lock:
            self._outcomes[result] += 1
        logger.debug("%s verification result: %s - %s", self.name, result.value, message)
        return result, message

    def stamp_attempt(self, location: Location) -> None:
        """Record this service and the current time as the last attempt."""
        location.standardize_attempted_service_type = self.name
        location.standardize_attempted_date_time = self.now()

        location.geocode_attempted_service_type = self.name
        location.geocode_attempted_date_time = self.now()

    @property
    def stats(self) -> dict[str, int]:
        """Get verification statistics.

        Returns:
            Dict with verify_count and one count per outcome value.
        """
        with self._stats_lock:
            return {
                "verify_count": self._verify_count,
                **{result.value: self._outcomes[result] for result in VerificationResult},
            }

    def reset_stats(self) -> None:
        """Reset verification statistics."""
        with self._stats_lock:
            self._verify_count = 0
            self._outcomes.clear()
