from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://mappify.io/api/rpc/"
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONFIDENCE_THRESHOLD = 0.75


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


@dataclass
class VerifierConfig:
    """Configuration for the mappify.io verification component.

    Every field defaults from the environment, so a host only needs to set
    ``MAPPIFY_API_KEY`` to get a working verifier.
    """

    api_key: str = field(
        default_factory=lambda: os.getenv("MAPPIFY_API_KEY", ""),
        repr=False,
    )
    base_url: str = field(
        default_factory=lambda: os.getenv("MAPPIFY_BASE_URL", DEFAULT_BASE_URL)
    )
    timeout: float = field(
        default_factory=lambda: _env_float("MAPPIFY_TIMEOUT", DEFAULT_TIMEOUT)
    )
    confidence_threshold: float = field(
        default_factory=lambda: _env_float(
            "MAPPIFY_CONFIDENCE_THRESHOLD", DEFAULT_CONFIDENCE_THRESHOLD
        )
    )

    def __post_init__(self) -> None:
        if not (0 <= self.confidence_threshold <= 1):
            raise ValueError(
                f"confidence_threshold must be between 0 and 1, got {self.confidence_threshold}"
            )
