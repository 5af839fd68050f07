from __future__ import annotations

import threading
from typing import Optional

from mappify_address.config import VerifierConfig
from mappify_address.models import Location, VerificationResult
from mappify_address.verifiers import MappifyVerifier

_default_verifier: Optional[MappifyVerifier] = None
_default_lock = threading.Lock()


def get_default_verifier(*, config: Optional[VerifierConfig] = None) -> MappifyVerifier:
    """Return the shared verifier, rebuilding it when a config is passed."""
    global _default_verifier

    with _default_lock:
        if _default_verifier is None or config is not None:
            if _default_verifier is not None:
                _default_verifier.close()
            _default_verifier = MappifyVerifier(config)
        return _default_verifier


def verify_location(
    location: Location,
    api_key: Optional[str] = None,
    *,
    config: Optional[VerifierConfig] = None,
    verifier: Optional[MappifyVerifier] = None,
) -> tuple[VerificationResult, str]:
    """Convenience wrapper that verifies one location with the default verifier."""
    active = verifier or get_default_verifier(config=config)
    return active.verify(location, api_key)
