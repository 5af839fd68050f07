"""Shared pytest fixtures and Hypothesis configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime

import httpx
import pytest
from hypothesis import Verbosity, settings

from mappify_address import Location, MappifyVerifier, VerifierConfig
from tests.payloads import FIXED_NOW

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def location() -> Location:
    return Location(
        street1="12 smith street",
        street2="unit 4",
        city="fitzroy",
        state="Victoria",
        postal_code="3065",
    )


@pytest.fixture
def make_verifier() -> Iterator[Callable[..., MappifyVerifier]]:
    """Build verifiers backed by an httpx.MockTransport handler and a fixed clock."""
    created: list[MappifyVerifier] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **config: object) -> MappifyVerifier:
        options: dict[str, object] = {"api_key": "test-key", "base_url": "http://test"}
        options.update(config)
        verifier = MappifyVerifier(
            VerifierConfig(**options),  # type: ignore[arg-type]
            transport=httpx.MockTransport(handler),
            clock=lambda: FIXED_NOW,
        )
        created.append(verifier)
        return verifier

    yield _make

    for verifier in created:
        verifier.close()
