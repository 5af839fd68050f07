"""Registry of verification services, keyed by a short lowercase name."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from mappify_address.config import VerifierConfig
from mappify_address.protocols import VerifierProtocol

DEFAULT_VERIFIER = "mappify"


class VerifierFactory:
    """Creates verifiers by service name, passing the shared configuration through.

    Example:
        >>> verifier = VerifierFactory.create(config=VerifierConfig(api_key="..."))

        # Register another service
        >>> VerifierFactory.register("smarty", SmartyVerifier)
        >>> verifier = VerifierFactory.create("smarty")
    """

    _registry: ClassVar[dict[str, type[VerifierProtocol]]] = {}

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if DEFAULT_VERIFIER not in cls._registry:
            from mappify_address.verifiers.mappify import MappifyVerifier

            cls._registry[DEFAULT_VERIFIER] = MappifyVerifier

    @classmethod
    def register(cls, name: str, verifier_class: type[VerifierProtocol]) -> None:
        """Register a verifier class under a case-insensitive name.

        Raises:
            TypeError: If the class has no ``verify`` method or no ``name``.
        """
        if not callable(getattr(verifier_class, "verify", None)) or not hasattr(
            verifier_class, "name"
        ):
            raise TypeError(f"{verifier_class.__name__} does not implement VerifierProtocol")
        cls._registry[name.lower()] = verifier_class

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name.lower(), None)

    @classmethod
    def create(
        cls,
        verifier_type: Optional[str] = None,
        *,
        config: Optional[VerifierConfig] = None,
        **kwargs: Any,
    ) -> VerifierProtocol:
        """Create a verifier instance.

        Args:
            verifier_type: Registered name, defaulting to "mappify".
            config: Configuration handed to the verifier, when given.
            **kwargs: Further constructor arguments (clock, transport, ...).

        Raises:
            ValueError: If the verifier type is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = (verifier_type or DEFAULT_VERIFIER).lower()
        verifier_class = cls._registry.get(type_name)
        if verifier_class is None:
            available = ", ".join(cls.available_types())
            raise ValueError(f"Unknown verifier type: {type_name}. Available types: {available}")

        if config is not None:
            kwargs["config"] = config
        return verifier_class(**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        cls._ensure_defaults_registered()
        return sorted(cls._registry)

    @classmethod
    def clear_registry(cls) -> None:
        """Remove every registration; the default is restored on next use."""
        cls._registry.clear()
