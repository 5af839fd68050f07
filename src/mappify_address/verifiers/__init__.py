from mappify_address.verifiers.base import BaseVerifier, utc_now
from mappify_address.verifiers.factory import VerifierFactory
from mappify_address.verifiers.mappify import SERVICE_NAME, MappifyVerifier

__all__ = ["BaseVerifier", "MappifyVerifier", "SERVICE_NAME", "VerifierFactory", "utc_now"]
