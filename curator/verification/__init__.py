"""Link verification layer.

Components:
    PlatformRegistry            - Static table of pre-vetted educational platforms
    VerificationCache           - TTL cache contract (InMemoryVerificationCache default)
    LinkVerifier                - Syntax / registry / probe / trusted-domain checks
    FallbackSynthesizer         - Deterministic replacement URLs for failed links
    BatchVerifier               - Bounded, paced, order-preserving batch checks
"""

from curator.verification.platforms import PlatformInfo, PlatformRegistry, platform_info
from curator.verification.cache import InMemoryVerificationCache, VerificationCache
from curator.verification.verifier import TRUSTED_DOMAINS, LinkVerifier
from curator.verification.fallback import FallbackSynthesizer, synthesize_fallback_url
from curator.verification.batch import BatchVerifier

__all__ = [
    "PlatformInfo",
    "PlatformRegistry",
    "platform_info",
    "VerificationCache",
    "InMemoryVerificationCache",
    "TRUSTED_DOMAINS",
    "LinkVerifier",
    "FallbackSynthesizer",
    "synthesize_fallback_url",
    "BatchVerifier",
]
