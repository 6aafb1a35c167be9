"""
Resource Curator
Learning-resource selection with link verification and fallback synthesis
"""

__version__ = "0.1.0"

from curator.config import CuratorConfig, get_config
from curator.models import CandidateResource, CuratedResource, VerificationOutcome
from curator.catalog.selector import ResourceSelector
from curator.verification.batch import BatchVerifier
from curator.verification.cache import InMemoryVerificationCache, VerificationCache
from curator.verification.fallback import FallbackSynthesizer
from curator.verification.verifier import LinkVerifier
from curator.pipeline import CurationPipeline, CurationResult, get_pipeline

__all__ = [
    "CuratorConfig",
    "get_config",
    "CandidateResource",
    "CuratedResource",
    "VerificationOutcome",
    "ResourceSelector",
    "BatchVerifier",
    "VerificationCache",
    "InMemoryVerificationCache",
    "FallbackSynthesizer",
    "LinkVerifier",
    "CurationPipeline",
    "CurationResult",
    "get_pipeline",
]
