"""
Dependency Injection

Composition root for the security core. Each provider returns the one
instance shared by the whole process; tests and embedding applications
swap them through the override hooks below.
"""

from functools import lru_cache

from safeguard.core.encoding import Encoder
from safeguard.core.intrusion import (
    IntrusionDetector,
    get_intrusion_detector,
    set_intrusion_detector,
)
from safeguard.core.logging import SecurityLogger, get_security_logger as _security_logger
from safeguard.core.security import Hasher
from safeguard.services.random_source import RandomSource
from safeguard.services.randomizer import Randomizer


__all__ = [
    "IntrusionDetector",
    "get_encoder",
    "get_hasher",
    "get_intrusion_detector",
    "get_random_source",
    "get_randomizer",
    "get_security_logger",
    "reset_dependencies",
    "set_intrusion_detector",
]


# ===================================
# Collaborators
# ===================================

@lru_cache()
def get_encoder() -> Encoder:
    """
    Get encoder instance.

    Returns:
        Encoder: Shared encoder
    """
    return Encoder()


@lru_cache()
def get_hasher() -> Hasher:
    """
    Get hasher instance.

    Returns:
        Hasher: Shared hasher
    """
    return Hasher()


@lru_cache()
def get_security_logger(name: str) -> SecurityLogger:
    """
    Get security logger for a component.

    Returns:
        SecurityLogger: Shared logger per name
    """
    return _security_logger(name)


# ===================================
# Randomness
# ===================================

@lru_cache()
def get_random_source() -> RandomSource:
    """
    Get the process random source.

    Returns:
        RandomSource: Source built from RANDOM_ALGORITHM
    """
    return RandomSource(logger=get_security_logger("RandomSource"))


@lru_cache()
def get_randomizer() -> Randomizer:
    """
    Get the process randomizer.

    Returns:
        Randomizer: Randomizer over the shared random source
    """
    return Randomizer(
        get_random_source(),
        encoder=get_encoder(),
        hasher=get_hasher(),
        logger=get_security_logger("Randomizer"),
    )


def reset_dependencies():
    """Drop all cached instances and restore the default intrusion detector."""
    for provider in (get_encoder, get_hasher, get_security_logger, get_random_source, get_randomizer):
        provider.cache_clear()
    set_intrusion_detector(None)
