"""
Random Source

Wraps the platform CSPRNG selected by RANDOM_ALGORITHM. One instance is
shared by the whole process, so every draw is serialized by a lock.
"""

import random
import threading
from typing import Callable, Dict, Optional

from safeguard.config import Settings, get_settings
from safeguard.core.exceptions import EncryptionException, IntrusionException
from safeguard.core.logging import EventType, SecurityLogger, get_security_logger
from safeguard.core.metrics import record_random_source_init


FALLBACK_ALGORITHM = "SystemRandom"

# All names resolve to the OS entropy pool; the aliases keep configs
# written for other runtimes working.
ALGORITHMS: Dict[str, Callable[[], random.Random]] = {
    "SystemRandom": random.SystemRandom,
    "NativePRNG": random.SystemRandom,
    "urandom": random.SystemRandom,
}


class RandomSource:
    """
    Process-wide source of cryptographically strong random draws.

    An unknown algorithm never makes construction fail: the source comes
    up degraded on the fallback generator, logs a critical security event
    and reports an EncryptionException to intrusion detection. Callers
    check ``degraded`` to detect this.
    """

    def __init__(
        self,
        algorithm: Optional[str] = None,
        *,
        generator: Optional[random.Random] = None,
        logger: Optional[SecurityLogger] = None,
        settings: Optional[Settings] = None,
    ):
        self.logger = logger or get_security_logger("RandomSource")
        self._lock = threading.Lock()
        self._degraded = False

        if generator is not None:
            self._requested = algorithm or type(generator).__name__
            self._algorithm = self._requested
            self._generator = generator
            return

        if algorithm is None:
            algorithm = (settings or get_settings()).get_random_algorithm()
        self._requested = algorithm

        factory = ALGORITHMS.get(algorithm)
        if factory is None:
            self._degraded = True
            self._algorithm = FALLBACK_ALGORITHM
            self._generator = ALGORITHMS[FALLBACK_ALGORITHM]()
            self.logger.critical(
                EventType.SECURITY,
                f"Can't find random algorithm {algorithm}, using insecure fallback {FALLBACK_ALGORITHM}",
                extra={"algorithm": algorithm},
            )
            # Constructed for its reporting side effect only
            try:
                EncryptionException(
                    "Error creating randomizer",
                    f"Can't find random algorithm {algorithm}",
                    KeyError(algorithm),
                )
            except IntrusionException as e:
                self.logger.critical(EventType.SECURITY, e.get_log_message())
        else:
            self._algorithm = algorithm
            self._generator = factory()

        record_random_source_init(algorithm, self._degraded)

    @property
    def algorithm(self) -> str:
        """Algorithm actually used for draws."""
        return self._algorithm

    @property
    def requested_algorithm(self) -> str:
        """Algorithm named in configuration."""
        return self._requested

    @property
    def degraded(self) -> bool:
        """True when running on the fallback generator."""
        return self._degraded

    def draw_int(self, bound: int) -> int:
        """
        Draw a uniform integer.

        Args:
            bound: Exclusive upper bound, must be positive

        Returns:
            int: Value in ``[0, bound)``
        """
        if bound <= 0:
            raise ValueError("bound must be positive")
        with self._lock:
            return self._generator.randrange(bound)

    def draw_float(self) -> float:
        """Draw a uniform float in ``[0, 1)``."""
        with self._lock:
            return self._generator.random()

    def draw_bool(self) -> bool:
        """Draw a fair coin flip."""
        with self._lock:
            return self._generator.getrandbits(1) == 1
