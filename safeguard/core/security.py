"""
Security Module

Provides the salted one-way hash used across the toolkit.
"""

import base64
from typing import Optional

from cryptography.hazmat.primitives import hashes

from safeguard.config import Settings, get_settings
from safeguard.core.exceptions import EncryptionException


_ALGORITHMS = {
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
}


# ===================================
# Hashing
# ===================================

class Hasher:
    """
    Salted, iterated digest.

    Uses HASH_ALGORITHM and HASH_ITERATIONS from settings.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize hasher with algorithm from settings."""
        settings = settings or get_settings()
        self.algorithm = settings.HASH_ALGORITHM
        self.iterations = settings.HASH_ITERATIONS

    def _digest(self, data: bytes) -> bytes:
        try:
            algorithm = _ALGORITHMS[self.algorithm]()
        except KeyError:
            raise EncryptionException(
                "Internal error",
                f"Unsupported hash algorithm: {self.algorithm}",
            )
        h = hashes.Hash(algorithm)
        h.update(data)
        return h.finalize()

    def hash(self, plaintext: str, salt: str) -> str:
        """
        Hash plaintext with a salt.

        Args:
            plaintext: Text to hash
            salt: Salt prepended to the plaintext

        Returns:
            str: Base64-encoded digest

        Raises:
            EncryptionException: If the algorithm is not supported
        """
        digest = self._digest(salt.encode("utf-8") + plaintext.encode("utf-8"))
        for _ in range(self.iterations - 1):
            digest = self._digest(digest)
        return base64.b64encode(digest).decode("ascii")
