"""
Randomizer Service

Unguessable strings, numbers, filenames and GUIDs drawn from the shared
RandomSource.
"""

import math
import socket
import time
from typing import Optional

from safeguard.config import Settings, get_settings
from safeguard.core import charsets
from safeguard.core.charsets import CharacterSet
from safeguard.core.encoding import DecodeError, Encoder
from safeguard.core.exceptions import EncodingException
from safeguard.core.logging import EventType, SecurityLogger, get_security_logger
from safeguard.core.metrics import record_guid_failure, record_guid_generated
from safeguard.core.security import Hasher
from safeguard.services.random_source import RandomSource


FALLBACK_HOST = "0.0.0.0"
FILENAME_LENGTH = 12
GUID_SEED_LENGTH = 20
GUID_BYTES = 16


def _local_host() -> str:
    """Best-effort host identity without a DNS round trip."""
    try:
        return socket.gethostname() or FALLBACK_HOST
    except OSError:
        return FALLBACK_HOST


class Randomizer:
    """
    Public randomness API.

    Handles:
    - Random strings over a character set
    - Booleans, integers and reals
    - Random filenames
    - Hash-derived GUIDs
    """

    union = staticmethod(charsets.union)
    contains = staticmethod(charsets.contains)

    def __init__(
        self,
        source: RandomSource,
        *,
        encoder: Optional[Encoder] = None,
        hasher: Optional[Hasher] = None,
        logger: Optional[SecurityLogger] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize randomizer.

        Args:
            source: Shared random source
            encoder: Base64 decoder used for GUIDs
            hasher: Salted hash used for GUIDs
            logger: Security logger
            settings: Settings providing the GUID salt
        """
        self.source = source
        self.encoder = encoder or Encoder()
        self.hasher = hasher or Hasher(settings)
        self.logger = logger or get_security_logger("Randomizer")
        self.guid_salt = (settings or get_settings()).GUID_HASH_SALT

    def random_string(self, length: int, charset: CharacterSet) -> str:
        """
        Generate a random string.

        Args:
            length: Number of characters
            charset: Characters to pick from, with replacement

        Returns:
            str: Random string

        Raises:
            ValueError: If length is negative or charset is empty
        """
        if length < 0:
            raise ValueError("length must be non-negative")
        if not charset:
            raise ValueError("charset must not be empty")

        return "".join(charset[self.source.draw_int(len(charset))] for _ in range(length))

    def random_boolean(self) -> bool:
        """Return a fair coin flip."""
        return self.source.draw_bool()

    def random_integer(self, min: int, max: int) -> int:
        """
        Generate a random integer.

        Args:
            min: Inclusive lower bound
            max: Exclusive upper bound

        Returns:
            int: Value in ``[min, max)``

        Raises:
            ValueError: If max is not greater than min
        """
        if max <= min:
            raise ValueError(f"max ({max}) must be greater than min ({min})")
        return self.source.draw_int(max - min) + min

    def random_real(self, min: float, max: float) -> float:
        """
        Generate a random real.

        Args:
            min: Inclusive lower bound
            max: Exclusive upper bound

        Returns:
            float: Value in ``[min, max)``
        """
        factor = max - min
        draw = self.source.draw_float()
        value = draw * factor + min
        # factor overflows to inf for ranges wider than the float limit
        if not math.isfinite(value):
            value = draw * max + (1.0 - draw) * min
        # Rounding can land exactly on max for wide ranges
        if value >= max and max > min:
            return min
        return value

    def random_filename(self, extension: str) -> str:
        """
        Generate an unguessable filename.

        Args:
            extension: Extension appended after a dot, used as-is

        Returns:
            str: Filename like ``a8Kd0QzLm3Xe.txt``
        """
        return f"{self.random_string(FILENAME_LENGTH, Encoder.CHAR_ALPHANUMERICS)}.{extension}"

    def random_guid(self) -> str:
        """
        Generate a GUID from hashed host, time and random seed.

        Returns:
            str: Uppercase GUID in 8-4-4-4-12 layout

        Raises:
            EncodingException: If the hash output cannot be turned into GUID bytes
        """
        seed = ":".join([
            _local_host(),
            str(int(time.time() * 1000)),
            self.random_string(GUID_SEED_LENGTH, Encoder.CHAR_ALPHANUMERICS),
        ])

        digest = self.hasher.hash(seed, self.guid_salt)
        try:
            raw_bytes = self.encoder.decode_base64(digest)
        except DecodeError as e:
            self.logger.critical(EventType.SECURITY, f"Problem decoding hash while creating GUID: {digest}")
            record_guid_failure("decode")
            raise EncodingException(
                "Could not generate identifier",
                f"Problem decoding hash while creating GUID: {digest}",
                e,
            )

        if len(raw_bytes) < GUID_BYTES:
            self.logger.critical(
                EventType.SECURITY,
                f"Hash too short while creating GUID: {len(raw_bytes)} bytes",
            )
            record_guid_failure("short_digest")
            raise EncodingException(
                "Could not generate identifier",
                f"Hash too short while creating GUID: {len(raw_bytes)} bytes",
            )

        raw = raw_bytes[:GUID_BYTES].hex().upper()
        record_guid_generated()
        return f"{raw[0:8]}-{raw[8:12]}-{raw[12:16]}-{raw[16:20]}-{raw[20:32]}"
