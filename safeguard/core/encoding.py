"""
Encoding

Base64 helpers and the named character sets used for token generation.
"""

import base64
import binascii
import string

from safeguard.core.charsets import union


class DecodeError(ValueError):
    """Raised when input is not valid base64."""


class Encoder:
    """
    Encoder with the standard character sets.
    """

    CHAR_LOWERS = string.ascii_lowercase
    CHAR_UPPERS = string.ascii_uppercase
    CHAR_DIGITS = string.digits
    CHAR_SPECIALS = ".-_!@$^*=~|+?"
    CHAR_LETTERS = union(CHAR_LOWERS, CHAR_UPPERS)
    CHAR_ALPHANUMERICS = union(CHAR_LETTERS, CHAR_DIGITS)

    # Look-alike characters (l, o, I, O, 0, 1) are left out of password sets
    CHAR_PASSWORD_LOWERS = "abcdefghjkmnpqrstuvwxyz"
    CHAR_PASSWORD_UPPERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
    CHAR_PASSWORD_DIGITS = "23456789"
    CHAR_PASSWORD_SPECIALS = "_.!@$*=-?"
    CHAR_PASSWORD_LETTERS = union(CHAR_PASSWORD_LOWERS, CHAR_PASSWORD_UPPERS)

    def encode_base64(self, data: bytes) -> str:
        """
        Encode bytes as base64.

        Args:
            data: Raw bytes

        Returns:
            str: Base64 text
        """
        return base64.b64encode(data).decode("ascii")

    def decode_base64(self, text: str) -> bytes:
        """
        Decode base64 text.

        Args:
            text: Base64 text

        Returns:
            bytes: Decoded bytes

        Raises:
            DecodeError: If the text is not valid base64
        """
        try:
            return base64.b64decode(text.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError) as e:
            raise DecodeError(f"Invalid base64 input: {e}") from e
