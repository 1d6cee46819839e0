"""
Base64url segment unpacking.

Converts one url-safe base64 segment of a consent string into a
BitSequence. Padding is optional; '-' and '_' stand in for '+' and '/'.
"""

import base64
import binascii
import re

from tcstring.bitsequence import BitSequence
from tcstring.errors import InvalidCharacterError, InvalidLengthError

# HTML "space characters", ignored like atob() does
_WHITESPACE = re.compile(r"[\t\n\f\r ]")
_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")


def unpack(segment: str) -> BitSequence:
    """
    Decode a base64url segment into bits.

    Args:
        segment: Base64url text, padding optional

    Returns:
        BitSequence holding eight bits per decoded byte, MSB-first

    Raises:
        InvalidCharacterError: If a non-alphabet character remains
        InvalidLengthError: If the unpadded length modulo 4 is 1
    """
    encoded = _WHITESPACE.sub("", segment)
    encoded = encoded.rstrip("=")
    encoded = encoded.replace("-", "+").replace("_", "/")

    if not _ALPHABET.fullmatch(encoded):
        raise InvalidCharacterError(
            "Invalid character: the segment is not correctly base64url encoded"
        )

    # One leftover character carries only 6 bits, not a whole byte
    if len(encoded) % 4 == 1:
        raise InvalidLengthError(
            f"Invalid length: {len(encoded)} characters cannot be base64 decoded"
        )

    encoded += "=" * (-len(encoded) % 4)
    try:
        data = base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise InvalidCharacterError(f"Invalid base64 payload: {e}") from e

    return BitSequence(data)
