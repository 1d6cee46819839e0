"""
IAB TCF v2 consent string decoder.

Schema-driven decoding of the bit-packed Core segment of
Transparency & Consent Framework v2 consent strings.
"""

__version__ = "1.0.0"

from tcstring.consent import get_consent, has_consent
from tcstring.errors import (
    DecodeError,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidTimestampError,
    TruncatedError,
    UnsupportedFieldTypeError,
    UnsupportedSegmentCountError,
)
from tcstring.tcstring import TCString, decode

__all__ = [
    "TCString",
    "decode",
    "get_consent",
    "has_consent",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "InvalidTimestampError",
    "TruncatedError",
    "UnsupportedFieldTypeError",
    "UnsupportedSegmentCountError",
    "__version__",
]
