"""
TCF v2 consent string decoding.

A consent string is one or two base64url segments joined by '.': the
Core segment, optionally followed by a Disclosed Vendors segment. Only
the Core segment is decoded.
"""

import copy
import logging

from tcstring.base64url import unpack
from tcstring.definitions import CORE_SEGMENT, MAX_SEGMENTS, SEGMENT_SEPARATOR
from tcstring.errors import UnsupportedSegmentCountError
from tcstring.segment import decode_segment

logger = logging.getLogger(__name__)


def decode_core_segment(segment: str) -> dict:
    """
    Decode the Core segment of a consent string.

    Args:
        segment: Base64url Core segment

    Returns:
        Core record keyed by field name
    """
    bits = unpack(segment)
    record, end_position = decode_segment(bits, CORE_SEGMENT)
    logger.debug(
        "Decoded core segment: %d bits, %d consumed", bits.length, end_position
    )
    return record


class TCString:
    """Decoded view of a consent string."""

    def __init__(self, consent_string: "str | None" = None) -> None:
        """
        Initialize and decode.

        Args:
            consent_string: Dot-delimited consent string; None or empty
                means no data

        Raises:
            DecodeError: If the string cannot be decoded
        """
        self._core = None
        self.disclosed_vendors_segment = None
        self.set_consent_string(consent_string)

    def set_consent_string(self, consent_string: "str | None") -> None:
        """
        Split the consent string into segments and decode the Core segment.

        Raises:
            UnsupportedSegmentCountError: If there are more than two segments
            DecodeError: If the Core segment cannot be decoded
        """
        self._core = None
        self.disclosed_vendors_segment = None

        if not consent_string:
            return

        segments = consent_string.split(SEGMENT_SEPARATOR)
        logger.debug("Consent string has %d segment(s)", len(segments))

        if len(segments) > MAX_SEGMENTS:
            raise UnsupportedSegmentCountError(
                f"Unknown segment type in consent string: "
                f"{len(segments)} segments, at most {MAX_SEGMENTS} supported"
            )

        core = decode_core_segment(segments[0])
        if len(segments) > 1:
            # Kept verbatim, not decoded
            self.disclosed_vendors_segment = segments[1]
        self._core = core

    def get_core_segment_data(self) -> "dict | None":
        """
        Get a copy of the decoded Core record.

        Returns:
            Deep copy of the record, or None if nothing was decoded
        """
        if self._core is None:
            return None
        return copy.deepcopy(self._core)


def decode(consent_string: "str | None") -> "dict | None":
    """
    Decode a consent string into its Core record.

    Args:
        consent_string: Dot-delimited consent string

    Returns:
        Core record, or None for an empty string

    Raises:
        DecodeError: If the string cannot be decoded
    """
    return TCString(consent_string).get_core_segment_data()
