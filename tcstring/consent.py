"""
Vendor consent checks on decoded Core records.
"""

import logging

from tcstring.errors import DecodeError
from tcstring.tcstring import TCString

logger = logging.getLogger(__name__)


def has_consent(record: "dict | None", vendor_id: int, purpose_ids) -> bool:
    """
    Check that a vendor has consent for every given purpose.

    Args:
        record: Decoded Core record, or None
        vendor_id: Vendor ID from the Global Vendor List
        purpose_ids: Purpose IDs that must all be consented

    Returns:
        True if the vendor and all purposes are consented
    """
    if not record:
        return False

    if vendor_id not in record["vendorsConsent"]:
        return False

    purposes = record["purposesConsent"]
    return all(purpose_id in purposes for purpose_id in purpose_ids)


def get_consent(consent_string: "str | None", vendor_id: int, purpose_ids) -> bool:
    """
    Decode a consent string and check vendor consent.

    Decode failures are logged and treated as no consent.

    Returns:
        True if the vendor and all purposes are consented
    """
    try:
        record = TCString(consent_string).get_core_segment_data()
    except DecodeError as e:
        logger.error("Failed to decode consent string. %s", e)
        return False

    return has_consent(record, vendor_id, purpose_ids)
