"""Pytest configuration and fixtures."""

import base64
import datetime

import pytest

# Core segment decoding to core_record
CORE_STRING = "COztr8AOztr8AAKADBENAwCoAOBAAEIAAAwIAEJEAIIAQAGYAPABAACEgAgAEA"


def encode_segment(bit_string: str) -> str:
    """
    Pack a '0'/'1' string into an unpadded base64url segment.

    Spaces are ignored and the last byte is zero-filled.
    """
    bit_string = bit_string.replace(" ", "")
    bit_string += "0" * (-len(bit_string) % 8)
    data = bytes(
        int(bit_string[i : i + 8], 2) for i in range(0, len(bit_string), 8)
    )
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


@pytest.fixture
def encode():
    """Test-only encoder from bit strings to base64url segments."""
    return encode_segment


@pytest.fixture
def core_string() -> str:
    return CORE_STRING


@pytest.fixture
def core_record() -> dict:
    """Expected decoding of CORE_STRING."""
    stamp = datetime.datetime(2020, 5, 20, 18, 40, tzinfo=datetime.timezone.utc)
    return {
        "version": 2,
        "created": stamp,
        "lastUpdated": stamp,
        "cmpId": 10,
        "cmpVersion": 3,
        "consentScreen": 1,
        "consentLanguage": "en",
        "vendorListVersion": 48,
        "tcfPolicyVersion": 2,
        "isServiceSpecific": True,
        "useNonStandardStacks": False,
        "specialFeatureOptIns": [1],
        "purposesConsent": [1, 2, 3, 10],
        "purposeLITransparency": [2, 7],
        "purposeOneTreatment": False,
        "publisherCC": "gb",
        "vendorsConsent": [1, 4, 8],
        "vendorsLegitimateInterest": [25, 30, 31, 32],
        "publisherRestrictions": [
            {"purposeId": 2, "restrictionType": 1, "restrictedVendors": [4]},
        ],
    }
