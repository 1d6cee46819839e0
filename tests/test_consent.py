"""Tests for vendor consent checks."""

import logging

from tcstring.consent import get_consent, has_consent


class TestHasConsent:
    """Test has_consent on decoded records."""

    def test_consented(self, core_record: dict) -> None:
        """Test vendor and purposes present."""
        assert has_consent(core_record, 4, [1, 2, 3])

    def test_vendor_missing(self, core_record: dict) -> None:
        """Test a vendor without consent."""
        assert not has_consent(core_record, 5, [1])

    def test_purpose_missing(self, core_record: dict) -> None:
        """Test a purpose without consent."""
        assert not has_consent(core_record, 4, [1, 4])

    def test_no_purposes(self, core_record: dict) -> None:
        """Test an empty purpose list only checks the vendor."""
        assert has_consent(core_record, 8, [])

    def test_no_record(self) -> None:
        """Test missing data means no consent."""
        assert not has_consent(None, 4, [1])
        assert not has_consent({}, 4, [1])


class TestGetConsent:
    """Test get_consent on consent strings."""

    def test_consented(self, core_string: str) -> None:
        """Test a consented vendor."""
        assert get_consent(core_string, 8, [3, 10])

    def test_not_consented(self, core_string: str) -> None:
        """Test a vendor without consent."""
        assert not get_consent(core_string, 25, [1])

    def test_empty(self) -> None:
        """Test an empty string."""
        assert not get_consent("", 8, [1])

    def test_decode_failure_logged(self, caplog) -> None:
        """Test decode failures are logged and mean no consent."""
        with caplog.at_level(logging.ERROR, logger="tcstring.consent"):
            assert not get_consent("A.B.C", 8, [1])
        assert "Failed to decode consent string." in caplog.text
