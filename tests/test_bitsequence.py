"""Tests for BitSequence class."""

import pytest

from tcstring.bitsequence import BitSequence


class TestBitSequenceInit:
    """Test BitSequence construction."""

    def test_length_is_eight_per_byte(self) -> None:
        """Test one byte expands to eight bits."""
        assert BitSequence(bytes([0xAB, 0xCD, 0xEF])).length == 24
        assert len(BitSequence(bytes([0xAB]))) == 8

    def test_empty(self) -> None:
        """Test an empty sequence."""
        bs = BitSequence(b"")
        assert bs.length == 0
        assert str(bs) == ""

    def test_copies_input(self) -> None:
        """Test that later changes to the source do not leak in."""
        source = bytearray([0xFF])
        bs = BitSequence(source)
        source[0] = 0x00
        assert bs.to_bytes() == b"\xff"


class TestBitSequenceGetBit:
    """Test bit access."""

    def test_msb_first(self) -> None:
        """Test that bit 0 is the MSB of the first byte."""
        bs = BitSequence(bytes([0b10110100]))
        assert [bs.get_bit(i) for i in range(8)] == [1, 0, 1, 1, 0, 1, 0, 0]

    def test_indexing_and_iteration(self) -> None:
        """Test sequence protocol matches get_bit."""
        bs = BitSequence(bytes([0xF0, 0x0F]))
        assert bs[0] == 1
        assert bs[15] == 1
        assert list(bs) == [1] * 4 + [0] * 8 + [1] * 4

    def test_out_of_range(self) -> None:
        """Test reading outside the sequence."""
        bs = BitSequence(bytes([0xFF]))
        with pytest.raises(IndexError):
            bs.get_bit(8)
        with pytest.raises(IndexError):
            bs.get_bit(-1)


class TestBitSequenceUint:
    """Test integer extraction."""

    def test_cross_byte(self) -> None:
        """Test a run spanning two bytes."""
        bs = BitSequence(bytes([0b00001111, 0b11000000]))
        assert bs.uint(4, 6) == 0b111111

    def test_whole_sequence(self) -> None:
        """Test a run covering every bit."""
        bs = BitSequence(bytes([0x12, 0x34]))
        assert bs.uint(0, 16) == 0x1234

    def test_zero_width(self) -> None:
        """Test zero-width runs yield zero."""
        bs = BitSequence(bytes([0xFF]))
        assert bs.uint(8, 0) == 0

    def test_past_end(self) -> None:
        """Test a run extending past the end."""
        bs = BitSequence(bytes([0xFF]))
        with pytest.raises(IndexError):
            bs.uint(4, 5)


class TestBitSequenceSubstring:
    """Test bit string rendering."""

    def test_substring(self) -> None:
        """Test leading zeros are kept."""
        bs = BitSequence(bytes([0b00101100]))
        assert bs.substring(0, 4) == "0010"
        assert bs.substring(4, 4) == "1100"

    def test_str(self) -> None:
        """Test the full rendering."""
        assert str(BitSequence(bytes([0x01, 0x80]))) == "0000000110000000"


class TestBitSequenceEquality:
    """Test equality."""

    def test_equal(self) -> None:
        """Test sequences from equal bytes compare equal."""
        a = BitSequence(bytes([1, 2, 3]))
        b = BitSequence(bytes([1, 2, 3]))
        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b)

    def test_not_equal(self) -> None:
        """Test differing sequences."""
        assert BitSequence(b"\x01") != BitSequence(b"\x02")
        assert BitSequence(b"\x00") != BitSequence(b"\x00\x00")
