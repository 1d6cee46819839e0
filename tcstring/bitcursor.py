"""
Positioned reader over a BitSequence.

A cursor is created for one segment decode and advanced field by field.
Every read checks bounds before touching the position, so a failed read
leaves the cursor where it was.
"""

from tcstring.bitsequence import BitSequence
from tcstring.errors import TruncatedError


class BitCursor:
    """Bit reader with an explicit absolute position."""

    def __init__(self, bits: BitSequence, position: int = 0) -> None:
        """
        Initialize a cursor.

        Args:
            bits: Sequence to read from
            position: Starting bit position

        Raises:
            ValueError: If position lies outside [0, len(bits)]
        """
        self.bits = bits
        self._position = 0
        self.position = position

    @property
    def position(self) -> int:
        """Absolute position of the next bit to read."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        if value < 0 or value > self.bits.length:
            raise ValueError(
                f"Position {value} out of range [0, {self.bits.length}]"
            )
        self._position = value

    @property
    def remaining(self) -> int:
        """Number of bits remaining to read."""
        return self.bits.length - self._position

    def skip(self, width: int) -> None:
        """
        Advance past bits without decoding them.

        Raises:
            TruncatedError: If fewer than width bits remain
        """
        self._require(self._position, width)
        self._position += width

    def read_uint(self, width: int) -> int:
        """
        Read and consume bits as a big-endian unsigned integer.

        Args:
            width: Number of bits to read

        Returns:
            Integer value of bits (MSB-first), 0 when width is 0

        Raises:
            TruncatedError: If fewer than width bits remain
        """
        self._require(self._position, width)
        value = self.bits.uint(self._position, width)
        self._position += width
        return value

    def read_bool(self) -> bool:
        """Read and consume a single bit as a flag."""
        return self.read_uint(1) == 1

    def peek_substring(self, start: int, length: int) -> str:
        """
        Read bits as a '0'/'1' string without moving the cursor.

        Args:
            start: Absolute bit position
            length: Number of bits

        Raises:
            TruncatedError: If the run extends past the end
        """
        self._require(start, length)
        return self.bits.substring(start, length)

    def _require(self, start: int, width: int) -> None:
        if width < 0:
            raise ValueError("width must be non-negative")
        if start < 0:
            raise ValueError(f"Position {start} is negative")
        available = max(self.bits.length - start, 0)
        if width > available:
            raise TruncatedError(start, width, available)
