"""
Immutable bit sequence built from bytes.

Bit Numbering Convention:
- Bit 0 = MSB of the first byte (first bit on the wire)
- Bit N-1 = LSB of the last byte

The length is always a multiple of 8.
"""


class BitSequence:
    """Read-only, MSB-first view of a byte string as bits."""

    def __init__(self, data: bytes = b"") -> None:
        """
        Initialize a bit sequence.

        Args:
            data: Source bytes, one byte expands to eight bits
        """
        self._data = bytes(data)
        self.length = len(self._data) * 8
        # Whole sequence as one integer for wide extractions
        self._value = int.from_bytes(self._data, "big")

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        for pos in range(self.length):
            yield self.get_bit(pos)

    def __getitem__(self, pos: int) -> int:
        return self.get_bit(pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return self.substring(0, self.length)

    def __repr__(self) -> str:
        return f"BitSequence({self._data!r})"

    def get_bit(self, pos: int) -> int:
        """
        Get bit value at position.

        Args:
            pos: Bit position (0 = MSB of first byte)

        Returns:
            Bit value (0 or 1)

        Raises:
            IndexError: If pos is out of range
        """
        if pos < 0 or pos >= self.length:
            raise IndexError(f"Bit position {pos} out of range [0, {self.length})")

        byte_index = pos // 8
        bit_index = pos % 8

        return (self._data[byte_index] >> (7 - bit_index)) & 1

    def uint(self, start: int, width: int) -> int:
        """
        Interpret a run of bits as a big-endian unsigned integer.

        Args:
            start: First bit position
            width: Number of bits (0 yields 0)

        Returns:
            Unsigned integer value of the bits

        Raises:
            IndexError: If the run does not fit inside the sequence
        """
        self._check_run(start, width)
        if width == 0:
            return 0

        shift = self.length - start - width
        return (self._value >> shift) & ((1 << width) - 1)

    def substring(self, start: int, length: int) -> str:
        """
        Render a run of bits as a string of '0' and '1' characters.

        Args:
            start: First bit position
            length: Number of bits

        Returns:
            Bit string, empty when length is 0
        """
        if length == 0:
            self._check_run(start, 0)
            return ""
        return format(self.uint(start, length), f"0{length}b")

    def to_bytes(self) -> bytes:
        """Return the underlying bytes."""
        return self._data

    def equals(self, other: "BitSequence") -> bool:
        """Check bit-for-bit equality with another sequence."""
        return self == other

    def _check_run(self, start: int, width: int) -> None:
        if width < 0:
            raise ValueError("width must be non-negative")
        if start < 0 or start + width > self.length:
            raise IndexError(
                f"Bit run [{start}, {start + width}) out of range [0, {self.length})"
            )
