"""
Exceptions raised while decoding consent strings.

Every decode failure derives from DecodeError, which is itself a
ValueError. Running out of bits is also an EOFError, matching how the
bit reader reports exhausted input.
"""


class DecodeError(ValueError):
    """Base class for consent string decoding failures."""


class InvalidCharacterError(DecodeError):
    """Segment contains a character outside the base64url alphabet."""


class InvalidLengthError(DecodeError):
    """Segment length cannot be a valid base64 payload."""


class TruncatedError(DecodeError, EOFError):
    """A read requested more bits than remain in the sequence."""

    def __init__(self, position: int, width: int, available: int) -> None:
        super().__init__(
            f"Not enough bits at position {position}: "
            f"need {width}, have {available}"
        )
        self.position = position
        self.width = width
        self.available = available


class UnsupportedFieldTypeError(DecodeError):
    """Schema references an encoding kind the codec does not implement."""


class UnsupportedSegmentCountError(DecodeError):
    """Consent string has more dot-delimited segments than supported."""


class InvalidTimestampError(DecodeError):
    """Timestamp lies outside the range datetime can represent."""
