"""
Field codec: per-kind decoding of bit-packed values.

Implements the encodings used by TCF v2 segments:
- Unsigned integers, flags and decisecond timestamps
- Bitmaps (bit i set means ID i+1 is present)
- Letter pairs (two 6-bit letters, e.g. language codes)
- Range lists (run-length ID entries, duplicates kept)
- Minimal lists (bitmap or range list, chosen by a flag bit)
- Repeated nested records

Every decoder takes a BitCursor and the declared width and returns
(value, new_position).
"""

import datetime

from tcstring.definitions import RANGE_COUNT_BITS, RANGE_ID_BITS
from tcstring.errors import (
    InvalidTimestampError,
    TruncatedError,
    UnsupportedFieldTypeError,
)
from tcstring.fields import FieldKind

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# Import for type hints only
if False:  # noqa: SIM108
    from tcstring.bitcursor import BitCursor
    from tcstring.fields import FieldDefinition


def decode_uint(cursor: "BitCursor", width: int) -> tuple:
    """Decode a big-endian unsigned integer."""
    value = cursor.read_uint(width)
    return value, cursor.position


def decode_bool(cursor: "BitCursor", width: int = 1) -> tuple:
    """Decode a single-bit flag. The width is always one bit."""
    value = cursor.read_bool()
    return value, cursor.position


def decode_timestamp(cursor: "BitCursor", width: int) -> tuple:
    """
    Decode a timestamp stored as deciseconds since the Unix epoch.

    Returns:
        (UTC datetime, new position)

    Raises:
        InvalidTimestampError: If the value is past year 9999
    """
    start = cursor.position
    deciseconds = cursor.read_uint(width)
    try:
        value = EPOCH + datetime.timedelta(milliseconds=deciseconds * 100)
    except OverflowError as e:
        cursor.position = start
        raise InvalidTimestampError(
            f"Timestamp of {deciseconds} deciseconds is out of range"
        ) from e
    return value, cursor.position


def decode_bitmap(cursor: "BitCursor", width: int) -> tuple:
    """
    Decode a bitmap into the sorted list of 1-based IDs that are set.

    Args:
        cursor: Cursor at the first bitmap bit
        width: Number of bitmap bits

    Returns:
        (ascending ID list, new position)
    """
    bits = cursor.peek_substring(cursor.position, width)
    ids = [i + 1 for i, bit in enumerate(bits) if bit == "1"]
    cursor.position += width
    return ids, cursor.position


def decode_letter_pair(cursor: "BitCursor", width: int) -> tuple:
    """
    Decode two letters packed into equal halves of the field.

    Each half holds 0-25 for 'a'-'z'.
    """
    # Check the whole field first so nothing is consumed on failure
    cursor.peek_substring(cursor.position, width)

    half = width // 2
    first = _letter(cursor.read_uint(half))
    second = _letter(cursor.read_uint(width - half))
    return first + second, cursor.position


def _letter(code: int) -> str:
    return chr(code + 65).lower()


def decode_range(cursor: "BitCursor", width: "int | None" = None) -> tuple:
    """
    Decode a run-length list of IDs.

    Layout: 12-bit entry count, then per entry a flag bit followed by
    either a 16-bit start and 16-bit end ID (flag set, inclusive range)
    or one 16-bit ID. Overlapping entries produce duplicate IDs; they are
    returned as encountered. On a truncated entry the cursor is restored
    to the entry count.

    Args:
        cursor: Cursor at the entry count
        width: Unused, the length is self-describing

    Returns:
        (ID list in encounter order, new position)
    """
    start = cursor.position
    try:
        ids = _read_range_entries(cursor)
    except TruncatedError:
        cursor.position = start
        raise

    return ids, cursor.position


def _read_range_entries(cursor: "BitCursor") -> list:
    ids = []
    entries = cursor.read_uint(RANGE_COUNT_BITS)

    for _ in range(entries):
        is_range = cursor.read_bool()
        if is_range:
            start_id = cursor.read_uint(RANGE_ID_BITS)
            end_id = cursor.read_uint(RANGE_ID_BITS)
            ids.extend(range(start_id, end_id + 1))
        else:
            ids.append(cursor.read_uint(RANGE_ID_BITS))

    return ids


def decode_minimal_list(cursor: "BitCursor", width: int) -> tuple:
    """
    Decode a vendor list stored as either a bitmap or a range list.

    Layout: width-bit maximum ID, then a flag bit. When the flag is set a
    range list follows and the maximum ID is not used; otherwise a bitmap
    of maximum-ID bits follows. On failure the cursor is restored to the
    maximum ID.
    """
    start = cursor.position
    try:
        max_id = cursor.read_uint(width)
        is_range = cursor.read_bool()

        if is_range:
            return decode_range(cursor)

        return decode_bitmap(cursor, max_id)
    except TruncatedError:
        cursor.position = start
        raise


def decode_records(
    cursor: "BitCursor", width: int, fields: "tuple[FieldDefinition, ...]"
) -> tuple:
    """
    Decode a counted sequence of nested records.

    Args:
        cursor: Cursor at the entry count
        width: Width of the entry count
        fields: Field definitions of one nested record

    Returns:
        (list of record dicts, new position)
    """
    from tcstring.segment import decode_fields

    records = []
    entries = cursor.read_uint(width)

    for _ in range(entries):
        records.append(decode_fields(cursor, fields))

    return records, cursor.position


def decode_field(cursor: "BitCursor", record: dict, field: "FieldDefinition") -> tuple:
    """
    Decode one field at the cursor.

    Args:
        cursor: Cursor at the start of the field
        record: Values already decoded in the same field list, used to
            resolve WidthOf widths
        field: Definition of the field to decode

    Returns:
        (value, new position)

    Raises:
        UnsupportedFieldTypeError: If the field kind has no decoder
    """
    kind = field.kind
    width = field.resolve_width(record)

    if kind is FieldKind.UINT:
        return decode_uint(cursor, width)
    if kind is FieldKind.BOOL:
        return decode_bool(cursor)
    if kind is FieldKind.TIMESTAMP:
        return decode_timestamp(cursor, width)
    if kind is FieldKind.BITMAP:
        return decode_bitmap(cursor, width)
    if kind is FieldKind.LETTER_PAIR:
        return decode_letter_pair(cursor, width)
    if kind is FieldKind.RANGE:
        return decode_range(cursor)
    if kind is FieldKind.MINIMAL_LIST:
        return decode_minimal_list(cursor, width)
    if kind is FieldKind.RECORDS:
        return decode_records(cursor, width, field.fields)

    raise UnsupportedFieldTypeError(
        f"Unknown field type {kind!r} for field {field.name!r}"
    )
