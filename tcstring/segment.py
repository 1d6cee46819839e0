"""
Segment decoding: walks a field list and assembles a record.
"""

from tcstring.bitcursor import BitCursor
from tcstring.codec import decode_field
from tcstring.definitions import SEGMENT_TYPE_BITS

# Import for type hints only
if False:  # noqa: SIM108
    from tcstring.bitsequence import BitSequence
    from tcstring.fields import FieldDefinition, SegmentSchema


def decode_fields(cursor: BitCursor, fields: "tuple[FieldDefinition, ...]") -> dict:
    """
    Decode fields in order starting at the cursor position.

    A value of None from the codec is not stored. The cursor is left
    after the last field.

    Args:
        cursor: Cursor at the first field
        fields: Definitions in wire order

    Returns:
        Mapping of field name to value, in field order
    """
    record = {}

    for field in fields:
        value, new_position = decode_field(cursor, record, field)
        if value is not None:
            record[field.name] = value
        cursor.position = new_position

    return record


def decode_segment(
    bits: "BitSequence", schema: "SegmentSchema", start_position: int = 0
) -> tuple:
    """
    Decode one segment against its schema.

    Args:
        bits: Unpacked segment bits
        schema: Field layout of the segment
        start_position: Bit position of the segment start

    Returns:
        (record, end position)

    Raises:
        DecodeError: On the first field that cannot be decoded; no
            partial record is returned
    """
    cursor = BitCursor(bits, start_position)

    if schema.has_type_prefix:
        # Segment type is known to the caller, not stored
        cursor.skip(SEGMENT_TYPE_BITS)

    record = decode_fields(cursor, schema.fields)
    return record, cursor.position
