"""
Schema types for bit-packed segments.

A segment is described by an ordered list of FieldDefinition objects.
Each definition names its encoding kind and a width that is either a
constant or a WidthOf reference to an earlier UInt field of the same
list. RECORDS fields own a nested field list, which makes a schema a
tree.
"""

import enum


class FieldKind(enum.Enum):
    """Encoding kinds understood by the field codec."""

    UINT = "int"
    BOOL = "bool"
    TIMESTAMP = "date"
    BITMAP = "list"
    LETTER_PAIR = "textcode"
    RANGE = "range"
    MINIMAL_LIST = "minlist"
    RECORDS = "array"


# Kinds whose bit length is only known after decoding
VARIABLE_KINDS = frozenset({FieldKind.RANGE})


class WidthOf:
    """Width taken from a previously decoded UInt field."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def resolve(self, record: dict) -> int:
        """
        Look up the width in the record decoded so far.

        Args:
            record: Values decoded earlier in the same field list

        Returns:
            Width in bits
        """
        return record[self.field_name]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, WidthOf) and other.field_name == self.field_name

    def __hash__(self) -> int:
        return hash(("WidthOf", self.field_name))

    def __repr__(self) -> str:
        return f"WidthOf({self.field_name!r})"


class FieldDefinition:
    """One named field of a segment or nested record."""

    def __init__(
        self,
        name: str,
        kind: FieldKind,
        width: "int | WidthOf | None" = None,
        fields: "list[FieldDefinition] | tuple" = (),
    ) -> None:
        """
        Define a field.

        Args:
            name: Key under which the decoded value is stored
            kind: Encoding kind
            width: Bit width, WidthOf reference, or None for BOOL/RANGE
            fields: Nested definitions (RECORDS only)

        Raises:
            ValueError: If the width or nested fields do not suit the kind
        """
        if not isinstance(kind, FieldKind):
            raise ValueError(f"Field {name!r}: kind must be a FieldKind")

        if width is None:
            if kind is FieldKind.BOOL:
                width = 1
            elif kind not in VARIABLE_KINDS:
                raise ValueError(f"Field {name!r}: {kind.name} requires a width")
        elif isinstance(width, int):
            if width < 0:
                raise ValueError(f"Field {name!r}: width must be non-negative")
            if kind is FieldKind.LETTER_PAIR and width % 2:
                raise ValueError(f"Field {name!r}: letter pair width must be even")
        elif not isinstance(width, WidthOf):
            raise ValueError(f"Field {name!r}: width must be an int or WidthOf")

        fields = tuple(fields)
        if kind is FieldKind.RECORDS:
            validate_fields(fields)
        elif fields:
            raise ValueError(f"Field {name!r}: only RECORDS may nest fields")

        self.name = name
        self.kind = kind
        self.width = width
        self.fields = fields

    def resolve_width(self, record: dict) -> "int | None":
        """Evaluate the declared width against earlier values."""
        if isinstance(self.width, WidthOf):
            return self.width.resolve(record)
        return self.width

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldDefinition):
            return NotImplemented
        return (self.name, self.kind, self.width, self.fields) == (
            other.name,
            other.kind,
            other.width,
            other.fields,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.kind, self.width, self.fields))

    def __repr__(self) -> str:
        return f"FieldDefinition({self.name!r}, {self.kind}, {self.width!r})"


class SegmentSchema:
    """Ordered field list for one segment."""

    def __init__(self, fields: list, has_type_prefix: bool = False) -> None:
        """
        Define a segment schema.

        Args:
            fields: FieldDefinition objects in wire order
            has_type_prefix: Skip a 3-bit segment type tag before the fields
        """
        self.fields = tuple(fields)
        validate_fields(self.fields)
        self.has_type_prefix = has_type_prefix


def validate_fields(fields: tuple) -> None:
    """
    Check names are unique and WidthOf references point backwards.

    Raises:
        ValueError: On a duplicate name or a dangling WidthOf
    """
    seen = {}
    for field in fields:
        if not isinstance(field, FieldDefinition):
            raise ValueError(f"Expected FieldDefinition, got {field!r}")
        if field.name in seen:
            raise ValueError(f"Duplicate field name {field.name!r}")

        if isinstance(field.width, WidthOf):
            source = seen.get(field.width.field_name)
            if source is None or source.kind is not FieldKind.UINT:
                raise ValueError(
                    f"Field {field.name!r}: {field.width!r} must name an "
                    "earlier UINT field"
                )

        seen[field.name] = field
