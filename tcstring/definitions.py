"""
TCF v2 format constants and the Core segment layout.
"""

from tcstring.fields import FieldDefinition, FieldKind, SegmentSchema

SEGMENT_SEPARATOR = "."
# Core plus one optional Disclosed Vendors segment
MAX_SEGMENTS = 2

SEGMENT_TYPE_BITS = 3
RANGE_COUNT_BITS = 12
RANGE_ID_BITS = 16

CORE_SEGMENT = SegmentSchema(
    [
        FieldDefinition("version", FieldKind.UINT, 6),
        FieldDefinition("created", FieldKind.TIMESTAMP, 36),
        FieldDefinition("lastUpdated", FieldKind.TIMESTAMP, 36),
        FieldDefinition("cmpId", FieldKind.UINT, 12),
        FieldDefinition("cmpVersion", FieldKind.UINT, 12),
        FieldDefinition("consentScreen", FieldKind.UINT, 6),
        FieldDefinition("consentLanguage", FieldKind.LETTER_PAIR, 12),
        FieldDefinition("vendorListVersion", FieldKind.UINT, 12),
        FieldDefinition("tcfPolicyVersion", FieldKind.UINT, 6),
        FieldDefinition("isServiceSpecific", FieldKind.BOOL),
        FieldDefinition("useNonStandardStacks", FieldKind.BOOL),
        FieldDefinition("specialFeatureOptIns", FieldKind.BITMAP, 12),
        FieldDefinition("purposesConsent", FieldKind.BITMAP, 24),
        FieldDefinition("purposeLITransparency", FieldKind.BITMAP, 24),
        FieldDefinition("purposeOneTreatment", FieldKind.BOOL),
        FieldDefinition("publisherCC", FieldKind.LETTER_PAIR, 12),
        FieldDefinition("vendorsConsent", FieldKind.MINIMAL_LIST, 16),
        FieldDefinition("vendorsLegitimateInterest", FieldKind.MINIMAL_LIST, 16),
        FieldDefinition(
            "publisherRestrictions",
            FieldKind.RECORDS,
            12,
            fields=[
                FieldDefinition("purposeId", FieldKind.UINT, 6),
                FieldDefinition("restrictionType", FieldKind.UINT, 2),
                FieldDefinition("restrictedVendors", FieldKind.RANGE),
            ],
        ),
    ]
)
