"""
Human-readable descriptions for EMV QR tags and nested sub-tags.
"""
from thaiqr.parsing.tags.descriptions import (
    field_description,
    sub_tag_description,
    FIELD_DESCRIPTIONS,
    GENERIC_SUB_TAG_DESCRIPTIONS,
    SUB_TAG_DESCRIPTIONS,
)

__all__ = [
    "field_description",
    "sub_tag_description",
    "FIELD_DESCRIPTIONS",
    "GENERIC_SUB_TAG_DESCRIPTIONS",
    "SUB_TAG_DESCRIPTIONS",
]
