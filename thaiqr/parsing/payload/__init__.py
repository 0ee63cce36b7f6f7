"""
Thai QR payload decoding.

Turns a raw payload string into a ``ThaiQRData`` record: every top-level field
with its description, nested templates expanded into sub-tags, and the common
merchant/transaction values folded into named attributes.
"""
from thaiqr.parsing.payload.decode import (
    classify_value,
    decode_payload,
    Atomic,
    Structured,
    FIELD_RULES,
    PROMPTPAY_LABEL,
)
from thaiqr.parsing.payload.model import QRField, QRSubTag, ThaiQRData

__all__ = [
    "classify_value",
    "decode_payload",
    "Atomic",
    "Structured",
    "FIELD_RULES",
    "PROMPTPAY_LABEL",
    "QRField",
    "QRSubTag",
    "ThaiQRData",
]
