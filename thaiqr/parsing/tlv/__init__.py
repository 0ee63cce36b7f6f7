"""
TLV (Tag-Length-Value) codec for EMV QR payload text.

Each field is framed as a two-digit decimal tag, a two-digit decimal length,
then exactly that many value characters. The same scanner is used for the
top-level payload and for nested templates.
"""
from thaiqr.parsing.tlv.decode import (
    consumed,
    encode_tlv,
    scan_tlv,
    TlvEntry,
    TlvLengthError,
    HEADER_SIZE,
    MAX_VALUE_LENGTH,
)

__all__ = [
    "consumed",
    "encode_tlv",
    "scan_tlv",
    "TlvEntry",
    "TlvLengthError",
    "HEADER_SIZE",
    "MAX_VALUE_LENGTH",
]
