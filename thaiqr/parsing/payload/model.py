from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class QRSubTag:
    tag: str
    length: int
    value: str
    description: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "length": self.length,
            "value": self.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class QRField:
    """
    A decoded top-level field.

    Attributes:
        tag: The two-digit tag.
        length: The declared value length.
        value: The raw value text.
        description: Human-readable meaning of the tag.
        sub_tags: The nested fields when the whole value is itself a TLV
            sequence, otherwise ``None``.
    """
    tag: str
    length: int
    value: str
    description: str
    sub_tags: Optional[tuple[QRSubTag, ...]] = None

    def sub_tag(self, tag: str) -> Optional[QRSubTag]:
        for sub in self.sub_tags or ():
            if sub.tag == tag:
                return sub
        return None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "tag": self.tag,
            "length": self.length,
            "value": self.value,
            "description": self.description,
        }
        if self.sub_tags is not None:
            data["sub_tags"] = [sub.as_dict() for sub in self.sub_tags]
        return data


@dataclass(frozen=True)
class ThaiQRData:
    """
    The result of decoding one Thai QR payload.

    Attributes:
        version: Payload format indicator (tag ``00``).
        type: Point of initiation method (tag ``01``).
        merchant_id: PromptPay target or merchant identifier, if found.
        merchant_name: Merchant name, or ``"PromptPay"`` for PromptPay payloads.
        amount: Transaction amount; NaN when tag ``54`` is not numeric.
        currency: ISO 4217 numeric currency code.
        reference: Value of tag ``05`` or ``07``, whichever came last.
        checksum: Value of the CRC field (tag ``63``).
        raw_data: The input string, unchanged.
        parsed_fields: Every decoded top-level field, in payload order.
        checksum_valid: Whether the CRC field matches the payload, or ``None``
            when there is no CRC field.
    """
    version: str = ""
    type: str = ""
    merchant_id: Optional[str] = None
    merchant_name: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    reference: Optional[str] = None
    checksum: Optional[str] = None
    raw_data: str = ""
    parsed_fields: tuple[QRField, ...] = ()
    checksum_valid: Optional[bool] = None

    def field(self, tag: str) -> Optional[QRField]:
        """Return the last decoded field with ``tag``, if any."""
        for entry in reversed(self.parsed_fields):
            if entry.tag == tag:
                return entry
        return None

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "type": self.type,
            "merchant_id": self.merchant_id,
            "merchant_name": self.merchant_name,
            "amount": self.amount,
            "currency": self.currency,
            "reference": self.reference,
            "checksum": self.checksum,
            "checksum_valid": self.checksum_valid,
            "raw_data": self.raw_data,
            "parsed_fields": [entry.as_dict() for entry in self.parsed_fields],
        }
