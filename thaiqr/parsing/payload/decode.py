"""
Decoder for Thai QR payload strings.

The payload is scanned as a flat TLV sequence. Each field value is then tried
as a nested TLV sequence and kept as sub-tags only when that parse consumes the
whole value. Recognised tags are folded into ``ThaiQRData`` attributes by an
ordered rule list, in payload order, so a later field overwrites an earlier one.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Union

from thaiqr.core.checksum import crc16
from thaiqr.errors import ParseError
from thaiqr.parsing.payload.model import QRField, QRSubTag, ThaiQRData
from thaiqr.parsing.tags import field_description, sub_tag_description
from thaiqr.parsing.tlv import consumed, scan_tlv, HEADER_SIZE

logger = logging.getLogger(__name__)

PROMPTPAY_LABEL = "PromptPay"

# Substring identifying a PromptPay network inside tags 15/29.
PROMPTPAY_MARKER = "promptpay"

# Sub-tags of tag 30 that carry the merchant identifier, in preference order.
MERCHANT_ID_SUB_TAGS = frozenset({"02", "03"})

# Leading decimal number of an amount; anything after it is ignored.
AMOUNT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


@dataclass(frozen=True)
class Atomic:
    """A field value that is not a complete nested TLV sequence."""
    value: str


@dataclass(frozen=True)
class Structured:
    """A field value that parsed, with nothing left over, into sub-tags."""
    sub_tags: tuple[QRSubTag, ...]


NestedValue = Union[Atomic, Structured]


def classify_value(parent_tag: str, value: str) -> NestedValue:
    """
    Decide whether ``value`` is itself a TLV sequence.

    Args:
        parent_tag: Tag of the field holding ``value``; selects sub-tag
            descriptions.
        value: The field value.

    Returns:
        ``Structured`` when at least one sub-tag was found and the sub-tags
        cover ``value`` exactly, otherwise ``Atomic``.
    """
    entries = scan_tlv(value)
    if not entries or consumed(entries) != len(value):
        return Atomic(value)
    return Structured(
        tuple(
            QRSubTag(
                tag=entry.tag,
                length=entry.length,
                value=entry.value,
                description=sub_tag_description(parent_tag, entry.tag),
            )
            for entry in entries
        )
    )


Setter = Callable[[dict[str, Any], QRField], None]


def _assign(name: str) -> Setter:
    def setter(record: dict[str, Any], field: QRField) -> None:
        record[name] = field.value
    return setter


def _parse_amount(value: str) -> float:
    match = AMOUNT_PREFIX.match(value)
    return float(match.group(1)) if match else math.nan


def _fold_amount(record: dict[str, Any], field: QRField) -> None:
    record["amount"] = _parse_amount(field.value)


def _fold_promptpay(record: dict[str, Any], field: QRField) -> None:
    if PROMPTPAY_MARKER not in field.value:
        return
    record["merchant_id"] = field.value.rsplit(".", 1)[-1] or field.value
    record["merchant_name"] = PROMPTPAY_LABEL


def _fold_merchant_account(record: dict[str, Any], field: QRField) -> None:
    for sub in field.sub_tags or ():
        if sub.tag in MERCHANT_ID_SUB_TAGS:
            record["merchant_id"] = sub.value
            return


# Applied in payload order; every rule whose tag set matches a field runs.
FIELD_RULES: tuple[tuple[frozenset[str], Setter], ...] = (
    (frozenset({"00"}), _assign("version")),
    (frozenset({"01"}), _assign("type")),
    (frozenset({"15", "29"}), _fold_promptpay),
    (frozenset({"30"}), _fold_merchant_account),
    (frozenset({"53"}), _assign("currency")),
    (frozenset({"54"}), _fold_amount),
    (frozenset({"59"}), _assign("merchant_name")),
    (frozenset({"05", "07"}), _assign("reference")),
    (frozenset({"63"}), _assign("checksum")),
)


def _build_field(tag: str, length: int, value: str) -> QRField:
    nested = classify_value(tag, value)
    return QRField(
        tag=tag,
        length=length,
        value=value,
        description=field_description(tag),
        sub_tags=nested.sub_tags if isinstance(nested, Structured) else None,
    )


def decode_payload(raw: str) -> ThaiQRData:
    """
    Decode a raw Thai QR payload.

    Malformed trailing data is dropped silently; decoding succeeds as long as
    at least one leading field can be framed.

    Args:
        raw: The payload text as read from the QR symbol.

    Returns:
        The decoded ``ThaiQRData``.

    Raises:
        ParseError: If no top-level field could be read.
    """
    entries = scan_tlv(raw)
    if not entries:
        logger.debug("payload_rejected", extra={"details": {"length": len(raw)}})
        raise ParseError(raw)

    record: dict[str, Any] = {}
    fields: list[QRField] = []
    checksum_valid = None
    for entry in entries:
        field = _build_field(entry.tag, entry.length, entry.value)
        fields.append(field)
        for tags, setter in FIELD_RULES:
            if field.tag in tags:
                setter(record, field)
        if field.tag == "63":
            covered = raw[:entry.offset + HEADER_SIZE]
            checksum_valid = crc16(covered) == field.value.upper()

    dropped = len(raw) - consumed(entries)
    logger.debug(
        "payload_decoded",
        extra={"details": {"fields": len(fields), "dropped": dropped, "checksum_valid": checksum_valid}},
    )
    return ThaiQRData(
        raw_data=raw,
        parsed_fields=tuple(fields),
        checksum_valid=checksum_valid,
        **record,
    )
