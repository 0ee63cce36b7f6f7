"""
Payload builder for static Thai QR bill-payment codes.

Tags are always emitted in this order:
``00 01 30 52 53 [54] 58 [59] [60] 62 63``
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from thaiqr.core.checksum import crc16, CRC_FIELD_PREFIX
from thaiqr.errors import GenerationError, GenerationValidationError
from thaiqr.generation.models import QRGenerationResult, ThaiQRGeneratorInput
from thaiqr.generation.validation import validate_input
from thaiqr.parsing.tlv import encode_tlv, TlvLengthError
from thaiqr.rendering import render_data_url

logger = logging.getLogger(__name__)

PAYLOAD_FORMAT_INDICATOR = "01"
STATIC_INITIATION = "12"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_THB = "764"
COUNTRY_CODE = "TH"

Renderer = Callable[[str], Any]


def _template(*pairs: tuple[str, Optional[str]]) -> str:
    # Sub-tags with no source value are left out.
    return "".join(encode_tlv(tag, value) for tag, value in pairs if value)


def build_payload(data: ThaiQRGeneratorInput) -> str:
    """
    Encode generator input as a Thai QR payload string.

    The input is not validated here; see ``generate_thai_qr``.

    Args:
        data: Merchant and transaction details.

    Returns:
        The complete payload, ending with ``6304`` and the CRC.

    Raises:
        TlvLengthError: If any field value exceeds 99 characters.
    """
    parts = [
        encode_tlv("00", PAYLOAD_FORMAT_INDICATOR),
        encode_tlv("01", STATIC_INITIATION),
    ]

    merchant_account = _template(("00", data.aid), ("02", data.biller_id))
    if merchant_account:
        parts.append(encode_tlv("30", merchant_account))

    parts.append(encode_tlv("52", MERCHANT_CATEGORY_CODE))
    parts.append(encode_tlv("53", CURRENCY_THB))
    if data.amount is not None and data.amount > 0:
        parts.append(encode_tlv("54", f"{data.amount:.2f}"))
    parts.append(encode_tlv("58", COUNTRY_CODE))
    if data.merchant_name:
        parts.append(encode_tlv("59", data.merchant_name))
    if data.merchant_city:
        parts.append(encode_tlv("60", data.merchant_city))

    additional_data = _template(("01", data.reference1), ("02", data.reference2))
    if additional_data:
        parts.append(encode_tlv("62", additional_data))

    payload = "".join(parts) + CRC_FIELD_PREFIX
    return payload + crc16(payload)


def generate_thai_qr(
    data: ThaiQRGeneratorInput,
    renderer: Optional[Renderer] = render_data_url,
) -> QRGenerationResult:
    """
    Validate input, build the payload and render it.

    Args:
        data: Merchant and transaction details.
        renderer: Called with the payload string; its return value becomes
            ``qr_code_image``. Pass ``None`` to skip rendering.

    Returns:
        The payload string and the rendered image.

    Raises:
        GenerationValidationError: If the input breaks any validation rule,
            or a field would not fit the two-digit length. The current
            limits in ``validate_input`` keep every field under that ceiling,
            so the second case only arises if those limits are raised.
        GenerationError: If the renderer fails.
    """
    errors = validate_input(data)
    if errors:
        raise GenerationValidationError(errors)
    try:
        qr_string = build_payload(data)
    except TlvLengthError as exc:
        raise GenerationValidationError([str(exc)]) from exc
    logger.debug("payload_built", extra={"details": {"length": len(qr_string)}})

    if renderer is None:
        return QRGenerationResult(qr_string=qr_string)
    try:
        image = renderer(qr_string)
    except Exception as exc:
        logger.warning("render_failed", extra={"details": {"error": str(exc)}})
        raise GenerationError(f"Failed to generate Thai QR code: {exc}", qr_string=qr_string) from exc
    return QRGenerationResult(qr_string=qr_string, qr_code_image=image)
