"""
Input validation for the Thai QR generator.

Every rule is checked and all violations are reported together.
"""
from __future__ import annotations

import math
from typing import Optional

from thaiqr.generation.models import ThaiQRGeneratorInput

MAX_AID_LENGTH = 32
MAX_BILLER_ID_LENGTH = 32
MAX_REFERENCE_LENGTH = 25
MAX_MERCHANT_NAME_LENGTH = 25
MAX_MERCHANT_CITY_LENGTH = 15
MAX_AMOUNT = 999999.99


def _check_required(value: Optional[str], required: str, too_long: str, max_length: int) -> Optional[str]:
    if not value or not value.strip():
        return required
    if len(value) > max_length:
        return too_long
    return None


def _check_optional(value: Optional[str], too_long: str, max_length: int) -> Optional[str]:
    if value and len(value) > max_length:
        return too_long
    return None


def _check_amount(amount: Optional[float]) -> Optional[str]:
    if amount is None:
        return None
    if not math.isfinite(amount):
        return "Amount must be a number"
    if amount < 0:
        return "Amount must be positive"
    if amount > MAX_AMOUNT:
        return "Amount must be less than 1,000,000"
    return None


def validate_input(data: ThaiQRGeneratorInput) -> list[str]:
    """
    Check generator input against the required-field, length and amount rules.

    Args:
        data: The input to check.

    Returns:
        Human-readable error messages; empty when the input is valid.
    """
    errors = [
        _check_required(
            data.aid,
            "AID (Application Identifier) is required",
            f"AID must be {MAX_AID_LENGTH} characters or less",
            MAX_AID_LENGTH,
        ),
        _check_required(
            data.biller_id,
            "Biller ID is required",
            f"Biller ID must be {MAX_BILLER_ID_LENGTH} characters or less",
            MAX_BILLER_ID_LENGTH,
        ),
        _check_required(
            data.reference1,
            "Reference 1 is required",
            f"Reference 1 must be {MAX_REFERENCE_LENGTH} characters or less",
            MAX_REFERENCE_LENGTH,
        ),
        _check_optional(
            data.reference2,
            f"Reference 2 must be {MAX_REFERENCE_LENGTH} characters or less",
            MAX_REFERENCE_LENGTH,
        ),
        _check_amount(data.amount),
        _check_optional(
            data.merchant_name,
            f"Merchant name must be {MAX_MERCHANT_NAME_LENGTH} characters or less",
            MAX_MERCHANT_NAME_LENGTH,
        ),
        _check_optional(
            data.merchant_city,
            f"Merchant city must be {MAX_MERCHANT_CITY_LENGTH} characters or less",
            MAX_MERCHANT_CITY_LENGTH,
        ),
    ]
    return [error for error in errors if error]
