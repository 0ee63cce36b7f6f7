from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ThaiQRGeneratorInput:
    """
    Merchant and transaction details for a static Thai QR payload.

    Attributes:
        aid: Application Identifier placed in tag 30, sub-tag 00.
        biller_id: Biller ID placed in tag 30, sub-tag 02.
        reference1: Bill number placed in tag 62, sub-tag 01.
        reference2: Optional second reference (tag 62, sub-tag 02).
        amount: Optional amount in baht; omitted from the payload unless > 0.
        merchant_name: Optional merchant name (tag 59).
        merchant_city: Optional merchant city (tag 60).
    """
    aid: str
    biller_id: str
    reference1: str
    reference2: Optional[str] = None
    amount: Optional[float] = None
    merchant_name: Optional[str] = None
    merchant_city: Optional[str] = None


@dataclass(frozen=True)
class QRGenerationResult:
    qr_string: str
    qr_code_image: Any = None


def sample_input() -> ThaiQRGeneratorInput:
    """Return a filled-in example input, useful for demos and smoke tests."""
    return ThaiQRGeneratorInput(
        aid="A000000677010112",
        biller_id="010566300012345",
        reference1="INV2024001",
        reference2="0876543210",
        amount=100.00,
        merchant_name="Sample Merchant",
        merchant_city="Bangkok",
    )
