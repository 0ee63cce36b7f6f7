"""
Thai QR payload generation.

Validates merchant input, emits the EMV tags in canonical order with nested
templates for tags 30 and 62, appends the CRC field, and hands the payload to
an image renderer.
"""
from thaiqr.generation.builder import build_payload, generate_thai_qr
from thaiqr.generation.models import QRGenerationResult, ThaiQRGeneratorInput, sample_input
from thaiqr.generation.validation import validate_input

__all__ = [
    "build_payload",
    "generate_thai_qr",
    "QRGenerationResult",
    "ThaiQRGeneratorInput",
    "sample_input",
    "validate_input",
]
