from thaiqr.core import crc16, verify_crc
from thaiqr.errors import GenerationError, GenerationValidationError, ParseError, ThaiQRError
from thaiqr.generation import (
    build_payload,
    generate_thai_qr,
    sample_input,
    validate_input,
    QRGenerationResult,
    ThaiQRGeneratorInput,
)
from thaiqr.history import HistoryItem, HistorySource, HistoryStore
from thaiqr.parsing.payload import decode_payload, QRField, QRSubTag, ThaiQRData
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "crc16",
    "verify_crc",
    "decode_payload",
    "build_payload",
    "generate_thai_qr",
    "sample_input",
    "validate_input",
    "QRField",
    "QRSubTag",
    "ThaiQRData",
    "QRGenerationResult",
    "ThaiQRGeneratorInput",
    "HistoryItem",
    "HistorySource",
    "HistoryStore",
    "ThaiQRError",
    "ParseError",
    "GenerationError",
    "GenerationValidationError",
]

try:
    __version__ = version("thaiqr")
except PackageNotFoundError:
    __version__ = "0.0.0"
