"""
TLV scanner and field framing for EMV QR payload text.

A field is ``[tag: 2 digits][length: 2 digits][value: length chars]``. The
scanner is lenient: it stops at the first fragment that cannot be framed and
drops it without raising.
"""
from __future__ import annotations

from dataclasses import dataclass

# Tag (2) + length (2).
HEADER_SIZE = 4

# Two decimal digits cannot describe a longer value.
MAX_VALUE_LENGTH = 99


class TlvLengthError(ValueError):
    """Raised when a field cannot be framed with a two-digit tag and length."""
    pass


@dataclass(frozen=True)
class TlvEntry:
    """
    A single framed field found by the scanner.

    Attributes:
        tag: The two-digit decimal tag.
        length: The declared value length (always ``len(value)``).
        value: The value characters.
        offset: Position of the tag within the scanned buffer.
    """
    tag: str
    length: int
    value: str
    offset: int = 0

    @property
    def span(self) -> int:
        """Number of buffer characters this entry occupies."""
        return HEADER_SIZE + self.length

    @property
    def end(self) -> int:
        return self.offset + self.span


def _is_two_digits(text: str) -> bool:
    return len(text) == 2 and text.isascii() and text.isdigit()


def scan_tlv(buffer: str) -> list[TlvEntry]:
    """
    Split a buffer into consecutive TLV entries.

    Scanning stops, without error, when fewer than four characters remain,
    when the tag or length is not two decimal digits, or when the declared
    length overruns the rest of the buffer.

    Args:
        buffer: The payload text (or a nested template value).

    Returns:
        The entries in buffer order. May be empty.
    """
    entries: list[TlvEntry] = []
    i = 0
    while len(buffer) - i >= HEADER_SIZE:
        tag = buffer[i:i + 2]
        length_str = buffer[i + 2:i + 4]
        if not _is_two_digits(tag) or not _is_two_digits(length_str):
            break
        length = int(length_str)
        if i + HEADER_SIZE + length > len(buffer):
            break
        value = buffer[i + HEADER_SIZE:i + HEADER_SIZE + length]
        entries.append(TlvEntry(tag=tag, length=length, value=value, offset=i))
        i += HEADER_SIZE + length
    return entries


def consumed(entries: list[TlvEntry]) -> int:
    """Total number of characters covered by consecutive entries."""
    return sum(entry.span for entry in entries)


def encode_tlv(tag: str, value: str) -> str:
    """
    Frame a single field.

    Args:
        tag: A two-digit decimal tag.
        value: The field value, at most ``MAX_VALUE_LENGTH`` characters.

    Returns:
        ``tag + zero-padded length + value``.

    Raises:
        TlvLengthError: If the tag is malformed or the value is too long.
    """
    if not _is_two_digits(tag):
        raise TlvLengthError(f"Tag must be two decimal digits, got {tag!r}")
    if len(value) > MAX_VALUE_LENGTH:
        raise TlvLengthError(
            f"Field {tag} value is {len(value)} characters; "
            f"at most {MAX_VALUE_LENGTH} fit in a two-digit length"
        )
    return f"{tag}{len(value):02d}{value}"
