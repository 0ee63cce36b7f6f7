from __future__ import annotations


CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF

# Tag 63 header the checksum is computed over (tag + declared length "04").
CRC_FIELD_PREFIX = "6304"


def crc16(data: str) -> str:
    crc = CRC16_INIT
    for char in data:
        crc ^= (ord(char) & 0xFF) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ CRC16_POLY
            else:
                crc <<= 1
            crc &= 0xFFFF
    return f"{crc:04X}"


def verify_crc(payload: str) -> bool:
    """
    Check the trailing ``6304XXXX`` checksum field of a payload.

    The checksum covers everything up to and including the ``6304`` header.
    Returns ``False`` when the payload does not end in a checksum field.
    """
    if len(payload) < 8 or payload[-8:-4] != CRC_FIELD_PREFIX:
        return False
    return crc16(payload[:-4]) == payload[-4:].upper()
