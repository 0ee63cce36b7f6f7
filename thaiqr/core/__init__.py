from thaiqr.core.checksum import crc16, verify_crc

__all__ = ["crc16", "verify_crc"]
