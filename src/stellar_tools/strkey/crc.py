import binascii
import typing as t

# CRC-16/XMODEM
#   width=16 poly=0x1021 init=0x0000 refin=false refout=false xorout=0x0000
#   check("123456789") = 0x31C3


def crc16(data: t.Union[bytes, bytearray]) -> int:
    """Compute the CRC-16/XMODEM checksum of data."""
    return binascii.crc_hqx(data, 0)


def checksum(data: t.Union[bytes, bytearray]) -> bytes:
    """Return the checksum of data serialized the way it is appended to a record (little endian)."""
    return crc16(data).to_bytes(2, byteorder="little")
