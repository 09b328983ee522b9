import base64
import binascii
import typing as t
from dataclasses import dataclass

from . import errors
from .constants import ALPHABET

# Symbol value of each alphabet character
_DECODING_TABLE: t.Dict[str, int] = {char: index for index, char in enumerate(ALPHABET)}


@dataclass(frozen=True)
class Base32Decoded:
    """Result of decoding an unpadded base32 string.

    Attributes:
        data: the decoded bytes. When a leftover character is detected, the
            bytes are decoded without that character.
        unused_bits: number of trailing bits which do not form a whole byte.
        unused_value: value of those trailing bits.
        leftover_character: True when the string holds one more character than
            required to encode its whole bytes (5 or more unused bits).
    """

    data: bytes
    unused_bits: int
    unused_value: int
    leftover_character: bool


def encode_base32(data: t.Union[bytes, bytearray]) -> str:
    """Encode bytes into the minimal unpadded base32 representation.

    Unused bits of the final character are always set to 0.
    """
    return base64.b32encode(bytes(data)).rstrip(b"=").decode("ascii")


def decode_base32(src: str) -> Base32Decoded:
    """Decode an unpadded base32 string, reporting unused trailing bits."""
    symbols: t.List[int] = []
    for position, char in enumerate(src):
        try:
            symbols.append(_DECODING_TABLE[char])
        except KeyError:
            raise errors.InvalidEncodingError(
                f"invalid character {char!r} at position {position}"
            )
    # Each character holds 5 bits, the bits which do not form a whole byte are unused
    unused_bits = (len(symbols) * 5) % 8
    # 5 or more unused bits means that the last character does not contribute to any byte
    leftover_character = unused_bits >= 5
    # Unused bits span at most the two last characters
    tail = 0
    for symbol in symbols[-2:]:
        tail = (tail << 5) | symbol
    unused_value = tail & ((1 << unused_bits) - 1)
    # Decode the characters which contribute to whole bytes
    body = src[:-1] if leftover_character else src
    padding = "=" * (-len(body) % 8)
    try:
        data = base64.b32decode(body + padding)
    except binascii.Error as exc:
        raise errors.InvalidEncodingError(str(exc)) from exc
    return Base32Decoded(
        data=data,
        unused_bits=unused_bits,
        unused_value=unused_value,
        leftover_character=leftover_character,
    )
