import itertools
import secrets
import typing as t

import pytest

from stellar_tools.strkey import VersionByte, constants, decode, decode_any, encode, errors
from stellar_tools import strkey
from stellar_tools.strkey import encoding
from stellar_tools.strkey.base32 import decode_base32, encode_base32
from stellar_tools.strkey.constants import ALPHABET

ALL_VERSIONS = list(VersionByte)


def _payload(version: VersionByte, fill: t.Optional[int] = None) -> bytes:
    length = constants.payload_length(version)
    if fill is None:
        return secrets.token_bytes(length)
    return bytes([fill]) * length


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=lambda v: v.name)
@pytest.mark.parametrize("fill", [None, 0x00, 0xFF])
def test_encode_decode_roundtrip(version: VersionByte, fill: t.Optional[int]) -> None:
    payload = _payload(version, fill)
    encoded = encode(version, payload)
    assert decode(version, encoded) == payload
    assert decode_any(encoded) == (version, payload)
    assert encoding.version(encoded) is version


@pytest.mark.parametrize(
    "version,length,prefix",
    [
        (VersionByte.ACCOUNT_ID, 56, "G"),
        (VersionByte.MUXED_ACCOUNT, 69, "M"),
        (VersionByte.SEED, 56, "S"),
        (VersionByte.HASH_TX, 56, "T"),
        (VersionByte.HASH_X, 56, "X"),
    ],
)
def test_encoded_length_and_prefix(version: VersionByte, length: int, prefix: str) -> None:
    encoded = encode(version, _payload(version))
    assert len(encoded) == length
    assert encoded[0] == prefix


def test_encode_known_account_id() -> None:
    payload = decode(
        VersionByte.ACCOUNT_ID,
        "GA3D5KRYM6CB7OWQ6TWYRR3Z4T7GNZLKERYNZGGA5SOAOPIFY6YQHES5",
    )
    assert (
        encode(VersionByte.ACCOUNT_ID, payload)
        == "GA3D5KRYM6CB7OWQ6TWYRR3Z4T7GNZLKERYNZGGA5SOAOPIFY6YQHES5"
    )


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=lambda v: v.name)
def test_encode_invalid_payload_length(version: VersionByte) -> None:
    length = constants.payload_length(version)
    with pytest.raises(errors.InvalidPayloadLengthError):
        encode(version, bytes(length - 1))
    with pytest.raises(errors.InvalidPayloadLengthError):
        encode(version, bytes(length + 1))


def test_encode_invalid_version() -> None:
    with pytest.raises(errors.InvalidVersionByteError):
        encode(2, bytes(32))


def test_encode_accepts_plain_int_version() -> None:
    payload = bytes(32)
    assert encode(6 << 3, payload) == encode(VersionByte.ACCOUNT_ID, payload)


def test_canonical_form_rejects_unused_bits() -> None:
    """Only one string may represent a given muxed account payload"""
    encoded = encode(VersionByte.MUXED_ACCOUNT, _payload(VersionByte.MUXED_ACCOUNT))
    last = ALPHABET.index(encoded[-1])
    # The last character of a muxed account carries one unused bit
    assert last & 1 == 0
    alternative = encoded[:-1] + ALPHABET[last | 1]
    assert decode_base32(alternative).data == decode_base32(encoded).data
    with pytest.raises(errors.NonCanonicalEncodingError, match="unused bits"):
        decode(VersionByte.MUXED_ACCOUNT, alternative)


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=lambda v: v.name)
@pytest.mark.parametrize("extra", ["A", "Q", "7"])
def test_canonical_form_rejects_leftover_character(version: VersionByte, extra: str) -> None:
    encoded = encode(version, _payload(version))
    with pytest.raises(errors.NonCanonicalEncodingError, match="unused leftover character"):
        decode(version, encoded + extra)


@pytest.mark.parametrize(
    "expected,actual",
    list(itertools.permutations(ALL_VERSIONS, 2)),
    ids=lambda v: v.name,
)
def test_version_isolation(expected: VersionByte, actual: VersionByte) -> None:
    encoded = encode(actual, _payload(actual))
    with pytest.raises(errors.VersionMismatchError):
        decode(expected, encoded)


@pytest.mark.parametrize("bit", [8, 9, 15, 100, 200, 255, 263])
def test_checksum_detects_single_bit_flip(bit: int) -> None:
    """Flip one payload bit while keeping the original checksum"""
    encoded = encode(VersionByte.ACCOUNT_ID, bytes(range(32)))
    raw = bytearray(decode_base32(encoded).data)
    raw[bit // 8] ^= 1 << (bit % 8)
    with pytest.raises(errors.ChecksumMismatchError):
        decode(VersionByte.ACCOUNT_ID, encode_base32(raw))


def test_version_byte_is_checked_before_checksum() -> None:
    """An unknown version byte is reported even if the checksum is wrong"""
    raw = bytes([2]) + bytes(32) + b"\xff\xff"
    with pytest.raises(errors.InvalidVersionByteError) as exc_info:
        decode(VersionByte.ACCOUNT_ID, encode_base32(raw))
    assert exc_info.value.version == 2


def test_version_mismatch_is_checked_before_length() -> None:
    raw = bytes([VersionByte.SEED]) + bytes(40) + b"\x00\x00"
    with pytest.raises(errors.VersionMismatchError):
        decode(VersionByte.MUXED_ACCOUNT, encode_base32(raw))


def test_length_is_checked_before_checksum() -> None:
    raw = bytes([VersionByte.ACCOUNT_ID]) + bytes(31) + b"\x00\x00"
    with pytest.raises(errors.InvalidEncodingError):
        decode(VersionByte.ACCOUNT_ID, encode_base32(raw))


def test_decode_any_rejects_unknown_version() -> None:
    raw = bytearray([2]) + bytes(32)
    raw += (0).to_bytes(2, "little")
    with pytest.raises(errors.InvalidVersionByteError):
        decode_any(encode_base32(raw))


@pytest.mark.parametrize(
    "func,src,expected",
    [
        (encoding.is_valid_ed25519_public_key, "GA3D5KRYM6CB7OWQ6TWYRR3Z4T7GNZLKERYNZGGA5SOAOPIFY6YQHES5", True),
        (encoding.is_valid_ed25519_public_key, "GA3D5KRYM6CB7OWQ6TWYRR3Z4T7GNZLKERYNZGGA5SOAOPIFY6YQHE55", False),
        (encoding.is_valid_ed25519_public_key, "SBU2RRGLXH3E5CQHTD3ODLDF2BWDCYUSSBLLZ5GNW7JXHDIYKXZWHOKR", False),
        (encoding.is_valid_ed25519_public_key, "", False),
        (encoding.is_valid_ed25519_secret_seed, "SBU2RRGLXH3E5CQHTD3ODLDF2BWDCYUSSBLLZ5GNW7JXHDIYKXZWHOKR", True),
        (encoding.is_valid_ed25519_secret_seed, "GA3D5KRYM6CB7OWQ6TWYRR3Z4T7GNZLKERYNZGGA5SOAOPIFY6YQHES5", False),
        (encoding.is_valid_muxed_account, "MCAAAAAAAAAAAAB7BQ2L7E5NBWMXDUCMZSIPOBKRDSBYVLMXGSSKF6YNPIB7Y77ITKNOG", True),
        (encoding.is_valid_muxed_account, "MCAAAAAAAAAAAAB7BQ2L7E5NBWMXDUCMZSIPOBKRDSBYVLMXGSSKF6YNPIB7Y77ITKNOH", False),
    ],
)
def test_is_valid(func: t.Callable[[str], bool], src: str, expected: bool) -> None:
    assert func(src) is expected


def test_is_valid_with_unknown_version() -> None:
    assert encoding.is_valid(2, "GA3D5KRYM6CB7OWQ6TWYRR3Z4T7GNZLKERYNZGGA5SOAOPIFY6YQHES5") is False


def test_rejected_strkey_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="stellar_tools.strkey"):
        with pytest.raises(errors.EmptyInputError):
            decode(VersionByte.ACCOUNT_ID, "")
    assert "Rejected strkey" in caplog.text


def test_hash_helpers() -> None:
    payload = bytes(range(32))
    assert strkey.encode_hash_tx(payload).startswith("T")
    assert strkey.decode_hash_tx(strkey.encode_hash_tx(payload)) == payload
    assert strkey.encode_hash_x(payload).startswith("X")
    assert strkey.decode_hash_x(strkey.encode_hash_x(payload)) == payload
    with pytest.raises(errors.VersionMismatchError):
        strkey.decode_hash_x(strkey.encode_hash_tx(payload))
