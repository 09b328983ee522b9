import logging
import typing as t

from . import constants, crc, errors
from .base32 import decode_base32, encode_base32
from .constants import VersionByte

logger = logging.getLogger("stellar_tools.strkey")


def _to_str(src: t.Union[str, bytes, bytearray]) -> str:
    """Make sure encoded key is a string"""
    if isinstance(src, str):
        return src
    try:
        return bytes(src).decode("ascii")
    except UnicodeDecodeError as exc:
        raise errors.InvalidEncodingError("non-ascii input") from exc


def _expect_version(version: int) -> VersionByte:
    """Validate a version byte provided by the caller."""
    resolved = constants.resolve(version)
    if resolved is None:
        raise errors.InvalidVersionByteError(version)
    return resolved


def encode(version: int, payload: t.Union[bytes, bytearray]) -> str:
    """Encode a payload into a strkey using given version byte.

    Raises:
        InvalidVersionByteError: version is not a recognized version byte.
        InvalidPayloadLengthError: payload length does not match the version byte.
    """
    version = _expect_version(version)
    expected_length = constants.payload_length(version)
    if len(payload) != expected_length:
        raise errors.InvalidPayloadLengthError(expected_length, len(payload))
    # Initialize record with version byte and payload
    record = bytearray([version])
    record += payload
    # Append crc16 checksum
    record += crc.checksum(record)
    # Encode to base32
    return encode_base32(record)


def _decode(
    src: t.Union[str, bytes, bytearray], expected: t.Optional[VersionByte]
) -> t.Tuple[VersionByte, bytes]:
    """Decode a strkey into its version byte and payload.

    Checks are performed in a fixed order, the first failing check wins:
    alphabet, canonical form, version byte, expected version, length, checksum.
    """
    encoded = _to_str(src)
    if not encoded:
        raise errors.EmptyInputError()
    decoded = decode_base32(encoded)
    # Strkeys must use the canonical base32 representation
    if decoded.leftover_character:
        raise errors.LeftoverCharacterError()
    if decoded.unused_value != 0:
        raise errors.UnusedBitsError()
    raw = decoded.data
    # Check minimal length (version byte + checksum)
    if len(raw) < 1 + constants.CHECKSUM_LENGTH:
        raise errors.InvalidEncodingError(f"decoded length {len(raw)} is too short")
    # Check version byte
    version = constants.resolve(raw[0])
    if version is None:
        raise errors.InvalidVersionByteError(raw[0])
    if expected is not None and version is not expected:
        raise errors.VersionMismatchError(expected, version)
    # Check length (version byte + payload + checksum)
    expected_length = 1 + constants.payload_length(version) + constants.CHECKSUM_LENGTH
    if len(raw) != expected_length:
        raise errors.InvalidEncodingError(
            f"decoded length {len(raw)} does not match expected length {expected_length}"
        )
    # Check crc16 checksum
    record = raw[: -constants.CHECKSUM_LENGTH]
    actual_checksum = int.from_bytes(raw[-constants.CHECKSUM_LENGTH :], byteorder="little")
    expected_checksum = crc.crc16(record)
    if actual_checksum != expected_checksum:
        raise errors.ChecksumMismatchError(expected_checksum, actual_checksum)
    return version, bytes(record[1:])


def decode(expected_version: int, src: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode a strkey into its payload, ensuring it was encoded with expected version byte.

    Arguments:
        expected_version: the version byte the strkey must carry.
        src: the encoded strkey.

    Returns:
        The raw payload, without version byte nor checksum.

    Raises:
        StrkeyError: one of its subclasses, depending on the first failing check.
    """
    expected = _expect_version(expected_version)
    try:
        _, payload = _decode(src, expected)
    except errors.StrkeyError as exc:
        logger.debug("Rejected strkey for version %s: %s", expected.name, exc)
        raise
    return payload


def decode_any(src: t.Union[str, bytes, bytearray]) -> t.Tuple[VersionByte, bytes]:
    """Decode a strkey of any recognized version into a tuple (version, payload)."""
    try:
        return _decode(src, None)
    except errors.StrkeyError as exc:
        logger.debug("Rejected strkey: %s", exc)
        raise


def version(src: t.Union[str, bytes, bytearray]) -> VersionByte:
    """Return the version byte of a valid strkey."""
    found, _ = decode_any(src)
    return found


def is_valid(expected_version: int, src: t.Union[str, bytes, bytearray]) -> bool:
    """Return True when src is a valid strkey for expected version byte."""
    try:
        decode(expected_version, src)
    except errors.StrkeyError:
        return False
    return True


def is_valid_ed25519_public_key(src: t.Union[str, bytes, bytearray]) -> bool:
    """Return True when src is a valid account address."""
    return is_valid(VersionByte.ACCOUNT_ID, src)


def is_valid_ed25519_secret_seed(src: t.Union[str, bytes, bytearray]) -> bool:
    """Return True when src is a valid secret seed."""
    return is_valid(VersionByte.SEED, src)


def is_valid_muxed_account(src: t.Union[str, bytes, bytearray]) -> bool:
    """Return True when src is a valid muxed account address."""
    return is_valid(VersionByte.MUXED_ACCOUNT, src)
