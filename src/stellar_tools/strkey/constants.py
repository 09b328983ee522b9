import enum
import typing as t

import typing_extensions as t_


class VersionByte(enum.IntEnum):
    """Leading byte of a decoded strkey.

    Each value is shifted by 3 so that the first base32 character of the
    encoded string is a mnemonic letter.
    """

    # ACCOUNT_ID is the version byte used for encoded account addresses
    ACCOUNT_ID = 6 << 3  # Base32-encodes to 'G...'

    # MUXED_ACCOUNT is the version byte used for encoded multiplexed accounts
    MUXED_ACCOUNT = 12 << 3  # Base32-encodes to 'M...'

    # SEED is the version byte used for encoded secret seeds
    SEED = 18 << 3  # Base32-encodes to 'S...'

    # HASH_TX is the version byte used for encoded pre-authorized transaction hashes
    HASH_TX = 19 << 3  # Base32-encodes to 'T...'

    # HASH_X is the version byte used for encoded hash-of-preimage signers
    HASH_X = 23 << 3  # Base32-encodes to 'X...'


# ALPHABET is the RFC4648 base32 alphabet, indexed by 5-bit symbol value
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Length of an ed25519 public key or seed
ED25519_LENGTH = 32

# Length of the numeric id carried by a muxed account
MUXED_ID_LENGTH = 8

# Length of the CRC16 checksum appended to each record
CHECKSUM_LENGTH = 2


def payload_length(version: VersionByte) -> int:
    """Return the fixed payload length associated with a version byte."""
    if version is VersionByte.ACCOUNT_ID:
        return ED25519_LENGTH
    elif version is VersionByte.MUXED_ACCOUNT:
        return ED25519_LENGTH + MUXED_ID_LENGTH
    elif version is VersionByte.SEED:
        return ED25519_LENGTH
    elif version is VersionByte.HASH_TX:
        return 32
    elif version is VersionByte.HASH_X:
        return 32
    else:
        t_.assert_never(version)


def resolve(value: int) -> t.Optional[VersionByte]:
    """Return the version byte matching value, or None when value is not recognized."""
    try:
        return VersionByte(value)
    except ValueError:
        return None


def lookup_payload_length(value: int) -> t.Optional[int]:
    """Return the payload length of a raw version byte, or None when not recognized."""
    version = resolve(value)
    if version is None:
        return None
    return payload_length(version)

