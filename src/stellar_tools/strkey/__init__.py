from .api import (
    decode_account_id,
    decode_hash_tx,
    decode_hash_x,
    decode_muxed_account,
    decode_seed,
    encode_account_id,
    encode_hash_tx,
    encode_hash_x,
    encode_muxed_account,
    encode_seed,
)
from .constants import VersionByte
from .encoding import (
    decode,
    decode_any,
    encode,
    is_valid,
    is_valid_ed25519_public_key,
    is_valid_ed25519_secret_seed,
    is_valid_muxed_account,
    version,
)
from .keypair import KeyPair, parse_address
from .muxed import MuxedAccount
from . import base32
from . import constants
from . import crc
from . import encoding
from . import errors

__all__ = [
    "KeyPair",
    "MuxedAccount",
    "VersionByte",
    "base32",
    "constants",
    "crc",
    "decode",
    "decode_account_id",
    "decode_any",
    "decode_hash_tx",
    "decode_hash_x",
    "decode_muxed_account",
    "decode_seed",
    "encode",
    "encode_account_id",
    "encode_hash_tx",
    "encode_hash_x",
    "encode_muxed_account",
    "encode_seed",
    "encoding",
    "errors",
    "is_valid",
    "is_valid_ed25519_public_key",
    "is_valid_ed25519_secret_seed",
    "is_valid_muxed_account",
    "parse_address",
    "version",
]
