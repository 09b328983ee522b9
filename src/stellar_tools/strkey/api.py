import typing as t

from . import encoding
from .constants import VersionByte
from .muxed import MuxedAccount


def encode_account_id(public_bytes: t.Union[bytes, bytearray]) -> str:
    """Encode an ed25519 public key into an account address ('G...')"""
    return encoding.encode(VersionByte.ACCOUNT_ID, public_bytes)


def decode_account_id(address: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode an account address into ed25519 public key bytes"""
    return encoding.decode(VersionByte.ACCOUNT_ID, address)


def encode_seed(raw_seed: t.Union[bytes, bytearray]) -> str:
    """Encode an ed25519 seed into a secret seed ('S...')"""
    return encoding.encode(VersionByte.SEED, raw_seed)


def decode_seed(seed: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode a secret seed into ed25519 seed bytes"""
    return encoding.decode(VersionByte.SEED, seed)


def encode_muxed_account(public_bytes: t.Union[bytes, bytearray], id: int) -> str:
    """Encode an ed25519 public key and a numeric id into a muxed account address ('M...')"""
    return MuxedAccount(ed25519=bytes(public_bytes), id=id).address


def decode_muxed_account(address: t.Union[str, bytes, bytearray]) -> MuxedAccount:
    """Decode a muxed account address"""
    return MuxedAccount.from_address(address)


def encode_hash_tx(tx_hash: t.Union[bytes, bytearray]) -> str:
    """Encode a pre-authorized transaction hash ('T...')"""
    return encoding.encode(VersionByte.HASH_TX, tx_hash)


def decode_hash_tx(src: t.Union[str, bytes, bytearray]) -> bytes:
    return encoding.decode(VersionByte.HASH_TX, src)


def encode_hash_x(hash_x: t.Union[bytes, bytearray]) -> str:
    """Encode the hash of a preimage signer ('X...')"""
    return encoding.encode(VersionByte.HASH_X, hash_x)


def decode_hash_x(src: t.Union[str, bytes, bytearray]) -> bytes:
    return encoding.decode(VersionByte.HASH_X, src)
