import secrets
import typing as t

from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from . import constants, encoding
from .constants import VersionByte


def parse_address(address: t.Union[str, bytes, bytearray]) -> ed25519.Ed25519PublicKey:
    """Decode an account address ('G...') into an ed25519 public key."""
    public_bytes = encoding.decode(VersionByte.ACCOUNT_ID, address)
    return ed25519.Ed25519PublicKey.from_public_bytes(public_bytes)


class KeyPair:
    def __init__(self, signing_key: ed25519.Ed25519PrivateKey):
        """
        Ed25519 KeyPair identified by its account address.

        Arguments:
            signing_key: The ed25519 private key.

        Returns:
            A KeyPair that can be used to sign data and expose its strkeys.
        """
        self.signing_key = signing_key

    @property
    def public_bytes(self) -> bytes:
        """Return the raw ed25519 public key."""
        return self.signing_key.public_key().public_bytes(
            encoding=Encoding.Raw, format=PublicFormat.Raw
        )

    @property
    def raw_seed(self) -> bytes:
        """Return the raw ed25519 seed."""
        return self.signing_key.private_bytes(
            encoding=Encoding.Raw,
            format=PrivateFormat.Raw,
            encryption_algorithm=NoEncryption(),
        )

    @property
    def address(self) -> str:
        """
        Return the account address ('G...') associated with the KeyPair.

        Returns:
            public key of the key pair encoded as a strkey
        """
        return encoding.encode(VersionByte.ACCOUNT_ID, self.public_bytes)

    @property
    def seed(self) -> str:
        """Return the secret seed ('S...') associated with the KeyPair"""
        return encoding.encode(VersionByte.SEED, self.raw_seed)

    def sign(self, data: bytes) -> bytes:
        """Sign some data using Ed25519PrivateKey

        Arguments:
            data: The payload in bytes to sign.

        Returns:
            The raw bytes representing the signature.
        """
        return self.signing_key.sign(data)

    @classmethod
    def from_seed(cls, seed: t.Union[str, bytes, bytearray]) -> "KeyPair":
        """Load a keypair from encoded secret seed."""
        raw_seed = encoding.decode(VersionByte.SEED, seed)
        return cls.from_raw_seed(raw_seed)

    @classmethod
    def from_raw_seed(cls, raw_seed: t.Union[bytes, bytearray]) -> "KeyPair":
        """Load a keypair from a raw 32 bytes seed."""
        if len(raw_seed) != constants.ED25519_LENGTH:
            raise ValueError(
                f"Invalid seed length: {len(raw_seed)}. Expected: {constants.ED25519_LENGTH}"
            )
        signing_key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(raw_seed))
        return cls(signing_key=signing_key)

    @classmethod
    def random(cls) -> "KeyPair":
        """Create a new random keypair."""
        return cls.from_raw_seed(secrets.token_bytes(constants.ED25519_LENGTH))

    def __repr__(self) -> str:
        return f"KeyPair(address={self.address})"
