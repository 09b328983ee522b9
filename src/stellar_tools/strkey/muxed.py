import typing as t
from dataclasses import dataclass

from . import constants, encoding
from .constants import VersionByte

MAX_ID = 2**64 - 1


@dataclass(frozen=True)
class MuxedAccount:
    """A muxed account combines an ed25519 public key with a numeric id.

    The strkey payload is the id as an unsigned 64-bit big endian integer
    followed by the 32-byte public key.
    """

    ed25519: bytes
    id: int

    def __post_init__(self) -> None:
        if len(self.ed25519) != constants.ED25519_LENGTH:
            raise ValueError(
                f"Invalid ed25519 key length: {len(self.ed25519)}. Expected: {constants.ED25519_LENGTH}"
            )
        if not 0 <= self.id <= MAX_ID:
            raise ValueError(f"Invalid muxed account id: {self.id}. Must fit in 64 bits")

    @property
    def payload(self) -> bytes:
        return self.id.to_bytes(constants.MUXED_ID_LENGTH, byteorder="big") + bytes(
            self.ed25519
        )

    @property
    def address(self) -> str:
        """Return the muxed account address ('M...')."""
        return encoding.encode(VersionByte.MUXED_ACCOUNT, self.payload)

    @property
    def account_id(self) -> str:
        """Return the address of the underlying account ('G...')."""
        return encoding.encode(VersionByte.ACCOUNT_ID, self.ed25519)

    @classmethod
    def from_payload(cls, payload: t.Union[bytes, bytearray]) -> "MuxedAccount":
        muxed_id = int.from_bytes(payload[: constants.MUXED_ID_LENGTH], byteorder="big")
        key = bytes(payload[constants.MUXED_ID_LENGTH :])
        return cls(ed25519=key, id=muxed_id)

    @classmethod
    def from_address(cls, address: t.Union[str, bytes, bytearray]) -> "MuxedAccount":
        """Load a muxed account from its encoded address."""
        payload = encoding.decode(VersionByte.MUXED_ACCOUNT, address)
        return cls.from_payload(payload)

    @classmethod
    def from_account_id(
        cls, account_id: t.Union[str, bytes, bytearray], id: int
    ) -> "MuxedAccount":
        """Create a muxed account from an account address and a numeric id."""
        key = encoding.decode(VersionByte.ACCOUNT_ID, account_id)
        return cls(ed25519=key, id=id)
