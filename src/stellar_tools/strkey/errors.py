import typing as t


class StrkeyError(Exception):
    pass


class EmptyInputError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: encoded string is empty"


class InvalidEncodingError(StrkeyError):
    def __init__(self, detail: t.Optional[str] = None) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"strkey: invalid encoded string: {self.detail}"
        return "strkey: invalid encoded string"


class NonCanonicalEncodingError(StrkeyError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"strkey: non-canonical strkey; {self.detail}"


class LeftoverCharacterError(NonCanonicalEncodingError):
    def __init__(self) -> None:
        super().__init__("unused leftover character")


class UnusedBitsError(NonCanonicalEncodingError):
    def __init__(self) -> None:
        super().__init__("unused bits should be set to 0")


class InvalidVersionByteError(StrkeyError):
    def __init__(self, version: int) -> None:
        super().__init__(version)
        self.version = version

    def __str__(self) -> str:
        return f"strkey: invalid version byte {self.version}"


class VersionMismatchError(StrkeyError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"strkey: invalid version byte: expected {self.expected}, got {self.actual}"


class ChecksumMismatchError(StrkeyError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"strkey: invalid checksum: expected {self.expected:#06x}, got {self.actual:#06x}"


class InvalidPayloadLengthError(StrkeyError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"strkey: invalid payload length: expected {self.expected}, got {self.actual}"
