"""Account data encodings accepted by getAccountInfo and friends."""

from __future__ import annotations

from enum import Enum

from account_decoder.errors import AccountShapeError


class UiAccountEncoding(Enum):
    BINARY = "binary"  # legacy, retained for RPC backwards compatibility
    BASE58 = "base58"
    BASE64 = "base64"
    JSON_PARSED = "jsonParsed"
    BASE64_ZSTD = "base64+zstd"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, value: object) -> UiAccountEncoding:
        if isinstance(value, str):
            for encoding in cls:
                if encoding.value == value:
                    return encoding
        raise AccountShapeError(f"unknown account encoding: {value!r}")
