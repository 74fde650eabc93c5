"""Account data as it appears in RPC responses.

The ``data`` field of an account is untagged on the wire; its JSON shape
decides the variant:

    "3Bxs4..."                              LegacyBinaryData (base58)
    {"program": ..., "parsed": ..., ...}    JsonParsedData
    ["dGVzdA==", "base64"]                  EncodedData
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from account_decoder.encoding import UiAccountEncoding
from account_decoder.errors import AccountShapeError

U64_MAX = (1 << 64) - 1


def require_u64(obj: dict, key: str) -> int:
    """Return obj[key] if it is an unsigned 64-bit integer."""
    if key not in obj:
        raise AccountShapeError(f"missing field {key!r}")
    v = obj[key]
    # bool is an int subclass but never a valid number on the wire.
    if isinstance(v, bool) or not isinstance(v, int):
        raise AccountShapeError(f"field {key!r} must be an integer, got {type(v).__name__}")
    if not 0 <= v <= U64_MAX:
        raise AccountShapeError(f"field {key!r} out of u64 range: {v}")
    return v


def require_str(obj: dict, key: str) -> str:
    if key not in obj:
        raise AccountShapeError(f"missing field {key!r}")
    v = obj[key]
    if not isinstance(v, str):
        raise AccountShapeError(f"field {key!r} must be a string, got {type(v).__name__}")
    return v


def require_bool(obj: dict, key: str) -> bool:
    if key not in obj:
        raise AccountShapeError(f"missing field {key!r}")
    v = obj[key]
    if not isinstance(v, bool):
        raise AccountShapeError(f"field {key!r} must be a boolean, got {type(v).__name__}")
    return v


@dataclass(frozen=True)
class ParsedAccount:
    """Program-specific interpretation of account data.

    ``parsed`` is whatever JSON the node produced and is never inspected
    here. ``space`` is the length of the underlying account data.
    """

    program: str
    parsed: Any
    space: int

    @classmethod
    def from_json(cls, obj: dict) -> ParsedAccount:
        if "parsed" not in obj:
            raise AccountShapeError("missing field 'parsed'")
        return cls(
            program=require_str(obj, "program"),
            parsed=obj["parsed"],
            space=require_u64(obj, "space"),
        )

    def to_json(self) -> dict:
        return {"program": self.program, "parsed": self.parsed, "space": self.space}


@dataclass(frozen=True)
class LegacyBinaryData:
    """Bare base58 string, from before encodings were tagged."""

    blob: str

    def to_json(self) -> str:
        return self.blob


@dataclass(frozen=True)
class JsonParsedData:
    parsed: ParsedAccount

    def to_json(self) -> dict:
        return self.parsed.to_json()


@dataclass(frozen=True)
class EncodedData:
    blob: str
    encoding: UiAccountEncoding

    def to_json(self) -> list:
        return [self.blob, self.encoding.value]


UiAccountData = Union[LegacyBinaryData, JsonParsedData, EncodedData]


def account_data_from_json(value: Any) -> UiAccountData:
    """Build UiAccountData from the ``data`` field of an RPC account.

    Shapes are tried in a fixed order: object, then two-element array,
    then string.
    """
    if isinstance(value, dict):
        return JsonParsedData(ParsedAccount.from_json(value))
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise AccountShapeError(
                f"encoded account data must be [blob, encoding], got {len(value)} elements"
            )
        blob, encoding = value
        if not isinstance(blob, str):
            raise AccountShapeError(
                f"encoded account data blob must be a string, got {type(blob).__name__}"
            )
        return EncodedData(blob, UiAccountEncoding.from_wire(encoding))
    if isinstance(value, str):
        return LegacyBinaryData(value)
    raise AccountShapeError(f"unrecognized account data shape: {type(value).__name__}")


@dataclass(frozen=True)
class UiDataSliceConfig:
    """Window of account data requested via the ``dataSlice`` RPC option."""

    offset: int
    length: int

    def __post_init__(self) -> None:
        if self.offset < 0 or self.length < 0:
            raise ValueError(
                f"data slice offset and length must be non-negative, got {self.offset}, {self.length}"
            )

    @classmethod
    def from_json(cls, obj: dict) -> UiDataSliceConfig:
        return cls(offset=require_u64(obj, "offset"), length=require_u64(obj, "length"))

    def to_json(self) -> dict:
        return {"offset": self.offset, "length": self.length}

    def apply(self, data: bytes) -> bytes:
        """Return the sliced window, truncated at the end of data."""
        if self.offset > len(data):
            return b""
        return bytes(data[self.offset : self.offset + self.length])
