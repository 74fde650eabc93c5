"""Recover raw account bytes and data sizes from UiAccountData.

decode_bytes and data_size raise an AccountDecodeError subclass describing
why the bytes are unavailable. The try_* variants return None instead.
"""

from __future__ import annotations

import base64
import logging

import base58  # type: ignore[import-untyped]

from account_decoder.compression import new_decompressor
from account_decoder.config import DecodeConfig
from account_decoder.data import (
    EncodedData,
    JsonParsedData,
    LegacyBinaryData,
    ParsedAccount,
    UiAccountData,
)
from account_decoder.encoding import UiAccountEncoding
from account_decoder.errors import (
    AccountDecodeError,
    Base58DecodeError,
    Base64DecodeError,
    ParsedDataUnavailable,
    UnsupportedEncodingState,
)

logger = logging.getLogger(__name__)


def _b58decode(blob: str) -> bytes:
    try:
        raw = blob.encode("ascii")
    except UnicodeEncodeError as e:
        raise Base58DecodeError("base58: non-ascii character in input") from e
    # base58.b58decode strips trailing whitespace; reject it here instead.
    invalid = raw.translate(None, base58.BITCOIN_ALPHABET)
    if invalid:
        raise Base58DecodeError(f"base58: invalid character {chr(invalid[0])!r}")
    return base58.b58decode(raw)


def _b64decode(blob: str) -> bytes:
    try:
        return base64.b64decode(blob, validate=True)
    except ValueError as e:
        raise Base64DecodeError(f"base64: {e}") from e


def decode_bytes(data: UiAccountData, config: DecodeConfig | None = None) -> bytes:
    """Return the raw account bytes carried by data."""
    if isinstance(data, JsonParsedData):
        raise ParsedDataUnavailable(
            f"account data was parsed by {data.parsed.program!r}; raw bytes are not available"
        )
    if isinstance(data, LegacyBinaryData):
        return _b58decode(data.blob)
    if isinstance(data, EncodedData):
        encoding = data.encoding
        if encoding is UiAccountEncoding.BASE58:
            return _b58decode(data.blob)
        if encoding is UiAccountEncoding.BASE64:
            return _b64decode(data.blob)
        if encoding is UiAccountEncoding.BASE64_ZSTD:
            compressed = _b64decode(data.blob)
            return new_decompressor(config).decompress(compressed)
        raise UnsupportedEncodingState(f"account data tagged {encoding} carries no bytes")
    raise TypeError(f"not account data: {type(data).__name__}")


def try_decode_bytes(data: UiAccountData, config: DecodeConfig | None = None) -> bytes | None:
    try:
        return decode_bytes(data, config)
    except AccountDecodeError as e:
        logger.debug("account data decode failed: %s", e)
        return None


def data_size(data: UiAccountData, config: DecodeConfig | None = None) -> int:
    """Return the account data length.

    For jsonParsed data this is the size the node declared, since the
    bytes themselves are gone.
    """
    if isinstance(data, JsonParsedData):
        return data.parsed.space
    return len(decode_bytes(data, config))


def try_data_size(data: UiAccountData, config: DecodeConfig | None = None) -> int | None:
    try:
        return data_size(data, config)
    except AccountDecodeError as e:
        logger.debug("account data size unavailable: %s", e)
        return None


def is_json_parsed(data: UiAccountData) -> bool:
    return isinstance(data, JsonParsedData)


def as_parsed(data: UiAccountData) -> ParsedAccount | None:
    if isinstance(data, JsonParsedData):
        return data.parsed
    return None
