"""Errors raised while reading account data from RPC responses.

Every error is a ValueError so callers that already guard SDK parsing with
``except ValueError`` keep working. The ``try_*`` helpers in this package
collapse AccountDecodeError into ``None``.
"""


class AccountDecodeError(ValueError):
    """Base class for failures turning a UiAccount into raw bytes or an account."""


class AddressParseError(AccountDecodeError):
    """The owner field is not a valid base58 public key."""


class Base58DecodeError(AccountDecodeError):
    pass


class Base64DecodeError(AccountDecodeError):
    pass


class CompressedStreamError(AccountDecodeError):
    """The zstd payload is corrupt or zstd support is disabled."""


class DecompressedSizeExceeded(CompressedStreamError):
    """Decompressed output grew past the configured limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"zstd: decompressed data exceeds limit of {limit} bytes")
        self.limit = limit


class UnsupportedEncodingState(AccountDecodeError):
    """Encoded data tagged binary or jsonParsed, which never carries bytes."""


class ParsedDataUnavailable(AccountDecodeError):
    """Raw bytes were requested from jsonParsed account data."""


class AccountShapeError(ValueError):
    """Wire JSON does not match any known account shape."""
