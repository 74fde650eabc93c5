from account_decoder.account import AccountFactory, UiAccount
from account_decoder.compression import (
    Decompressor,
    UnavailableDecompressor,
    ZstdDecompressor,
    new_decompressor,
)
from account_decoder.config import DEFAULT_CONFIG, MAX_DECOMPRESSED_SIZE, DecodeConfig
from account_decoder.data import (
    EncodedData,
    JsonParsedData,
    LegacyBinaryData,
    ParsedAccount,
    UiAccountData,
    UiDataSliceConfig,
    account_data_from_json,
)
from account_decoder.decode import (
    as_parsed,
    data_size,
    decode_bytes,
    is_json_parsed,
    try_data_size,
    try_decode_bytes,
)
from account_decoder.encoding import UiAccountEncoding
from account_decoder.errors import (
    AccountDecodeError,
    AccountShapeError,
    AddressParseError,
    Base58DecodeError,
    Base64DecodeError,
    CompressedStreamError,
    DecompressedSizeExceeded,
    ParsedDataUnavailable,
    UnsupportedEncodingState,
)

__all__ = [
    "AccountFactory",
    "UiAccount",
    "Decompressor",
    "UnavailableDecompressor",
    "ZstdDecompressor",
    "new_decompressor",
    "DEFAULT_CONFIG",
    "MAX_DECOMPRESSED_SIZE",
    "DecodeConfig",
    "EncodedData",
    "JsonParsedData",
    "LegacyBinaryData",
    "ParsedAccount",
    "UiAccountData",
    "UiDataSliceConfig",
    "account_data_from_json",
    "as_parsed",
    "data_size",
    "decode_bytes",
    "is_json_parsed",
    "try_data_size",
    "try_decode_bytes",
    "UiAccountEncoding",
    "AccountDecodeError",
    "AccountShapeError",
    "AddressParseError",
    "Base58DecodeError",
    "Base64DecodeError",
    "CompressedStreamError",
    "DecompressedSizeExceeded",
    "ParsedDataUnavailable",
    "UnsupportedEncodingState",
]
