"""Pluggable decompression for base64+zstd account data."""

from __future__ import annotations

from typing import Protocol

import zstandard

from account_decoder.config import DEFAULT_CONFIG, DEFAULT_ZSTD_CHUNK_SIZE, DecodeConfig
from account_decoder.errors import CompressedStreamError, DecompressedSizeExceeded


class Decompressor(Protocol):
    def decompress(self, data: bytes) -> bytes: ...


class ZstdDecompressor:
    """Incremental zstd decompressor with a hard cap on output size.

    Input is fed ``chunk_size`` bytes at a time and the cap is checked after
    every step, so a small payload that expands to gigabytes fails long
    before it is fully inflated. Concatenated frames are decoded in order;
    input that ends inside a frame is an error.
    """

    def __init__(
        self,
        max_output_size: int = DEFAULT_CONFIG.max_decompressed_size,
        chunk_size: int = DEFAULT_ZSTD_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._max_output_size = max_output_size
        self._chunk_size = chunk_size

    @property
    def max_output_size(self) -> int:
        return self._max_output_size

    def decompress(self, data: bytes) -> bytes:
        # A fresh context per call keeps this safe to share between threads.
        dctx = zstandard.ZstdDecompressor()
        out = bytearray()
        offset = 0
        try:
            while offset < len(data):
                dobj = dctx.decompressobj()
                while offset < len(data) and not dobj.eof:
                    chunk = data[offset : offset + self._chunk_size]
                    offset += len(chunk)
                    out += dobj.decompress(chunk)
                    if len(out) > self._max_output_size:
                        raise DecompressedSizeExceeded(self._max_output_size)
                if not dobj.eof:
                    raise CompressedStreamError(
                        f"zstd: incomplete frame at offset {offset} of {len(data)}"
                    )
                # Bytes past the end of this frame start the next one.
                offset -= len(dobj.unused_data)
        except zstandard.ZstdError as e:
            raise CompressedStreamError(f"zstd: {e}") from e
        return bytes(out)


class UnavailableDecompressor:
    """Stand-in used when zstd support is switched off; always fails."""

    def decompress(self, data: bytes) -> bytes:
        raise CompressedStreamError("zstd: decompression is disabled")


def new_decompressor(config: DecodeConfig | None = None) -> Decompressor:
    """Select the decompressor described by config."""
    config = config or DEFAULT_CONFIG
    if config.decompressor is not None:
        return config.decompressor
    if not config.zstd_enabled:
        return UnavailableDecompressor()
    return ZstdDecompressor(max_output_size=config.max_decompressed_size)
