"""Decoding limits and compression settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from account_decoder.compression import Decompressor

# Largest account data length the ledger permits.
MAX_DECOMPRESSED_SIZE = 10 * 1024 * 1024

# Compressed bytes fed to the decoder per step. A single zstd block expands
# to at most 128 KiB, so small steps keep the overshoot past the cap small.
DEFAULT_ZSTD_CHUNK_SIZE = 512


@dataclass(frozen=True)
class DecodeConfig:
    max_decompressed_size: int = MAX_DECOMPRESSED_SIZE
    zstd_enabled: bool = True
    # Overrides zstd_enabled and max_decompressed_size when set.
    decompressor: Decompressor | None = None

    def __post_init__(self) -> None:
        if self.max_decompressed_size < 0:
            raise ValueError(
                f"max_decompressed_size must be non-negative, got {self.max_decompressed_size}"
            )


DEFAULT_CONFIG = DecodeConfig()
