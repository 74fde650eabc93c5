"""Accounts as returned by the JSON RPC API, and conversion to typed accounts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from solders.account import Account  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from account_decoder.config import DecodeConfig
from account_decoder.data import (
    ParsedAccount,
    UiAccountData,
    account_data_from_json,
    require_bool,
    require_str,
    require_u64,
)
from account_decoder.decode import as_parsed, data_size, decode_bytes, is_json_parsed
from account_decoder.errors import AccountDecodeError, AccountShapeError, AddressParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Called as factory(lamports, data, owner, executable, rent_epoch).
AccountFactory = Callable[[int, bytes, Pubkey, bool, int], T]


@dataclass(frozen=True)
class UiAccount:
    """JSON representation of an account, as served by getAccountInfo.

    ``decode`` raises AccountDecodeError on failure; the ``try_`` variants
    return None instead. jsonParsed accounts only convert through the
    fallback methods, which substitute empty data.
    """

    lamports: int
    data: UiAccountData
    owner: str
    executable: bool
    rent_epoch: int
    space: int | None = None

    @classmethod
    def from_json(cls, obj: Any) -> UiAccount:
        if not isinstance(obj, dict):
            raise AccountShapeError(f"account must be an object, got {type(obj).__name__}")
        if "data" not in obj:
            raise AccountShapeError("missing field 'data'")
        space = obj.get("space")
        return cls(
            lamports=require_u64(obj, "lamports"),
            data=account_data_from_json(obj["data"]),
            owner=require_str(obj, "owner"),
            executable=require_bool(obj, "executable"),
            rent_epoch=require_u64(obj, "rentEpoch"),
            space=None if space is None else require_u64(obj, "space"),
        )

    @classmethod
    def from_rpc_response(cls, body: Any) -> UiAccount | None:
        """Read the account out of a getAccountInfo response.

        Accepts the whole JSON-RPC body or just its ``result``. Returns None
        when the account does not exist.
        """
        if not isinstance(body, dict):
            raise AccountShapeError(f"rpc response must be an object, got {type(body).__name__}")
        if "error" in body:
            raise RuntimeError(body["error"])
        result = body.get("result", body)
        if not isinstance(result, dict) or "value" not in result:
            raise AccountShapeError("rpc response has no 'value'")
        value = result["value"]
        if value is None:
            return None
        return cls.from_json(value)

    def to_json(self) -> dict:
        return {
            "lamports": self.lamports,
            "data": self.data.to_json(),
            "owner": self.owner,
            "executable": self.executable,
            "rentEpoch": self.rent_epoch,
            "space": self.space,
        }

    def owner_pubkey(self) -> Pubkey:
        try:
            return Pubkey.from_string(self.owner)
        except ValueError as e:
            raise AddressParseError(f"invalid owner address {self.owner!r}: {e}") from e

    # --- Strict conversion (raise AccountDecodeError) ---

    def decode(
        self,
        factory: AccountFactory[T] = Account,  # type: ignore[assignment]
        config: DecodeConfig | None = None,
    ) -> T:
        owner = self.owner_pubkey()
        data = decode_bytes(self.data, config)
        return factory(self.lamports, data, owner, self.executable, self.rent_epoch)

    def decode_with_fallback(
        self,
        factory: AccountFactory[T] = Account,  # type: ignore[assignment]
        config: DecodeConfig | None = None,
    ) -> tuple[T, bool]:
        """Decode, substituting empty data for jsonParsed accounts.

        Returns (account, was_json_parsed). Corrupt encodings still raise;
        only jsonParsed data falls back.
        """
        owner = self.owner_pubkey()
        if is_json_parsed(self.data):
            return factory(self.lamports, b"", owner, self.executable, self.rent_epoch), True
        data = decode_bytes(self.data, config)
        return factory(self.lamports, data, owner, self.executable, self.rent_epoch), False

    # --- Try variants (return None on failure) ---

    def try_decode(
        self,
        factory: AccountFactory[T] = Account,  # type: ignore[assignment]
        config: DecodeConfig | None = None,
    ) -> T | None:
        try:
            return self.decode(factory, config)
        except AccountDecodeError as e:
            logger.debug("account decode failed: %s", e)
            return None

    def try_decode_with_fallback(
        self,
        factory: AccountFactory[T] = Account,  # type: ignore[assignment]
        config: DecodeConfig | None = None,
    ) -> tuple[T, bool] | None:
        try:
            return self.decode_with_fallback(factory, config)
        except AccountDecodeError as e:
            logger.debug("account decode with fallback failed: %s", e)
            return None

    # --- Data introspection ---

    def is_json_parsed(self) -> bool:
        return is_json_parsed(self.data)

    def parsed_data(self) -> ParsedAccount | None:
        return as_parsed(self.data)

    def data_size(self, config: DecodeConfig | None = None) -> int:
        return data_size(self.data, config)

    def try_data_size(self, config: DecodeConfig | None = None) -> int | None:
        try:
            return self.data_size(config)
        except AccountDecodeError as e:
            logger.debug("account data size unavailable: %s", e)
            return None
