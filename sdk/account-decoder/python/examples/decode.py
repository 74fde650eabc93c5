#!/usr/bin/env python3
"""Example CLI that decodes a saved getAccountInfo response.

    curl -s https://api.mainnet-beta.solana.com -X POST -H 'Content-Type: application/json' \
        -d '{"jsonrpc":"2.0","id":1,"method":"getAccountInfo",
             "params":["EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",{"encoding":"base64+zstd"}]}' \
        | python decode.py
"""

import argparse
import json
import logging
import sys

from account_decoder import (
    MAX_DECOMPRESSED_SIZE,
    AccountDecodeError,
    DecodeConfig,
    EncodedData,
    LegacyBinaryData,
    UiAccount,
)


def describe_encoding(ui: UiAccount) -> str:
    if isinstance(ui.data, EncodedData):
        return str(ui.data.encoding)
    if isinstance(ui.data, LegacyBinaryData):
        return "legacy base58"
    return "jsonParsed"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Decode a getAccountInfo response")
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="JSON response or bare account object (default: stdin)",
    )
    parser.add_argument(
        "--max-decompressed-size",
        type=int,
        default=MAX_DECOMPRESSED_SIZE,
        help="Largest zstd output to accept, in bytes",
    )
    parser.add_argument("--no-zstd", action="store_true", help="Disable zstd decompression")
    parser.add_argument("--hex", action="store_true", help="Print account data as hex")
    parser.add_argument("--verbose", action="store_true", help="Log decode failures to stderr")
    args = parser.parse_args(argv)
    if args.max_decompressed_size < 0:
        parser.error("--max-decompressed-size must be non-negative")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    body = json.load(args.file)
    if isinstance(body, dict) and ("result" in body or "value" in body or "error" in body):
        ui = UiAccount.from_rpc_response(body)
    else:
        ui = UiAccount.from_json(body)
    if ui is None:
        print("account not found")
        sys.exit(1)

    config = DecodeConfig(
        max_decompressed_size=args.max_decompressed_size,
        zstd_enabled=not args.no_zstd,
    )

    print("=== Account ===")
    print(f"Owner:       {ui.owner}")
    print(f"Lamports:    {ui.lamports}")
    print(f"Executable:  {ui.executable}")
    print(f"Rent epoch:  {ui.rent_epoch}")
    print(f"Encoding:    {describe_encoding(ui)}")
    size = ui.try_data_size(config)
    print(f"Data size:   {size if size is not None else 'unavailable'}")

    try:
        account, was_json_parsed = ui.decode_with_fallback(config=config)
    except AccountDecodeError as e:
        print(f"decode failed: {e}", file=sys.stderr)
        sys.exit(1)

    if was_json_parsed:
        parsed = ui.parsed_data()
        print(f"Parsed by:   {parsed.program}")
        print("Raw bytes unavailable; parsed data follows.")
        print(json.dumps(parsed.parsed, indent=2))
    elif args.hex:
        print(account.data.hex())


if __name__ == "__main__":
    main()
