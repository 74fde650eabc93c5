"""Wire shape discrimination and JSON round trips for account data."""

import pytest

from account_decoder import (
    AccountShapeError,
    EncodedData,
    JsonParsedData,
    LegacyBinaryData,
    ParsedAccount,
    UiAccountEncoding,
    UiDataSliceConfig,
    account_data_from_json,
)


class TestUiAccountEncoding:
    @pytest.mark.parametrize(
        "wire,encoding",
        [
            ("binary", UiAccountEncoding.BINARY),
            ("base58", UiAccountEncoding.BASE58),
            ("base64", UiAccountEncoding.BASE64),
            ("jsonParsed", UiAccountEncoding.JSON_PARSED),
            ("base64+zstd", UiAccountEncoding.BASE64_ZSTD),
        ],
    )
    def test_from_wire(self, wire, encoding):
        assert UiAccountEncoding.from_wire(wire) is encoding
        assert str(encoding) == wire

    @pytest.mark.parametrize("wire", ["Base64", "json_parsed", "base64zstd", "", 1, None])
    def test_unknown(self, wire):
        with pytest.raises(AccountShapeError):
            UiAccountEncoding.from_wire(wire)

    def test_hashable(self):
        assert len({UiAccountEncoding.BASE64, UiAccountEncoding.BASE64}) == 1


class TestAccountDataFromJson:
    def test_string_is_legacy(self):
        assert account_data_from_json("3yZe7d") == LegacyBinaryData("3yZe7d")

    def test_array_is_encoded(self):
        got = account_data_from_json(["dGVzdCBkYXRh", "base64"])
        assert got == EncodedData("dGVzdCBkYXRh", UiAccountEncoding.BASE64)

    def test_tuple_is_encoded(self):
        got = account_data_from_json(("abc", "base64+zstd"))
        assert got == EncodedData("abc", UiAccountEncoding.BASE64_ZSTD)

    def test_binary_and_json_parsed_tags_are_accepted(self):
        assert account_data_from_json(["", "binary"]).encoding is UiAccountEncoding.BINARY
        assert account_data_from_json(["", "jsonParsed"]).encoding is UiAccountEncoding.JSON_PARSED

    def test_object_is_json_parsed(self):
        parsed = {"info": {"decimals": 6}, "type": "mint"}
        got = account_data_from_json({"program": "spl-token", "parsed": parsed, "space": 82})
        assert isinstance(got, JsonParsedData)
        assert got.parsed == ParsedAccount(program="spl-token", parsed=parsed, space=82)
        # parsed passes through untouched
        assert got.parsed.parsed is parsed

    def test_object_extra_keys_ignored(self):
        got = account_data_from_json({"program": "p", "parsed": None, "space": 0, "extra": 1})
        assert got == JsonParsedData(ParsedAccount("p", None, 0))

    @pytest.mark.parametrize(
        "value",
        [
            ["only-one"],
            ["a", "base64", "extra"],
            [],
            [1, "base64"],
            ["abc", "base32"],
            {"program": "p", "space": 1},
            {"parsed": {}, "space": 1},
            {"program": "p", "parsed": {}},
            {"program": "p", "parsed": {}, "space": -1},
            {"program": "p", "parsed": {}, "space": True},
            {"program": 7, "parsed": {}, "space": 1},
            42,
            None,
            b"bytes",
        ],
    )
    def test_rejects_unknown_shapes(self, value):
        with pytest.raises(AccountShapeError):
            account_data_from_json(value)

    @pytest.mark.parametrize(
        "value",
        [
            "3yZe7d",
            ["dGVzdCBkYXRh", "base64"],
            ["", "base64+zstd"],
            {"program": "spl-token", "parsed": {"type": "account"}, "space": 165},
        ],
    )
    def test_to_json_restores_wire_form(self, value):
        assert account_data_from_json(value).to_json() == value


class TestUiDataSliceConfig:
    def test_from_json(self):
        cfg = UiDataSliceConfig.from_json({"offset": 4, "length": 8})
        assert cfg == UiDataSliceConfig(offset=4, length=8)
        assert cfg.to_json() == {"offset": 4, "length": 8}

    def test_apply(self):
        assert UiDataSliceConfig(2, 3).apply(b"abcdefg") == b"cde"

    def test_apply_saturates(self):
        assert UiDataSliceConfig(5, 10).apply(b"abcdefg") == b"fg"
        assert UiDataSliceConfig(7, 1).apply(b"abcdefg") == b""
        assert UiDataSliceConfig(100, 1).apply(b"abcdefg") == b""

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            UiDataSliceConfig(-1, 2)

    def test_from_json_rejects_missing(self):
        with pytest.raises(AccountShapeError):
            UiDataSliceConfig.from_json({"offset": 1})
