"""Tests for the JSON document codec."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from jsonbytes import (
    B64_ENCODER,
    RAW_B64_ENCODER,
    Bytes,
    BytesJSONEncoder,
    DocumentCodec,
    FixedBytes,
    FormatError,
    dumps,
    get_active_encoder,
    loads,
    set_active_encoder,
)


class Key(FixedBytes):
    """Four byte key."""

    size = 4


class Record(BaseModel):
    """Model mixing byte fields with plain ones."""

    name: str
    key: Key
    blob: Bytes


def _record() -> Record:
    return Record(name="r1", key=Key(b"\x01\x02\x03\x04"), blob=Bytes(b"foo"))


class TestBytesJSONEncoder:
    """Test byte handling with the standard json module."""

    def test_encodes_bytes_like_values(self) -> None:
        data = {
            "raw": b"\xde\x14",
            "array": bytearray(b"\xde\x14"),
            "view": memoryview(b"\xde\x14"),
            "wrapped": Bytes(b"\xde\x14"),
            "fixed": Key(b"\xde\x14\x00\x01"),
        }
        decoded = json.loads(json.dumps(data, cls=BytesJSONEncoder))
        assert decoded == {
            "raw": "DE14",
            "array": "DE14",
            "view": "DE14",
            "wrapped": "DE14",
            "fixed": "DE140001",
        }

    def test_explicit_byte_encoder(self) -> None:
        text = json.dumps({"data": b"foo"}, cls=BytesJSONEncoder, byte_encoder=B64_ENCODER)
        assert json.loads(text) == {"data": "Zm9v"}

    def test_nested_models(self) -> None:
        text = json.dumps({"records": [_record()]}, cls=BytesJSONEncoder, byte_encoder="raw-base64")
        assert json.loads(text) == {"records": [{"name": "r1", "key": "AQIDBA", "blob": "Zm9v"}]}

    def test_unknown_types_still_fail(self) -> None:
        with pytest.raises(TypeError):
            json.dumps({"value": object()}, cls=BytesJSONEncoder)


class TestDocumentCodec:
    """Test encoding and decoding whole documents."""

    def test_model_round_trip(self) -> None:
        codec = DocumentCodec()
        encoded = codec.encode(_record())
        assert encoded == b'{"name":"r1","key":"01020304","blob":"666F6F"}'
        assert codec.decode(encoded, Record) == _record()

    def test_codec_encoder_does_not_leak(self) -> None:
        codec = DocumentCodec(B64_ENCODER)
        encoded = codec.encode(_record())
        assert json.loads(encoded)["blob"] == "Zm9v"
        assert codec.decode(encoded, Record) == _record()
        assert get_active_encoder().name == "hex"

    def test_plain_data(self) -> None:
        codec = DocumentCodec("raw-base64")
        encoded = codec.encode({"count": 15, "data": b"D!.3s"})
        assert encoded == b'{"count":15,"data":"RCEuM3M"}'
        assert codec.decode(encoded) == {"count": 15, "data": "RCEuM3M"}

    def test_follows_active_encoder(self) -> None:
        codec = DocumentCodec()
        set_active_encoder(RAW_B64_ENCODER)
        assert json.loads(codec.encode(_record()))["blob"] == "Zm9v"

    def test_bad_byte_field_raises_format_error(self) -> None:
        bad = b'{"name":"r1","key":"01020304","blob":"xyz"}'
        with pytest.raises(FormatError):
            DocumentCodec().decode(bad, Record)

    def test_wrong_fixed_length_raises_format_error(self) -> None:
        bad = b'{"name":"r1","key":"0102","blob":"00"}'
        with pytest.raises(FormatError, match="needs 4 bytes"):
            DocumentCodec().decode(bad, Record)

    def test_other_validation_errors_pass_through(self) -> None:
        with pytest.raises(ValidationError):
            DocumentCodec().decode(b'{"key":"01020304","blob":"00"}', Record)


def test_dumps_and_loads() -> None:
    """Test the module-level helpers."""
    text = dumps(_record(), encoder="base64")
    assert json.loads(text)["key"] == "AQIDBA=="
    assert loads(text, Record, encoder="base64") == _record()
    assert loads('{"a": [1, 2]}') == {"a": [1, 2]}
