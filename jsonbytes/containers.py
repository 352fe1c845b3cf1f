# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Byte container types that serialize through the active byte encoder."""

from collections.abc import Iterator
from typing import Any, ClassVar, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .exceptions import FormatError
from .selector import EncoderLike, get_active_encoder, resolve_encoder

F = TypeVar("F", bound="FixedBytes")

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _bytes_schema(validate: Any) -> core_schema.CoreSchema:
    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda value: get_active_encoder().encode(bytes(value)),
            when_used="json",
        ),
    )


def _bytes_json_schema() -> JsonSchemaValue:
    return {"type": "string", "contentEncoding": get_active_encoder().name}


class Bytes(bytes):
    """Byte string rendered as text by the active encoder.

    Works as a pydantic field type and with ``jsonbytes.document``::

        class Blob(BaseModel):
            data: Bytes

        Blob(data=b"\\x1a\\x2b").model_dump_json()  # '{"data":"1A2B"}'
    """

    def to_json(self, encoder: EncoderLike | None = None) -> str:
        """Return the quoted JSON literal for these bytes."""
        return resolve_encoder(encoder).marshal(self)

    @classmethod
    def from_json(cls, literal: str | bytes, encoder: EncoderLike | None = None) -> "Bytes":
        """Decode a quoted JSON literal.

        Raises:
            FormatError: If the literal is malformed for the encoder
        """
        return cls(resolve_encoder(encoder).unmarshal(literal))

    @classmethod
    def _validate(cls, value: Any) -> "Bytes":
        if isinstance(value, cls):
            return value
        if isinstance(value, _BYTES_LIKE):
            return cls(value)
        if isinstance(value, str):
            return cls(get_active_encoder().decode(value))
        raise FormatError(f"expected bytes or encoded text, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return _bytes_schema(cls._validate)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return _bytes_json_schema()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self)!r})"


class FixedBytes:
    """Mutable byte array of a fixed size.

    Subclass and set ``size``::

        class Digest(FixedBytes):
            size = 32

    Decoding never writes partially: ``load_json`` decodes into a fresh
    buffer and only replaces the contents once the whole value is valid
    and exactly ``size`` bytes long.
    """

    size: ClassVar[int] = 0

    __slots__ = ("_buf",)

    def __init__(self, data: bytes | bytearray | memoryview | None = None):
        if data is None:
            self._buf = bytearray(self.size)
            return
        data = bytes(data)
        if len(data) != self.size:
            raise ValueError(f"{type(self).__name__} needs {self.size} bytes, got {len(data)}")
        self._buf = bytearray(data)

    @classmethod
    def _check_size(cls, data: bytes) -> bytes:
        if len(data) != cls.size:
            raise FormatError(f"{cls.__name__} needs {cls.size} bytes, decoded {len(data)}")
        return data

    def to_json(self, encoder: EncoderLike | None = None) -> str:
        """Return the quoted JSON literal for the contents."""
        return resolve_encoder(encoder).marshal(self._buf)

    @classmethod
    def from_json(cls: type[F], literal: str | bytes, encoder: EncoderLike | None = None) -> F:
        """Decode a quoted JSON literal into a new array."""
        return cls(cls._check_size(resolve_encoder(encoder).unmarshal(literal)))

    def load_json(self, literal: str | bytes, encoder: EncoderLike | None = None) -> None:
        """Replace the contents with a decoded JSON literal.

        Raises:
            FormatError: If the literal is malformed or decodes to the wrong
                length. The current contents are left untouched.
        """
        decoded = self._check_size(resolve_encoder(encoder).unmarshal(literal))
        self._buf[:] = decoded

    @classmethod
    def _validate(cls, value: Any) -> "FixedBytes":
        if isinstance(value, cls):
            return value
        if isinstance(value, _BYTES_LIKE):
            return cls(cls._check_size(bytes(value)))
        if isinstance(value, str):
            return cls(cls._check_size(get_active_encoder().decode(value)))
        raise FormatError(f"expected bytes or encoded text, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return _bytes_schema(cls._validate)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = _bytes_json_schema()
        json_schema["description"] = f"{cls.size} bytes"
        return json_schema

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        return iter(self._buf)

    def __getitem__(self, key: int | slice) -> Any:
        if isinstance(key, slice):
            return bytes(self._buf[key])
        return self._buf[key]

    def __setitem__(self, key: int | slice, value: Any) -> None:
        if isinstance(key, slice):
            updated = bytearray(self._buf)
            updated[key] = value
            if len(updated) != self.size:
                raise ValueError(f"{type(self).__name__} cannot change size")
            self._buf = updated
        else:
            self._buf[key] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedBytes):
            return type(other) is type(self) and other._buf == self._buf
        if isinstance(other, _BYTES_LIKE):
            return self._buf == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._buf)!r})"
