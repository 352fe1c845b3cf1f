# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""JSON document codec with byte-aware serialization."""

import json
from typing import Any, TypeVar, overload

from pydantic import BaseModel, ValidationError

from .containers import FixedBytes
from .exceptions import FormatError
from .selector import EncoderLike, resolve_encoder, use_encoder

M = TypeVar("M", bound=BaseModel)


class BytesJSONEncoder(json.JSONEncoder):
    """JSON encoder that renders bytes through a byte encoder.

    Handles ``bytes``, ``bytearray``, ``memoryview``, ``Bytes`` and
    ``FixedBytes`` values, and pydantic models nested in plain data.
    """

    def __init__(self, *args: Any, byte_encoder: EncoderLike | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.byte_encoder = byte_encoder

    def default(self, o: Any) -> Any:
        if isinstance(o, (bytes, bytearray, memoryview, FixedBytes)):
            return resolve_encoder(self.byte_encoder).encode(bytes(o))
        if isinstance(o, BaseModel):
            with use_encoder(self.byte_encoder):
                return o.model_dump(mode="json")
        return super().default(o)


def _format_error(exc: ValidationError) -> FormatError | None:
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, FormatError):
            return cause
    return None


class DocumentCodec:
    """Codec for JSON documents carrying byte fields.

    Args:
        byte_encoder: Encoder for byte values; the active encoder if None
    """

    def __init__(self, byte_encoder: EncoderLike | None = None):
        self.byte_encoder = byte_encoder

    def encode(self, data: Any) -> bytes:
        """Encode data to JSON bytes.

        Args:
            data: Data to encode (pydantic model or plain data)

        Returns:
            UTF-8 encoded JSON bytes
        """
        with use_encoder(self.byte_encoder):
            if isinstance(data, BaseModel):
                return data.model_dump_json().encode("utf-8")
            return json.dumps(
                data, cls=BytesJSONEncoder, byte_encoder=self.byte_encoder, separators=(",", ":")
            ).encode("utf-8")

    @overload
    def decode(self, data: bytes | str, model: type[M]) -> M: ...

    @overload
    def decode(self, data: bytes | str, model: None = None) -> Any: ...

    def decode(self, data: bytes | str, model: type[M] | None = None) -> Any:
        """Decode JSON bytes to data.

        Args:
            data: UTF-8 encoded JSON
            model: Pydantic model to validate into; plain data if None

        Returns:
            Model instance, or the decoded JSON value

        Raises:
            FormatError: If a byte field holds malformed text
            pydantic.ValidationError: For any other validation failure
        """
        if model is None:
            if isinstance(data, (bytes, bytearray)):
                data = data.decode("utf-8")
            return json.loads(data)

        with use_encoder(self.byte_encoder):
            try:
                return model.model_validate_json(data)
            except ValidationError as e:
                cause = _format_error(e)
                if cause is None:
                    raise
                raise cause from e


def dumps(obj: Any, encoder: EncoderLike | None = None) -> str:
    """Serialize ``obj`` to a JSON string, encoding bytes with ``encoder``."""
    return DocumentCodec(encoder).encode(obj).decode("utf-8")


def loads(text: bytes | str, model: type[BaseModel] | None = None, encoder: EncoderLike | None = None) -> Any:
    """Deserialize JSON text, optionally into a pydantic model."""
    return DocumentCodec(encoder).decode(text, model)
