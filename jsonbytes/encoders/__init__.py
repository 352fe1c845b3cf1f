# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Byte encoder implementations and registry."""

import logging

from ..constants import EncodingID
from .base import ByteEncoder, unquote
from .base64_encoder import Base64Encoder, RawBase64Encoder
from .hex_encoder import HexEncoder

__all__ = [
    "ByteEncoder",
    "HexEncoder",
    "Base64Encoder",
    "RawBase64Encoder",
    "HEX_ENCODER",
    "B64_ENCODER",
    "RAW_B64_ENCODER",
    "register_encoding",
    "get_encoding",
    "list_encodings",
    "unquote",
]

# Encoders are stateless, one shared instance each
HEX_ENCODER = HexEncoder()
B64_ENCODER = Base64Encoder()
RAW_B64_ENCODER = RawBase64Encoder()


# Encoding registry
_ENCODINGS: dict[str, ByteEncoder] = {}


def _key(name: str) -> str:
    return name.value if isinstance(name, EncodingID) else name


def register_encoding(name: str, encoder: ByteEncoder) -> None:
    """Register an encoder under a name."""
    if not isinstance(encoder, ByteEncoder):
        raise TypeError(f"Expected a ByteEncoder, got {type(encoder).__name__}")
    key = _key(name)
    if key in _ENCODINGS and _ENCODINGS[key] is not encoder:
        logging.debug("Replacing byte encoding %r", key)
    _ENCODINGS[key] = encoder


def get_encoding(name: str) -> ByteEncoder:
    """Get a registered encoder by name."""
    key = _key(name)
    if key not in _ENCODINGS:
        raise ValueError(f"Unsupported byte encoding: {name!r}")
    return _ENCODINGS[key]


def list_encodings() -> list[str]:
    """List all registered encoding names."""
    return list(_ENCODINGS.keys())


# Register default encoders
register_encoding(EncodingID.HEX, HEX_ENCODER)
register_encoding(EncodingID.BASE64, B64_ENCODER)
register_encoding(EncodingID.RAW_BASE64, RAW_B64_ENCODER)
