# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""jsonbytes - Byte sequences inside JSON documents.

This package encodes raw bytes as JSON string literals using one of three
interchangeable encodings, selected process-wide or per context:
- Uppercase hexadecimal (default)
- URL-safe base64 with padding
- URL-safe base64 without padding

It provides:
- ByteEncoder strategies with strict decoding that raises FormatError
- A registry of encodings by name
- Bytes and FixedBytes containers that work as pydantic field types
- A JSON document codec for plain data and pydantic models
"""

# Import public API from modules
from .constants import (
    DEFAULT_ENCODING,
    ENV_ENCODING,
    EncodingID,
)
from .containers import (
    Bytes,
    FixedBytes,
)
from .document import (
    BytesJSONEncoder,
    DocumentCodec,
    dumps,
    loads,
)
from .encoders import (
    B64_ENCODER,
    HEX_ENCODER,
    RAW_B64_ENCODER,
    Base64Encoder,
    ByteEncoder,
    HexEncoder,
    RawBase64Encoder,
    get_encoding,
    list_encodings,
    register_encoding,
)
from .exceptions import FormatError
from .selector import (
    encoder_from_env,
    get_active_encoder,
    resolve_encoder,
    set_active_encoder,
    use_encoder,
)

# Public API exports
__all__ = [
    # Containers
    "Bytes",
    "FixedBytes",
    # Encoders
    "ByteEncoder",
    "HexEncoder",
    "Base64Encoder",
    "RawBase64Encoder",
    "HEX_ENCODER",
    "B64_ENCODER",
    "RAW_B64_ENCODER",
    # Encoder selection
    "get_active_encoder",
    "set_active_encoder",
    "use_encoder",
    "resolve_encoder",
    "encoder_from_env",
    # Registry
    "get_encoding",
    "list_encodings",
    "register_encoding",
    # Documents
    "BytesJSONEncoder",
    "DocumentCodec",
    "dumps",
    "loads",
    # Constants and errors
    "EncodingID",
    "DEFAULT_ENCODING",
    "ENV_ENCODING",
    "FormatError",
]

__version__ = "0.1.0"
