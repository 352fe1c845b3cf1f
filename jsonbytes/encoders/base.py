# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Base byte encoder interface."""

import json
from abc import ABC, abstractmethod

from ..exceptions import FormatError


class ByteEncoder(ABC):
    """Converts raw bytes to and from text embedded in a JSON document.

    Subclasses implement ``encode``/``decode`` over the bare text; the
    quoted literal handling in ``marshal``/``unmarshal`` is shared.
    """

    name: str = ""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes to bare text."""
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode bare text to bytes, raising FormatError on bad input."""
        pass

    def marshal(self, data: bytes) -> str:
        """Encode bytes to a quoted JSON string literal.

        Args:
            data: Raw bytes to encode

        Returns:
            JSON string literal, e.g. ``'"1A2B"'``
        """
        return json.dumps(self.encode(bytes(data)))

    def unmarshal(self, literal: str | bytes) -> bytes:
        """Decode a quoted JSON string literal to bytes.

        Args:
            literal: JSON string literal as text or UTF-8 bytes

        Returns:
            Decoded bytes

        Raises:
            FormatError: If the literal is not a JSON string or its content
                is not valid for this encoding
        """
        return self.decode(unquote(literal))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def unquote(literal: str | bytes) -> str:
    """Return the content of a JSON string literal."""
    if isinstance(literal, (bytes, bytearray, memoryview)):
        try:
            literal = bytes(literal).decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"literal is not valid UTF-8: {e}") from e

    # json.loads would happily parse numbers and objects too
    if not literal.startswith('"'):
        raise FormatError(f"expected a quoted string, got {literal[:16]!r}")
    try:
        value = json.loads(literal)
    except json.JSONDecodeError as e:
        raise FormatError(f"malformed string literal: {e}") from e
    if not isinstance(value, str):
        raise FormatError(f"expected a quoted string, got {literal[:16]!r}")
    return value
