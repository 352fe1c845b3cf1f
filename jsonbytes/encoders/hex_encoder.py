# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Hexadecimal byte encoder."""

from ..constants import HEX_DIGITS, EncodingID
from ..exceptions import FormatError
from .base import ByteEncoder

_HEX_DIGITS = frozenset(HEX_DIGITS)


class HexEncoder(ByteEncoder):
    """Uppercase hex, two digits per byte, no separators.

    Decoding is case-insensitive.
    """

    name = EncodingID.HEX.value

    def encode(self, data: bytes) -> str:
        return bytes(data).hex().upper()

    def decode(self, text: str) -> bytes:
        if len(text) % 2:
            raise FormatError(f"odd length hex string ({len(text)} chars)")
        # bytes.fromhex skips whitespace, so check the alphabet first
        for pos, char in enumerate(text):
            if char not in _HEX_DIGITS:
                raise FormatError(f"invalid hex character {char!r} at position {pos}")
        return bytes.fromhex(text)
