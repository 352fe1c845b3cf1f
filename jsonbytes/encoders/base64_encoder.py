# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""URL-safe base64 byte encoders, padded and unpadded."""

import base64
import binascii

from ..constants import PAD, URLSAFE_ALPHABET, EncodingID
from ..exceptions import FormatError
from .base import ByteEncoder

_ALPHABET = frozenset(URLSAFE_ALPHABET)


def _check_alphabet(text: str) -> None:
    for pos, char in enumerate(text):
        if char not in _ALPHABET:
            raise FormatError(f"invalid base64url character {char!r} at position {pos}")


def _b64decode(text: str) -> bytes:
    try:
        return base64.urlsafe_b64decode(text)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"invalid base64url data: {e}") from e


class Base64Encoder(ByteEncoder):
    """URL-safe base64 (``-`` and ``_``) with ``=`` padding.

    ``urlsafe_b64decode`` silently accepts ``+`` and ``/`` and drops
    characters outside the alphabet, so input is validated before decoding.
    """

    name = EncodingID.BASE64.value

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        if len(text) % 4:
            raise FormatError(f"base64 length {len(text)} is not a multiple of 4")
        body = text.rstrip(PAD)
        if len(text) - len(body) > 2:
            raise FormatError("too much base64 padding")
        _check_alphabet(body)
        return _b64decode(text)


class RawBase64Encoder(ByteEncoder):
    """URL-safe base64 without padding."""

    name = EncodingID.RAW_BASE64.value

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip(PAD)

    def decode(self, text: str) -> bytes:
        if PAD in text:
            raise FormatError("padding is not allowed in unpadded base64")
        _check_alphabet(text)
        if len(text) % 4 == 1:
            raise FormatError(f"invalid unpadded base64 length {len(text)}")
        return _b64decode(text + PAD * (-len(text) % 4))
