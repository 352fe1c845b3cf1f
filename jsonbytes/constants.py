# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""jsonbytes constants and enums."""

from enum import Enum

# ----------------------------------------------------------------------------
# Encoding identifiers
# ----------------------------------------------------------------------------


class EncodingID(str, Enum):
    """Names of the built-in byte encodings."""

    HEX = "hex"  # Uppercase hexadecimal
    BASE64 = "base64"  # URL-safe base64 with "=" padding
    RAW_BASE64 = "raw-base64"  # URL-safe base64, no padding


# ----------------------------------------------------------------------------
# Configuration
# ----------------------------------------------------------------------------

ENV_ENCODING = "JSONBYTES_ENCODING"
DEFAULT_ENCODING = EncodingID.HEX

# ----------------------------------------------------------------------------
# Alphabets
# ----------------------------------------------------------------------------

HEX_DIGITS = "0123456789abcdefABCDEF"
URLSAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
PAD = "="
