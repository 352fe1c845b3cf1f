# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""
Exceptions raised by jsonbytes.

Decoding has a single failure kind so callers only need one except clause.
"""


class FormatError(ValueError):
    """Encoded text could not be turned back into bytes.

    Raised when:
    - The literal is not a JSON string
    - A hex string has odd length
    - A character falls outside the encoding's alphabet
    - Base64 padding is missing, misplaced or forbidden
    - A decoded value does not fit a fixed-size byte array

    The destination of a failed decode is never modified.
    """
