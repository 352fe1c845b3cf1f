# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Selection of the byte encoder used by the container types.

There is one process-wide encoder, chosen at import time from the
``JSONBYTES_ENCODING`` environment variable and changeable with
``set_active_encoder``. The process-wide slot is not synchronized: code
that needs a different encoding while other threads or tasks are
serializing should use ``use_encoder``, which installs a context-local
override, or pass an encoder explicitly.
"""

import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar

from .constants import DEFAULT_ENCODING, ENV_ENCODING, EncodingID
from .encoders import ByteEncoder, get_encoding

EncoderLike = ByteEncoder | EncodingID | str


def _as_encoder(encoder: EncoderLike) -> ByteEncoder:
    if isinstance(encoder, ByteEncoder):
        return encoder
    return get_encoding(encoder)


def encoder_from_env(environ: Mapping[str, str] | None = None) -> ByteEncoder:
    """Return the encoder named by ``JSONBYTES_ENCODING``, hex if unset.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Returns:
        The configured encoder, or the default one if the name is unknown
    """
    environ = os.environ if environ is None else environ
    name = environ.get(ENV_ENCODING, "").strip().lower()
    if not name:
        return get_encoding(DEFAULT_ENCODING)
    try:
        return get_encoding(name)
    except ValueError:
        logging.warning("Unknown %s=%r, falling back to %s", ENV_ENCODING, name, DEFAULT_ENCODING.value)
        return get_encoding(DEFAULT_ENCODING)


_active: ByteEncoder = encoder_from_env()
_override: ContextVar[ByteEncoder | None] = ContextVar("jsonbytes_encoder", default=None)


def get_active_encoder() -> ByteEncoder:
    """Return the encoder currently in effect for this context."""
    return _override.get() or _active


def set_active_encoder(encoder: EncoderLike) -> ByteEncoder:
    """Replace the process-wide encoder.

    Args:
        encoder: Encoder instance or registered encoding name

    Returns:
        The previous process-wide encoder
    """
    global _active
    previous, _active = _active, _as_encoder(encoder)
    logging.debug("Active byte encoder set to %s", _active.name)
    return previous


def resolve_encoder(encoder: EncoderLike | None = None) -> ByteEncoder:
    """Return ``encoder`` if given, else the active encoder."""
    if encoder is None:
        return get_active_encoder()
    return _as_encoder(encoder)


@contextmanager
def use_encoder(encoder: EncoderLike | None) -> Iterator[ByteEncoder]:
    """Use ``encoder`` within the block for the current context only.

    Passing None keeps the current selection.
    """
    if encoder is None:
        yield get_active_encoder()
        return
    selected = _as_encoder(encoder)
    token = _override.set(selected)
    try:
        yield selected
    finally:
        _override.reset(token)
