"""Shared test fixtures for jsonbytes tests."""

import logging

import pytest

from jsonbytes import HEX_ENCODER, set_active_encoder

# Enable jsonbytes debug logging during tests
logging.getLogger().setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def hex_by_default():
    """Start every test with the hex encoder and restore the previous one."""
    previous = set_active_encoder(HEX_ENCODER)
    yield
    set_active_encoder(previous)
