"""Shared fixtures for xxmerkle tests."""

from __future__ import annotations

import secrets

import pytest

from xxmerkle import Config


@pytest.fixture
def four_inputs():
    """Four random 32-byte inputs."""
    return [secrets.token_bytes(32) for _ in range(4)]


@pytest.fixture(
    params=[(False, False), (False, True), (True, False), (True, True)],
    ids=["xxh64", "xxh64-sep", "xxh128", "xxh128-sep"],
)
def config(request):
    """Every combination of hash width and domain separation."""
    xxh128, domain_separation = request.param
    return Config(xxh128=xxh128, domain_separation=domain_separation)
