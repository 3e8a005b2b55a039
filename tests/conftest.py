"""Shared fixtures for hybridseal tests."""

from __future__ import annotations

import pytest

from hybridseal.crypto import Keypair, generate_keypair


@pytest.fixture(scope="session")
def keypair() -> Keypair:
    """A 2048-bit RSA keypair, generated once per test session."""
    return generate_keypair(2048)


@pytest.fixture(scope="session")
def other_keypair() -> Keypair:
    """A second, unrelated 2048-bit RSA keypair."""
    return generate_keypair(2048)


@pytest.fixture(scope="session")
def small_keypair() -> Keypair:
    """A 1024-bit RSA keypair."""
    return generate_keypair(1024)
