# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con claves, nonces y salts de prueba.
# --------------------------------------------------------------

import os

import pytest


@pytest.fixture
def key() -> bytes:
    """Clave AES-256 aleatoria para cada prueba.

    Returns:
        bytes: 32 bytes obtenidos de `os.urandom`.
    """
    return os.urandom(32)


@pytest.fixture
def nonce() -> bytes:
    """Nonce de 96 bits aleatorio, distinto en cada prueba.

    Returns:
        bytes: 12 bytes obtenidos de `os.urandom`.
    """
    return os.urandom(12)


@pytest.fixture
def zero_salt() -> bytes:
    """Salt fija de 64 bytes a cero para vectores reproducibles."""
    return bytes(64)
