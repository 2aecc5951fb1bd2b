# --------------------------------------------------------------
# File: test_crypto_random.py
# Description: Pruebas de generación de salts y nonces aleatorios.
# --------------------------------------------------------------

import pytest

import symcrypto.crypto_random as crypto_random
from symcrypto.crypto_random import generate_nonce, generate_salt
from symcrypto.errors import EntropySourceError, ErrorKind


def test_salt_and_nonce_lengths():
    """Las salts miden 64 bytes y los nonces 12.

    Returns:
        None: Las aserciones verifican longitudes y tipos.
    """
    for _ in range(20):
        salt = generate_salt()
        nonce = generate_nonce()
        assert salt.ok and nonce.ok
        assert isinstance(salt.value, bytes) and len(salt.value) == 64
        assert isinstance(nonce.value, bytes) and len(nonce.value) == 12


def test_nonce_uniqueness():
    """Evalúa que los nonces aleatorios generados no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    nonces = set()
    for _ in range(200):
        nonce = generate_nonce().unwrap()
        assert nonce not in nonces
        nonces.add(nonce)


def test_unavailable_entropy_source(monkeypatch):
    """Un fallo de `os.urandom` se devuelve como ENTROPY_SOURCE."""

    def _fail(size):
        raise NotImplementedError("no entropy source")

    monkeypatch.setattr(crypto_random.os, "urandom", _fail)
    salt = generate_salt()
    nonce = generate_nonce()
    assert salt.kind is ErrorKind.ENTROPY_SOURCE
    assert nonce.kind is ErrorKind.ENTROPY_SOURCE
    with pytest.raises(EntropySourceError):
        nonce.unwrap()


def test_short_read_from_entropy_source(monkeypatch):
    monkeypatch.setattr(crypto_random.os, "urandom", lambda size: b"\x00" * (size - 1))
    outcome = generate_salt()
    assert not outcome.ok
    assert outcome.kind is ErrorKind.ENTROPY_SOURCE
    assert "63 of 64" in outcome.message
