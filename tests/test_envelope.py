# --------------------------------------------------------------
# File: test_envelope.py
# Description: Pruebas del cifrado con passphrase y de la carga de sobres.
# --------------------------------------------------------------

import json

import symcrypto.envelope as envelope_module
from symcrypto.crypto_sym import aes_gcm_encrypt
from symcrypto.envelope import (
    decrypt_envelope,
    decrypt_with_password,
    encrypt_with_password,
    envelope_from_dict,
)
from symcrypto.errors import ErrorKind
from symcrypto.models import Failure


def test_password_roundtrip():
    """Un sobre cifrado con passphrase se descifra con la misma passphrase.

    Returns:
        None: Las aserciones comparan claro y descifrado.
    """
    env = encrypt_with_password("correct horse battery staple", b"datos privados")
    assert env.ok
    assert len(env.salt) == 64
    assert len(env.nonce) == 12
    dec = decrypt_with_password("correct horse battery staple", env.salt, env.nonce, env.ciphertext, env.tag)
    assert dec.plaintext == b"datos privados"


def test_wrong_password_fails_authentication():
    env = encrypt_with_password("pw-uno", b"msg")
    assert decrypt_envelope("pw-dos", env).kind is ErrorKind.AUTHENTICATION


def test_each_envelope_uses_fresh_salt_and_nonce():
    first = encrypt_with_password("pw", b"msg")
    second = encrypt_with_password("pw", b"msg")
    assert first.salt != second.salt
    assert first.nonce != second.nonce
    assert first.ciphertext != second.ciphertext


def test_empty_password_short_circuits():
    outcome = encrypt_with_password("", b"msg")
    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.INVALID_PARAMETER


def test_entropy_failure_is_propagated(monkeypatch):
    monkeypatch.setattr(
        envelope_module,
        "generate_salt",
        lambda: Failure(kind=ErrorKind.ENTROPY_SOURCE, message="no entropy"),
    )
    outcome = encrypt_with_password("pw", b"msg")
    assert outcome.kind is ErrorKind.ENTROPY_SOURCE


def test_json_roundtrip_through_dict():
    """El sobre sobrevive a una serialización JSON completa."""
    env = encrypt_with_password("pw", b"\x00\xff binario")
    restored = envelope_from_dict(json.loads(json.dumps(env.to_dict())))
    assert restored == env
    assert decrypt_envelope("pw", restored).plaintext == b"\x00\xff binario"


def test_envelope_from_dict_rejects_malformed_input():
    env = encrypt_with_password("pw", b"msg").to_dict()

    missing = dict(env)
    del missing["tag"]
    assert envelope_from_dict(missing).kind is ErrorKind.INVALID_PARAMETER

    short_salt = dict(env, salt=env["salt"][:20])
    outcome = envelope_from_dict(short_salt)
    assert outcome.kind is ErrorKind.INVALID_PARAMETER
    assert "salt" in outcome.message

    assert envelope_from_dict(dict(env, nonce=12)).kind is ErrorKind.INVALID_PARAMETER
    assert envelope_from_dict(dict(env, ct="a")).kind is ErrorKind.INVALID_PARAMETER


def test_plaintext_not_encodable_is_reported():
    outcome = encrypt_with_password("pw", "\udc80")
    assert outcome.kind is ErrorKind.INVALID_PARAMETER


def test_envelope_from_dict_requires_salt():
    """Un resultado de `aes_gcm_encrypt` sin salt no es un sobre con passphrase."""
    plain = aes_gcm_encrypt(bytes(32), bytes(12), b"msg").to_dict()
    outcome = envelope_from_dict(plain)
    assert outcome.kind is ErrorKind.INVALID_PARAMETER
    assert "salt" in outcome.message
