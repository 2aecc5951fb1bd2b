# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA512.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de una passphrase y una salt."""

from __future__ import annotations

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from symcrypto.constants import KEY_SIZE, PBKDF2_ITERATIONS, SALT_SIZE
from symcrypto.errors import SymCryptoError, UnderlyingCryptoError
from symcrypto.models import KeyOutcome, KeySuccess, failure_from
from symcrypto.validation import require_length, require_non_empty, to_bytes

Password = Union[str, bytes, bytearray, memoryview]


def _pbkdf2_sha512(password: bytes, salt: bytes) -> bytes:
    try:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA512(),
            length=KEY_SIZE,
            salt=salt,
            iterations=PBKDF2_ITERATIONS,
        )
        return kdf.derive(password)
    except (UnsupportedAlgorithm, ValueError, TypeError) as exc:
        raise UnderlyingCryptoError(f"PBKDF2 derivation failed: {type(exc).__name__}") from exc

def derive_key(password: Password, salt: bytes) -> KeyOutcome:
    """Deriva una clave AES-256 con PBKDF2-HMAC-SHA512 y 20000 iteraciones.

    La derivación es determinista: la misma passphrase y la misma salt producen
    siempre la misma clave. El coste de iteraciones es deliberado (decenas de
    milisegundos de CPU); en rutas sensibles a la latencia conviene ejecutarla
    fuera del hilo principal.

    Args:
        password (str | bytes): Passphrase no vacía; el texto se codifica en UTF-8.
        salt (bytes): Salt aleatoria de 64 bytes (ver `generate_salt`).

    Returns:
        KeyOutcome: `KeySuccess` con la clave de 32 bytes o `Failure` con
        `INVALID_PARAMETER` si la passphrase está vacía o la salt no mide 64 bytes.

    """

    try:
        secret = require_non_empty(to_bytes(password, "password", allow_text=True), "password")
        salt_bytes = require_length(to_bytes(salt, "salt"), SALT_SIZE, "salt")
        return KeySuccess(key=_pbkdf2_sha512(secret, salt_bytes))
    except SymCryptoError as exc:
        return failure_from(exc)
