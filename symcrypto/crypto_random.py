# --------------------------------------------------------------
# File: crypto_random.py
# Description: Generación de salts y nonces con el CSPRNG del sistema operativo.
# --------------------------------------------------------------
"""Valores aleatorios criptográficamente seguros para PBKDF2 y AES-GCM."""

from __future__ import annotations

import os

from symcrypto.constants import NONCE_SIZE, SALT_SIZE
from symcrypto.errors import EntropySourceError, SymCryptoError
from symcrypto.models import RandomOutcome, RandomSuccess, failure_from


def _random_bytes(size: int) -> bytes:
    try:
        data = os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"secure random source unavailable: {exc}") from exc
    if len(data) != size:
        raise EntropySourceError(f"secure random source returned {len(data)} of {size} bytes")
    return data

def _outcome(size: int) -> RandomOutcome:
    try:
        return RandomSuccess(value=_random_bytes(size))
    except SymCryptoError as exc:
        return failure_from(exc)

def generate_salt() -> RandomOutcome:
    """Genera una salt aleatoria de 64 bytes para `derive_key`."""

    return _outcome(SALT_SIZE)

def generate_nonce() -> RandomOutcome:
    """Genera un nonce aleatorio de 12 bytes para AES-GCM.

    IMPORTANTE: un nonce NUNCA debe repetirse con la misma clave. Reutilizar
    un par (clave, nonce) en GCM rompe por completo la confidencialidad y la
    autenticidad. Con nonces aleatorios de 96 bits la probabilidad de colisión
    deja de ser despreciable en torno a 2^48 cifrados por clave (paradoja del
    cumpleaños); quien cifre grandes volúmenes con una misma clave debe usar
    un esquema de nonces basado en contador, que este módulo no proporciona.

    Returns:
        RandomOutcome: `RandomSuccess` con 12 bytes o `Failure` con
        `ENTROPY_SOURCE` si la fuente aleatoria falla.

    """

    return _outcome(NONCE_SIZE)
