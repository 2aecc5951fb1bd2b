# --------------------------------------------------------------
# File: envelope.py
# Description: Composición salt + PBKDF2 + nonce + AES-GCM a partir de una passphrase.
# --------------------------------------------------------------
"""Atajos que encadenan las operaciones públicas para cifrar con passphrase.

Cada llamada a `encrypt_with_password` genera una salt nueva y, por tanto, una
clave nueva; el nonce aleatorio no se reutiliza con la misma clave.
"""

from __future__ import annotations

import binascii
from typing import Any, Dict

from pydantic import ValidationError

from symcrypto.crypto_kdf import Password, derive_key
from symcrypto.crypto_random import generate_nonce, generate_salt
from symcrypto.crypto_sym import Plaintext, aes_gcm_decrypt, aes_gcm_encrypt
from symcrypto.errors import ErrorKind
from symcrypto.models import (
    DecryptionOutcome,
    Failure,
    PasswordEnvelope,
    PasswordEnvelopeOutcome,
)


def encrypt_with_password(password: Password, plaintext: Plaintext) -> PasswordEnvelopeOutcome:
    """Cifra `plaintext` con una clave derivada de `password`.

    Args:
        password (str | bytes): Passphrase del usuario.
        plaintext (str | bytes): Datos a proteger.

    Returns:
        PasswordEnvelopeOutcome: `PasswordEnvelope` con salt, nonce, tag y
        ciphertext, o el primer `Failure` producido por la cadena.

    """

    salt = generate_salt()
    if not salt.ok:
        return salt
    key = derive_key(password, salt.value)
    if not key.ok:
        return key
    nonce = generate_nonce()
    if not nonce.ok:
        return nonce
    enc = aes_gcm_encrypt(key.key, nonce.value, plaintext)
    if not enc.ok:
        return enc
    return PasswordEnvelope(salt=salt.value, ciphertext=enc.ciphertext, nonce=enc.nonce, tag=enc.tag)


def decrypt_with_password(
    password: Password, salt: bytes, nonce: bytes, ciphertext: bytes, tag: bytes
) -> DecryptionOutcome:
    """Re-deriva la clave con la salt almacenada y descifra el mensaje."""

    key = derive_key(password, salt)
    if not key.ok:
        return key
    return aes_gcm_decrypt(key.key, nonce, ciphertext, tag)


def decrypt_envelope(password: Password, envelope: PasswordEnvelope) -> DecryptionOutcome:
    return decrypt_with_password(
        password, envelope.salt, envelope.nonce, envelope.ciphertext, envelope.tag
    )


def envelope_from_dict(data: Dict[str, Any]) -> PasswordEnvelopeOutcome:
    """Carga un sobre serializado con `PasswordEnvelope.to_dict`.

    Args:
        data (Dict[str, Any]): Campos `salt`, `nonce`, `tag` y `ct` en Base64 URL-safe.

    Returns:
        PasswordEnvelopeOutcome: El sobre validado, o `Failure` con
        `INVALID_PARAMETER` si falta un campo, no es Base64 o la longitud es incorrecta.

    """

    try:
        return PasswordEnvelope.from_dict(data)
    except KeyError as exc:
        return Failure(kind=ErrorKind.INVALID_PARAMETER, message=f"missing field {exc.args[0]!r}")
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        return Failure(kind=ErrorKind.INVALID_PARAMETER, message=f"invalid envelope fields: {fields}")
    except (TypeError, AttributeError, binascii.Error, ValueError):
        return Failure(kind=ErrorKind.INVALID_PARAMETER, message="envelope fields must be Base64 URL-safe text")
