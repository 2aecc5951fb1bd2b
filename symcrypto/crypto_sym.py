# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-GCM para cifrado y descifrado autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado con AES-256 en modo GCM.

El llamador es responsable de no reutilizar nunca un nonce con la misma clave.
No se usan datos autenticados adicionales (AAD).
"""

from __future__ import annotations

from typing import Union

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from symcrypto.constants import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from symcrypto.errors import AuthenticationError, SymCryptoError, UnderlyingCryptoError
from symcrypto.models import (
    DecryptionOutcome,
    DecryptionSuccess,
    EncryptionOutcome,
    EncryptionSuccess,
    failure_from,
)
from symcrypto.validation import require_length, to_bytes

Plaintext = Union[str, bytes, bytearray, memoryview]

_LIBRARY_FAULTS = (ValueError, TypeError, OverflowError, UnsupportedAlgorithm)


def _check_key_and_nonce(key: bytes, nonce: bytes) -> tuple[bytes, bytes]:
    nonce_bytes = require_length(to_bytes(nonce, "nonce"), NONCE_SIZE, "nonce")
    key_bytes = require_length(to_bytes(key, "key"), KEY_SIZE, "key")
    return key_bytes, nonce_bytes

def aes_gcm_encrypt(key: bytes, nonce: bytes, plaintext: Plaintext) -> EncryptionOutcome:
    """Cifra datos con AES-256-GCM utilizando la clave y el nonce proporcionados.

    Las longitudes se validan antes de inicializar el cifrador; con una
    entrada inválida no se realiza ninguna operación criptográfica.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Nonce de 96 bits, único para esta clave.
        plaintext (str | bytes): Datos a cifrar; el texto se codifica en UTF-8.

    Returns:
        EncryptionOutcome: `EncryptionSuccess` con ciphertext (misma longitud que
        el claro), el nonce y un tag de 16 bytes, o `Failure`.

    """

    try:
        key_bytes, nonce_bytes = _check_key_and_nonce(key, nonce)
        data = to_bytes(plaintext, "plaintext", allow_text=True)
        try:
            ct_full = AESGCM(key_bytes).encrypt(nonce_bytes, data, None)
        except _LIBRARY_FAULTS as exc:
            raise UnderlyingCryptoError(f"AES-GCM encryption failed: {type(exc).__name__}") from exc
        return EncryptionSuccess(
            ciphertext=ct_full[:-TAG_SIZE],
            nonce=nonce_bytes,
            tag=ct_full[-TAG_SIZE:],
        )
    except SymCryptoError as exc:
        return failure_from(exc)

def aes_gcm_decrypt(key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes) -> DecryptionOutcome:
    """Descifra datos con AES-256-GCM verificando la etiqueta de autenticación.

    La verificación del tag forma parte de la propia operación de la librería
    (comparación en tiempo constante); si falla no se devuelve ningún byte en
    claro.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Nonce de 96 bits usado al cifrar.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    Returns:
        DecryptionOutcome: `DecryptionSuccess` con el mensaje original, o
        `Failure` con `AUTHENTICATION` si el tag no verifica.

    """

    try:
        key_bytes, nonce_bytes = _check_key_and_nonce(key, nonce)
        tag_bytes = require_length(to_bytes(tag, "tag"), TAG_SIZE, "tag")
        ct_bytes = to_bytes(ciphertext, "ciphertext")
        try:
            plaintext = AESGCM(key_bytes).decrypt(nonce_bytes, ct_bytes + tag_bytes, None)
        except InvalidTag as exc:
            raise AuthenticationError("authentication tag verification failed") from exc
        except _LIBRARY_FAULTS as exc:
            raise UnderlyingCryptoError(f"AES-GCM decryption failed: {type(exc).__name__}") from exc
        return DecryptionSuccess(plaintext=plaintext)
    except SymCryptoError as exc:
        return failure_from(exc)
