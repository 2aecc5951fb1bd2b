# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las utilidades criptográficas del paquete.
# --------------------------------------------------------------
"""Derivación de claves, valores aleatorios y cifrado AES-256-GCM.

Composición típica::

    salt = generate_salt().unwrap()
    key = derive_key("passphrase", salt).unwrap()
    nonce = generate_nonce().unwrap()   # único por clave
    result = aes_gcm_encrypt(key, nonce, b"datos")
"""

import logging

from symcrypto.crypto_kdf import derive_key
from symcrypto.crypto_random import generate_nonce, generate_salt
from symcrypto.crypto_sym import aes_gcm_decrypt, aes_gcm_encrypt
from symcrypto.envelope import (
    decrypt_envelope,
    decrypt_with_password,
    encrypt_with_password,
    envelope_from_dict,
)
from symcrypto.errors import (
    AuthenticationError,
    EntropySourceError,
    ErrorKind,
    InvalidParameterError,
    SymCryptoError,
    UnderlyingCryptoError,
)
from symcrypto.models import (
    DecryptionSuccess,
    EncryptionSuccess,
    Failure,
    KeySuccess,
    PasswordEnvelope,
    RandomSuccess,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "derive_key",
    "generate_salt",
    "generate_nonce",
    "aes_gcm_encrypt",
    "aes_gcm_decrypt",
    "encrypt_with_password",
    "decrypt_with_password",
    "decrypt_envelope",
    "envelope_from_dict",
    "ErrorKind",
    "SymCryptoError",
    "InvalidParameterError",
    "AuthenticationError",
    "EntropySourceError",
    "UnderlyingCryptoError",
    "Failure",
    "KeySuccess",
    "RandomSuccess",
    "EncryptionSuccess",
    "DecryptionSuccess",
    "PasswordEnvelope",
]
