# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores de las operaciones criptográficas.
# --------------------------------------------------------------
"""Tipos de error estructurados devueltos (o lanzados con `unwrap`)."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Type


class ErrorKind(str, Enum):
    """Categoría de un fallo criptográfico."""

    INVALID_PARAMETER = "invalid_parameter"
    AUTHENTICATION = "authentication"
    ENTROPY_SOURCE = "entropy_source"
    UNDERLYING_CRYPTO = "underlying_crypto"


class SymCryptoError(Exception):
    # contenedor general de errores
    kind: ErrorKind = ErrorKind.UNDERLYING_CRYPTO

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidParameterError(SymCryptoError):
    # longitud incorrecta de clave/nonce/salt/tag o entrada vacía
    kind = ErrorKind.INVALID_PARAMETER


class AuthenticationError(SymCryptoError):
    # la verificación del tag GCM ha fallado
    kind = ErrorKind.AUTHENTICATION


class EntropySourceError(SymCryptoError):
    # la fuente aleatoria del sistema no está disponible
    kind = ErrorKind.ENTROPY_SOURCE


class UnderlyingCryptoError(SymCryptoError):
    # cualquier otro fallo de la librería criptográfica
    kind = ErrorKind.UNDERLYING_CRYPTO


_BY_KIND: Dict[ErrorKind, Type[SymCryptoError]] = {
    cls.kind: cls
    for cls in (
        InvalidParameterError,
        AuthenticationError,
        EntropySourceError,
        UnderlyingCryptoError,
    )
}


def error_for(kind: ErrorKind, message: str) -> SymCryptoError:
    """Construye la excepción correspondiente a `kind`.

    Args:
        kind (ErrorKind): Categoría del fallo.
        message (str): Descripción legible sin material secreto.

    Returns:
        SymCryptoError: Instancia de la subclase asociada a la categoría.

    """

    return _BY_KIND[kind](message)
