# --------------------------------------------------------------
# File: validation.py
# Description: Normalización y comprobación de longitudes de las entradas.
# --------------------------------------------------------------
"""Comprobaciones previas a cualquier operación criptográfica."""

from __future__ import annotations

from typing import Any

from symcrypto.errors import InvalidParameterError

_BYTES_LIKE = (bytes, bytearray, memoryview)


def to_bytes(value: Any, name: str, *, allow_text: bool = False) -> bytes:
    """Convierte `value` en `bytes` inmutables.

    Args:
        value (Any): Entrada del llamador.
        name (str): Nombre del parámetro para el mensaje de error.
        allow_text (bool): Si se aceptan `str`, que se codifican en UTF-8.

    Returns:
        bytes: Copia inmutable de la entrada.

    Raises:
        InvalidParameterError: Si el tipo no es admitido o el texto no es
            codificable en UTF-8.

    """

    if isinstance(value, _BYTES_LIKE):
        return bytes(value)
    if allow_text and isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidParameterError(f"{name} is not encodable as UTF-8") from exc
    raise InvalidParameterError(f"{name} must be bytes, got {type(value).__name__}")


def require_length(value: bytes, size: int, name: str) -> bytes:
    if len(value) != size:
        raise InvalidParameterError(f"{name} must be {size} bytes, got {len(value)}")
    return value


def require_non_empty(value: bytes, name: str) -> bytes:
    if not value:
        raise InvalidParameterError(f"{name} must not be empty")
    return value
