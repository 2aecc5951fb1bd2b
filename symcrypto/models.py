# --------------------------------------------------------------
# File: models.py
# Description: Modelos de valores y resultados de la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan los resultados de cada operación.

Cada operación devuelve una variante de éxito o un `Failure`. Las variantes
no comparten atributos de carga útil: leer `ciphertext` o `plaintext` de un
`Failure` lanza `AttributeError`, y `unwrap()` lanza la excepción asociada al
tipo de error. Ningún resultado puede confundirse con un éxito vacío.
"""

from __future__ import annotations

import base64
from typing import Annotated, Any, Dict, Literal, NoReturn, Union

from pydantic import BaseModel, ConfigDict, Field

from symcrypto.constants import KEY_SIZE, NONCE_SIZE, SALT_SIZE, TAG_SIZE
from symcrypto.errors import ErrorKind, SymCryptoError, error_for

Salt = Annotated[bytes, Field(min_length=SALT_SIZE, max_length=SALT_SIZE)]
DerivedKey = Annotated[bytes, Field(min_length=KEY_SIZE, max_length=KEY_SIZE)]
Nonce = Annotated[bytes, Field(min_length=NONCE_SIZE, max_length=NONCE_SIZE)]
AuthenticationTag = Annotated[bytes, Field(min_length=TAG_SIZE, max_length=TAG_SIZE)]


def b64u(data: bytes) -> str:
    # Base64 URL-safe sin relleno, formato de los campos serializados
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def unb64u(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def __bool__(self) -> bool:
        return self.ok


class Failure(_Outcome):
    """Resultado fallido de cualquier operación.

    Attributes:
        kind (ErrorKind): Categoría del fallo.
        message (str): Descripción sin material secreto.

    """

    status: Literal["failure"] = "failure"
    kind: ErrorKind
    message: str

    def unwrap(self) -> NoReturn:
        """Lanza la excepción `SymCryptoError` que corresponde a `kind`."""

        raise error_for(self.kind, self.message)


class KeySuccess(_Outcome):
    """Clave simétrica de 256 bits derivada correctamente."""

    status: Literal["success"] = "success"
    key: DerivedKey = Field(repr=False)

    def unwrap(self) -> bytes:
        return self.key


class RandomSuccess(_Outcome):
    """Bytes aleatorios (salt o nonce) obtenidos del CSPRNG del sistema."""

    status: Literal["success"] = "success"
    value: bytes

    def unwrap(self) -> bytes:
        return self.value


class EncryptionSuccess(_Outcome):
    """Representa el resultado de un cifrado AES-256-GCM.

    Attributes:
        ciphertext (bytes): Datos cifrados sin etiqueta, de igual longitud que el claro.
        nonce (bytes): Vector de inicialización de 96 bits utilizado.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    status: Literal["success"] = "success"
    ciphertext: bytes
    nonce: Nonce
    tag: AuthenticationTag

    def unwrap(self) -> "EncryptionSuccess":
        return self

    def to_dict(self) -> Dict[str, str]:
        """Serializa el resultado con campos Base64 URL-safe.

        Returns:
            Dict[str, str]: Diccionario con `nonce`, `tag` y `ct`.

        """

        return {"nonce": b64u(self.nonce), "tag": b64u(self.tag), "ct": b64u(self.ciphertext)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EncryptionSuccess":
        """Reconstruye el resultado desde `to_dict`; valida las longitudes.

        Raises:
            pydantic.ValidationError: Si nonce o tag no tienen la longitud exacta.
            KeyError: Si falta algún campo.

        """

        return cls(
            ciphertext=unb64u(data["ct"]),
            nonce=unb64u(data["nonce"]),
            tag=unb64u(data["tag"]),
        )


class PasswordEnvelope(EncryptionSuccess):
    """Cifrado con clave derivada de passphrase: incluye la salt de PBKDF2."""

    salt: Salt

    def to_dict(self) -> Dict[str, str]:
        data = super().to_dict()
        data["salt"] = b64u(self.salt)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PasswordEnvelope":
        return cls(
            salt=unb64u(data["salt"]),
            ciphertext=unb64u(data["ct"]),
            nonce=unb64u(data["nonce"]),
            tag=unb64u(data["tag"]),
        )


class DecryptionSuccess(_Outcome):
    """Mensaje en claro recuperado tras verificar la etiqueta."""

    status: Literal["success"] = "success"
    plaintext: bytes = Field(repr=False)

    def unwrap(self) -> bytes:
        return self.plaintext


KeyOutcome = Annotated[Union[KeySuccess, Failure], Field(discriminator="status")]
RandomOutcome = Annotated[Union[RandomSuccess, Failure], Field(discriminator="status")]
EncryptionOutcome = Annotated[Union[EncryptionSuccess, Failure], Field(discriminator="status")]
PasswordEnvelopeOutcome = Annotated[Union[PasswordEnvelope, Failure], Field(discriminator="status")]
DecryptionOutcome = Annotated[Union[DecryptionSuccess, Failure], Field(discriminator="status")]


def failure_from(exc: SymCryptoError) -> Failure:
    """Convierte una excepción interna en un resultado `Failure`."""

    return Failure(kind=exc.kind, message=exc.message)
