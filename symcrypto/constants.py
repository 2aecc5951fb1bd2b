# --------------------------------------------------------------
# File: constants.py
# Description: Tamaños y parámetros fijos de las primitivas simétricas.
# --------------------------------------------------------------
"""Constantes de interoperabilidad: no deben cambiarse entre versiones."""

SALT_SIZE = 64
KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16

# PBKDF2-HMAC-SHA512; cambiarlos invalida las claves ya derivadas.
PBKDF2_ITERATIONS = 20000
PBKDF2_DIGEST = "sha512"
