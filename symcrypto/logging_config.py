# --------------------------------------------------------------
# File: logging_config.py
# Description: Configuración del logger raíz para aplicaciones cliente.
# --------------------------------------------------------------
"""Configuración mínima de logging para aplicaciones que usan symcrypto."""

import logging
import sys
from typing import Optional, Union

from symcrypto.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    # Configura el logger raíz una sola vez; nunca se registran bytes secretos.
    logging.basicConfig(
        level=level if level is not None else LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
