# --------------------------------------------------------------
# File: config.py
# Description: Ajustes de entorno (.env) para el logging de la aplicación.
# --------------------------------------------------------------
import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("SYMCRYPTO_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("SYMCRYPTO_LOG_FORMAT", "[%(asctime)s] %(levelname)s %(name)s: %(message)s")
