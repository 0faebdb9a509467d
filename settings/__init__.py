"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("PREDICTOR_DB_PATH", "predictor.duckdb")

# Logging
LOG_DIR = Path(os.getenv("PREDICTOR_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("PREDICTOR_LOG_LEVEL", "INFO")

# HTTP
HOST = os.getenv("PREDICTOR_HOST", "0.0.0.0")
PORT = int(os.getenv("PREDICTOR_PORT", "8000"))

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}
