"""Configuration: env-driven API host/port, logging, and upload limits."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of trackbridge package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so TRACKBRIDGE_* overrides are set
load_dotenv(BASE_DIR / ".env")

# API
API_HOST = os.getenv("TRACKBRIDGE_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("TRACKBRIDGE_API_PORT", "8000"))
RELOAD = os.getenv("TRACKBRIDGE_RELOAD", "0").lower() in ("1", "true", "yes")

# Logging
LOG_LEVEL = os.getenv("TRACKBRIDGE_LOG_LEVEL", "INFO").upper()

# Largest in-memory audio payload accepted by POST /api/tracks/buffer (bytes)
MAX_BUFFER_BYTES = int(os.getenv("TRACKBRIDGE_MAX_BUFFER_BYTES", str(50 * 1024 * 1024)))
