"""Configuration and logging setup for Cursus."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables from .env file
load_dotenv(PROJECT_ROOT / ".env")

CONTENT_DIR = Path(os.getenv("CURSUS_CONTENT_DIR", PROJECT_ROOT / "content"))
DEFAULT_LANGUAGE = os.getenv("CURSUS_DEFAULT_LANGUAGE", "pt")
LOG_LEVEL = os.getenv("CURSUS_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None):
    """Configure root logging for scripts and the app."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
    )
