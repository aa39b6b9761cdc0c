"""Startup validation and logging setup."""

import logging
from pathlib import Path
from typing import Optional

from .config import get_log_level, get_together_api_key

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once."""
    logging.basicConfig(
        level=getattr(logging, (level or get_log_level()), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_config() -> None:
    """Warn if .env or TOGETHER_API_KEY is missing (AI advice is optional)."""
    env_exists = Path(".env").exists()
    key_set = bool(get_together_api_key())
    if not env_exists:
        logger.warning(".env file not found; using environment and defaults. AI advice disabled unless TOGETHER_API_KEY is set.")
    elif not key_set:
        logger.warning("TOGETHER_API_KEY not set in .env. AI migration advice will be disabled.")
