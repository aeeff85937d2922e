"""
Configuration
=============
Environment-driven settings. Values are read from the process
environment, with a local ``.env`` file loaded first when present.

Variables:
    MEDTRIAGE_LOG_LEVEL         Root log level for the entry points (INFO).
    MEDTRIAGE_API_HOST          Bind address of the HTTP API (0.0.0.0).
    MEDTRIAGE_API_PORT          Port of the HTTP API (8001).
    MEDTRIAGE_EMERGENCY_NUMBER  Number shown in red-tier next steps (911).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8001
DEFAULT_EMERGENCY_NUMBER = "911"

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    emergency_number: str = DEFAULT_EMERGENCY_NUMBER


def load_settings() -> Settings:
    """Build Settings from the environment.

    Invalid values fall back to the defaults with a warning rather than
    stopping the app from starting.
    """
    level = os.getenv("MEDTRIAGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown MEDTRIAGE_LOG_LEVEL '%s', using %s.", level, DEFAULT_LOG_LEVEL)
        level = DEFAULT_LOG_LEVEL

    raw_port = os.getenv("MEDTRIAGE_API_PORT", str(DEFAULT_API_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        logger.warning("Invalid MEDTRIAGE_API_PORT '%s', using %d.", raw_port, DEFAULT_API_PORT)
        port = DEFAULT_API_PORT

    return Settings(
        log_level=level,
        api_host=os.getenv("MEDTRIAGE_API_HOST", DEFAULT_API_HOST),
        api_port=port,
        emergency_number=os.getenv("MEDTRIAGE_EMERGENCY_NUMBER", DEFAULT_EMERGENCY_NUMBER),
    )


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the root logger."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
