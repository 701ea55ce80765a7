"""
Environment settings loaded from .env file.
"""
import logging
import os
import sys

from dotenv import load_dotenv

from fieldcheck.config.constants import LENGTH_UNITS

load_dotenv()

logger = logging.getLogger(__name__)


def resolve_length_unit(raw: str) -> str:
    """Normalize a LENGTH_UNIT value, falling back to "bytes" when unknown."""
    unit = raw.strip().lower()
    if unit not in LENGTH_UNITS:
        logger.warning(
            "Unknown LENGTH_UNIT '%s', expected one of %s; using 'bytes'",
            raw,
            LENGTH_UNITS,
        )
        return "bytes"
    return unit


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"

# --- Rules ---
# "bytes" measures UTF-8 encoded length, "chars" measures code points.
LENGTH_UNIT: str = resolve_length_unit(os.getenv("LENGTH_UNIT", "bytes"))

# --- Metrics ---
METRICS_ENABLED: bool = os.getenv("METRICS_ENABLED", "true").lower() == "true"


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL (or *level*) to the root logger."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
