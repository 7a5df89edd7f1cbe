"""Application configuration — environment variables and derived constants.

Loads the bot token and the Bot API deployment settings from the environment
via ``python-dotenv``.  All values are resolved at import time so other
modules can ``from config import …`` without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import BotwireLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

logger = BotwireLogger.get_logger()

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_bool(raw: str | None) -> bool:
    """Interpret ``1/true/yes/on`` (any case) as ``True``; anything else is ``False``."""
    if not raw:
        return False
    return raw.strip().lower() in _TRUTHY


def _parse_timeout(raw: str | None, default: float = 30.0) -> float:
    """Parse a positive number of seconds, falling back to *default*."""
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric BOT_REQUEST_TIMEOUT", extra={"raw_value": raw})
        return default
    return value if value > 0 else default


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_ROOT: str = os.environ.get("BOT_API_ROOT") or "https://api.telegram.org"
API_MODE: str = os.environ.get("BOT_API_MODE") or "bot"
TEST_ENV: bool = _parse_bool(os.environ.get("BOT_TEST_ENV"))
REQUEST_TIMEOUT: float = _parse_timeout(os.environ.get("BOT_REQUEST_TIMEOUT"))
LOG_DIR: str | None = os.environ.get("BOTWIRE_LOG_DIR")

# Picks up a directory set only in .env, after the logger already exists.
if LOG_DIR:
    BotwireLogger().add_file_handler(LOG_DIR)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded, BOT_TOKEN is set", extra={"api_root": API_ROOT, "api_mode": API_MODE})
else:
    logger.warning("Config loaded, BOT_TOKEN is NOT set")

if TEST_ENV:
    logger.info("Using the Bot API test environment")
