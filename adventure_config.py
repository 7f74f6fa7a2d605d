import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration ---
DEFAULT_API_BASE = "https://text-adventure.winsauce.com/api"
DEFAULT_START_SCREEN = "0290922a-59ce-458b-8dbc-1c33f646580a"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one client session."""
    api_base: str = DEFAULT_API_BASE
    start_screen_id: str = DEFAULT_START_SCREEN
    timeout: float = DEFAULT_TIMEOUT
    log_file: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid ADVENTURE_TIMEOUT value: {raw}. Using default: {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"ADVENTURE_TIMEOUT must be positive, got {raw}. Using default: {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(use_dotenv: bool = True) -> Settings:
    """Reads settings from the environment, loading .env first when present."""
    if use_dotenv:
        load_dotenv()

    return Settings(
        api_base=os.environ.get("ADVENTURE_API_BASE", DEFAULT_API_BASE).rstrip("/"),
        start_screen_id=os.environ.get("ADVENTURE_START_SCREEN", DEFAULT_START_SCREEN),
        timeout=_parse_timeout(os.environ.get("ADVENTURE_TIMEOUT")),
        log_file=os.environ.get("ADVENTURE_LOG_FILE") or None,
        log_level=os.environ.get("ADVENTURE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
