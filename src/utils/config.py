"""Bidding app settings read from the environment, with `.env` loaded by python-dotenv.

Every accessor reloads `.env` and trims the value; blank counts as unset.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """Read <project root>/.env into os.environ; its values win over exported ones."""
    load_dotenv(_project_root() / ".env", override=True)


def get_optional(key: str, default: str = "") -> str:
    """Trimmed value of `key`, or `default` when it is unset or blank."""
    load_config()
    return os.getenv(key, "").strip() or default


def get_optional_bool(key: str, default: bool) -> bool:
    """Get optional env var as bool (1/true/yes/on, 0/false/no/off); default otherwise."""
    raw = get_optional(key, "").lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def app_title() -> str:
    """Optional: page and window title. Default 'Bidding App'."""
    return get_optional("APP_TITLE", "Bidding App")


def log_level() -> int:
    """Optional: LOG_LEVEL name (DEBUG, INFO, ...). Unknown names fall back to INFO."""
    name = get_optional("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def log_file() -> Optional[Path]:
    """Optional: LOG_FILE path, relative paths resolve against the project root."""
    val = get_optional("LOG_FILE", "")
    if not val:
        return None
    path = Path(val)
    return path if path.is_absolute() else project_root() / path


def voice_input_enabled() -> bool:
    """Optional: show the dictation widget in the sidebar. Default on."""
    return get_optional_bool("VOICE_INPUT_ENABLED", True)


def voice_input_language() -> str:
    """Optional: speech recognition language code. Default en."""
    return get_optional("VOICE_INPUT_LANGUAGE", "en")


def project_root() -> Path:
    """Project root directory."""
    return _project_root()
