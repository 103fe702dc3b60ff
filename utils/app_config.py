"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Holds settings that must be known before the database is opened or the
connectivity oracle is built. Lives in ~/.finance_tracker/config.json.
"""
import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".finance_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONNECTIVITY_HOST = "1.1.1.1"
DEFAULT_CONNECTIVITY_PORT = 53
DEFAULT_CONNECTIVITY_TIMEOUT = 2.0


def load_config() -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def get_db_folder() -> str | None:
    """Return config["db_folder"] or None if not set."""
    return load_config().get("db_folder")


def get_log_level() -> str | None:
    return load_config().get("log_level")


def is_offline_mode() -> bool:
    return bool(load_config().get("offline_mode", False))


def get_connectivity_probe() -> tuple[str, int, float]:
    """Return (host, port, timeout) used to decide whether we are online."""
    config = load_config()
    try:
        port = int(config.get("connectivity_port", DEFAULT_CONNECTIVITY_PORT))
        timeout = float(config.get("connectivity_timeout", DEFAULT_CONNECTIVITY_TIMEOUT))
    except (TypeError, ValueError):
        port, timeout = DEFAULT_CONNECTIVITY_PORT, DEFAULT_CONNECTIVITY_TIMEOUT
    host = config.get("connectivity_host") or DEFAULT_CONNECTIVITY_HOST
    return host, port, timeout
