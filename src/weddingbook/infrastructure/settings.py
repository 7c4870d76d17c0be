"""Environment-driven defaults for UserPrefs.

Reads .env (explicit path, then repo root, then cwd) and then these variables:
WEDDINGBOOK_ADDRESS_BOOK_PATH, WEDDINGBOOK_WEDDING_BOOK_PATH,
WEDDINGBOOK_WINDOW_WIDTH, WEDDINGBOOK_WINDOW_HEIGHT.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from weddingbook.application.user_prefs import (
    DEFAULT_ADDRESS_BOOK_FILE_PATH,
    DEFAULT_WEDDING_BOOK_FILE_PATH,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    GuiSettings,
    UserPrefs,
)

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def load_env(env_file: Path | None = None) -> Path | None:
    """Load the first .env found. Existing environment variables win. Returns the file used."""
    candidates = [env_file] if env_file is not None else [REPO_ROOT / ".env", Path.cwd() / ".env"]
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            logger.debug("Loaded environment from %s", path)
            return path
    return None


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


def _path_env(name: str, default: Path) -> Path:
    raw = os.environ.get(name, "").strip()
    return Path(raw) if raw else default


def load_user_prefs(env_file: Path | None = None) -> UserPrefs:
    """Build UserPrefs from the environment, falling back to built-in defaults."""
    load_env(env_file)
    prefs = UserPrefs()
    prefs.set_gui_settings(
        GuiSettings(
            window_width=_int_env("WEDDINGBOOK_WINDOW_WIDTH", DEFAULT_WINDOW_WIDTH),
            window_height=_int_env("WEDDINGBOOK_WINDOW_HEIGHT", DEFAULT_WINDOW_HEIGHT),
        )
    )
    prefs.set_address_book_file_path(
        _path_env("WEDDINGBOOK_ADDRESS_BOOK_PATH", DEFAULT_ADDRESS_BOOK_FILE_PATH)
    )
    prefs.set_wedding_book_file_path(
        _path_env("WEDDINGBOOK_WEDDING_BOOK_PATH", DEFAULT_WEDDING_BOOK_FILE_PATH)
    )
    return prefs
