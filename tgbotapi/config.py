"""Library configuration: environment variables and derived constants.

Loads ``TELEGRAM_API_URL``, ``TGBOTAPI_LOG_LEVEL`` and ``TGBOTAPI_LOG_FILE``
from the environment via ``python-dotenv``.  All values are resolved at import
time so other modules can ``from tgbotapi.config import …`` without repeated
lookups.  Nothing here is required: every setting has a usable default.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_log_level(raw: str | None) -> int:
    """Turn a level name (``"DEBUG"``) or number (``"10"``) into an int.

    Unknown names fall back to ``WARNING`` so a typo never breaks imports.
    """
    if not raw:
        return logging.WARNING
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def _resolve_api_base_url() -> str:
    """Return the Bot API server root without a trailing slash.

    Resolution order:
    1. ``TELEGRAM_API_URL`` environment variable (local Bot API servers).
    2. The public cloud server ``https://api.telegram.org``.
    """
    from_env = os.environ.get("TELEGRAM_API_URL", "").strip()
    if from_env:
        return from_env.rstrip("/")
    return DEFAULT_API_BASE_URL


# ── Public constants ─────────────────────────────────────────────────────────

DEFAULT_API_BASE_URL: str = "https://api.telegram.org"
API_BASE_URL: str = _resolve_api_base_url()
LOG_LEVEL: int = _parse_log_level(os.environ.get("TGBOTAPI_LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("TGBOTAPI_LOG_FILE") or None

# JSON handlers are attached only when the host asked for library logging.
LOGGING_ENABLED: bool = bool(os.environ.get("TGBOTAPI_LOG_LEVEL", "").strip() or LOG_FILE)
