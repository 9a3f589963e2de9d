"""Runtime configuration for the adapters around the response pipeline.

Architectural role:
    Centralizes environment-driven settings consumed by `engine`, the CLI and
    the HTTP adapter.

Resolution:
    Values are read once at import time from the process environment, after
    `load_dotenv()` has merged a local `.env` file.

Scope:
    Only operational knobs live here (default mode, debug logging, session
    cap). Classification thresholds and window sizes are fixed constants in
    their own modules because they define behaviour.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() == "true"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-integer %s=%r, using %d", name, raw, default
        )
        return default


# Mode used by adapters when the caller does not pick one.
DEFAULT_MODE = os.getenv("MODECHAT_DEFAULT_MODE", "general").strip() or "general"

# Per-turn classification debug line in `engine` (opt-in).
DEBUG_PIPELINE = _env_flag("DEBUG_PIPELINE")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

# Upper bound on turns kept by the CLI session buffer.
SESSION_LIMIT = _env_int("MODECHAT_SESSION_LIMIT", 200)


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler. Called by adapters, never by library code."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
