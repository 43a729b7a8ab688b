"""Environment-driven settings. Values are read at call time so tests can patch os.environ."""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_NEXT_QUESTION_DELAY_SECONDS = 2.5
DEFAULT_LEADERBOARD_LIMIT = 10
DEFAULT_SCORE_DISTRIBUTION_LIMIT = 5
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


def _env_number(name: str, default: float, cast: type = float):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("[config] %s=%r is not a valid number; using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("[config] %s=%r is negative; using %s", name, raw, default)
        return default
    return value


def get_next_question_delay() -> float:
    """Seconds between a round result and the next question."""
    return _env_number("NEXT_QUESTION_DELAY_SECONDS", DEFAULT_NEXT_QUESTION_DELAY_SECONDS)


def get_leaderboard_limit() -> int:
    return _env_number("LEADERBOARD_LIMIT", DEFAULT_LEADERBOARD_LIMIT, int)


def get_score_distribution_limit() -> int:
    return _env_number("SCORE_DISTRIBUTION_LIMIT", DEFAULT_SCORE_DISTRIBUTION_LIMIT, int)


def get_allowed_origins() -> list[str]:
    """Comma-separated CORS origins; "*" when unset."""
    raw = os.environ.get("ALLOWED_ORIGINS", "").strip()
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_host() -> str:
    return os.environ.get("HOST", "").strip() or DEFAULT_HOST


def get_port() -> int:
    return _env_number("PORT", DEFAULT_PORT, int)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
