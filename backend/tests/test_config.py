from unittest.mock import patch

from app.config import (
    DEFAULT_LEADERBOARD_LIMIT,
    DEFAULT_NEXT_QUESTION_DELAY_SECONDS,
    get_allowed_origins,
    get_leaderboard_limit,
    get_log_level,
    get_next_question_delay,
    get_port,
    get_score_distribution_limit,
)


def test_defaults_when_unset() -> None:
    env = {
        "NEXT_QUESTION_DELAY_SECONDS": "",
        "LEADERBOARD_LIMIT": "",
        "SCORE_DISTRIBUTION_LIMIT": "",
        "ALLOWED_ORIGINS": "",
        "PORT": "",
        "LOG_LEVEL": "",
    }
    with patch.dict("os.environ", env, clear=False):
        assert get_next_question_delay() == DEFAULT_NEXT_QUESTION_DELAY_SECONDS == 2.5
        assert get_leaderboard_limit() == DEFAULT_LEADERBOARD_LIMIT == 10
        assert get_score_distribution_limit() == 5
        assert get_allowed_origins() == ["*"]
        assert get_port() == 3000
        assert get_log_level() == "INFO"


def test_values_from_env() -> None:
    env = {
        "NEXT_QUESTION_DELAY_SECONDS": " 0.5 ",
        "LEADERBOARD_LIMIT": "3",
        "ALLOWED_ORIGINS": "http://localhost:5173, http://127.0.0.1:5173 ,",
        "LOG_LEVEL": "debug",
    }
    with patch.dict("os.environ", env, clear=False):
        assert get_next_question_delay() == 0.5
        assert get_leaderboard_limit() == 3
        assert get_allowed_origins() == ["http://localhost:5173", "http://127.0.0.1:5173"]
        assert get_log_level() == "DEBUG"


def test_invalid_numbers_fall_back_to_defaults() -> None:
    env = {"NEXT_QUESTION_DELAY_SECONDS": "soon", "LEADERBOARD_LIMIT": "-4", "PORT": "3000.5"}
    with patch.dict("os.environ", env, clear=False):
        assert get_next_question_delay() == 2.5
        assert get_leaderboard_limit() == 10
        assert get_port() == 3000
