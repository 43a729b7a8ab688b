import pytest

from models import GameSession, Question
from services import messages
from services.messages import StartGameMessage, parse_client_message


def _session(**kwargs) -> GameSession:
    question = Question(text="Measure the distance about 30 cm (tolerance 4 cm)", target=30, tolerance=4)
    return GameSession(player_id=3, current_question=question, generation=1, **kwargs)


def test_parse_start_game() -> None:
    parsed = parse_client_message('{"type": "startGame", "playerId": 12}')
    assert isinstance(parsed, StartGameMessage)
    assert parsed.player_id == 12


def test_parse_accepts_bytes_frames() -> None:
    parsed = parse_client_message(b'{"type": "startGame", "playerId": 4}')
    assert parsed is not None and parsed.player_id == 4


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "[1, 2, 3]",
        '{"type": "startGame"}',
        '{"type": "startGame", "playerId": 0}',
        '{"type": "startGame", "playerId": "abc"}',
        '{"type": "submit", "playerId": 5}',
        "",
        None,
    ],
)
def test_parse_drops_malformed_messages(raw) -> None:
    assert parse_client_message(raw) is None


def test_new_question_payload() -> None:
    assert messages.new_question(_session(score=2, lives=1)) == {
        "type": "newQuestion",
        "question": "Measure the distance about 30 cm (tolerance 4 cm)",
        "lives": 1,
        "score": 2,
    }


def test_round_result_payload_keeps_submitted_value() -> None:
    payload = messages.round_result(_session(score=4), correct=True, measured=31.5)
    assert payload == {
        "type": "roundResult",
        "result": "Correct",
        "distance": 31.5,
        "newScore": 4,
        "lives": 3,
    }
    wrong = messages.round_result(_session(lives=2), correct=False, measured=80)
    assert wrong["result"] == "Wrong"
    assert wrong["distance"] == 80
    assert isinstance(wrong["distance"], int)


def test_game_over_payload() -> None:
    assert messages.game_over(_session(score=9, lives=0)) == {"type": "gameOver", "finalScore": 9}
