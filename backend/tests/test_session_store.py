import pytest

from models import GameSession, Question
from services.session_store import SessionStore


def _session(player_id: int = 1, generation: int = 1) -> GameSession:
    question = Question(text="Measure the distance about 10 cm (tolerance 1 cm)", target=10, tolerance=1)
    return GameSession(player_id=player_id, current_question=question, generation=generation)


def test_create_and_get() -> None:
    store = SessionStore()
    session = _session()
    store.create(1, session)
    assert store.get(1) is session
    assert 1 in store
    assert store.player_ids() == [1]


def test_create_rejects_duplicate_key() -> None:
    store = SessionStore()
    store.create(1, _session())
    with pytest.raises(ValueError):
        store.create(1, _session(generation=2))


def test_replace_swaps_session() -> None:
    store = SessionStore()
    store.create(1, _session())
    newer = _session(generation=2)
    store.replace(1, newer)
    assert store.get(1) is newer


def test_remove_is_idempotent() -> None:
    store = SessionStore()
    store.create(1, _session())
    assert store.remove(1) is not None
    assert store.remove(1) is None
    assert store.get(1) is None
    assert len(store) == 0
