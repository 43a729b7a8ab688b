import random

from models import TARGET_MAX, TARGET_MIN, TOLERANCE_MAX, TOLERANCE_MIN
from services.questions import generate_question


def test_generated_questions_stay_in_bounds() -> None:
    for _ in range(5000):
        question = generate_question()
        assert TARGET_MIN <= question.target <= TARGET_MAX
        assert TOLERANCE_MIN <= question.tolerance <= TOLERANCE_MAX


def test_generator_reaches_both_ends_of_each_range() -> None:
    rng = random.Random(1234)
    questions = [generate_question(rng) for _ in range(20000)]
    targets = {q.target for q in questions}
    tolerances = {q.tolerance for q in questions}
    assert min(targets) == 5 and max(targets) == 104
    assert tolerances == {1, 2, 3, 4, 5}


def test_seeded_generator_is_reproducible() -> None:
    first = [generate_question(random.Random(42)) for _ in range(3)]
    second = [generate_question(random.Random(42)) for _ in range(3)]
    assert first == second


def test_question_text_mentions_target_and_tolerance() -> None:
    question = generate_question(random.Random(7))
    assert question.text == (
        f"Measure the distance about {question.target} cm (tolerance {question.tolerance} cm)"
    )
