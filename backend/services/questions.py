"""Question generation for a measuring round."""

from __future__ import annotations

import random

from models import TARGET_MAX, TARGET_MIN, TOLERANCE_MAX, TOLERANCE_MIN, Question


def generate_question(rng: random.Random | None = None) -> Question:
    """
    Draw a fresh target distance and tolerance.

    Both values are drawn independently and uniformly (inclusive bounds).
    Uses the module-level `random` source unless `rng` is given.
    """
    source = rng or random
    target = source.randint(TARGET_MIN, TARGET_MAX)
    tolerance = source.randint(TOLERANCE_MIN, TOLERANCE_MAX)
    return Question(
        text=f"Measure the distance about {target} cm (tolerance {tolerance} cm)",
        target=target,
        tolerance=tolerance,
    )
