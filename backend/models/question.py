from dataclasses import dataclass

TARGET_MIN = 5
TARGET_MAX = 104
TOLERANCE_MIN = 1
TOLERANCE_MAX = 5


@dataclass(frozen=True)
class Question:
    text: str          # shown to the player
    target: int        # cm, in [TARGET_MIN, TARGET_MAX]
    tolerance: int     # cm, in [TOLERANCE_MIN, TOLERANCE_MAX]
