from typing import Optional
from fifteen.domains.puzzle15 import GOAL, State, manhattan as _manhattan


def manhattan(s: State, goal: Optional[State] = None) -> int:
    return _manhattan(s, GOAL if goal is None else goal)
