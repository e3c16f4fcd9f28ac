from typing import Optional
from fifteen.domains.puzzle15 import GOAL, State, misplaced_tiles as _misplaced_tiles


def misplaced_tiles(s: State, goal: Optional[State] = None) -> int:
    return _misplaced_tiles(s, GOAL if goal is None else goal)
