from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Iterable, List, Sequence, Set, Tuple
import operator
import random

SIDE = 4
SIZE = SIDE * SIDE


class PuzzleError(Exception):
    """Base class for 15-puzzle errors."""


class InvalidInput(PuzzleError, ValueError):
    """Raised when a configuration is not a permutation of 0..15."""


class IllegalMove(PuzzleError, ValueError):
    """Raised when the blank would leave the board."""


class Move(Enum):
    """Direction the *blank* travels."""
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Move":
        return _OPPOSITE[self]

    @classmethod
    def from_letter(cls, letter: str) -> "Move":
        return cls(letter.upper())


_DELTAS: Dict[Move, Tuple[int, int]] = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}
_OPPOSITE: Dict[Move, Move] = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}
# Expansion order; fixed so that searches are reproducible
MOVE_ORDER: Tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


@dataclass(frozen=True)
class State:
    """Immutable 4x4 board stored row-major; 0 is the blank."""
    cells: Tuple[int, ...]

    @classmethod
    def parse(cls, values: Iterable[int]) -> "State":
        try:
            raw = list(values)
        except TypeError:
            raise InvalidInput(f"expected a sequence of {SIZE} integers, got {values!r}") from None
        if len(raw) != SIZE:
            raise InvalidInput(f"expected {SIZE} values, got {len(raw)}")
        cells: List[int] = []
        for v in raw:
            if isinstance(v, bool):
                raise InvalidInput(f"tile values must be integers, got {v!r}")
            try:
                cells.append(operator.index(v))
            except TypeError:
                raise InvalidInput(f"tile values must be integers, got {v!r}") from None
        out_of_range = sorted(v for v in cells if not 0 <= v < SIZE)
        if out_of_range:
            raise InvalidInput(f"values out of range 0..{SIZE - 1}: {out_of_range}")
        blanks = cells.count(0)
        if blanks != 1:
            raise InvalidInput(f"expected exactly one blank (0), found {blanks}")
        if len(set(cells)) != SIZE:
            dups = sorted({v for v in cells if cells.count(v) > 1})
            raise InvalidInput(f"duplicate tile values: {dups}")
        return cls(tuple(cells))

    @classmethod
    def from_grid(cls, rows: Sequence[Sequence[int]]) -> "State":
        if len(rows) != SIDE or any(len(r) != SIDE for r in rows):
            raise InvalidInput(f"expected a {SIDE}x{SIDE} grid")
        return cls.parse(v for r in rows for v in r)

    @classmethod
    def goal(cls) -> "State":
        return cls(tuple(list(range(1, SIZE)) + [0]))

    def locate_blank(self) -> Tuple[int, int]:
        return divmod(self.cells.index(0), SIDE)

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(self.cells[r * SIDE:(r + 1) * SIDE] for r in range(SIDE))

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        r, c = pos
        return self.cells[r * SIDE + c]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(f"{t:2d}" if t else " ." for t in row) for row in self.rows()
        )


GOAL: State = State.goal()


# ---------- Core dynamics ----------
def legal_moves(s: State) -> Set[Move]:
    r, c = s.locate_blank()
    out: Set[Move] = set()
    if r > 0:           out.add(Move.UP)
    if r < SIDE - 1:    out.add(Move.DOWN)
    if c > 0:           out.add(Move.LEFT)
    if c < SIDE - 1:    out.add(Move.RIGHT)
    return out


def apply_move(s: State, move: Move) -> State:
    """Swap the blank with its neighbour in direction `move`."""
    r, c = s.locate_blank()
    dr, dc = move.delta
    nr, nc = r + dr, c + dc
    if not (0 <= nr < SIDE and 0 <= nc < SIDE):
        raise IllegalMove(f"blank at {(r, c)} cannot move {move.name}")
    z, j = r * SIDE + c, nr * SIDE + nc
    lst = list(s.cells)
    lst[z], lst[j] = lst[j], lst[z]
    return State(tuple(lst))


def apply_moves(s: State, moves: Iterable[Move]) -> State:
    for m in moves:
        s = apply_move(s, m)
    return s


def neighbors(s: State) -> List[Tuple[Move, State]]:
    """Return (move, next_state) pairs in MOVE_ORDER. Unit edge costs."""
    legal = legal_moves(s)
    return [(m, apply_move(s, m)) for m in MOVE_ORDER if m in legal]


# ---------- Instance generation ----------
def scramble(depth: int, seed: int, start: State = GOAL) -> State:
    """Depth-limited random walk from `start` with no immediate backtrack."""
    rng = random.Random(seed)
    s = start
    last = None
    for _ in range(depth):
        cand = [m for m in MOVE_ORDER if m in legal_moves(s)]
        if last is not None and last.opposite in cand and len(cand) > 1:
            cand.remove(last.opposite)
        last = rng.choice(cand)
        s = apply_move(s, last)
    return s


def _parity(s: State) -> int:
    arr = [x for x in s.cells if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    blank_row_from_bottom = SIDE - s.locate_blank()[0]  # 1-based
    return (inv + blank_row_from_bottom) % 2


def is_solvable(s: State, goal: State = GOAL) -> bool:
    """Even width: (inversions + blank row from bottom) must share the goal's parity.

    For the standard goal that parity is odd.
    """
    return _parity(s) == _parity(goal)


def flip_parity(s: State) -> State:
    """Swap the first two non-blank tiles, giving a state in the other orbit."""
    lst = list(s.cells)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return State(tuple(lst))


# ---------------- Heuristics ----------------
@lru_cache(maxsize=None)
def _goal_positions(goal: State) -> Dict[int, Tuple[int, int]]:
    return {t: divmod(i, SIDE) for i, t in enumerate(goal.cells)}


def misplaced_tiles(s: State, goal: State = GOAL) -> int:
    """Number of non-blank tiles not on their goal cell."""
    return sum(1 for t, g in zip(s.cells, goal.cells) if t != 0 and t != g)


def manhattan(s: State, goal: State = GOAL) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    goal_pos = _goal_positions(goal)
    dist = 0
    for idx, tile in enumerate(s.cells):
        if tile == 0:
            continue
        r, c = divmod(idx, SIDE)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
