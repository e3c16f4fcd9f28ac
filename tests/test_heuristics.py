import pytest

from fifteen.domains.puzzle15 import GOAL, Move, State, apply_moves, neighbors, scramble
from fifteen.heuristics.manhattan import manhattan
from fifteen.heuristics.misplaced import misplaced_tiles
from fifteen.search.a_star import HeuristicKind
from fifteen.search.bfs import bfs_distance

HEURISTICS = [manhattan, misplaced_tiles]


@pytest.mark.parametrize("h", HEURISTICS)
def test_zero_at_goal(h):
    assert h(GOAL) == 0


@pytest.mark.parametrize("moves, expected_manhattan, expected_misplaced", [
    ([Move.LEFT], 1, 1),
    ([Move.LEFT, Move.LEFT, Move.UP], 3, 3),
    ([Move.UP, Move.UP, Move.UP], 3, 3),      # column of 4, 8, 12 shifted down
    ([Move.UP, Move.LEFT, Move.DOWN], 3, 3),
])
def test_known_values(moves, expected_manhattan, expected_misplaced):
    s = apply_moves(GOAL, moves)
    assert manhattan(s) == expected_manhattan
    assert misplaced_tiles(s) == expected_misplaced


def test_far_tile():
    # 1 and 15 swapped: two tiles each 3 rows + 2 cols away
    s = State.parse([15, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 1, 0])
    assert manhattan(s) == 10
    assert misplaced_tiles(s) == 2


@pytest.mark.parametrize("seed", range(6))
def test_manhattan_dominates_misplaced(seed):
    s = scramble(30, seed)
    assert manhattan(s) >= misplaced_tiles(s)


@pytest.mark.parametrize("seed", range(6))
def test_consistent_across_moves(seed):
    s = scramble(25, seed)
    for _, s2 in neighbors(s):
        assert abs(manhattan(s) - manhattan(s2)) == 1
        assert abs(misplaced_tiles(s) - misplaced_tiles(s2)) <= 1


@pytest.mark.parametrize("seed", range(4))
def test_admissible_on_small_scrambles(seed):
    s = scramble(8, seed)
    d = bfs_distance(s)
    assert manhattan(s) <= d
    assert misplaced_tiles(s) <= d


def test_relative_to_custom_goal():
    other = scramble(6, seed=11)
    assert manhattan(other, goal=other) == 0
    assert misplaced_tiles(other, goal=other) == 0
    assert manhattan(GOAL, goal=other) == manhattan(other)


@pytest.mark.parametrize("name, kind", [
    ("manhattan", HeuristicKind.MANHATTAN_DISTANCE),
    ("Manhattan-Distance", HeuristicKind.MANHATTAN_DISTANCE),
    ("misplaced", HeuristicKind.MISPLACED_TILES),
    ("misplaced_tiles", HeuristicKind.MISPLACED_TILES),
])
def test_kind_from_name(name, kind):
    assert HeuristicKind.from_name(name) is kind


def test_kind_from_unknown_name():
    with pytest.raises(ValueError):
        HeuristicKind.from_name("linear_conflict")


def test_evaluator_binds_goal():
    s = scramble(10, seed=5)
    assert HeuristicKind.MANHATTAN_DISTANCE.evaluator()(s) == manhattan(s)
    assert HeuristicKind.MISPLACED_TILES.evaluator(s)(s) == 0
