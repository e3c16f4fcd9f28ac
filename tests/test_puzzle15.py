import pytest

from fifteen.domains.puzzle15 import (
    GOAL, IllegalMove, InvalidInput, Move, State,
    apply_move, apply_moves, flip_parity, is_solvable, legal_moves, neighbors, scramble,
)

ONE_MOVE = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15]


def test_goal_layout():
    assert GOAL.cells == tuple(range(1, 16)) + (0,)
    assert GOAL.locate_blank() == (3, 3)
    assert GOAL[(0, 0)] == 1
    assert GOAL[(2, 1)] == 10
    assert State.goal() == GOAL


def test_parse_accepts_permutation():
    s = State.parse(ONE_MOVE)
    assert s.cells == tuple(ONE_MOVE)
    assert s.locate_blank() == (3, 2)


@pytest.mark.parametrize("values", [
    list(range(1, 15)) + [0],                # 15 elements
    [0, 0] + list(range(2, 16)),             # two blanks
    [16] + list(range(1, 15)) + [0],         # value 16
    [-1] + list(range(1, 15)) + [0],         # negative
    [1, 1] + list(range(3, 16)) + [0],       # duplicate tile
    list(range(1, 16)) + [15],               # no blank
    ["1"] + list(range(2, 16)) + [0],        # not an int
    [True] + list(range(2, 16)) + [0],       # bool is not a tile
])
def test_parse_rejects(values):
    with pytest.raises(InvalidInput):
        State.parse(values)


def test_parse_rejects_non_iterable():
    with pytest.raises(InvalidInput):
        State.parse(None)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        State.parse([])


def test_from_grid_and_rows():
    rows = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]]
    s = State.from_grid(rows)
    assert s == GOAL
    assert s.rows() == tuple(tuple(r) for r in rows)
    with pytest.raises(InvalidInput):
        State.from_grid(rows[:3])


def test_equality_and_hash_are_content_based():
    a = State.parse(list(GOAL.cells))
    assert a == GOAL
    assert a is not GOAL
    assert len({a, GOAL}) == 1
    assert State.parse(ONE_MOVE) != GOAL


def test_str_marks_blank():
    assert str(GOAL).splitlines()[-1] == "13 14 15  ."


@pytest.mark.parametrize("blank_index, expected", [
    (15, {Move.UP, Move.LEFT}),
    (0, {Move.DOWN, Move.RIGHT}),
    (3, {Move.DOWN, Move.LEFT}),
    (12, {Move.UP, Move.RIGHT}),
    (5, {Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT}),
    (7, {Move.UP, Move.DOWN, Move.LEFT}),
])
def test_legal_moves_follow_blank(blank_index, expected):
    cells = [t for t in range(1, 16)]
    cells.insert(blank_index, 0)
    assert legal_moves(State.parse(cells)) == expected


def test_apply_move_blank_direction():
    s = State.parse(ONE_MOVE)
    assert apply_move(s, Move.RIGHT) == GOAL
    up = apply_move(GOAL, Move.UP)
    assert up.locate_blank() == (2, 3)
    assert up[(3, 3)] == 12
    left = apply_move(GOAL, Move.LEFT)
    assert left.locate_blank() == (3, 2)
    assert left[(3, 3)] == 15


def test_apply_move_does_not_mutate():
    before = GOAL.cells
    apply_move(GOAL, Move.UP)
    assert GOAL.cells == before


def test_illegal_move_raises():
    with pytest.raises(IllegalMove):
        apply_move(GOAL, Move.DOWN)
    with pytest.raises(IllegalMove):
        apply_move(GOAL, Move.RIGHT)


def test_moves_undo_each_other():
    s = scramble(12, seed=3)
    for m in legal_moves(s):
        assert apply_moves(s, [m, m.opposite]) == s


def test_neighbors_in_fixed_order():
    s = State.parse([1, 2, 3, 4, 5, 0, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15])
    moves = [m for m, _ in neighbors(s)]
    assert moves == [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT]
    for m, s2 in neighbors(s):
        assert s2 == apply_move(s, m)


def test_move_letters():
    assert Move.from_letter("u") is Move.UP
    assert [m.value for m in (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)] == ["U", "D", "L", "R"]


def test_scramble_is_deterministic_and_solvable():
    a = scramble(20, seed=7)
    assert a == scramble(20, seed=7)
    assert is_solvable(a)
    assert scramble(0, seed=1) == GOAL


def test_parity():
    assert is_solvable(GOAL)
    assert is_solvable(State.parse(ONE_MOVE))
    swapped = State.parse(list(range(1, 14)) + [15, 14, 0])
    assert not is_solvable(swapped)
    assert not is_solvable(flip_parity(scramble(9, seed=2)))
