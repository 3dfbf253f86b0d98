import pytest

from aoc2022.day09 import (
    Direction,
    count_tail_positions,
    follow,
    parse_motions,
    solve,
    step,
)

SMALL = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
LARGE = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"

OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def test_solve_small_example():
    assert solve(SMALL) == (13, 1)


def test_large_example_ten_knots():
    assert count_tail_positions(parse_motions(LARGE), 10) == 36


def test_parse_motions():
    assert parse_motions("R 4\nU 2") == [(Direction.RIGHT, 4), (Direction.UP, 2)]


@pytest.mark.parametrize("text", ["X 3", "R", "R four", "R -1"])
def test_parse_motions_errors(text):
    with pytest.raises(ValueError):
        parse_motions(text)


@pytest.mark.parametrize("direction", list(Direction))
def test_step_and_back(direction):
    start = (3, -2)
    moved = step(start, direction)
    assert moved != start
    assert step(moved, OPPOSITE[direction]) == start


def test_follow_touching_stays():
    for head in [(0, 0), (1, 0), (1, 1), (-1, 1), (0, -1)]:
        assert follow((0, 0), head) == (0, 0)


@pytest.mark.parametrize("head", [(2, 0), (0, -2), (2, 1), (-1, 2), (2, 2)])
def test_follow_far_head_ends_touching(head):
    tail = (0, 0)
    moved = follow(tail, head)
    assert max(abs(moved[0] - tail[0]), abs(moved[1] - tail[1])) == 1
    assert max(abs(head[0] - moved[0]), abs(head[1] - moved[1])) <= 1


def test_longer_rope_visits_no_more():
    motions = parse_motions(LARGE)
    counts = [count_tail_positions(motions, knots) for knots in (1, 2, 10)]
    assert counts == sorted(counts, reverse=True)


def test_zero_knots_rejected():
    with pytest.raises(ValueError):
        count_tail_positions(parse_motions(SMALL), 0)