import pytest

from aoc2022.day12 import Heightmap, main, parse_heightmap, solve

EXAMPLE = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n"
LADDER = "SbcdefghijklmnopqrstuvwxyE"


def test_example_solution():
    assert solve(EXAMPLE) == (31, 29)


def test_parse_marks_start_and_end_levels():
    heightmap = parse_heightmap(EXAMPLE)
    sx, sy = heightmap.start
    ex, ey = heightmap.end
    assert heightmap.levels[sy][sx] == ord("a")
    assert heightmap.levels[ey][ex] == ord("z")
    assert EXAMPLE.splitlines()[sy][sx] == "S"
    assert EXAMPLE.splitlines()[ey][ex] == "E"


def test_dimensions_follow_input():
    heightmap = parse_heightmap(EXAMPLE)
    rows = EXAMPLE.splitlines()
    assert heightmap.height == len(rows)
    assert heightmap.width == len(rows[0])


def test_ladder_path_length():
    heightmap = parse_heightmap(LADDER)
    assert heightmap.shortest_path(heightmap.start) == len(LADDER) - 1


def test_neighbours_respect_climb_limit():
    heightmap = parse_heightmap(EXAMPLE)
    for y in range(heightmap.height):
        for x in range(heightmap.width):
            for nx, ny in heightmap.neighbours((x, y)):
                assert abs(nx - x) + abs(ny - y) == 1
                assert heightmap.levels[ny][nx] <= heightmap.levels[y][x] + 1


def test_neighbours_exclude_steep_step():
    heightmap = Heightmap([[ord("a"), ord("c")]], (0, 0), (1, 0))
    assert heightmap.neighbours((0, 0)) == []
    assert heightmap.neighbours((1, 0)) == [(0, 0)]
    assert heightmap.shortest_path((0, 0)) is None


def test_lowest_points_are_all_level_a():
    heightmap = parse_heightmap(EXAMPLE)
    points = heightmap.lowest_points()
    assert heightmap.start in points
    assert all(heightmap.levels[y][x] == ord("a") for x, y in points)
    expected = sum(row.count("a") + row.count("S") for row in EXAMPLE.splitlines())
    assert len(points) == expected


def test_part2_not_worse_than_part1():
    part1, part2 = solve(EXAMPLE)
    assert part2 <= part1


def test_path_to_end_is_zero_from_end():
    heightmap = parse_heightmap(EXAMPLE)
    assert heightmap.shortest_path(heightmap.end) == 0


def test_unreachable_end_raises():
    with pytest.raises(ValueError):
        solve("SE")


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        parse_heightmap("Sa1E")


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        parse_heightmap("Sab\nbE")


def test_empty_raises():
    with pytest.raises(ValueError):
        parse_heightmap("\n\n")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(LADDER, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.strip()
    assert out == str(solve(LADDER))