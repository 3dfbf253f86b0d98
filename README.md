# aoc2022

Solutions to the first thirteen puzzles of Advent of Code 2022, usable both
as a Python library and from the command line. The package needs nothing
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has its own command, `aoc2022-day01` through `aoc2022-day13`.
Each takes the path of a puzzle input file, or reads standard input when no
path is given, and prints the answers to both parts:

```
aoc2022-day01 input.txt
aoc2022-day06 < input.txt
aoc2022-day13 input.txt
```

Most commands print the two answers as a tuple, for example `(24000, 45000)`.
`aoc2022-day10` prints `Part 1: <signal strength>`, then `Part 2:` followed by
the rows of the rendered screen.

## Library

Each day lives in its own module, `aoc2022.day01` to `aoc2022.day13`. Every
module has a `solve(text)` function that takes the whole puzzle input as a
string and returns the answers to both parts, and a `main(argv=None)`
function behind its command.

```python
from aoc2022 import day01, day06

with open("input.txt", encoding="utf-8") as handle:
    print(day01.solve(handle.read()))

print(day06.find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4))   # 7
print(day06.find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 14))  # 19
```

The modules also expose the building blocks of each puzzle:

- `day01`: `elf_totals(text)` and `top_total(totals, count)`.
- `day02`: the `Shape` enumeration (`score`, `compete_points`,
  `outcome_against`, `find_match`) and the `Outcome` enumeration (`points`),
  with `parse_shape`, `tokenize`, `score_as_shapes` and `score_with_strategy`.
- `day03`: `priority`, `compartments`, `common_item`, `rucksack_priority` and
  `badge_priority`.
- `day04`: `Section` (`contains`, `overlaps`) and `Assignment`
  (`has_subset`, `has_overlap`), with `parse_section`, `parse_assignment`,
  `read_assignments`, `count_subsets` and `count_overlaps`.
- `day05`: `Move` and `Stacks` (`move_one_by_one`, `move_together`, `tops`),
  with `parse_move`, `parse_stacks` and `parse_input`.
- `day06`: `find_marker(signal, length)`.
- `day07`: `Directory` (`size`, `walk`), with `parse_terminal`,
  `small_directories_total` and `smallest_to_delete`.
- `day08`: `parse_grid`, `tree_view`, `visible_count` and
  `best_scenic_score`.
- `day09`: the `Direction` enumeration, with `parse_motions`, `step`,
  `follow` and `count_tail_positions` for ropes of any number of knots.
- `day10`: `Instruction`, `parse_instruction`, `register_history`,
  `signal_strength` and `render_screen`.
- `day11`: `Operation`, `Monkey`, `tokenize`, `parse_monkeys` and
  `monkey_business(monkeys, rounds, relief)`.
- `day12`: `parse_heightmap` and `Heightmap` (`neighbours`, `shortest_path`,
  `lowest_points`), which finds the fewest steps by breadth-first search.
- `day13`: `parse_packet`, `compare_packets`, `right_order_sum` and
  `decoder_key`.

## Errors

Malformed input raises `ValueError` or one of its subclasses
(`SectionError`, `MoveError`, `InstructionError`, `TerminalError`,
`PacketError`) instead of producing a wrong answer silently.

## What it does not do

The package only solves puzzle inputs you already have; it does not fetch
inputs or submit answers, and it covers days 1 to 13 only.