# advent2024

Solvers for the 2024 Advent of Code puzzles, days 1 through 11. Each day is a
module of small functions that work on plain Python values, plus a `main`
function that reads a puzzle input and prints the answers. There are no
dependencies beyond the standard library.

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

Every day has its own command. Each takes the puzzle input file as an optional
argument and reads `input.txt` in the current directory when none is given. If
the file cannot be read it prints `Cannot open file.` to standard error and
exits with status 1.

```
advent2024-day01 [input]
advent2024-day02 [input]
advent2024-day03 [input]
advent2024-day04 [input]
advent2024-day05 [input]
advent2024-day06 [input]
advent2024-day07 [input]
advent2024-day08 [input] [--no-harmonics]
advent2024-day09 [input] [--blocks] [--show]
advent2024-day10 [input]
advent2024-day11 [input] [--blocks N]
```

| Command            | What it prints                                                        |
|--------------------|-----------------------------------------------------------------------|
| `advent2024-day01` | total distance and similarity score of two location lists             |
| `advent2024-day02` | number of safe reports, then number safe with the dampener            |
| `advent2024-day03` | sum of all `mul(a,b)` products, then of those between `do()` and `don't()` |
| `advent2024-day04` | count of XMAS words, then count of MAS crosses                        |
| `advent2024-day05` | middle-page sum of correct updates, then of repaired incorrect ones   |
| `advent2024-day06` | cells the guard visits, then obstructions that make it loop           |
| `advent2024-day07` | sum of targets reachable with `+`, `*` and `\|\|`                     |
| `advent2024-day08` | number of antinode cells                                              |
| `advent2024-day09` | checksum of the compacted disk                                        |
| `advent2024-day10` | sum of trailhead scores, then sum of trailhead ratings                |
| `advent2024-day11` | number of stones after blinking                                       |

Options:

- `advent2024-day08 --no-harmonics` counts only the two antinodes of each
  antenna pair; by default every in-bounds point on the line through a pair
  counts.
- `advent2024-day09 --blocks` moves single blocks instead of whole files;
  `--show` prints the disk before and after compacting.
- `advent2024-day11 --blocks N` sets the number of blinks (75 by default).

## Library use

```python
from advent2024 import day01, day02, day11

left, right = day01.parse_lists("3 4\n4 3\n2 5\n1 3\n3 9\n3 3\n")
print(day01.total_distance(left, right))      # 11
print(day01.similarity_score(left, right))    # 31

print(day02.is_safe([7, 6, 4, 2, 1]))                 # True
print(day02.is_safe_with_dampener([1, 3, 2, 4, 5]))   # True

print(day11.total_stones([125, 17], 25))      # 55312
```

What each module offers:

- `day01`: `parse_lists`, `total_distance` (raises `ValueError` for lists of
  different lengths), `similarity_score`.
- `day02`: `parse_reports`, `is_safe`, `is_safe_with_dampener`.
- `day03`: `sum_multiplications`, `sum_enabled_multiplications`. The latter
  counts only products inside a span that starts with `do()` and ends at the
  next `don't()`; text before the first `do()` is not counted. The command
  joins the input's lines without separators before scanning.
- `day04`: `parse_grid`, `count_xmas`, `count_x_mas`.
- `day05`: `parse_input`, `find_broken_rule`, `follows_rules`, `fix_order`
  (returns a new list), `middle_sum`.
- `day06`: the `Direction` enum with `turn_right`, `parse_grid`, `find_start`,
  `visited_positions`, `loop_obstructions`. They raise `ValueError` for an
  empty or ragged map, a missing guard, or a guard that never leaves.
- `day07`: the `Operator` enum (`ADD`, `MULTIPLY`, `CONCAT`), the `Equation`
  dataclass with `evaluate` and `is_solvable`, `parse_equations` (a later line
  with the same target replaces an earlier one) and `calibration_total`.
- `day08`: `parse_antennas`, `collinear_points`, `harmonic_points`,
  `count_antinodes`.
- `day09`: `parse_disk_map` (file ids per block, `None` for free space),
  `render`, `compact_blocks`, `compact_files`, `checksum`.
- `day10`: `parse_map`, `trailheads`, `trail_score`, `trail_rating`.
- `day11`: `count_stones`, `total_stones`; both raise `ValueError` for negative
  values or blink counts.

## What it does not do

- Only days 1 to 11 are solved; there is nothing for day 12 or later.
- Day 7 counts equations with all three operators allowed; it has no separate
  answer for `+` and `*` alone.
- Days 8 and 9 print one answer per run; choose the variant with the options
  above.