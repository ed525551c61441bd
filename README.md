# yulecode

Solvers for a month of festive programming puzzles, one module per puzzle.
Every solver takes the puzzle input as a Python string or as ready-parsed
values and returns the answer. The solver modules print nothing and touch no
files; only the `yulecode` command reads input files and prints answers.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the solvers from Python

```python
from yulecode.captcha import halfway_captcha
from yulecode.spiral import spiral_distance, first_value_reaching
from yulecode.knot import knot_hash, count_regions
from yulecode.spinlock import value_after

halfway_captcha("1212")          # sum of digits matching the one halfway round the list
spiral_distance(1024)            # Manhattan distance from square 1024 to square 1
first_value_reaching(747)        # first summing-spiral value that is 747 or more
knot_hash("AoC 2017")            # 32 hex digit dense knot hash
count_regions("flqrgnkx")        # connected used regions on the 128x128 disk grid
value_after(3, 2017)             # value following the last one the spinlock inserted
```

## What each module covers

| Module | Contents |
| --- | --- |
| `captcha` | `halfway_captcha` |
| `checksum` | `parse_rows`, `range_checksum`, `divisible_checksum` |
| `spiral` | `spiral_distance`, `first_value_reaching` |
| `passphrase` | `is_valid`, `count_valid` (no two words may be anagrams) |
| `jumps` | `parse_offsets`, `count_steps` |
| `reallocation` | `redistribute`, `loop_size` |
| `tower` | `Program`, `parse_tower`, `find_bottom`, `tower_weight`, `find_imbalances` |
| `registers` | `Instruction`, `parse_instruction`, `condition_holds`, `run`, `largest_value` |
| `stream` | `StreamStats`, `scan_stream` (group score and garbage count) |
| `knot` | `knot_rounds`, `first_two_product`, `dense_hash`, `knot_hash`, `disk_grid`, `count_regions` |
| `hexgrid` | `hex_distance`, `walk`, `final_and_furthest` |
| `pipes` | `parse_pipes`, `group_of`, `count_groups` |
| `firewall` | `parse_firewall`, `severity`, `smallest_delay` |
| `dance` | `Move`, `parse_moves`, `perform`, `dance_repeated` |
| `spinlock` | `value_after` |
| `duet` | `PairResult`, `parse_program`, `recover_frequency`, `run_pair` |
| `tubes` | `parse_diagram`, `follow_path` |
| `particles` | `Particle`, `parse_particles`, `simulate`, `closest_particle`, `surviving_particles` |
| `virus` | `parse_infected`, `count_infections` |
| `coprocessor` | `count_multiplications` |
| `turing` | `Blueprint`, `parse_blueprint`, `diagnostic_checksum` |
| `cli` | `main`, the `yulecode` command |

Parsing functions accept the puzzle input as it is given, with a trailing
newline or without one. Malformed input raises `ValueError`.

Some defaults worth knowing: `dance_repeated` dances one billion times over
`abcdefghijklmnop`; `closest_particle` and `surviving_particles` run 300
ticks; `count_infections` runs 10,000 bursts on a 25-wide map; `value_after`
makes 2017 inserts. `recover_frequency` returns `None` when no `rcv` fires.

## Command line

Installing the package adds a `yulecode` command:

```
yulecode PUZZLE [INPUT]
```

`PUZZLE` is one of `1`, `2`, `2b`, `4b`, `5`, `6b`, `7`, `8`, `9b`, `10`,
`10b`, `11`, `11b`, `12`, `12b`, `13`, `13b`, `16b`, `18`, `18b`, `19`, `20`,
`20b`, `22`, `23`, `25`, which read `INPUT` as a file path (standard input when
it is missing or `-`), or `3`, `3b`, `14b`, `17`, which take `INPUT` itself as
the value (a number, or the key string for `14b`). The answer is printed; an
unreadable file or malformed input prints an error and exits with status 1.

```
yulecode --help
```

## What is not covered

Only the puzzles listed above have solvers; there are none for puzzles 15, 21
and 24, and for several puzzles only one of the two variants is available
(for example `passphrase` checks anagrams only, `reallocation` reports the
loop size only).