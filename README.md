# so_long

The map layer of a small tile-map puzzle game. A map is a plain-text `.ber`
file. This package finds and reads map files and checks whether a map is
valid and can be won. It also has small helpers for strings, byte buffers,
character handling and printf-style formatting.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Map format

Each line of the file is one row of the map. The map may use only these
characters:

| Char | Meaning          |
|------|------------------|
| `1`  | wall             |
| `0`  | empty floor      |
| `P`  | player start     |
| `E`  | exit             |
| `C`  | collectible coin |

Example:

```
1111111
1P0C0E1
1111111
```

## Loading a map

`so_long.mapfile.check_map(name, maps_dir="maps")` loads a map. It raises
`MapFileError` when:

- the name is `None`;
- the name is shorter than five characters;
- the name does not end in `.ber`;
- the file cannot be opened from `maps_dir`.

If the name is accepted, it returns the rows as a list of strings with the
newlines removed. There are lower-level functions as well:

- `try_open(mapname, maps_dir)` returns the checked `Path`.
- `read_map(path)` reads any file into rows.
- `iter_lines(stream)` yields the lines of a text stream with their newlines
  kept.

```python
from so_long.mapfile import check_map
from so_long.rules import validate, MapError

grid = check_map("level1.ber", maps_dir="maps")
try:
    validate(grid)
except MapError as err:
    print(err)
```

## Checking a map

`so_long.rules.validate(grid)` raises `MapError` for the first rule the map
breaks. The rules are checked in this order:

1. `is_rectangular`: the map has rows, and all rows have the same length.
2. `it_has_walls`: the first and last rows are all walls, and every row
   starts and ends with a wall (`lateral_walls`).
3. `has_all_elements`: exactly one `P`, exactly one `E`, and at least one `C`.
4. `has_valid_elements`: only the five characters above appear.
5. `is_winnable`: the player can reach every coin and the exit.

The reachability check uses these functions:

- `find_player(grid)` returns `(x, y)` or `None`.
- `flood_fill(cells, x, y)` marks the reachable cells of a grid of mutable
  rows with `F`.
- `check_remaining(cells)` reports whether no `C` or `E` is left.

## Helpers

- `so_long.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`. They accept a one-character string
  or a character code. The module also has `atoi` (parses a leading decimal
  integer) and `itoa`.
- `so_long.memory`: functions that work on `bytearray` and similar buffers:
  `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` (within one
  buffer, by offsets) and `memset`.
- `so_long.strtools`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`
  and `striteri`. Searches return an index, or `None` when nothing is found.
  `strlcpy` and `strlcat` return the resulting text together with the length
  the full result would have had.
- `so_long.fdio`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
  Each writes to a text stream.
- `so_long.formatting`: `format_message(fmt, *args)` and
  `print_message(fmt, *args, stream=None)`. They handle the conversions
  `%c %s %p %d %i %u %x %X %%`. Integers for the numeric conversions are
  taken as 32-bit values. A missing format, a trailing lone `%`, or too few
  arguments raise `FormatError`.

## What this package does not do

It has no command to run and opens no game window. It does not load or draw
images, and it does not handle key presses or movement. It provides the map
loading and checking that a game would use, but not the game itself.