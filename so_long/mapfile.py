"""Locating, checking and reading map files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Optional, TextIO, Union

from so_long.strtools import strtrim

BUFFER_SIZE = 1000
MAP_EXTENSION = ".ber"
DEFAULT_MAPS_DIR = "maps"

PathLike = Union[str, Path]


class MapFileError(Exception):
    """Raised when a map file name is invalid or the file cannot be read."""


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of stream with their newlines kept.

    The last line comes without a newline if the stream does not end in one;
    an empty stream yields nothing.
    """
    pending = ""
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        pending += chunk
        while True:
            cut = pending.find("\n")
            if cut < 0:
                break
            yield pending[: cut + 1]
            pending = pending[cut + 1:]
    if pending:
        yield pending


def _os_error(exc: OSError) -> MapFileError:
    reason = exc.strerror or str(exc)
    return MapFileError(f"Error: {reason}")


def try_open(mapname: str, maps_dir: PathLike = DEFAULT_MAPS_DIR) -> Path:
    """Return the path of mapname inside maps_dir after checking it can be opened."""
    path = Path(maps_dir) / mapname
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise _os_error(exc) from exc
    return path


def read_map(path: PathLike) -> list[str]:
    """Read a map file into a list of rows with newlines removed."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            return [strtrim(line, "\n") for line in iter_lines(stream)]
    except OSError as exc:
        raise _os_error(exc) from exc


def check_map(name: Optional[str], maps_dir: PathLike = DEFAULT_MAPS_DIR) -> list[str]:
    """Validate a map file name, then read the map it names from maps_dir."""
    if name is None:
        raise MapFileError("Error: Name Map")
    if len(name) < len(MAP_EXTENSION) + 1:
        raise MapFileError("Error: Invalid Name Map")
    if not name.endswith(MAP_EXTENSION):
        raise MapFileError("Error: Invalid Extension")
    return read_map(try_open(name, maps_dir))