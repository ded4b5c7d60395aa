"""Reading and validating height-map files."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

DEFAULT_COLOR = 0xFFFFFF
EXTENSION = ".fdf"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SEPARATORS = re.compile(r"[ \n]")


class MapError(Exception):
    """Raised when a map file is missing, malformed or of the wrong type."""


@dataclass
class HeightMap:
    """Grid of heights and per-point colours, indexed by [row][column]."""

    heights: np.ndarray
    colors: np.ndarray
    name: str = field(default="")

    @property
    def rows(self) -> int:
        return int(self.heights.shape[0])

    @property
    def cols(self) -> int:
        return int(self.heights.shape[1])


def parse_value(token: str) -> int:
    """Decimal value of a token, with an optional leading minus sign."""
    sign = 1
    digits = token
    if token.startswith("-"):
        sign = -1
        digits = token[1:]
    value = 0
    for ch in digits:
        if ch == "\n":
            break
        value = value * 10 + (ord(ch) - 48)
    return value * sign


def is_valid_token(token: str) -> bool:
    """True if ``token`` is a height, optionally followed by ``,0x`` and hex digits."""
    i = 0
    if token.startswith("-") and len(token) > 1:
        i = 1
    while i < len(token) and token[i].isdigit() and token[i].isascii():
        i += 1
    if i < len(token) and token[i] == ",":
        i += 1
        if not token.startswith("0x", i):
            return False
        i += 2
        if any(ch not in _HEX_DIGITS for ch in token[i:]):
            return False
        i = len(token)
    return i == len(token)


def parse_token(token: str) -> tuple[int, int]:
    """Height and colour of one map token."""
    if not is_valid_token(token):
        raise MapError("Map Error")
    if "," not in token:
        return parse_value(token), DEFAULT_COLOR
    height_part, color_part = token.split(",", 1)
    hex_digits = color_part[2:].lower()
    color = int(hex_digits, 16) if hex_digits else 0
    return parse_value(height_part), color


def _tokens(line: str) -> list[str]:
    return [t for t in _SEPARATORS.split(line) if t]


def _read_lines(path: Path) -> list[str]:
    try:
        text = path.read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("Empty map file or no file found") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise MapError("Empty map file or no file found")
    first = lines[0]
    if first == "" or first == " " or "\t" <= first[0] <= "\r":
        raise MapError("Empty map file or no file found")
    return lines


def load_map(path: str | Path) -> HeightMap:
    """Load a ``.fdf`` map file into a :class:`HeightMap`."""
    path = Path(path)
    name = str(path)
    if len(name) < 5 or not name.endswith(EXTENSION):
        raise MapError("Wrong file type: required file type -> '.fdf'")
    lines = _read_lines(path)
    rows = [_tokens(line) for line in lines]
    cols = len(rows[0])
    if cols == 0 or any(len(row) != cols for row in rows):
        raise MapError("Map Error")
    parsed = [[parse_token(token) for token in row] for row in rows]
    heights = np.array([[h for h, _ in row] for row in parsed], dtype=np.int64)
    colors = np.array([[c for _, c in row] for row in parsed], dtype=np.int64)
    return HeightMap(heights=heights, colors=colors, name=name)


def most_frequent_height(heights) -> int:
    """Most common height; the first cell's height wins ties, then the lowest."""
    array = np.asarray(heights, dtype=np.int64)
    if array.size == 0:
        raise MapError("Map Error")
    counts = Counter(int(v) for v in array.flat)
    first = int(array.flat[0])
    best = max(counts.values())
    if counts[first] == best:
        return first
    return min(value for value, count in counts.items() if count == best)


def zoom_for(rows: int, cols: int) -> int:
    """Initial zoom factor suited to a map of the given size."""
    for limit, zoom in ((30, 35), (60, 15), (100, 10), (150, 5), (500, 2)):
        if rows <= limit and cols <= limit:
            return zoom
    return 1