"""Colour helpers: packing, gradients and height-based palettes."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

OPAQUE = 0xFF000000
PALETTE_COUNT = 6

# Each palette is a list of (offset from ground, colour) thresholds checked in
# order with "z < ground + offset", followed by the colour used above them all.
_PALETTES: dict[int, tuple[tuple[tuple[int, int], ...], int]] = {
    1: (
        (
            (-50, 0x003366),
            (-15, 0x1962E1),
            (0, 0x99CCFF),
            (5, 0x009A00),
            (20, 0xFFB266),
            (40, 0xC16100),
            (60, 0x945700),
            (90, 0x693502),
        ),
        0xFFFFFF,
    ),
    2: (
        (
            (-20, 0x9A1F6A),
            (0, 0xC2294E),
            (15, 0xEC4B27),
            (45, 0xEF8633),
        ),
        0xF3AF3D,
    ),
    3: (
        (
            (-50, 0x277DA1),
            (-15, 0x577590),
            (0, 0x4D908E),
            (5, 0x43AA8B),
            (20, 0x90BE6D),
            (40, 0xF9C74F),
            (60, 0xF9844A),
            (90, 0xF8961E),
            (100, 0xF3722C),
        ),
        0xF94144,
    ),
    4: (
        (
            (-25, 0x5F0F40),
            (0, 0x9A031E),
            (15, 0xFB8B24),
            (45, 0xE36414),
        ),
        0x0F4C5C,
    ),
    5: (
        (
            (-50, 0x4D1A7F),
            (-25, 0xCC99FF),
            (0, 0xEDBDFF),
            (15, 0xFFE8FA),
            (45, 0xFF91BF),
        ),
        0xF7638F,
    ),
    6: (
        (
            (5, 0x0F0F0F),
            (15, 0xFFE8FA),
            (45, 0xFF91BF),
        ),
        0xF7638F,
    ),
}


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + (end - start) * t


def unpack_rgb(value: int) -> tuple[int, int, int]:
    """Split a packed 0xRRGGBB value into its channels."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def gradient(first: int, second: int, pos: float) -> int:
    """Opaque 0xAARRGGBB colour at ``pos`` between two packed RGB colours."""
    channels = zip(unpack_rgb(first), unpack_rgb(second))
    color = OPAQUE
    for shift, (a, b) in zip((16, 8, 0), channels):
        color += int(lerp(a, b, pos)) << shift
    return color


def palette_color(palette: int, z: int, ground: int, flipped: bool) -> int:
    """Colour of height ``z`` in ``palette``; 0 for an unknown palette."""
    try:
        thresholds, top = _PALETTES[palette]
    except KeyError:
        return 0
    if flipped:
        z = -z
    for offset, color in thresholds:
        if z < ground + offset:
            return color
    return top


def recolor(
    heights: Sequence[Sequence[int]] | np.ndarray | Iterable,
    palette: int,
    ground: int,
    flipped: bool,
) -> np.ndarray:
    """Colour matrix for a height matrix under the given palette."""
    array = np.asarray(heights, dtype=np.int64)
    result = np.zeros(array.shape, dtype=np.int64)
    for index, z in np.ndenumerate(array):
        result[index] = palette_color(palette, int(z), ground, flipped)
    return result