"""Rasterising the wireframe: canvas, line drawing and scene rendering."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from wireview.camera import WINDOW_HEIGHT, WINDOW_WIDTH, Camera
from wireview.colors import gradient
from wireview.mapfile import HeightMap
from wireview.projection import Point, project

BACKGROUND = 0xFF0F0F0F
_EPSILON = 0.0000001

Cell = tuple[int, int]
Edge = tuple[Cell, Cell]


class Canvas:
    """A fixed-size image of packed 0xAARRGGBB pixels."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def clear(self, color: int = BACKGROUND) -> None:
        """Fill the whole canvas with ``color``."""
        self.pixels.fill(color & 0xFFFFFFFF)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of one pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return int(self.pixels[y, x])


def _low(p1, p2, inverted: bool) -> Iterator[tuple[int, int, float]]:
    dx = int(p2.x - p1.x)
    dy = int(p2.y - p1.y)
    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy
    d = 2 * dy - dx
    x = int(p1.x)
    y = int(p1.y)
    span = abs(p2.y - p1.y) + _EPSILON
    while x <= p2.x:
        ratio = abs(y - p1.y) / span
        yield x, y, ratio if inverted else 1 - ratio
        if d > 0:
            y += yi
            d -= 2 * dx
        d += 2 * dy
        x += 1


def _high(p1, p2, inverted: bool) -> Iterator[tuple[int, int, float]]:
    dx = int(p2.x - p1.x)
    dy = int(p2.y - p1.y)
    xi = 1
    if dx < 0:
        xi = -1
        dx = -dx
    d = 2 * dx - dy
    x = int(p1.x)
    y = int(p1.y)
    span = abs(p2.x - p1.x) + _EPSILON
    while y <= p2.y:
        ratio = abs(x - p1.x) / span
        yield x, y, ratio if inverted else 1 - ratio
        if d > 0:
            x += xi
            d -= 2 * dy
        d += 2 * dx
        y += 1


def line_pixels(start, end) -> Iterator[tuple[int, int, float]]:
    """Pixels of the segment as (x, y, pos); pos 0 is the start colour, 1 the end colour."""
    if abs(int(start.y) - int(end.y)) < abs(int(start.x) - int(end.x)):
        if start.x - end.x > 0:
            yield from _low(end, start, inverted=False)
        else:
            yield from _low(start, end, inverted=True)
    else:
        if start.y - end.y > 0:
            yield from _high(end, start, inverted=False)
        else:
            yield from _high(start, end, inverted=True)


def draw_line(canvas: Canvas, start, end, first_color: int, second_color: int) -> None:
    """Draw a segment shaded from ``first_color`` at start to ``second_color`` at end."""
    for x, y, pos in line_pixels(start, end):
        canvas.set_pixel(x, y, gradient(first_color, second_color, pos))


def edges(rows: int, cols: int, mesh: int) -> Iterator[Edge]:
    """Pairs of neighbouring cells to join, in drawing order, for a mesh mode."""
    if mesh in (1, 3):
        for x in range(rows - 1):
            for y in range(cols - 1):
                yield (x, y), (x + 1, y + 1)
    if mesh in (2, 3):
        for x in range(1, rows):
            for y in range(cols - 1):
                yield (x, y), (x - 1, y + 1)
    for y in range(cols):
        for x in range(rows - 1):
            yield (x, y), (x + 1, y)
    for x in range(rows):
        for y in range(cols - 1):
            yield (x, y), (x, y + 1)


def render_scene(
    canvas: Canvas,
    heightmap: HeightMap,
    colors,
    camera: Camera,
    ground: int,
) -> Canvas:
    """Clear the canvas and draw the projected wireframe of the map on it."""
    canvas.clear(BACKGROUND)
    palette = np.asarray(colors)
    projected: dict[Cell, Point] = {}

    def point(cell: Cell) -> Point:
        if cell not in projected:
            projected[cell] = project(heightmap, camera, ground, *cell)
        return projected[cell]

    for a, b in edges(heightmap.rows, heightmap.cols, camera.mesh):
        draw_line(canvas, point(a), point(b), int(palette[a]), int(palette[b]))
    return canvas