"""Turning map coordinates into screen coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wireview.camera import Camera, Projection
from wireview.mapfile import HeightMap

_ISO_X = math.cos(math.radians(45))
_ISO_Y = math.sin(math.radians(25))


@dataclass(frozen=True)
class Point:
    """A projected point; ``z`` is the rotated depth."""

    x: float
    y: float
    z: float


def rotate_x(y: float, z: float, alpha: float) -> tuple[float, float]:
    """Rotate around the x axis; returns the new (y, z)."""
    c, s = math.cos(alpha), math.sin(alpha)
    return y * c + z * s, -y * s + z * c


def rotate_y(x: float, z: float, beta: float) -> tuple[float, float]:
    """Rotate around the y axis; returns the new (x, z)."""
    c, s = math.cos(beta), math.sin(beta)
    return x * c + z * s, -x * s + z * c


def rotate_z(x: float, y: float, gamma: float) -> tuple[float, float]:
    """Rotate around the z axis; returns the new (x, y)."""
    c, s = math.cos(gamma), math.sin(gamma)
    return x * c - y * s, x * s + y * c


def isometric(x: float, y: float, z: float) -> tuple[float, float]:
    """Isometric flattening of a 3D point; returns (x, y)."""
    return (x - y) * -_ISO_X, (x + y - z) * _ISO_Y


def project(heightmap: HeightMap, camera: Camera, ground: int, x: int, y: int) -> Point:
    """Screen position of the map cell at row ``x``, column ``y``."""
    zoom = camera.zoom
    z = int((int(heightmap.heights[x][y]) - ground) * camera.height * zoom / 2)
    px = x * zoom - (heightmap.rows * zoom) / 2
    py = y * zoom - (heightmap.cols * zoom) / 2

    py, zf = rotate_x(py, z, camera.alpha)
    z = int(zf)
    px, zf = rotate_y(px, z, camera.beta)
    z = int(zf)
    px, py = rotate_z(px, py, camera.gamma)

    if camera.projection == Projection.ISOMETRIC:
        px, py = isometric(px, py, z)
    elif camera.projection == Projection.TOP:
        py = -py
    elif camera.projection == Projection.SIDE:
        px, py = -px, -z

    return Point(px + camera.offset_x, py + camera.offset_y, z)