"""Camera state and the on-screen menu that drives it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
MENU_SHIFT = 250

ROTATION_STEP = 0.01
RESET_ANGLE = 0.00001
MIN_ZOOM = 1.0
MESH_MODES = 4

SLIDER_MIN = 75
SLIDER_MAX = 420
SLIDER_SIZE = 30
HEIGHT_SLIDER_Y = 196
ZOOM_SLIDER_Y = 280

# Inclusive screen regions as (x_min, x_max, y_min, y_max).
MENU_AREA = (33, 495, 30, 910)
TOP_BUTTON = (75, 223, 375, 402)
ISO_BUTTON = (300, 450, 375, 403)
SIDE_BUTTON = (187, 335, 325, 353)

BUTTON_IDLE = 0
BUTTON_HOVER = 1
BUTTON_PRESSED = 2


class Projection(IntEnum):
    """How the rotated map is flattened onto the screen."""

    ISOMETRIC = 1
    TOP = 2
    SIDE = 3


class RotateAxis(IntEnum):
    """Which angles the automatic rotation advances."""

    GAMMA = 1
    BETA = 2
    ALPHA = 3
    ALL = 4


def _contains(region: tuple[int, int, int, int], x: float, y: float) -> bool:
    x_min, x_max, y_min, y_max = region
    return x_min <= x <= x_max and y_min <= y <= y_max


def _clamp_slider(value: float) -> int:
    return int(min(max(value, SLIDER_MIN), SLIDER_MAX))


@dataclass
class Camera:
    """View parameters: offsets, zoom, height scale, angles and display modes."""

    zoom: float = 1.0
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    offset_x: float = field(init=False, default=0.0)
    offset_y: float = field(init=False, default=0.0)
    height: float = field(init=False, default=1.0)
    projection: Projection = field(init=False, default=Projection.ISOMETRIC)
    alpha: float = field(init=False, default=0.0)
    beta: float = field(init=False, default=0.0)
    gamma: float = field(init=False, default=0.0)
    menu: bool = field(init=False, default=True)
    mesh: int = field(init=False, default=0)
    rotating: bool = field(init=False, default=False)
    rotate_axis: RotateAxis = field(init=False, default=RotateAxis.GAMMA)

    def __post_init__(self) -> None:
        self.reset(self.zoom)

    def reset(self, zoom: float) -> None:
        """Return every setting to its starting value with the given zoom."""
        self.offset_x = self.window_width // 2 + MENU_SHIFT
        self.offset_y = self.window_height // 2
        self.height = 1.0
        self.projection = Projection.ISOMETRIC
        self.alpha = 0.0
        self.beta = 0.0
        self.gamma = 0.0
        self.zoom = zoom
        self.menu = True
        self.mesh = 0
        self.rotating = False
        self.rotate_axis = RotateAxis.GAMMA

    def translate(self, dx: float, dy: float) -> None:
        self.offset_x += dx
        self.offset_y += dy

    def change_height(self, delta: float) -> None:
        self.height += delta

    def rotate(self, dalpha: float, dbeta: float, dgamma: float) -> None:
        self.alpha += dalpha
        self.beta += dbeta
        self.gamma += dgamma

    def _reset_angles(self) -> None:
        self.alpha = RESET_ANGLE
        self.beta = RESET_ANGLE
        self.gamma = RESET_ANGLE

    def cycle_projection(self) -> None:
        """Reset the angles and step to the next projection."""
        self._reset_angles()
        order = list(Projection)
        self.projection = order[(order.index(self.projection) + 1) % len(order)]

    def set_projection(self, projection: Projection) -> None:
        """Reset the angles and switch to ``projection``."""
        self._reset_angles()
        self.projection = Projection(projection)

    def set_rotate_mode(self, axis: RotateAxis) -> None:
        self.rotate_axis = RotateAxis(axis)

    def toggle_rotation(self) -> None:
        self.rotating = not self.rotating

    def tick_rotation(self) -> None:
        """Advance the automatic rotation by one step, if it is on."""
        if not self.rotating:
            return
        axis = self.rotate_axis
        if axis in (RotateAxis.GAMMA, RotateAxis.ALL):
            self.gamma += ROTATION_STEP
        if axis in (RotateAxis.BETA, RotateAxis.ALL):
            self.beta += ROTATION_STEP
        if axis in (RotateAxis.ALPHA, RotateAxis.ALL):
            self.alpha += ROTATION_STEP

    def scale_zoom(self, factor: float) -> None:
        self.zoom = max(self.zoom * factor, MIN_ZOOM)

    def add_zoom(self, delta: float) -> None:
        self.zoom = max(self.zoom + delta, MIN_ZOOM)

    def cycle_mesh(self) -> None:
        """Step through: grid, diagonals, anti-diagonals, both."""
        self.mesh = (self.mesh + 1) % MESH_MODES

    def toggle_menu(self) -> None:
        self.menu = not self.menu


@dataclass
class Menu:
    """Slider positions and button states of the side menu."""

    height_slider_x: int = SLIDER_MIN
    zoom_slider_x: int = SLIDER_MIN
    dragging_height: bool = False
    dragging_zoom: bool = False
    height_slider_active: bool = False
    zoom_slider_active: bool = False
    top_status: int = BUTTON_IDLE
    iso_status: int = BUTTON_IDLE
    side_status: int = BUTTON_IDLE

    def sync_sliders(self, camera: Camera) -> None:
        """Place both sliders to match the camera's height and zoom."""
        self.height_slider_x = _clamp_slider(5 * (camera.height + 47))
        self.zoom_slider_x = _clamp_slider(5 * (camera.zoom + 13))

    def drag_height_slider(self, camera: Camera, dx: float) -> None:
        self.height_slider_x = _clamp_slider(self.height_slider_x + dx)
        camera.height = (1 + (self.height_slider_x - 245) * 0.1) * 2

    def drag_zoom_slider(self, camera: Camera, dx: float) -> None:
        self.zoom_slider_x = _clamp_slider(self.zoom_slider_x + dx)
        camera.zoom = (1 + (self.zoom_slider_x - SLIDER_MIN) * 0.1) * 2

    def hover(self, x: float, y: float) -> None:
        """Highlight the view button under the cursor, or clear all highlights."""
        if _contains(TOP_BUTTON, x, y):
            self.top_status = BUTTON_HOVER
        elif _contains(ISO_BUTTON, x, y):
            self.iso_status = BUTTON_HOVER
        elif _contains(SIDE_BUTTON, x, y):
            self.side_status = BUTTON_HOVER
        else:
            self.top_status = BUTTON_IDLE
            self.iso_status = BUTTON_IDLE
            self.side_status = BUTTON_IDLE

    def release(self) -> None:
        """Stop any drag and clear every button state."""
        self.dragging_height = False
        self.dragging_zoom = False
        self.height_slider_active = False
        self.zoom_slider_active = False
        self.top_status = BUTTON_IDLE
        self.iso_status = BUTTON_IDLE
        self.side_status = BUTTON_IDLE