"""Keyboard and mouse handling for the viewer."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from wireview.camera import (
    BUTTON_PRESSED,
    HEIGHT_SLIDER_Y,
    ISO_BUTTON,
    MENU_AREA,
    SIDE_BUTTON,
    SLIDER_SIZE,
    TOP_BUTTON,
    ZOOM_SLIDER_Y,
    Camera,
    Menu,
    Projection,
    RotateAxis,
)
from wireview.colors import PALETTE_COUNT, recolor
from wireview.mapfile import HeightMap, most_frequent_height, zoom_for

LEFT_BUTTON = 1
WHEEL_UP = 1
WHEEL_DOWN = 2
TRANSLATE_STEP = 5
ZOOM_FACTOR = 1.1


class Key(Enum):
    """Keys the viewer reacts to."""

    ESCAPE = auto()
    V = auto()
    B = auto()
    N = auto()
    G = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    KEYPAD_1 = auto()
    KEYPAD_2 = auto()
    KEYPAD_3 = auto()
    KEYPAD_4 = auto()
    KEYPAD_5 = auto()
    KEYPAD_6 = auto()
    KEYPAD_7 = auto()
    KEYPAD_8 = auto()
    KEYPAD_9 = auto()
    KEYPAD_DIV = auto()
    KEYPAD_MULT = auto()
    KEYPAD_PLUS = auto()
    KEYPAD_MINUS = auto()
    M = auto()
    C = auto()
    SPACE = auto()
    P = auto()
    R = auto()


_ROTATE_MODES = {
    Key.V: RotateAxis.GAMMA,
    Key.B: RotateAxis.BETA,
    Key.N: RotateAxis.ALPHA,
    Key.G: RotateAxis.ALL,
}

_TRANSLATIONS = {
    Key.ARROW_DOWN: (0, TRANSLATE_STEP),
    Key.ARROW_UP: (0, -TRANSLATE_STEP),
    Key.ARROW_LEFT: (-TRANSLATE_STEP, 0),
    Key.ARROW_RIGHT: (TRANSLATE_STEP, 0),
}

_STEP = 0.01
# (dalpha, dbeta, dgamma)
_ROTATIONS = {
    Key.KEYPAD_1: (0, 0, _STEP),
    Key.KEYPAD_2: (_STEP, 0, 0),
    Key.KEYPAD_3: (0, 0, -_STEP),
    Key.KEYPAD_4: (0, _STEP, 0),
    Key.KEYPAD_5: (-_STEP, 0, 0),
    Key.KEYPAD_6: (0, -_STEP, 0),
}

_HEIGHTS = {Key.KEYPAD_7: -1, Key.KEYPAD_9: 1}

_VIEW_BUTTONS = (
    (TOP_BUTTON, Projection.TOP, "top_status"),
    (ISO_BUTTON, Projection.ISOMETRIC, "iso_status"),
    (SIDE_BUTTON, Projection.SIDE, "side_status"),
)


def _inside(region: tuple[int, int, int, int], x: float, y: float) -> bool:
    x_min, x_max, y_min, y_max = region
    return x_min <= x <= x_max and y_min <= y <= y_max


class Viewer:
    """Interactive state of one opened map and its reactions to input."""

    def __init__(
        self,
        heightmap: HeightMap,
        on_click: Optional[Callable[[], None]] = None,
    ) -> None:
        self.heightmap = heightmap
        self.on_click = on_click
        self.ground = most_frequent_height(heightmap.heights)
        self.camera = Camera(zoom=zoom_for(heightmap.rows, heightmap.cols))
        self.menu = Menu()
        self.palette = 0
        self.colors = np.array(heightmap.colors, copy=True)
        self.running = True
        self.mouse_x = 0
        self.mouse_y = 0
        self.dragging = False
        self._place_sliders()

    def _place_sliders(self) -> None:
        self.menu.height_slider_x = int(5 * (self.camera.height + 47))
        self.menu.zoom_slider_x = int(5 * (self.camera.zoom + 13))

    def _click(self) -> None:
        if self.on_click is not None:
            self.on_click()

    def close(self) -> None:
        """Stop the viewer."""
        self._click()
        self.running = False

    def key_pressed(self, key: Key) -> None:
        """React to one key press."""
        camera = self.camera
        if key is Key.ESCAPE:
            self.close()
        elif key in _ROTATE_MODES:
            camera.set_rotate_mode(_ROTATE_MODES[key])
        elif key in _TRANSLATIONS:
            camera.translate(*_TRANSLATIONS[key])
        elif key in _HEIGHTS:
            camera.change_height(_HEIGHTS[key])
            self.menu.sync_sliders(camera)
        elif key in _ROTATIONS:
            camera.rotate(*_ROTATIONS[key])
        elif key is Key.KEYPAD_DIV:
            camera.scale_zoom(1 / ZOOM_FACTOR)
            self.menu.sync_sliders(camera)
        elif key is Key.KEYPAD_MULT:
            camera.scale_zoom(ZOOM_FACTOR)
            self.menu.sync_sliders(camera)
        elif key is Key.KEYPAD_PLUS:
            camera.add_zoom(1)
            self.menu.sync_sliders(camera)
        elif key is Key.KEYPAD_MINUS:
            camera.add_zoom(-1)
            self.menu.sync_sliders(camera)
        elif key is Key.M:
            self.menu.sync_sliders(camera)
            camera.toggle_menu()
        elif key is Key.C:
            self.cycle_palette()
        elif key is Key.KEYPAD_8:
            camera.cycle_mesh()
        elif key is Key.SPACE:
            camera.toggle_rotation()
        elif key is Key.P:
            camera.cycle_projection()
        elif key is Key.R:
            self.reset()

    def _outside_menu(self, x: float, y: float) -> bool:
        return not self.camera.menu or not _inside(MENU_AREA, x, y)

    def mouse_pressed(self, button: int, x: int, y: int) -> None:
        """React to a mouse button going down at (x, y)."""
        menu = self.menu
        if self._outside_menu(x, y) and button == LEFT_BUTTON:
            self.mouse_x, self.mouse_y = x, y
            self.dragging = True
        if not self.camera.menu:
            return
        height_slider = (
            menu.height_slider_x,
            menu.height_slider_x + SLIDER_SIZE,
            HEIGHT_SLIDER_Y,
            HEIGHT_SLIDER_Y + SLIDER_SIZE,
        )
        if _inside(height_slider, x, y):
            if button == LEFT_BUTTON:
                self.mouse_x, self.mouse_y = x, y
                if not menu.dragging_height:
                    menu.dragging_height = True
                    menu.height_slider_active = True
            self._click()
        zoom_slider = (
            menu.zoom_slider_x,
            menu.zoom_slider_x + SLIDER_SIZE,
            ZOOM_SLIDER_Y,
            ZOOM_SLIDER_Y + SLIDER_SIZE,
        )
        if _inside(zoom_slider, x, y):
            if button == LEFT_BUTTON:
                self.mouse_x, self.mouse_y = x, y
                if not menu.dragging_zoom:
                    menu.dragging_zoom = True
                    menu.zoom_slider_active = True
            self._click()
        for region, projection, status in _VIEW_BUTTONS:
            if _inside(region, x, y):
                if button == LEFT_BUTTON:
                    if self.camera.projection != projection:
                        setattr(menu, status, BUTTON_PRESSED)
                    self.camera.set_projection(projection)
                self._click()

    def mouse_released(self, button: int) -> None:
        """React to a mouse button going up."""
        if button == LEFT_BUTTON:
            self.dragging = False
            self.menu.release()

    def mouse_moved(self, x: int, y: int) -> None:
        """Per-frame update with the current cursor position."""
        camera = self.camera
        if self.dragging:
            camera.offset_y -= self.mouse_y - y
            camera.offset_x += x - self.mouse_x
        if self.menu.dragging_height:
            self.menu.drag_height_slider(camera, x - self.mouse_x)
        if self.menu.dragging_zoom:
            self.menu.drag_zoom_slider(camera, x - self.mouse_x)
        if camera.menu:
            self.menu.hover(x, y)
        self.mouse_x, self.mouse_y = x, y
        camera.tick_rotation()

    def mouse_wheel(self, direction: int, x: int, y: int) -> None:
        """Zoom around the cursor; 1 zooms in, 2 zooms out."""
        camera = self.camera
        if self._outside_menu(x, y):
            if direction == WHEEL_UP:
                camera.zoom *= ZOOM_FACTOR
                camera.offset_x = x - (x - camera.offset_x) * ZOOM_FACTOR
                camera.offset_y = y - (y - camera.offset_y) * ZOOM_FACTOR
            if direction == WHEEL_DOWN and camera.zoom >= 1:
                camera.zoom /= ZOOM_FACTOR
                camera.offset_x = x - (x - camera.offset_x) / ZOOM_FACTOR
                camera.offset_y = y - (y - camera.offset_y) / ZOOM_FACTOR
        self.menu.sync_sliders(camera)

    def cycle_palette(self) -> None:
        """Step to the next palette, wrapping back to the map's own colours."""
        if self.palette == PALETTE_COUNT:
            self.palette = 0
            self.colors = np.array(self.heightmap.colors, copy=True)
        else:
            self.palette += 1
            self.colors = recolor(
                self.heightmap.heights,
                self.palette,
                self.ground,
                self.camera.height < 0,
            )

    def reset(self) -> None:
        """Restore the initial camera, mouse state and colours."""
        self.camera.reset(zoom_for(self.heightmap.rows, self.heightmap.cols))
        self.mouse_x = 0
        self.mouse_y = 0
        self.dragging = False
        if self.palette != 0:
            self.palette = 0
            self.colors = np.array(self.heightmap.colors, copy=True)
        self._place_sliders()