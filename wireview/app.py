"""Window, event loop and command-line entry point of the viewer."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402

from wireview.camera import (  # noqa: E402
    BUTTON_IDLE,
    BUTTON_PRESSED,
    HEIGHT_SLIDER_Y,
    ISO_BUTTON,
    MENU_AREA,
    SIDE_BUTTON,
    SLIDER_SIZE,
    TOP_BUTTON,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    ZOOM_SLIDER_Y,
    Menu,
)
from wireview.controls import LEFT_BUTTON, WHEEL_DOWN, WHEEL_UP, Key, Viewer  # noqa: E402
from wireview.mapfile import MapError, load_map  # noqa: E402
from wireview.render import Canvas, render_scene  # noqa: E402

CLICK_SOUND = "./sounds/click.ogg"
MUSIC = "./sounds/strad_music_minecraft.ogg"
SOUND_PLAYER = "paplay"
MIN_WINDOW_WIDTH = 600
MIN_WINDOW_HEIGHT = 1080
FPS = 60
# Closing the window ends the program with a failure status.
CLOSE_STATUS = 1

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_v: Key.V,
    pygame.K_b: Key.B,
    pygame.K_n: Key.N,
    pygame.K_g: Key.G,
    pygame.K_UP: Key.ARROW_UP,
    pygame.K_DOWN: Key.ARROW_DOWN,
    pygame.K_LEFT: Key.ARROW_LEFT,
    pygame.K_RIGHT: Key.ARROW_RIGHT,
    pygame.K_KP1: Key.KEYPAD_1,
    pygame.K_KP2: Key.KEYPAD_2,
    pygame.K_KP3: Key.KEYPAD_3,
    pygame.K_KP4: Key.KEYPAD_4,
    pygame.K_KP5: Key.KEYPAD_5,
    pygame.K_KP6: Key.KEYPAD_6,
    pygame.K_KP7: Key.KEYPAD_7,
    pygame.K_KP8: Key.KEYPAD_8,
    pygame.K_KP9: Key.KEYPAD_9,
    pygame.K_KP_DIVIDE: Key.KEYPAD_DIV,
    pygame.K_KP_MULTIPLY: Key.KEYPAD_MULT,
    pygame.K_KP_PLUS: Key.KEYPAD_PLUS,
    pygame.K_KP_MINUS: Key.KEYPAD_MINUS,
    pygame.K_m: Key.M,
    pygame.K_c: Key.C,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_p: Key.P,
    pygame.K_r: Key.R,
}

_PANEL_COLOR = (40, 40, 48)
_SLIDER_ON = (120, 220, 120)
_SLIDER_OFF = (200, 200, 200)
_BUTTON_COLORS = {
    BUTTON_IDLE: (90, 90, 110),
    1: (140, 140, 170),
    BUTTON_PRESSED: (60, 160, 60),
}
_TEXT_COLOR = (255, 255, 255)


def play_sound(path: str) -> Optional[subprocess.Popen]:
    """Play a sound file in the background; None if no player is available."""
    try:
        return subprocess.Popen(
            [SOUND_PLAYER, path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return None


def translate_key(pygame_key: int) -> Optional[Key]:
    """Viewer key for a pygame key code, or None if the viewer ignores it."""
    return _KEYS.get(pygame_key)


def _check_window_size(width: int, height: int) -> None:
    if height < MIN_WINDOW_HEIGHT or width < MIN_WINDOW_WIDTH:
        raise MapError(
            "Resize the window please: minimum height -> 1080, minimum width -> 600"
        )


def _to_surface(canvas: Canvas) -> pygame.Surface:
    p = canvas.pixels
    rgb = np.dstack(((p >> 16) & 0xFF, (p >> 8) & 0xFF, p & 0xFF)).astype(np.uint8)
    return pygame.surfarray.make_surface(rgb.swapaxes(0, 1))


def _region_rect(region: tuple[int, int, int, int]) -> pygame.Rect:
    x_min, x_max, y_min, y_max = region
    return pygame.Rect(x_min, y_min, x_max - x_min + 1, y_max - y_min + 1)


def _draw_menu(screen: pygame.Surface, font: pygame.font.Font, menu: Menu, name: str) -> None:
    pygame.draw.rect(screen, _PANEL_COLOR, _region_rect(MENU_AREA), border_radius=12)
    screen.blit(font.render(f"File : {name}", True, _TEXT_COLOR), (170, 135))
    sliders = (
        (menu.height_slider_x, HEIGHT_SLIDER_Y, menu.height_slider_active, "Height"),
        (menu.zoom_slider_x, ZOOM_SLIDER_Y, menu.zoom_slider_active, "Zoom"),
    )
    for x, y, active, label in sliders:
        screen.blit(font.render(label, True, _TEXT_COLOR), (75, y - 22))
        pygame.draw.line(screen, _SLIDER_OFF, (75, y + SLIDER_SIZE // 2), (450, y + SLIDER_SIZE // 2), 2)
        color = _SLIDER_ON if active else _SLIDER_OFF
        pygame.draw.rect(screen, color, pygame.Rect(x, y, SLIDER_SIZE, SLIDER_SIZE))
    buttons = (
        (TOP_BUTTON, menu.top_status, "TOP"),
        (ISO_BUTTON, menu.iso_status, "ISO"),
        (SIDE_BUTTON, menu.side_status, "SIDE"),
    )
    for region, status, label in buttons:
        rect = _region_rect(region)
        pygame.draw.rect(screen, _BUTTON_COLORS.get(status, _BUTTON_COLORS[BUTTON_IDLE]), rect)
        text = font.render(label, True, _TEXT_COLOR)
        screen.blit(text, text.get_rect(center=rect.center))


def run(path: str | Path) -> int:
    """Open a map in a window and run until it is closed; returns the exit status."""
    _check_window_size(WINDOW_WIDTH, WINDOW_HEIGHT)
    heightmap = load_map(path)
    sounds: list[subprocess.Popen] = []

    def click() -> None:
        process = play_sound(CLICK_SOUND)
        if process is not None:
            sounds.append(process)

    viewer = Viewer(heightmap, on_click=click)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(heightmap.name)
        font = pygame.font.Font(None, 22)
        canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
        clock = pygame.time.Clock()
        music = play_sound(MUSIC)
        if music is not None:
            sounds.append(music)

        while viewer.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    viewer.close()
                elif event.type == pygame.KEYDOWN:
                    key = translate_key(event.key)
                    if key is not None:
                        viewer.key_pressed(key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3):
                    viewer.mouse_pressed(event.button, *event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button in (1, 2, 3):
                    viewer.mouse_released(event.button)
                elif event.type == pygame.MOUSEWHEEL and event.y:
                    x, y = pygame.mouse.get_pos()
                    viewer.mouse_wheel(WHEEL_UP if event.y > 0 else WHEEL_DOWN, x, y)
            if not viewer.running:
                break
            viewer.mouse_moved(*pygame.mouse.get_pos())
            render_scene(canvas, heightmap, viewer.colors, viewer.camera, viewer.ground)
            screen.blit(_to_surface(canvas), (0, 0))
            if viewer.camera.menu:
                _draw_menu(screen, font, viewer.menu, heightmap.name)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        for process in sounds:
            if process.poll() is None:
                process.terminate()
        pygame.quit()
    return CLOSE_STATUS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: view the single map file given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        return run(args[0])
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 1


if __name__ == "__main__":
    sys.exit(main())