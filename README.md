# wireview

An interactive wireframe viewer for height maps stored in `.fdf` files.
It opens a 1920×1080 window, draws the map as a shaded wireframe and lets
you move, rotate, zoom and recolour it.

## The map format

A `.fdf` file is a grid of integers separated by spaces, one row per line.
Each number is a height, optionally preceded by a minus sign. A number may
carry a colour after a comma, written as `0x` followed by hexadecimal
digits: `10,0xff0000`. A value without a colour is drawn white. Every row
must hold the same number of values, and the first line must not be empty
or start with whitespace.

```
0 0 0 0
0 5 5 0
0 5,0xff0000 5 0
0 0 0 0
```

## Install

```
pip install .
```

## Run

```
wireview path/to/map.fdf
```

The command takes exactly one argument; with any other number of
arguments it does nothing and exits with status 0. The file name must end
in `.fdf`. A missing, empty or malformed map is reported on standard error
and the program exits with status 1. Closing the window, with Escape or the
window's close button, also ends the program with status 1.

While running, the viewer plays `./sounds/strad_music_minecraft.ogg` in the
background and `./sounds/click.ogg` on menu clicks, both relative to the
current directory, by starting `paplay`. If `paplay` cannot be started the
viewer runs silently. Sounds still playing are stopped when the window
closes.

## Controls

| Input | Effect |
|-------|--------|
| Arrow keys | Move the map by 5 pixels |
| Keypad 7 / 9 | Lower / raise the height scale |
| Keypad 1–6 | Rotate around the three axes |
| Keypad + / − | Zoom in / out by one step (zoom never drops below 1) |
| Keypad * / / | Zoom in / out by 10 % (zoom never drops below 1) |
| Keypad 8 | Cycle the mesh: grid, diagonals, anti-diagonals, both |
| P | Cycle isometric, top and side projections |
| C | Cycle six colour palettes, then back to the map's own colours |
| V / B / N / G | Choose the axis for automatic rotation (G: all three) |
| Space | Start or stop automatic rotation |
| M | Show or hide the menu |
| R | Reset the view and the colours |
| Escape | Quit |

With the left mouse button, drag to move the map; scroll to zoom around the
cursor. While the menu is open these only act outside the menu panel. The
menu shows the file name, a height slider and a zoom slider that can be
dragged, and TOP, ISO and SIDE buttons that switch the projection.

## Using it from Python

```python
from wireview.controls import Viewer
from wireview.mapfile import load_map
from wireview.render import Canvas, render_scene

heightmap = load_map("map.fdf")
viewer = Viewer(heightmap)
canvas = render_scene(Canvas(), heightmap, viewer.colors, viewer.camera, viewer.ground)
# canvas.pixels is a numpy array of packed 0xAARRGGBB values
```

- `wireview.mapfile` — `load_map`, `HeightMap`, `MapError` and the token
  helpers `parse_token`, `parse_value` and `is_valid_token`;
  `most_frequent_height` finds the ground level and `zoom_for` picks a
  starting zoom.
- `wireview.colors` — `gradient`, `palette_color` and `recolor`.
- `wireview.camera` — `Camera`, `Menu`, `Projection` and `RotateAxis`.
- `wireview.projection` — `project` and the rotation helpers.
- `wireview.render` — `Canvas`, `line_pixels`, `draw_line`, `edges` and
  `render_scene`.
- `wireview.controls` — `Viewer`, which applies `Key` presses and mouse
  input to the camera, menu and colours.
- `wireview.app` — `run` and `main`, the window and event loop.

## Limits

The menu is drawn with plain shapes and text rather than images. The
window size is fixed; it cannot be resized.