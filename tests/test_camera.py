import pytest

from wireview.camera import (
    BUTTON_HOVER,
    BUTTON_IDLE,
    ISO_BUTTON,
    MENU_SHIFT,
    ROTATION_STEP,
    RESET_ANGLE,
    SIDE_BUTTON,
    SLIDER_MAX,
    SLIDER_MIN,
    TOP_BUTTON,
    Camera,
    Menu,
    Projection,
    RotateAxis,
)


def test_reset_uses_window_size_and_zoom():
    cam = Camera(zoom=15, window_width=1000, window_height=800)
    assert cam.offset_x == 1000 // 2 + MENU_SHIFT
    assert cam.offset_y == 800 // 2
    assert cam.zoom == 15
    assert cam.projection is Projection.ISOMETRIC
    assert cam.menu is True
    assert cam.mesh == 0
    assert cam.rotating is False


def test_reset_restores_after_changes():
    cam = Camera(zoom=10)
    fresh = Camera(zoom=10)
    cam.translate(30, -20)
    cam.rotate(0.5, 0.2, 0.1)
    cam.change_height(3)
    cam.cycle_mesh()
    cam.toggle_menu()
    cam.reset(10)
    assert cam == fresh


def test_translate_round_trip():
    cam = Camera()
    x, y = cam.offset_x, cam.offset_y
    cam.translate(5, -5)
    cam.translate(-5, 5)
    assert (cam.offset_x, cam.offset_y) == (x, y)


def test_cycle_projection_order_and_angles():
    cam = Camera()
    cam.rotate(1, 1, 1)
    seen = []
    for _ in range(3):
        cam.cycle_projection()
        seen.append(cam.projection)
    assert seen == [Projection.TOP, Projection.SIDE, Projection.ISOMETRIC]
    assert cam.alpha == cam.beta == cam.gamma == RESET_ANGLE


def test_set_projection():
    cam = Camera()
    cam.rotate(0.3, 0.3, 0.3)
    cam.set_projection(Projection.SIDE)
    assert cam.projection is Projection.SIDE
    assert cam.gamma == RESET_ANGLE


def test_tick_rotation_off_does_nothing():
    cam = Camera()
    cam.tick_rotation()
    assert (cam.alpha, cam.beta, cam.gamma) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "axis, expected",
    [
        (RotateAxis.GAMMA, (0.0, 0.0, ROTATION_STEP)),
        (RotateAxis.BETA, (0.0, ROTATION_STEP, 0.0)),
        (RotateAxis.ALPHA, (ROTATION_STEP, 0.0, 0.0)),
        (RotateAxis.ALL, (ROTATION_STEP, ROTATION_STEP, ROTATION_STEP)),
    ],
)
def test_tick_rotation_axes(axis, expected):
    cam = Camera()
    cam.set_rotate_mode(axis)
    cam.toggle_rotation()
    cam.tick_rotation()
    assert (cam.alpha, cam.beta, cam.gamma) == pytest.approx(expected)


def test_toggle_rotation_twice():
    cam = Camera()
    cam.toggle_rotation()
    cam.toggle_rotation()
    assert cam.rotating is False


def test_zoom_never_below_one():
    cam = Camera(zoom=2)
    cam.add_zoom(-10)
    assert cam.zoom == 1
    cam.scale_zoom(1 / 1.1)
    assert cam.zoom == 1


def test_zoom_scale_round_trip():
    cam = Camera(zoom=20)
    cam.scale_zoom(1.1)
    cam.scale_zoom(1 / 1.1)
    assert cam.zoom == pytest.approx(20)


def test_cycle_mesh_wraps():
    cam = Camera()
    states = []
    for _ in range(4):
        cam.cycle_mesh()
        states.append(cam.mesh)
    assert states == [1, 2, 3, 0]


def test_sync_sliders_clamped():
    cam = Camera(zoom=1000)
    cam.change_height(-1000)
    menu = Menu()
    menu.sync_sliders(cam)
    assert menu.height_slider_x == SLIDER_MIN
    assert menu.zoom_slider_x == SLIDER_MAX


def test_drag_height_slider_clamps_and_sets_height():
    cam = Camera()
    menu = Menu()
    menu.drag_height_slider(cam, 10_000)
    assert menu.height_slider_x == SLIDER_MAX
    menu.drag_height_slider(cam, -10_000)
    assert menu.height_slider_x == SLIDER_MIN
    low = cam.height
    menu.drag_height_slider(cam, 50)
    assert cam.height > low


def test_drag_zoom_slider_at_minimum():
    cam = Camera(zoom=30)
    menu = Menu(zoom_slider_x=200)
    menu.drag_zoom_slider(cam, -10_000)
    assert menu.zoom_slider_x == SLIDER_MIN
    assert cam.zoom == pytest.approx(2.0)


@pytest.mark.parametrize(
    "region, attr",
    [(TOP_BUTTON, "top_status"), (ISO_BUTTON, "iso_status"), (SIDE_BUTTON, "side_status")],
)
def test_hover_buttons(region, attr):
    menu = Menu()
    menu.hover(region[0], region[2])
    assert getattr(menu, attr) == BUTTON_HOVER
    menu.hover(0, 0)
    assert getattr(menu, attr) == BUTTON_IDLE


def test_release_clears_state():
    menu = Menu(dragging_height=True, dragging_zoom=True, height_slider_active=True, top_status=2)
    menu.release()
    assert not menu.dragging_height and not menu.dragging_zoom
    assert not menu.height_slider_active
    assert menu.top_status == BUTTON_IDLE