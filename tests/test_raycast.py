import math

import pytest

from spherecast.colour import Colour
from spherecast.graphics import PixelBuffer
from spherecast.raycast import (
    ALPHA_DEFAULT,
    COORDSYS_X_MIN,
    COORDSYS_Y_MAX,
    LIGHT_SRC_POS,
    PLANE_V,
    ROT_ANGLE_RAD,
    S_COEFF,
    SPHERE_Y_MOVE_STEP,
    SPHERE_Y_NEG_OFFSET,
    SPHERE_Y_POS_OFFSET,
    VIEW_POINT,
    LightSource,
    PixelNotSetError,
    PointInfo,
    Scene,
    Sphere,
    SphereMover,
    default_coordsys,
    default_scene,
    default_sphere,
    raycast_point,
    raycast_sphere_point,
    render_frame,
    rotate_light,
    sphere_crossing,
)
from spherecast.vector import Vector


def test_default_scene_uses_configured_values():
    scene = default_scene()
    assert scene.light_src.pos == LIGHT_SRC_POS
    assert scene.light_src.clr.rgb() == (255, 255, 255)
    assert scene.view_point == VIEW_POINT
    assert scene.plane == PLANE_V


def test_default_sphere_colour_is_clamped():
    sphere = default_sphere()
    assert sphere.colour.rgb() == (255, 0, 210)
    assert sphere.center_pos == Vector(0, 0, 0)


def test_default_coordsys_maps_origin_pixel_to_corner():
    coordsys = default_coordsys(10, 20)
    assert coordsys.x_size == 10
    assert coordsys.y_size == 20
    corner = coordsys.from_screen(Vector(0, 0))
    assert corner.x == pytest.approx(COORDSYS_X_MIN)
    assert corner.y == pytest.approx(COORDSYS_Y_MAX)


def test_sphere_crossing_lies_on_surface():
    sphere = default_sphere()
    cross = sphere_crossing(VIEW_POINT, Vector(0, 0, -1), sphere)
    assert cross is not None
    assert (cross - sphere.center_pos).length() ** 2 == pytest.approx(sphere.rad_sqr)


def test_sphere_crossing_picks_nearer_point():
    sphere = default_sphere()
    cross = sphere_crossing(VIEW_POINT, Vector(0, 0, -1), sphere)
    assert cross is not None
    assert (cross - VIEW_POINT).length() < (sphere.center_pos - VIEW_POINT).length()


def test_sphere_crossing_tangent_line():
    sphere = default_sphere()
    start = Vector(2, 0, 6)
    cross = sphere_crossing(start, Vector(0, 0, -1), sphere)
    assert cross is not None
    assert (cross - sphere.center_pos).length() ** 2 == pytest.approx(sphere.rad_sqr)
    assert cross.x == pytest.approx(start.x)


def test_sphere_crossing_miss():
    assert sphere_crossing(VIEW_POINT, Vector(1, 0, 0), default_sphere()) is None


def test_raycast_point_black_surface_lit_from_behind_is_black():
    scene = Scene(
        light_src=LightSource(pos=Vector(0, 0, -5), clr=Colour(255, 255, 255)),
        view_point=Vector(0, 0, 5),
    )
    info = PointInfo(normal=Vector(0, 0, 1), colour=Colour(), coords=Vector())
    assert raycast_point(scene, info).rgb() == (0, 0, 0)


def test_raycast_point_specular_highlight():
    scene = Scene(
        light_src=LightSource(pos=Vector(0, 0, 5), clr=Colour(255, 255, 255)),
        view_point=Vector(0, 0, 5),
    )
    info = PointInfo(normal=Vector(0, 0, 1), colour=Colour(), coords=Vector())
    result = raycast_point(scene, info)
    expected = S_COEFF * scene.light_src.clr
    assert result.r == pytest.approx(expected.r)
    assert result.g == pytest.approx(expected.g)
    assert result.b == pytest.approx(expected.b)


def test_raycast_point_brighter_when_facing_light():
    light = LightSource(pos=Vector(0, 0, 5), clr=Colour(100, 100, 100))
    scene = Scene(light_src=light, view_point=Vector(5, 0, 0))
    surface = Colour(1, 1, 1)
    facing = raycast_point(scene, PointInfo(Vector(0, 0, 1), surface, Vector()))
    away = raycast_point(scene, PointInfo(Vector(0, 0, -1), surface, Vector()))
    assert facing.r > away.r


def test_raycast_sphere_point_miss_is_black():
    scene = default_scene()
    cur = scene.view_point + scene.plane + Vector(-4, 4)
    assert raycast_sphere_point(scene, cur, default_sphere()).rgb() == (0, 0, 0)


def test_raycast_sphere_point_centre_is_lit():
    scene = default_scene()
    cur = scene.view_point + scene.plane
    colour = raycast_sphere_point(scene, cur, default_sphere())
    assert colour.r > 0


def test_rotate_light_preserves_height_radius_and_colour():
    light = LightSource(pos=LIGHT_SRC_POS, clr=Colour(10, 20, 30))
    rotated = rotate_light(light)
    assert rotated.pos.y == light.pos.y
    assert rotated.clr == light.clr
    assert math.hypot(rotated.pos.x, rotated.pos.z) == pytest.approx(
        math.hypot(light.pos.x, light.pos.z)
    )
    assert rotated.pos != light.pos


def test_rotate_light_full_turn_returns_to_start():
    light = LightSource(pos=LIGHT_SRC_POS)
    for _ in range(round(2 * math.pi / ROT_ANGLE_RAD)):
        light = rotate_light(light)
    assert light.pos.x == pytest.approx(LIGHT_SRC_POS.x, abs=1e-9)
    assert light.pos.z == pytest.approx(LIGHT_SRC_POS.z, abs=1e-9)


def test_sphere_mover_first_step_goes_up():
    mover = SphereMover()
    moved = mover.step(default_sphere())
    assert moved.center_pos.y == pytest.approx(SPHERE_Y_MOVE_STEP)
    assert moved.rad_sqr == default_sphere().rad_sqr


def test_sphere_mover_stays_in_range_and_turns():
    mover = SphereMover()
    sphere = default_sphere()
    heights = []
    for _ in range(300):
        sphere = mover.step(sphere)
        heights.append(sphere.center_pos.y)
    assert max(heights) <= SPHERE_Y_POS_OFFSET + SPHERE_Y_MOVE_STEP + 1e-9
    assert min(heights) >= SPHERE_Y_NEG_OFFSET - SPHERE_Y_MOVE_STEP - 1e-9
    assert max(heights) > SPHERE_Y_POS_OFFSET
    assert min(heights) < SPHERE_Y_NEG_OFFSET


def test_render_frame_fills_buffer():
    buffer = PixelBuffer(8, 8)
    render_frame(default_scene(), default_sphere(), default_coordsys(8, 8), buffer)
    corner = buffer.get_pixel(0, 0)
    centre = buffer.get_pixel(4, 4)
    assert corner == (0, 0, 0, ALPHA_DEFAULT)
    assert centre[3] == ALPHA_DEFAULT
    assert centre[:3] != (0, 0, 0)


def test_render_frame_raises_when_buffer_too_small():
    buffer = PixelBuffer(4, 4)
    with pytest.raises(PixelNotSetError):
        render_frame(default_scene(), default_sphere(), default_coordsys(8, 8), buffer)


def test_sphere_dataclass_defaults():
    sphere = Sphere()
    assert sphere.rad_sqr == 0.0
    assert sphere.colour.rgb() == (0, 0, 0)