"""Ray casting of a lit sphere: scene description, lighting model and frame rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Protocol

from spherecast.colour import Colour
from spherecast.coordsys import CoordSystem
from spherecast.quadratic import RootCase, solve_equation
from spherecast.vector import Vector

SPECULAR_POWER = 25
D_COEFF = 0.7
A_COEFF = 0.1
S_COEFF = 0.7

ALPHA_DEFAULT = 255

SPHERE_CENTER_POS = Vector(0, 0, 0)
SPHERE_COLOUR = Colour(304, 0, 210)
SPHERE_RAD_SQR = 4.0
SPHERE_Y_MOVE_STEP = 0.05
SPHERE_Y_POS_OFFSET = +1.5
SPHERE_Y_NEG_OFFSET = -1.5

ROT_ANGLE_RAD = 3 * math.pi / 180
ROT_ANGLE_SIN = math.sin(ROT_ANGLE_RAD)
ROT_ANGLE_COS = math.cos(ROT_ANGLE_RAD)

LIGHT_SRC_POS = Vector(3, 5, 3)
LIGHT_SRC_CLR = Colour(255, 255, 255)

VIEW_POINT = Vector(0, 0, +6)
PLANE_V = Vector(0, 0, -4)

COORDSYS_X_MAX = +4
COORDSYS_X_MIN = -4
COORDSYS_Y_MAX = +4
COORDSYS_Y_MIN = -4
COORDSYS_X_POS = 0
COORDSYS_Y_POS = 0

WINDOW_X_SIZE = 800
WINDOW_Y_SIZE = 800


class PixelNotSetError(IndexError):
    """A pixel could not be stored because it lies outside the target."""


class _PixelTarget(Protocol):
    def set_pixel(self, x: float, y: float, colour: Colour, alpha: int = ...) -> bool: ...


@dataclass(frozen=True)
class LightSource:
    """A point light with a colour."""

    pos: Vector = field(default_factory=Vector)
    clr: Colour = field(default_factory=Colour)


@dataclass(frozen=True)
class Scene:
    """Light, the eye position and the vector from the eye to the picture plane."""

    light_src: LightSource = field(default_factory=LightSource)
    view_point: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)


@dataclass(frozen=True)
class Sphere:
    """A coloured sphere given by its centre and squared radius."""

    center_pos: Vector = field(default_factory=Vector)
    colour: Colour = field(default_factory=Colour)
    rad_sqr: float = 0.0


@dataclass(frozen=True)
class PointInfo:
    """A surface point with its unit normal and colour."""

    normal: Vector = field(default_factory=Vector)
    colour: Colour = field(default_factory=Colour)
    coords: Vector = field(default_factory=Vector)


@dataclass
class SphereMover:
    """Moves a sphere up and down between the configured offsets."""

    direction: int = +1
    step_size: float = SPHERE_Y_MOVE_STEP
    upper: float = SPHERE_Y_POS_OFFSET
    lower: float = SPHERE_Y_NEG_OFFSET

    def step(self, sphere: Sphere) -> Sphere:
        """Return the sphere moved one step along y, turning at the offsets."""
        y = sphere.center_pos.y + self.direction * self.step_size
        if y > self.upper:
            self.direction = -1
        if y < self.lower:
            self.direction = +1
        center = sphere.center_pos
        return replace(sphere, center_pos=Vector(center.x, y, center.z))


def default_scene() -> Scene:
    """The scene used by the demo: white light, eye on the z axis."""
    return Scene(
        light_src=LightSource(pos=LIGHT_SRC_POS, clr=LIGHT_SRC_CLR),
        view_point=VIEW_POINT,
        plane=PLANE_V,
    )


def default_sphere() -> Sphere:
    """The sphere used by the demo."""
    return Sphere(center_pos=SPHERE_CENTER_POS, colour=SPHERE_COLOUR, rad_sqr=SPHERE_RAD_SQR)


def default_coordsys(x_size: int = WINDOW_X_SIZE, y_size: int = WINDOW_Y_SIZE) -> CoordSystem:
    """The world-to-screen mapping used by the demo for a screen of the given size."""
    return CoordSystem(
        x_max=COORDSYS_X_MAX,
        x_min=COORDSYS_X_MIN,
        y_max=COORDSYS_Y_MAX,
        y_min=COORDSYS_Y_MIN,
        x_size=x_size,
        y_size=y_size,
        x_pos=COORDSYS_X_POS,
        y_pos=COORDSYS_Y_POS,
    )


def raycast_point(scene: Scene, point_info: PointInfo) -> Colour:
    """Colour of a surface point: ambient, diffuse and specular (Phong) terms."""
    light = scene.light_src
    surface = light.clr % point_info.colour

    result = Colour()
    result += A_COEFF * surface

    to_light = (light.pos - point_info.coords).normalized()
    cos_fi = to_light @ point_info.normal

    if cos_fi >= 0:
        result += (cos_fi * D_COEFF) * surface

    reflected = 2 * cos_fi * point_info.normal - to_light
    to_view = scene.view_point - point_info.coords

    denominator = reflected.length() * to_view.length()
    cos_alpha = (reflected @ to_view) / denominator if denominator else 0.0
    if cos_alpha < 0:
        cos_alpha = 0.0

    result += cos_alpha**SPECULAR_POWER * S_COEFF * light.clr
    return result


def sphere_crossing(view_point: Vector, direction: Vector, sphere: Sphere) -> Vector | None:
    """Nearest point where the line through ``view_point`` along unit ``direction`` meets the sphere."""
    w = view_point - sphere.center_pos
    w_len = w.length()

    solution = solve_equation(1.0, 2 * (direction @ w), w_len * w_len - sphere.rad_sqr)

    if solution.case is RootCase.ONE_ROOT:
        t = solution.root1
    elif solution.case is RootCase.TWO_ROOTS:
        t = min(solution.root1, solution.root2)
    else:
        return None

    return view_point + t * direction


def raycast_sphere_point(scene: Scene, cur_point: Vector, sphere: Sphere) -> Colour:
    """Colour seen through ``cur_point`` on the picture plane; black when the sphere is missed."""
    straight = (cur_point - scene.view_point).normalized()

    cross_point = sphere_crossing(scene.view_point, straight, sphere)
    if cross_point is None:
        return Colour()

    # The sphere must lie beyond the picture plane, not between it and the eye.
    if (cross_point - scene.view_point).length() < (cur_point - scene.view_point).length():
        return Colour()

    normal = (cross_point - sphere.center_pos).normalized()
    return raycast_point(
        scene, PointInfo(normal=normal, colour=sphere.colour, coords=cross_point)
    )


def rotate_light(light: LightSource) -> LightSource:
    """The light turned by the rotation step around the y axis."""
    pos = light.pos
    rotated = Vector(pos.x, pos.z).rotated_2d_sincos(ROT_ANGLE_SIN, ROT_ANGLE_COS)
    return replace(light, pos=Vector(rotated.x, pos.y, rotated.y))


def render_frame(
    scene: Scene, sphere: Sphere, coordsys: CoordSystem, buffer: _PixelTarget
) -> None:
    """Cast a ray for every screen pixel of ``coordsys`` and store the colours in ``buffer``."""
    for y_pos in range(coordsys.y_size):
        for x_pos in range(coordsys.x_size):
            screen_point = Vector(float(x_pos), float(y_pos))
            world_point = coordsys.from_screen(screen_point)
            cur_point = scene.view_point + scene.plane + world_point

            colour = raycast_sphere_point(scene, cur_point, sphere)

            if not buffer.set_pixel(screen_point.x, screen_point.y, colour, ALPHA_DEFAULT):
                raise PixelNotSetError(f"pixel ({x_pos}, {y_pos}) is not set")