"""Window, pixel buffer and drawing of axes and vectors on screen."""

from __future__ import annotations

import enum
import math
import os
import sys
from dataclasses import dataclass
from typing import Iterator

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from spherecast.colour import Colour  # noqa: E402
from spherecast.coordsys import CoordSystem  # noqa: E402
from spherecast.vector import PosedVector, Vector  # noqa: E402

FONT_FILENAME = "fonts/doom_dont.ttf"
TEXT_SIZE = 25
DIV_NUMBER_SIZE = 10
DEFAULT_ALPHA = 255

VECTOR_POINTER_SCALE = 0.1
AXIS_DIV_HALF_LENGTH = 0.1

_SIN_45_DEGREE = math.sin(45 * math.pi / 180)

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)


class MouseButton(enum.Enum):
    """Mouse buttons that can be queried."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class EventType(enum.Enum):
    """Window events that are reported."""

    CLOSED = enum.auto()
    RESIZED = enum.auto()


class PixelBuffer:
    """An RGBA pixel array of a fixed size, four bytes per pixel, row by row."""

    def __init__(self, x_size: int, y_size: int) -> None:
        if x_size < 0 or y_size < 0:
            raise ValueError("pixel buffer size must not be negative")
        self.x_size = x_size
        self.y_size = y_size
        self._pixels = bytearray(x_size * y_size * 4)

    def _offset(self, x: float, y: float) -> int | None:
        x_pos, y_pos = int(x), int(y)
        if 0 <= x_pos < self.x_size and 0 <= y_pos < self.y_size:
            return (y_pos * self.x_size + x_pos) * 4
        return None

    def set_pixel(
        self, x: float, y: float, colour: Colour, alpha: int = DEFAULT_ALPHA
    ) -> bool:
        """Store a pixel; return False when the position lies outside the buffer."""
        offset = self._offset(x, y)
        if offset is None:
            return False
        r, g, b = colour.rgb()
        self._pixels[offset:offset + 4] = bytes((r, g, b, alpha & 0xFF))
        return True

    def get_pixel(self, x: float, y: float) -> tuple[int, int, int, int]:
        """The RGBA value at a position."""
        offset = self._offset(x, y)
        if offset is None:
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        r, g, b, a = self._pixels[offset:offset + 4]
        return r, g, b, a

    def to_bytes(self) -> bytes:
        """The whole buffer as RGBA bytes."""
        return bytes(self._pixels)


@dataclass(frozen=True)
class AxisDivision:
    """One tick mark on an axis with the number written next to it."""

    tick: PosedVector
    value: int
    label_point: Vector

    @property
    def labelled(self) -> bool:
        """Whether the number is drawn; zero is left unlabelled."""
        return self.value != 0


def arrow_head(posed: PosedVector) -> tuple[PosedVector, PosedVector]:
    """The two short strokes forming the arrow head at the end of ``posed``."""
    head = PosedVector(posed.end(), posed.vector.orthogonal_2d())
    head = head.rotated_2d_sincos(-_SIN_45_DEGREE, -_SIN_45_DEGREE)
    head = head.normalized().scaled(VECTOR_POINTER_SCALE)
    return head, head.rotated_2d_sincos(1, 0)


def _axes(coordsys: CoordSystem) -> tuple[tuple[PosedVector, int], tuple[PosedVector, int]]:
    x_axis = PosedVector(
        Vector(float(coordsys.x_min), 0.0),
        Vector(float(coordsys.x_max - coordsys.x_min), 0.0),
    )
    y_axis = PosedVector(
        Vector(0.0, float(coordsys.y_min)),
        Vector(0.0, float(coordsys.y_max - coordsys.y_min)),
    )
    return (x_axis, coordsys.x_min), (y_axis, coordsys.y_min)


def _axis_divisions(axis: PosedVector, axis_min: int) -> Iterator[AxisDivision]:
    ort = axis.vector.orthogonal_2d().normalized() * AXIS_DIV_HALF_LENGTH
    rad = axis.point - ort
    tick_vector = ort * 2
    tau = axis.vector.normalized()
    num_point = rad + ort

    length = axis.length()
    count = 0
    value = axis_min
    while count < length:
        yield AxisDivision(PosedVector(rad, tick_vector), value, num_point)
        rad = rad + tau
        num_point = num_point + tau
        count += 1
        value += 1


def axis_divisions(coordsys: CoordSystem) -> list[AxisDivision]:
    """Tick marks of the x axis followed by those of the y axis."""
    return [
        division
        for axis, axis_min in _axes(coordsys)
        for division in _axis_divisions(axis, axis_min)
    ]


class Window:
    """A drawing window with a white background."""

    def __init__(self, x_size: int, y_size: int, title: str = "window") -> None:
        pygame.init()
        self._surface = pygame.display.set_mode((x_size, y_size), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self._open = True
        self._font: pygame.font.Font | None = None

    def is_open(self) -> bool:
        """Whether the window has not been closed."""
        return self._open

    def poll_events(self) -> Iterator[EventType]:
        """Pending close and resize events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                yield EventType.CLOSED
            elif event.type == pygame.VIDEORESIZE:
                yield EventType.RESIZED

    def clear(self) -> None:
        """Fill the window with white."""
        self._surface.fill(_WHITE)

    def close(self) -> None:
        """Close the window."""
        if self._open:
            pygame.display.quit()
            self._open = False

    def display(self) -> None:
        """Show what has been drawn."""
        pygame.display.flip()

    def size(self) -> Vector:
        """Window size in pixels."""
        width, height = self._surface.get_size()
        return Vector(float(width), float(height))

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the given mouse button is held down."""
        left, middle, right = pygame.mouse.get_pressed()[:3]
        match button:
            case MouseButton.LEFT:
                return bool(left)
            case MouseButton.RIGHT:
                return bool(right)
            case MouseButton.MIDDLE:
                return bool(middle)
            case _:
                return False

    def mouse_pos(self) -> Vector:
        """Mouse position relative to the window."""
        x, y = pygame.mouse.get_pos()
        return Vector(float(x), float(y))

    def draw_axes(self, coordsys: CoordSystem) -> None:
        """Draw both axes with their arrow heads, tick marks and numbers."""
        for axis, _ in _axes(coordsys):
            self.draw_vector(axis, coordsys)
        font = self._division_font()
        for division in axis_divisions(coordsys):
            self._draw_vector_body(division.tick, coordsys)
            if division.labelled:
                text = font.render(str(division.value), True, _BLACK)
                pos = coordsys.to_screen(division.label_point)
                self._surface.blit(text, (pos.x, pos.y))

    def draw_vector(self, posed: PosedVector, coordsys: CoordSystem) -> None:
        """Draw a vector as a line with an arrow head."""
        self._draw_vector_body(posed, coordsys)
        for stroke in arrow_head(posed):
            self._draw_vector_body(stroke, coordsys)

    def _draw_vector_body(self, posed: PosedVector, coordsys: CoordSystem) -> None:
        start = coordsys.to_screen(posed.point)
        end = coordsys.to_screen(posed.end())
        pygame.draw.line(self._surface, _BLACK, (start.x, start.y), (end.x, end.y))

    def _division_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            try:
                self._font = pygame.font.Font(FONT_FILENAME, DIV_NUMBER_SIZE)
            except (OSError, FileNotFoundError):
                sys.stderr.write(f"Could not load font from file {FONT_FILENAME} \n")
                self._font = pygame.font.Font(None, DIV_NUMBER_SIZE)
        return self._font


class PixelsWindow(Window):
    """A window showing the contents of a pixel buffer."""

    def __init__(self, x_size: int, y_size: int, title: str = "window") -> None:
        super().__init__(x_size, y_size, title)
        self.pixels = PixelBuffer(x_size, y_size)
        self._texture = self._make_texture()

    def _make_texture(self) -> pygame.Surface:
        return pygame.image.frombuffer(
            self.pixels.to_bytes(), (self.pixels.x_size, self.pixels.y_size), "RGBA"
        )

    def set_pixel(
        self, x: float, y: float, colour: Colour, alpha: int = DEFAULT_ALPHA
    ) -> bool:
        """Store a pixel in the buffer; False when it lies outside the window."""
        return self.pixels.set_pixel(x, y, colour, alpha)

    def pixels_update(self) -> None:
        """Copy the buffer into the image that is drawn."""
        self._texture = self._make_texture()

    def pixels_draw(self) -> None:
        """Draw the buffer image onto the window."""
        self._surface.blit(self._texture, (0, 0))