"""Drawing primitives, colours and point rotation in screen pixels.

Points are ``(x, y)`` tuples in pixels.
"""

from __future__ import annotations

import enum
import math
import random as _random
from dataclasses import dataclass
from typing import Optional, Tuple

Point = Tuple[float, float]

ORIGIN: Point = (0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour with integer components, nominally 0 to 255."""

    red: int
    green: int
    blue: int

    def as_float(self) -> Tuple[float, float, float]:
        """Components scaled to fractions, as the renderer expects."""
        return (self.red / 256.0, self.green / 256.0, self.blue / 256.0)


WHITE = Color(255, 255, 255)
LIGHT_GREY = Color(196, 196, 196)
GREY = Color(128, 128, 128)
DARK_GREY = Color(64, 64, 64)
DEEP_BLUE = Color(64, 64, 156)
BLUE = Color(0, 0, 256)
RED = Color(255, 0, 0)
GOLD = Color(255, 255, 0)
TAN = Color(180, 150, 110)
GREEN = Color(0, 150, 0)


class PrimitiveKind(enum.Enum):
    """How a primitive's vertices are joined together."""

    POINTS = "points"
    LINES = "lines"
    LINE_STRIP = "line_strip"
    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"
    QUADS = "quads"


@dataclass(frozen=True, slots=True)
class Primitive:
    """A single-coloured shape ready to be rendered."""

    kind: PrimitiveKind
    color: Color
    vertices: Tuple[Point, ...]


def rotate(origin: Point, x: float, y: float, rotation: float) -> Point:
    """Rotate the offset (x, y) about origin by rotation radians."""
    cos_a = math.cos(rotation)
    sin_a = math.sin(rotation)
    return (
        origin[0] + x * cos_a + y * sin_a,
        origin[1] + y * cos_a - x * sin_a,
    )


@dataclass(frozen=True, slots=True)
class ColorRect:
    """A coloured quadrilateral given by four corners relative to a centre."""

    corners: Tuple[Point, Point, Point, Point]
    color: Color

    def to_primitive(
        self, center: Point, offset: Point = ORIGIN, rotation: float = 0.0
    ) -> Primitive:
        """Place the rectangle at center, shifted by offset, then rotated."""
        vertices = tuple(
            rotate(center, cx + offset[0], cy + offset[1], rotation)
            for cx, cy in self.corners
        )
        return Primitive(PrimitiveKind.QUADS, self.color, vertices)


def random_int(low: int, high: int, rng: Optional[_random.Random] = None) -> int:
    """A random integer with low <= n < high."""
    if low >= high:
        raise ValueError(f"low ({low}) must be less than high ({high})")
    source = rng if rng is not None else _random
    return source.randrange(low, high)


def random_float(
    low: float, high: float, rng: Optional[_random.Random] = None
) -> float:
    """A random float with low <= n <= high."""
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    source = rng if rng is not None else _random
    return low + source.random() * (high - low)