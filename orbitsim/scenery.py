"""Primitive lists for the player's ship, the Earth and twinkling stars.

Positions are pixel points; rotation is in radians.
"""

from __future__ import annotations

import random as _random
from typing import List, Optional, Sequence, Tuple

from orbitsim.geometry import (
    BLUE,
    DEEP_BLUE,
    GREEN,
    GREY,
    LIGHT_GREY,
    RED,
    TAN,
    WHITE,
    Color,
    ColorRect,
    Point,
    Primitive,
    PrimitiveKind,
    random_float,
    rotate,
)

PALE_YELLOW = Color(128, 128, 0)
MID_YELLOW = Color(179, 179, 0)
BRIGHT_YELLOW = Color(256, 256, 0)

_SHIP_HULL = (
    (0, 0),
    (-3, -9), (-12, -12), (-14, -12), (-13, -7), (-8, -2), (-6, 3), (-4, 11),
    (-4, 14), (-3, 16), (-1, 18), (1, 18), (3, 16), (4, 14), (4, 11), (6, 3),
    (8, -2), (13, -7), (14, -12), (12, -12), (3, -9), (-3, -9),
)

_SHIP_DARK = (
    (-5, -8), (-12, -11), (-11, -7), (-5, -2),   # left wing
    (5, -8), (12, -11), (11, -7), (5, -2),       # right wing
    (0, -13), (-3, 11), (-1, 15), (1, 15),       # left canopy
    (0, -13), (3, 11), (1, 15), (-1, 15),        # right canopy
)

_EARTH_COLORS = (GREY, BLUE, GREEN, TAN, WHITE)

_EARTH_SCALE = 2

_EARTH_OFFSET: Point = (-25.0 * _EARTH_SCALE, -25.0 * _EARTH_SCALE)

_EARTH_MAP = (
    "00000 00000 00000 00000 11111 11111 00000 00000 00000 00000",
    "00000 00000 00000 00133 32211 11222 31100 00000 00000 00000",
    "00000 00000 00000 11122 22223 33333 33111 00000 00000 00000",
    "00000 00000 00211 12222 22222 22223 33311 11100 00000 00000",
    "00000 00000 02211 22222 33333 33333 22221 11111 00000 00000",
    "00000 00002 11122 33333 33333 33334 33333 31331 10000 00000",
    "00000 00011 11113 33333 33333 33333 43333 33233 11000 00000",
    "00000 00111 11111 33333 33333 33333 33333 33313 32200 00000",
    "00000 01111 11111 23333 33333 33332 33333 33333 33230 00000",
    "00000 01111 22222 33333 33333 23333 33323 32232 33330 00000",
    "00000 11111 21123 33332 22233 32333 33333 31333 33323 00000",
    "00001 11111 21133 33333 32232 23333 33333 11333 33333 30000",
    "00001 11112 11322 32333 23222 22233 33333 33333 33333 33000",
    "00011 11111 11223 33333 23333 23333 22333 32321 31133 33000",
    "00011 11111 22223 33222 33333 33332 22323 33321 33123 33000",
    "00111 11111 11221 22232 33333 33333 22222 33332 13113 33300",
    "00111 11111 11111 32233 33333 33433 32222 33333 11331 33300",
    "01111 11111 11111 33333 33333 33311 12222 22333 23212 33320",
    "01111 11111 21113 33333 33443 11114 12222 22333 33211 33330",
    "01111 11111 13223 33331 11141 11141 11322 22333 33121 33330",
    "01111 11111 12213 33334 11114 11111 11222 22123 32111 33330",
    "11111 11111 11113 33314 11111 11111 11222 22223 33312 33333",
    "11111 11111 11133 33111 11111 11111 11113 32223 33222 33322",
    "11111 11111 11133 34111 11111 11144 41111 13311 33321 33332",
    "11111 11111 11123 31111 11111 11444 44411 11111 13331 33332",
    "11111 11111 11111 31111 11111 11111 11111 11123 33133 33332",
    "11111 11111 11111 11111 11111 11441 11111 11112 11133 33332",
    "11111 11111 11111 14111 11111 11444 41111 11112 11132 33332",
    "11111 11111 11132 22211 11114 44444 44414 11111 11111 13333",
    "01111 11111 11122 23311 11144 41444 44411 11111 11111 13330",
    "01111 11111 11132 22311 11411 41144 44411 11111 11111 12330",
    "01111 11111 11113 22224 14114 41111 44411 11111 11111 11210",
    "01111 11111 11111 32222 22444 24411 44411 11111 11111 11110",
    "00111 11111 11111 22232 32214 24441 11411 11111 11111 11100",
    "00111 11111 11111 33333 33333 22244 11111 11111 11111 11100",
    "00011 11111 11111 23222 33322 21222 11111 11111 11111 11000",
    "00011 11111 11111 12222 31322 11232 11111 11111 11111 11000",
    "00001 11111 11111 22222 33332 11132 23221 11111 11111 10000",
    "00001 11111 11111 13223 33333 11222 22223 11111 11111 10000",
    "00000 11111 11111 23233 33333 22122 21111 11111 11111 00000",
    "00000 01111 11112 32233 33322 22222 12211 11111 11110 00000",
    "00000 00111 11112 33333 31322 12222 22111 11111 11100 00000",
    "00000 00011 11111 33333 33332 22222 21111 11111 11000 00000",
    "00000 00001 11111 23333 33333 33322 11111 11111 10000 00000",
    "00000 00000 11111 11333 33333 33222 11111 11111 00000 00000",
    "00000 00000 01111 12333 33323 22221 11111 11110 00000 00000",
    "00000 00000 00011 11133 33321 11222 11112 12000 00000 00000",
    "00000 00000 00000 11113 33111 11122 22113 00000 00000 00000",
    "00000 00000 00000 00111 12222 11111 12300 00000 00000 00000",
    "00000 00000 00000 00000 01111 11110 00000 00000 00000 00000",
)


def _earth_rects() -> Tuple[ColorRect, ...]:
    rects = []
    s = _EARTH_SCALE
    for y, row in enumerate(_EARTH_MAP):
        for x, cell in enumerate(row.replace(" ", "")):
            index = int(cell)
            if index:
                corners = (
                    (x * s, y * s),
                    (x * s, y * s + s),
                    (x * s + s, y * s + s),
                    (x * s + s, y * s),
                )
                rects.append(ColorRect(corners, _EARTH_COLORS[index]))
    return tuple(rects)


_EARTH_RECTS = _earth_rects()


def _path(
    kind: PrimitiveKind,
    color: Color,
    points: Sequence[Point],
    center: Point,
    rotation: float,
) -> Primitive:
    return Primitive(
        kind, color, tuple(rotate(center, x, y, rotation) for x, y in points)
    )


def ship(
    center: Point,
    rotation: float,
    thrust: bool,
    rng: Optional[_random.Random] = None,
) -> List[Primitive]:
    """The player's ship, with a flickering flame when thrust is on."""
    primitives = [
        _path(PrimitiveKind.TRIANGLE_FAN, LIGHT_GREY, _SHIP_HULL, center, rotation)
    ]
    if thrust:
        flame: List[Point] = []
        for _ in range(2):
            tip_x = random_float(-5.0, 5.0, rng)
            tip_y = random_float(-25.0, -13.0, rng)
            flame.extend([(-3.0, -9.0), (tip_x, tip_y), (3.0, -9.0)])
        primitives.append(
            _path(PrimitiveKind.TRIANGLES, RED, flame, center, rotation)
        )
    primitives.append(
        _path(PrimitiveKind.QUADS, DEEP_BLUE, _SHIP_DARK, center, rotation)
    )
    return primitives


def earth(center: Point, rotation: float) -> List[Primitive]:
    """The Earth as a 50 by 50 grid of coloured squares."""
    return [rect.to_primitive(center, _EARTH_OFFSET, rotation) for rect in _EARTH_RECTS]


def _points(color: Color, point: Point, offsets: Sequence[Point]) -> Primitive:
    px, py = point
    return Primitive(
        PrimitiveKind.POINTS, color, tuple((px + dx, py + dy) for dx, dy in offsets)
    )


_NEAR = ((1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0))
_FAR = ((2.0, 0.0), (-2.0, 0.0), (0.0, 2.0), (0.0, -2.0))


def star(point: Point, phase: int) -> List[Primitive]:
    """A star whose size and brightness depend on its twinkle phase (0-255)."""
    if not 0 <= phase <= 255:
        raise ValueError(f"phase must be between 0 and 255, got {phase}")
    centre = ((0.0, 0.0),)
    if phase < 128:
        return [_points(PALE_YELLOW, point, centre)]
    if phase < 160 or phase > 224:
        return [_points(BRIGHT_YELLOW, point, centre)]
    if phase < 176 or phase > 208:
        return [
            _points(BRIGHT_YELLOW, point, centre),
            _points(PALE_YELLOW, point, _NEAR),
        ]
    return [
        _points(BRIGHT_YELLOW, point, centre),
        _points(MID_YELLOW, point, _NEAR),
        _points(PALE_YELLOW, point, _FAR),
    ]