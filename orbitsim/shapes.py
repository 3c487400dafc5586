"""Primitive lists for every satellite, part and projectile.

Each function returns the primitives to render, in drawing order.
Positions and offsets are pixel points; rotation is in radians.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from orbitsim.geometry import (
    DARK_GREY,
    DEEP_BLUE,
    GOLD,
    GREY,
    LIGHT_GREY,
    ORIGIN,
    WHITE,
    Color,
    ColorRect,
    Point,
    Primitive,
    PrimitiveKind,
    rotate,
)


def _rect(coords: Tuple[int, ...], color: Color) -> ColorRect:
    x0, y0, x1, y1, x2, y2, x3, y3 = coords
    return ColorRect(((x0, y0), (x1, y1), (x2, y2), (x3, y3)), color)


def _place(
    rects: Sequence[ColorRect], center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    return [rect.to_primitive(center, offset, rotation) for rect in rects]


def _path(
    kind: PrimitiveKind,
    color: Color,
    points: Sequence[Point],
    center: Point,
    rotation: float,
    offset: Point = ORIGIN,
) -> Primitive:
    vertices = tuple(
        rotate(center, x + offset[0], y + offset[1], rotation) for x, y in points
    )
    return Primitive(kind, color, vertices)


_PROJECTILE = (_rect((1, 1, -1, 1, -1, -1, 1, -1), WHITE),)

_FRAGMENT = (_rect((-4, 1, -4, -1, 4, -1, 4, 1), LIGHT_GREY),)

_CREW_DRAGON_CENTER = (
    _rect((-5, 5, 3, 5, 3, -5, -5, -5), LIGHT_GREY),
    _rect((3, 5, 3, -5, 11, -3, 11, 3), GREY),
    _rect((12, -3, 12, 3, 11, -3, 11, 3), DARK_GREY),
    _rect((4, 3, 7, 2, 7, -2, 4, -3), DARK_GREY),
)

_CREW_DRAGON_ARRAY = (
    _rect((-4, 5, 4, 5, 4, 1, -4, 1), DEEP_BLUE),
    _rect((-4, -1, 4, 1, 4, -5, -4, -5), DEEP_BLUE),
    _rect((0, 2, 0, -6, 1, -6, 1, 2), GREY),
)

_SPUTNIK_SPHERE = (
    (0, 0),
    (2, 6), (6, 2), (6, -2), (2, -6), (-2, -6), (-2, -6), (-6, -2), (-6, 2), (-2, 6), (2, 6),
)

_SPUTNIK_ANTENNAS = (
    (-6.0, 2.0), (-10.0, -15.0),
    (0.0, 1.0), (-2.5, -15.0),
    (2.0, -6.0), (2.5, -15.0),
    (6.0, 2.0), (10.0, -15.0),
)

_GPS_LEFT = (
    _rect((-6, 5, 6, 5, 6, 1, -6, 1), WHITE),
    _rect((-6, 0, 6, 0, 6, -4, -6, -4), WHITE),
    _rect((-5, 4, 5, 4, 5, 2, -5, 2), DEEP_BLUE),
    _rect((-5, -1, 5, -1, 5, -3, -5, -3), DEEP_BLUE),
)

_GPS_RIGHT = (
    _rect((-6, -5, 6, -5, 6, -1, -6, -1), WHITE),
    _rect((-6, 0, 6, 0, 6, 4, -6, 4), WHITE),
    _rect((-5, -4, 5, -4, 5, -2, -5, -2), DEEP_BLUE),
    _rect((-5, 1, 5, 1, 5, 3, -5, 3), DEEP_BLUE),
)

_GPS_CENTER = (
    _rect((-3, 4, 4, 4, 4, -4, -3, -4), GOLD),
    _rect((4, 4, -3, 4, -3, -4, -4, -4), WHITE),
    _rect((4, 3, 7, 3, 7, 1, 4, 1), GREY),
    _rect((4, -3, 7, -3, 7, -1, 4, -1), GREY),
)

_HUBBLE_TELESCOPE = (
    _rect((-9, 3, 11, 3, 11, -3, -9, -3), LIGHT_GREY),
    _rect((11, 3, 15, 6, 16, 5, 12, 2), GREY),
    _rect((-9, -2, 11, -2, 11, -3, -9, -3), GREY),
)

_HUBBLE_COMPUTER = (
    _rect((-5, 5, 0, 5, 0, -3, -5, -3), GREY),
    _rect((-5, -5, 0, -5, 0, -3, -5, -3), DARK_GREY),
    _rect((0, 4, 3, 4, 3, -2, 0, -2), GREY),
    _rect((0, -4, 3, -4, 3, -2, 0, -2), DARK_GREY),
)

_HUBBLE_LEFT = (
    _rect((-8, 3, -1, 3, -1, -1, -8, -1), LIGHT_GREY),
    _rect((8, 3, 1, 3, 1, -1, 8, -1), LIGHT_GREY),
    _rect((-7, 2, -1, 2, -2, 0, -7, 0), DARK_GREY),
    _rect((7, 2, 1, 2, 2, 0, 7, 0), DARK_GREY),
)

_HUBBLE_RIGHT = (
    _rect((-8, -3, -1, -3, -1, 1, -8, 1), LIGHT_GREY),
    _rect((8, -3, 1, -3, 1, 1, 8, 1), LIGHT_GREY),
    _rect((-7, -2, -1, -2, -2, 0, -7, 0), DARK_GREY),
    _rect((7, -2, 1, -2, 2, 0, 7, 0), DARK_GREY),
)

_STARLINK_BODY = (
    _rect((1, 5, 1, -3, -1, -5, -1, 3), LIGHT_GREY),
    _rect((-4, -5, -1, -5, -1, 3, -4, 3), GREY),
    _rect((-4, 3, -2, 3, 1, 5, -1, 3), WHITE),
)

_STARLINK_ARRAY = (
    _rect((-7, 7, 8, 2, 8, -6, -7, -1), GREY),
    _rect((-6, 6, 7, 1, 7, -5, -6, 0), DEEP_BLUE),
)

CREW_DRAGON_RIGHT_OFFSET: Point = (-1.0, 11.0)
CREW_DRAGON_LEFT_OFFSET: Point = (-1.0, -11.0)
GPS_RIGHT_OFFSET: Point = (0.0, 12.0)
GPS_LEFT_OFFSET: Point = (0.0, -12.0)
HUBBLE_TELESCOPE_OFFSET: Point = (2.0, 0.0)
HUBBLE_COMPUTER_OFFSET: Point = (-10.0, 0.0)
HUBBLE_RIGHT_OFFSET: Point = (1.0, -8.0)
HUBBLE_LEFT_OFFSET: Point = (1.0, 8.0)
STARLINK_BODY_OFFSET: Point = (-1.0, 0.0)
STARLINK_ARRAY_OFFSET: Point = (8.0, -2.0)


def projectile(center: Point) -> List[Primitive]:
    """A small white square."""
    return _place(_PROJECTILE, center, 0.0)


def fragment(center: Point, rotation: float) -> List[Primitive]:
    """A thin grey sliver."""
    return _place(_FRAGMENT, center, rotation)


def crew_dragon_center(center: Point, rotation: float) -> List[Primitive]:
    """The capsule of the Crew Dragon."""
    return _place(_CREW_DRAGON_CENTER, center, rotation)


def crew_dragon_right(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The right solar array of the Crew Dragon."""
    return _place(_CREW_DRAGON_ARRAY, center, rotation, offset)


def crew_dragon_left(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The left solar array of the Crew Dragon."""
    return _place(_CREW_DRAGON_ARRAY, center, rotation, offset)


def crew_dragon(center: Point, rotation: float) -> List[Primitive]:
    """The whole Crew Dragon: capsule and both arrays."""
    return (
        crew_dragon_center(center, rotation)
        + crew_dragon_right(center, rotation, CREW_DRAGON_RIGHT_OFFSET)
        + crew_dragon_left(center, rotation, CREW_DRAGON_LEFT_OFFSET)
    )


def sputnik(center: Point, rotation: float) -> List[Primitive]:
    """A grey sphere with four white antennas."""
    return [
        _path(PrimitiveKind.TRIANGLE_FAN, GREY, _SPUTNIK_SPHERE, center, rotation),
        _path(PrimitiveKind.LINES, WHITE, _SPUTNIK_ANTENNAS, center, rotation),
    ]


def gps_center(center: Point, rotation: float) -> List[Primitive]:
    """The body of a GPS satellite."""
    return _place(_GPS_CENTER, center, rotation)


def gps_right(center: Point, rotation: float, offset: Point = ORIGIN) -> List[Primitive]:
    """The right solar array of a GPS satellite with its strut."""
    strut = ((3.0, -4.0), (0.0, -8.0), (-3.0, -4.0))
    return _place(_GPS_RIGHT, center, rotation, offset) + [
        _path(PrimitiveKind.LINE_STRIP, WHITE, strut, center, rotation, offset)
    ]


def gps_left(center: Point, rotation: float, offset: Point = ORIGIN) -> List[Primitive]:
    """The left solar array of a GPS satellite with its strut."""
    strut = ((3.0, 4.0), (0.0, 8.0), (-3.0, 4.0))
    return _place(_GPS_LEFT, center, rotation, offset) + [
        _path(PrimitiveKind.LINE_STRIP, WHITE, strut, center, rotation, offset)
    ]


def gps(center: Point, rotation: float) -> List[Primitive]:
    """The whole GPS satellite: body and both arrays."""
    return (
        gps_center(center, rotation)
        + gps_right(center, rotation, GPS_RIGHT_OFFSET)
        + gps_left(center, rotation, GPS_LEFT_OFFSET)
    )


def hubble_telescope(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The telescope tube of the Hubble."""
    return _place(_HUBBLE_TELESCOPE, center, rotation, offset)


def hubble_computer(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The computer module of the Hubble."""
    return _place(_HUBBLE_COMPUTER, center, rotation, offset)


def hubble_left(center: Point, rotation: float, offset: Point = ORIGIN) -> List[Primitive]:
    """The left solar array of the Hubble with its mast."""
    mast = ((0.0, 3.0), (0.0, -5.0))
    return _place(_HUBBLE_LEFT, center, rotation, offset) + [
        _path(PrimitiveKind.LINE_STRIP, WHITE, mast, center, rotation, offset)
    ]


def hubble_right(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The right solar array of the Hubble with its mast."""
    mast = ((0.0, -3.0), (0.0, 5.0))
    return _place(_HUBBLE_RIGHT, center, rotation, offset) + [
        _path(PrimitiveKind.LINE_STRIP, WHITE, mast, center, rotation, offset)
    ]


def hubble(center: Point, rotation: float) -> List[Primitive]:
    """The whole Hubble: telescope, computer and both arrays."""
    return (
        hubble_telescope(center, rotation, HUBBLE_TELESCOPE_OFFSET)
        + hubble_computer(center, rotation, HUBBLE_COMPUTER_OFFSET)
        + hubble_right(center, rotation, HUBBLE_RIGHT_OFFSET)
        + hubble_left(center, rotation, HUBBLE_LEFT_OFFSET)
    )


def starlink_body(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The body of a Starlink satellite."""
    return _place(_STARLINK_BODY, center, rotation, offset)


def starlink_array(
    center: Point, rotation: float, offset: Point = ORIGIN
) -> List[Primitive]:
    """The solar array of a Starlink satellite."""
    return _place(_STARLINK_ARRAY, center, rotation, offset)


def starlink(center: Point, rotation: float) -> List[Primitive]:
    """The whole Starlink satellite: body and array."""
    return starlink_body(center, rotation, STARLINK_BODY_OFFSET) + starlink_array(
        center, rotation, STARLINK_ARRAY_OFFSET
    )