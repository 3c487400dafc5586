"""A graphics stream that collects text lines and drawing primitives.

Text is written to the stream like a file and laid out line by line,
each line 18 pixels below the previous one. Drawing calls add the
primitives for each object, ready for a renderer to consume.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import List, Optional

from orbitsim import scenery, shapes
from orbitsim.geometry import ORIGIN, Point, Primitive

LINE_HEIGHT = 18.0


@dataclass(frozen=True, slots=True)
class TextLine:
    """One line of text and the pixel point of its top-left corner."""

    position: Point
    text: str


class GraphicsStream:
    """Buffers text and collects primitives for one frame of drawing."""

    def __init__(self, position: Point = ORIGIN) -> None:
        self.position: Point = (float(position[0]), float(position[1]))
        self.lines: List[TextLine] = []
        self.primitives: List[Primitive] = []
        self._buffer = io.StringIO()

    def __enter__(self) -> GraphicsStream:
        return self

    def __exit__(self, *args: object) -> None:
        self.flush()

    @property
    def pending(self) -> str:
        """Text written but not yet flushed."""
        return self._buffer.getvalue()

    def write(self, text: str) -> int:
        """Append text to the buffer; it is laid out on flush."""
        return self._buffer.write(text)

    def _clear_buffer(self) -> None:
        self._buffer = io.StringIO()

    def _emit(self, text: str) -> None:
        self.lines.append(TextLine(self.position, text))
        x, y = self.position
        self.position = (x, y - LINE_HEIGHT)

    def flush(self) -> None:
        """Lay out buffered text as lines, moving down after each one."""
        *complete, last = self._buffer.getvalue().split("\n")
        for line in complete:
            self._emit(line)
        if last:
            self._emit(last)
        self._clear_buffer()

    def set_position(self, position: Point) -> None:
        """Flush pending text, then move the text cursor."""
        self.flush()
        self.position = (float(position[0]), float(position[1]))

    def draw_fragment(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.fragment(center, rotation))

    def draw_projectile(self, center: Point) -> None:
        self.primitives.extend(shapes.projectile(center))

    def draw_crew_dragon(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.crew_dragon(center, rotation))

    def draw_crew_dragon_right(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.crew_dragon_right(center, rotation, offset))

    def draw_crew_dragon_left(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.crew_dragon_left(center, rotation, offset))

    def draw_crew_dragon_center(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.crew_dragon_center(center, rotation))

    def draw_sputnik(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.sputnik(center, rotation))

    def draw_gps(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.gps(center, rotation))

    def draw_gps_center(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.gps_center(center, rotation))

    def draw_gps_right(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.gps_right(center, rotation, offset))

    def draw_gps_left(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.gps_left(center, rotation, offset))

    def draw_hubble(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.hubble(center, rotation))

    def draw_hubble_computer(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.hubble_computer(center, rotation, offset))

    def draw_hubble_telescope(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.hubble_telescope(center, rotation, offset))

    def draw_hubble_left(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.hubble_left(center, rotation, offset))

    def draw_hubble_right(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.hubble_right(center, rotation, offset))

    def draw_starlink(self, center: Point, rotation: float) -> None:
        self.primitives.extend(shapes.starlink(center, rotation))

    def draw_starlink_body(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.starlink_body(center, rotation, offset))

    def draw_starlink_array(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.primitives.extend(shapes.starlink_array(center, rotation, offset))

    def draw_ship(self, center: Point, rotation: float, thrust: bool) -> None:
        self.primitives.extend(scenery.ship(center, rotation, thrust))

    def draw_earth(self, center: Point, rotation: float) -> None:
        self.primitives.extend(scenery.earth(center, rotation))

    def draw_star(self, point: Point, phase: int) -> None:
        self.primitives.extend(scenery.star(point, phase))


def _describe(name: str, center: Point, value: Optional[object] = None) -> str:
    text = f"{name} ({center[0]}, {center[1]})"
    if value is not None:
        text += f" {value}"
    return text + "\n"


class FakeGraphicsStream(GraphicsStream):
    """Records each drawing call as a line of text instead of primitives.

    Text layout is not available: flushing or moving the cursor raises.
    """

    def __exit__(self, *args: object) -> None:
        return None

    def flush(self) -> None:
        raise RuntimeError("a fake graphics stream does not lay out text")

    def set_position(self, position: Point) -> None:
        raise RuntimeError("a fake graphics stream has no text cursor")

    def draw_fragment(self, center: Point, rotation: float) -> None:
        self.write(_describe("Fragment", center, rotation))

    def draw_projectile(self, center: Point) -> None:
        self.write(_describe("Projectile", center))

    def draw_crew_dragon(self, center: Point, rotation: float) -> None:
        self.write(_describe("CrewDragon", center, rotation))

    def draw_crew_dragon_right(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("CrewDragonRight", center, rotation))

    def draw_crew_dragon_left(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("CrewDragonLeft", center, rotation))

    def draw_crew_dragon_center(self, center: Point, rotation: float) -> None:
        self.write(_describe("CrewDragonCenter", center, rotation))

    def draw_sputnik(self, center: Point, rotation: float) -> None:
        self.write(_describe("Sputnik", center, rotation))

    def draw_gps(self, center: Point, rotation: float) -> None:
        self.write(_describe("GPS", center, rotation))

    def draw_gps_center(self, center: Point, rotation: float) -> None:
        self.write(_describe("GPSCenter", center, rotation))

    def draw_gps_right(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("GPSRight", center, rotation))

    def draw_gps_left(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("GPSLeft", center, rotation))

    def draw_hubble(self, center: Point, rotation: float) -> None:
        self.write(_describe("Hubble", center, rotation))

    def draw_hubble_computer(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("HubbleComputer", center, rotation))

    def draw_hubble_telescope(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("HubbleTelescope", center, rotation))

    def draw_hubble_left(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("HubbleLeft", center, rotation))

    def draw_hubble_right(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("HubbleRight", center, rotation))

    def draw_starlink(self, center: Point, rotation: float) -> None:
        self.write(_describe("Starlink", center, rotation))

    def draw_starlink_body(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("StarlinkBody", center, rotation))

    def draw_starlink_array(
        self, center: Point, rotation: float, offset: Point = ORIGIN
    ) -> None:
        self.write(_describe("StarlinkArray", center, rotation))

    def draw_ship(self, center: Point, rotation: float, thrust: bool) -> None:
        self.write(_describe("Ship", center, rotation))

    def draw_earth(self, center: Point, rotation: float) -> None:
        self.write(_describe("Earth", center, rotation))

    def draw_star(self, point: Point, phase: int) -> None:
        self.write(_describe("Star", point, phase))