# orbitsim

Support code for a two-dimensional orbital simulator: velocity physics,
frame pacing and keyboard state, and the vector geometry used to draw
satellites, the player's ship, the Earth and twinkling stars.

The package has no dependencies. Shape functions return lists of
`Primitive`s (quads, triangle fans, triangles, lines, line strips and
points) in screen pixels, for whatever renderer you choose to use.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `orbitsim.velocity` — `Velocity`, a dataclass with `dx` and `dy`, and
  the methods `speed()`, `set_polar(radians, magnitude)` (zero radians
  points straight up), `accelerate(ddx, ddy, time)`,
  `add_velocity(other)` and `reverse()`.
- `orbitsim.checks` — `close_enough(value, test, tolerance)` and
  `UnitTest`, which records `check()` and `assert_equals()` results under
  the name of the calling function, and whose `report(name)` prints and
  returns a summary with the success rate, then resets.
- `orbitsim.interact` — `Key` and `Interface`. `key_event(key, down)`
  takes a `Key` or its string value (`"up"`, `"down"`, `"left"`,
  `"right"`, `"home"`, `" "`); other keys are ignored. `is_up()`,
  `is_down()`, `is_left()` and `is_right()` give how many frames an arrow
  has been held (0 when released); `is_space()` is true only for the
  frame in which space or home was pressed. `end_frame()` advances those
  counters. Frame timing uses an injectable clock (default
  `time.monotonic`): `set_frames_per_second()` (raises `ValueError` for
  a non-positive rate), `frame_rate()` (seconds per frame),
  `is_time_to_draw()`, `set_next_draw_time()` and `next_tick`.
  `run(callback, frames=None)` calls `callback(interface)` once per
  frame, sleeping to keep the frame rate, forever or for `frames` frames.
- `orbitsim.geometry` — `Color` (with `as_float()`), the colour
  constants, `PrimitiveKind`, `Primitive`, `ColorRect` (with
  `to_primitive(center, offset, rotation)`), `rotate(origin, x, y,
  rotation)`, `random_int(low, high, rng)` (low ≤ n < high) and
  `random_float(low, high, rng)`; both raise `ValueError` for a bad range.
- `orbitsim.shapes` — `sputnik`, `gps`, `hubble`, `starlink` and
  `crew_dragon`, each of their parts (`gps_center`, `gps_left`,
  `hubble_telescope`, `starlink_array`, …), `fragment` and `projectile`.
- `orbitsim.scenery` — `ship(center, rotation, thrust, rng)` (a random
  flame when thrusting), `earth(center, rotation)` and `star(point,
  phase)`, where `phase` must be 0 to 255.
- `orbitsim.gstream` — `GraphicsStream` collects drawing primitives in
  `primitives` from its `draw_*` methods, and text written with `write()`
  as `TextLine`s in `lines`: `flush()` lays the text out one line per
  newline, 18 pixels further down each time, and leaving a `with` block
  flushes. `FakeGraphicsStream` writes a line of text for each `draw_*`
  call instead, readable through `pending`; its `flush()` and
  `set_position()` raise `RuntimeError`.

Points throughout are `(x, y)` tuples in pixels and rotations are in
radians.

## Example

```python
from orbitsim.velocity import Velocity
from orbitsim.shapes import gps
from orbitsim.gstream import GraphicsStream

v = Velocity(0.0, 3100.0)
v.accelerate(-0.5, 0.0, 48.0)
print(v.speed())

for primitive in gps((120.0, -40.0), 0.25):
    print(primitive.kind, primitive.color.as_float(), primitive.vertices)

with GraphicsStream((-300.0, 280.0)) as out:
    out.write("Altitude: 35786 km\nSpeed: 3.1 km/s\n")
    out.draw_star((10.0, 20.0), 200)
print(out.lines)
```

## What it does not do

The package opens no window, renders nothing and reads no keyboard: key
events must be passed to `Interface.key_event()` by your own code, and
primitives must be drawn by your own renderer. It has no positions in
metres, no satellite objects, no gravity and no collision handling; those
belong to the simulation that uses it.