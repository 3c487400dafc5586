import pytest

from orbitsim import scenery, shapes
from orbitsim.gstream import FakeGraphicsStream, GraphicsStream, TextLine


def test_flush_splits_lines_and_moves_down():
    stream = GraphicsStream((10.0, 100.0))
    stream.write("alpha\nbeta")
    stream.flush()
    assert stream.lines == [
        TextLine((10.0, 100.0), "alpha"),
        TextLine((10.0, 82.0), "beta"),
    ]
    assert stream.position == (10.0, 64.0)
    assert stream.pending == ""


def test_trailing_newline_does_not_add_empty_line():
    stream = GraphicsStream((0.0, 0.0))
    stream.write("one\n")
    stream.flush()
    assert [line.text for line in stream.lines] == ["one"]
    assert stream.position == (0.0, -18.0)


def test_empty_lines_between_text_are_kept():
    stream = GraphicsStream()
    stream.write("a\n\nb")
    stream.flush()
    assert [line.text for line in stream.lines] == ["a", "", "b"]


def test_write_returns_length_and_buffers():
    stream = GraphicsStream()
    assert stream.write("hello") == 5
    assert stream.pending == "hello"
    assert stream.lines == []


def test_set_position_flushes_first():
    stream = GraphicsStream((5.0, 5.0))
    stream.write("before")
    stream.set_position((50.0, 60.0))
    assert stream.lines == [TextLine((5.0, 5.0), "before")]
    assert stream.position == (50.0, 60.0)


def test_context_manager_flushes_on_exit():
    with GraphicsStream((1.0, 2.0)) as stream:
        stream.write("done")
    assert stream.lines == [TextLine((1.0, 2.0), "done")]


def test_draw_calls_collect_shape_primitives():
    stream = GraphicsStream()
    stream.draw_fragment((3.0, 4.0), 0.5)
    stream.draw_projectile((1.0, 1.0))
    expected = shapes.fragment((3.0, 4.0), 0.5) + shapes.projectile((1.0, 1.0))
    assert stream.primitives == expected


def test_draw_hubble_matches_parts():
    stream = GraphicsStream()
    stream.draw_hubble((0.0, 0.0), 1.0)
    assert stream.primitives == shapes.hubble((0.0, 0.0), 1.0)
    assert len(stream.primitives) > 0


def test_draw_part_with_default_offset():
    stream = GraphicsStream()
    stream.draw_starlink_array((2.0, 2.0), 0.0)
    assert stream.primitives == shapes.starlink_array((2.0, 2.0), 0.0)


def test_draw_earth_and_star():
    stream = GraphicsStream()
    stream.draw_earth((0.0, 0.0), 0.0)
    stream.draw_star((5.0, 5.0), 200)
    expected = scenery.earth((0.0, 0.0), 0.0) + scenery.star((5.0, 5.0), 200)
    assert stream.primitives == expected


def test_draw_ship_without_thrust_is_deterministic():
    stream = GraphicsStream()
    stream.draw_ship((0.0, 0.0), 0.0, False)
    assert stream.primitives == scenery.ship((0.0, 0.0), 0.0, False)


def test_draw_star_rejects_bad_phase():
    stream = GraphicsStream()
    with pytest.raises(ValueError):
        stream.draw_star((0.0, 0.0), 300)


def test_fake_records_draw_calls_as_text():
    fake = FakeGraphicsStream()
    fake.draw_sputnik((1.0, 2.0), 0.5)
    fake.draw_projectile((3.0, 4.0))
    lines = fake.pending.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Sputnik")
    assert lines[1].startswith("Projectile")
    assert fake.primitives == []


def test_fake_records_each_kind_by_name():
    fake = FakeGraphicsStream()
    fake.draw_gps((0.0, 0.0), 0.0)
    fake.draw_starlink_body((0.0, 0.0), 0.0)
    fake.draw_hubble_telescope((0.0, 0.0), 0.0)
    names = [line.split(" ")[0] for line in fake.pending.splitlines()]
    assert names == ["GPS", "StarlinkBody", "HubbleTelescope"]


def test_fake_cannot_flush_or_move():
    fake = FakeGraphicsStream()
    with pytest.raises(RuntimeError):
        fake.flush()
    with pytest.raises(RuntimeError):
        fake.set_position((1.0, 1.0))


def test_fake_context_manager_keeps_text():
    with FakeGraphicsStream() as fake:
        fake.draw_earth((0.0, 0.0), 0.0)
    assert fake.pending.startswith("Earth")
    assert fake.lines == []