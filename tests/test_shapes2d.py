import math

import pytest

from sceneforge.colors import Color
from sceneforge.object2 import Mode
from sceneforge.shapes2d import Circle, Line, Rectangle, Triangle


def _close(p, q):
    return math.isclose(p[0], q[0], abs_tol=1e-9) and math.isclose(p[1], q[1], abs_tol=1e-9)


def _dist(p, q):
    return math.hypot(p[0] - q[0], p[1] - q[1])


def test_circle_defaults_and_clamp():
    assert Circle().radius == 1.0
    c = Circle((1, 2), -3)
    assert c.radius == 0.0
    c.radius = 4
    assert c.radius == 4.0


def test_circle_render_fan_is_centered_and_on_rim():
    c = Circle((3.0, -1.0), 2.0)
    fan, outline = c.render()
    assert fan.mode is Mode.TRIANGLE_FAN
    assert _close(fan.vertices[0], (3.0, -1.0))
    for v in fan.vertices[1:]:
        assert math.isclose(_dist(v, (3.0, -1.0)), 2.0)
    assert _close(fan.vertices[1], fan.vertices[-1])
    assert len(fan.normals) == len(fan.vertices)
    assert outline.mode is Mode.LINE_LOOP
    assert outline.color == Color.black()
    assert len(outline.vertices) == len(fan.vertices) - 2


def test_circle_precision_grows_with_radius():
    small = Circle((0, 0), 1.0).render()[1]
    large = Circle((0, 0), 500.0).render()[1]
    huge = Circle((0, 0), 5000.0).render()[1]
    assert len(large.vertices) > len(small.vertices)
    assert len(huge.vertices) == 250


def test_line_endpoints():
    line = Line((1.0, 1.0), 4.0)
    a, b = line.endpoints()
    assert math.isclose(_dist(a, b), 4.0)
    assert _close(((a[0] + b[0]) / 2, (a[1] + b[1]) / 2), (1.0, 1.0))
    assert math.isclose(a[1], b[1])


def test_line_rotation_and_clamp():
    line = Line((0.0, 0.0), 2.0)
    line.rotation = math.pi / 2
    a, b = line.endpoints()
    assert _close(a, (0.0, -1.0))
    assert _close(b, (0.0, 1.0))
    assert Line((0, 0), -1).length == 0.0
    (call,) = line.render()
    assert call.mode is Mode.LINES
    assert call.vertices == (a, b)


def test_rectangle_measurements():
    r = Rectangle((0.0, 0.0), (4.0, 2.0))
    assert r.dimensions == (4.0, 2.0)
    assert r.center() == (2.0, 1.0)
    assert r.ratio() == 2.0


def test_rectangle_default_and_zero_height():
    r = Rectangle()
    assert r.dimensions == (0.0, 0.0)
    with pytest.raises(ZeroDivisionError):
        r.ratio()
    r.dimensions = (-5, 3)
    assert r.dimensions == (0.0, 3.0)


def test_rectangle_corners_and_render():
    r = Rectangle((10.0, 5.0), (4.0, 2.0))
    c0, c1, c2, c3 = r.corners()
    assert math.isclose(_dist(c0, c3), 4.0)
    assert math.isclose(_dist(c0, c1), 2.0)
    assert _close(((c0[0] + c2[0]) / 2, (c0[1] + c2[1]) / 2), (10.0, 5.0))
    strip, loop = r.render()
    assert strip.mode is Mode.TRIANGLE_STRIP
    assert strip.vertices == (c0, c1, c3, c2)
    assert loop.vertices == (c0, c1, c2, c3)
    assert loop.color == Color.black()


def test_triangle_is_equilateral_around_position():
    t = Triangle((2.0, 3.0), 6.0)
    a, b, c = t.corners()
    for p, q in ((a, b), (b, c), (c, a)):
        assert math.isclose(_dist(p, q), 6.0)
    centroid = ((a[0] + b[0] + c[0]) / 3, (a[1] + b[1] + c[1]) / 3)
    assert _close(centroid, (2.0, 3.0))


def test_triangle_size_clamp_and_render():
    t = Triangle()
    assert t.size == 1.0
    t.size = -2
    assert t.size == 0.0
    t.size = 3
    tris, loop = t.render()
    assert tris.mode is Mode.TRIANGLES
    assert tris.vertices == t.corners()
    assert loop.mode is Mode.LINE_LOOP