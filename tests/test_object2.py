import math

import pytest

from sceneforge.object2 import DrawCall, Mode, Object2, Transform2


def test_transform_without_rotation_translates():
    t = Transform2((3.0, -2.0), 0.0)
    assert t.apply((1.0, 1.0)) == pytest.approx((4.0, -1.0))


def test_quarter_turn():
    t = Transform2((0.0, 0.0), math.pi / 2)
    assert t.apply((1.0, 0.0)) == pytest.approx((0.0, 1.0))


@pytest.mark.parametrize("angle", [0.3, 1.0, 2.5, -4.0])
def test_rotation_preserves_distance(angle):
    x, y = Transform2((0.0, 0.0), angle).apply((3.0, 4.0))
    assert math.hypot(x, y) == pytest.approx(5.0)


def test_transform_rejects_wrong_size():
    with pytest.raises(ValueError):
        Transform2((1.0, 2.0, 3.0), 0.0)


def test_default_object():
    obj = Object2()
    assert obj.position == (0.0, 0.0)
    assert obj.rotation == 0.0
    assert obj.transform_point((1.0, 2.0)) == pytest.approx((1.0, 2.0))


def test_position_updates_transform():
    obj = Object2((1.0, 2.0))
    obj.position = (5.0, 6.0)
    assert obj.position == (5.0, 6.0)
    assert obj.transformation.translation == (5.0, 6.0)
    assert obj.transform_point((0.0, 0.0)) == pytest.approx((5.0, 6.0))


def test_rotation_updates_transform_and_keeps_position():
    obj = Object2((2.0, 0.0))
    obj.rotation = math.pi
    assert obj.transformation.rotation == pytest.approx(math.pi)
    assert obj.transform_point((1.0, 0.0)) == pytest.approx((1.0, 0.0))


def test_transformation_setter_leaves_position_alone():
    obj = Object2((1.0, 1.0))
    obj.transformation = Transform2((9.0, 9.0), 0.0)
    assert obj.position == (1.0, 1.0)
    assert obj.transform_point((0.0, 0.0)) == pytest.approx((9.0, 9.0))


def test_transformation_setter_type_checks():
    with pytest.raises(TypeError):
        Object2().transformation = (1.0, 2.0)


def test_render_is_point_at_position():
    calls = Object2((3.0, 4.0)).render()
    assert calls == [DrawCall(Mode.POINTS, ((3.0, 4.0),))]


def test_draw_call_checks_normals():
    with pytest.raises(ValueError):
        DrawCall(Mode.LINES, ((0, 0), (1, 1)), normals=((0, 0, 1),))