import pytest

from sudokit.ui.geometry import ComputedPosition, Transform
from sudokit.ui.values import AxisScaling, Val


def test_default_transform_is_identity():
    assert Transform().is_identity()
    assert Transform().scale == (1.0, 1.0, 1.0)


def test_default_2d_moves_up_z_axis():
    transform = Transform.default_2d()
    assert transform.translation == (0.0, 0.0, 1.0)
    assert transform.scale == (1.0, 1.0, 1.0)
    assert not transform.is_identity()


def test_from_2d_scale():
    transform = Transform.from_2d_scale(0.25, 4)
    assert transform.scale == (0.25, 4.0, 1.0)
    assert transform.translation == (0.0, 0.0, 1.0)


def test_from_translation():
    transform = Transform.from_translation((0.0, 0.0, 3.0))
    assert transform.translation == (0.0, 0.0, 3.0)
    assert transform.scale == (1.0, 1.0, 1.0)
    assert not transform.is_identity()


def test_from_translation_rejects_wrong_length():
    with pytest.raises(ValueError):
        Transform.from_translation((1.0, 2.0))


def test_center_is_inside_and_midway():
    position = ComputedPosition(x=10.0, y=20.0, width=30.0, height=40.0)
    cx, cy = position.center()
    assert cx - position.x == pytest.approx(position.x + position.width - cx)
    assert cy - position.y == pytest.approx(position.y + position.height - cy)
    assert position.contains((cx, cy))


def test_contains_edges_and_outside():
    position = ComputedPosition(x=10.0, y=20.0, width=30.0, height=40.0)
    assert position.contains((10.0, 20.0))
    assert position.contains((40.0, 60.0))
    assert not position.contains((9.0, 30.0))
    assert not position.contains((20.0, 61.0))


def test_transformed_identity_keeps_position():
    position = ComputedPosition(x=10.0, y=20.0, width=30.0, height=40.0, screens=("game",))
    assert position.transformed((1, 1, 1), (0, 0, 1)) == position


def test_transformed_scales_around_center():
    position = ComputedPosition(x=10.0, y=20.0, width=30.0, height=40.0)
    child = position.transformed((0.5, 0.25, 1), (0, 0, 1))
    assert child.width == pytest.approx(position.width * 0.5)
    assert child.height == pytest.approx(position.height * 0.25)
    assert child.center() == pytest.approx(position.center())


def test_transformed_screens_override():
    position = ComputedPosition(width=1.0, height=1.0, screens=("game",))
    assert position.transformed((1, 1, 1), (0, 0, 0)).screens == ("game",)
    child = position.transformed((1, 1, 1), (0, 0, 0), screens=["menu", "settings"])
    assert child.screens == ("menu", "settings")


def test_axis_scales_landscape():
    position = ComputedPosition(width=200.0, height=100.0)
    scales = position.axis_scales(200.0, 100.0)
    assert scales.horizontal.pixel_scale == pytest.approx(1 / 200.0)
    assert scales.vertical.pixel_scale == pytest.approx(1 / 100.0)
    # Vmin and Vmax refer to the same viewport length on both axes.
    assert Val.vmax(10).evaluate(scales.horizontal) * 200 == pytest.approx(
        Val.vmax(10).evaluate(scales.vertical) * 100
    )
    assert scales.horizontal.vmin_scale < scales.horizontal.vmax_scale


def test_axis_scales_portrait():
    position = ComputedPosition(width=100.0, height=200.0)
    scales = position.axis_scales(100.0, 200.0)
    assert scales.horizontal.axis_ratio == pytest.approx(2.0)
    assert scales.vertical.axis_ratio == pytest.approx(0.5)
    assert Val.vmin(10).evaluate(scales.horizontal) * 100 == pytest.approx(
        Val.vmin(10).evaluate(scales.vertical) * 200
    )
    assert scales.vertical.vmin_scale < scales.vertical.vmax_scale


def test_axis_scales_full_viewport_percent():
    position = ComputedPosition(width=300.0, height=300.0)
    scales = position.axis_scales(300.0, 300.0)
    assert scales.horizontal == AxisScaling(
        axis_ratio=1.0, pixel_scale=1 / 300.0, vmin_scale=0.01, vmax_scale=0.01
    )