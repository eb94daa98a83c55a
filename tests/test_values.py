import pytest

from sudokit.ui.values import (
    Alignment,
    AxesScaling,
    AxisScaling,
    Expr,
    FlexDirection,
    Operator,
    Sides,
    Size,
    Val,
    ValKind,
)

SCALING = AxisScaling(axis_ratio=2.0, pixel_scale=0.004, vmin_scale=0.03, vmax_scale=0.05)

SAMPLES = [
    Val.pixel(12),
    Val.percent(30.0),
    Val.cross_percent(15.0),
    Val.vmax(4.0),
    Val.vmin(7.0),
]


def test_default_axis_scaling_matches_documented_defaults():
    scaling = AxisScaling()
    assert (scaling.axis_ratio, scaling.pixel_scale, scaling.vmin_scale, scaling.vmax_scale) == (
        1.0,
        0.01,
        0.01,
        0.01,
    )


def test_percent_evaluates_as_fraction():
    assert Val.percent(50.0).evaluate(AxisScaling()) == pytest.approx(0.5)


def test_none_and_auto_evaluate_to_zero():
    assert Val.none().evaluate(SCALING) == 0.0
    assert Val.auto().evaluate(SCALING) == 0.0
    assert Val() == Val.none()


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_addition_evaluates_as_sum(a, b):
    assert (a + b).evaluate(SCALING) == pytest.approx(a.evaluate(SCALING) + b.evaluate(SCALING))


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_subtraction_evaluates_as_difference(a, b):
    assert (a - b).evaluate(SCALING) == pytest.approx(a.evaluate(SCALING) - b.evaluate(SCALING))


@pytest.mark.parametrize("a", SAMPLES)
def test_same_kind_stays_simple(a):
    assert (a + a).kind is a.kind
    assert (a - a).kind is a.kind
    assert (a - a).evaluate(SCALING) == pytest.approx(0.0)


def test_mixed_kinds_build_calc():
    result = Val.pixel(1) + Val.percent(2.0)
    assert result == Val.calc(Expr(Val.pixel(1), Operator.PLUS, Val.percent(2.0)))
    diff = Val.vmin(3.0) - Val.pixel(4)
    assert diff == Val.calc(Expr(Val.vmin(3.0), Operator.MINUS, Val.pixel(4)))


@pytest.mark.parametrize("a", SAMPLES)
def test_none_and_auto_rules(a):
    assert Val.none() + a == a
    assert Val.auto() + a == a
    assert a + Val.none() == a
    assert a - Val.none() == a
    assert Val.none() - a == Val.none()


def test_auto_subtraction():
    assert Val.auto() - Val.auto() == Val.none()
    assert Val.auto() - Val.pixel(5) == Val.calc(Expr(Val.auto(), Operator.MINUS, Val.pixel(5)))


def test_pixel_multiplication_truncates():
    assert 0.5 * Val.pixel(3) == Val.pixel(1)


@pytest.mark.parametrize("a", SAMPLES[1:])
def test_scaling_float_values(a):
    assert (3.0 * a).kind is a.kind
    assert (3.0 * a).evaluate(SCALING) == pytest.approx(3.0 * a.evaluate(SCALING))


def test_scaling_calc_distributes():
    calc = Val.percent(10.0) + Val.vmin(2.0)
    scaled = 2.0 * calc
    assert scaled.kind is ValKind.CALC
    assert scaled.evaluate(SCALING) == pytest.approx(2.0 * calc.evaluate(SCALING))
    assert 2.0 * Val.auto() == Val.auto()


def test_pixel_requires_integer():
    with pytest.raises(TypeError):
        Val.pixel(1.5)


def test_calc_requires_expression():
    with pytest.raises(TypeError):
        Val.calc(Val.pixel(1))


def test_adding_non_val_raises():
    with pytest.raises(TypeError):
        Val.pixel(1) + 1


def test_flex_direction_cross():
    assert FlexDirection.COLUMN.cross() is FlexDirection.ROW
    assert FlexDirection.ROW.cross() is FlexDirection.COLUMN
    assert len(list(Alignment)) == 3


def test_size_for_direction():
    size = Size(Val.pixel(10), Val.percent(20.0))
    assert size.for_direction(FlexDirection.ROW) == Val.pixel(10)
    assert size.for_direction(FlexDirection.COLUMN) == Val.percent(20.0)
    assert Size.all(Val.vmin(5.0)) == Size(Val.vmin(5.0), Val.vmin(5.0))


def test_sides_constructors():
    h, v = Val.pixel(3), Val.pixel(4)
    sides = Sides.symmetric(h, v)
    assert (sides.top, sides.right, sides.bottom, sides.left) == (v, h, v, h)
    assert Sides.all(h) == Sides(h, h, h, h)
    assert Sides.horizontal(h) == Sides(Val.none(), h, Val.none(), h)
    assert Sides.vertical(v) == Sides(v, Val.none(), v, Val.none())
    assert Sides.top_only(h) == Sides(top=h)
    assert Sides.right_only(h) == Sides(right=h)
    assert Sides.bottom_only(h) == Sides(bottom=h)
    assert Sides.left_only(h) == Sides(left=h)


def test_sides_for_direction():
    sides = Sides(Val.pixel(1), Val.pixel(2), Val.pixel(3), Val.pixel(4))
    assert sides.before_for_direction(FlexDirection.COLUMN) == sides.top
    assert sides.after_for_direction(FlexDirection.COLUMN) == sides.bottom
    assert sides.before_for_direction(FlexDirection.ROW) == sides.left
    assert sides.after_for_direction(FlexDirection.ROW) == sides.right


def test_sides_with_methods_return_copies():
    sides = Sides.all(Val.pixel(2))
    changed = sides.with_top(Val.auto()).with_right(Val.none())
    assert changed.top == Val.auto()
    assert changed.right == Val.none()
    assert changed.bottom == sides.bottom
    assert sides.top == Val.pixel(2)


def test_axes_scaling_for_direction():
    axes = AxesScaling(horizontal=SCALING, vertical=AxisScaling())
    assert axes.scaling_for_direction(FlexDirection.ROW) == SCALING
    assert axes.scaling_for_direction(FlexDirection.COLUMN) == AxisScaling()


def test_expr_evaluate_operators():
    plus = Expr(Val.percent(40.0), Operator.PLUS, Val.pixel(5))
    minus = Expr(Val.percent(40.0), Operator.MINUS, Val.pixel(5))
    left = Val.percent(40.0).evaluate(SCALING)
    right = Val.pixel(5).evaluate(SCALING)
    assert plus.evaluate(SCALING) == pytest.approx(left + right)
    assert minus.evaluate(SCALING) == pytest.approx(left - right)