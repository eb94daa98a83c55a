"""Layout values, sizes and sides used by the flex layout."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class Operator(Enum):
    """Operator of a calculated value."""

    MINUS = "-"
    PLUS = "+"


@dataclass(frozen=True)
class AxisScaling:
    """Scales for evaluating values along a single axis."""

    axis_ratio: float = 1.0
    pixel_scale: float = 0.01
    vmin_scale: float = 0.01
    vmax_scale: float = 0.01


class FlexDirection(Enum):
    """Direction in which a container lays out its children."""

    COLUMN = "column"
    ROW = "row"

    def cross(self) -> FlexDirection:
        """Return the perpendicular direction."""
        return FlexDirection.ROW if self is FlexDirection.COLUMN else FlexDirection.COLUMN


class Alignment(Enum):
    """Alignment of an item along its container's cross axis."""

    CENTERED = "centered"
    END = "end"
    START = "start"


@dataclass(frozen=True)
class AxesScaling:
    """Scales for evaluating values along both axes."""

    horizontal: AxisScaling = field(default_factory=AxisScaling)
    vertical: AxisScaling = field(default_factory=AxisScaling)

    def scaling_for_direction(self, direction: FlexDirection) -> AxisScaling:
        """Return the scaling for the axis of ``direction``."""
        return self.horizontal if direction is FlexDirection.ROW else self.vertical


@dataclass(frozen=True)
class Expr:
    """A binary calculation over two values."""

    left: Val
    operator: Operator
    right: Val

    def evaluate(self, axis_scaling: AxisScaling) -> float:
        """Evaluate both sides and combine them."""
        left = self.left.evaluate(axis_scaling)
        right = self.right.evaluate(axis_scaling)
        return left - right if self.operator is Operator.MINUS else left + right

    def __rmul__(self, factor: Any) -> Expr:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Expr(factor * self.left, self.operator, factor * self.right)


class ValKind(Enum):
    """The kinds of layout value."""

    NONE = "none"
    AUTO = "auto"
    PIXEL = "pixel"
    PERCENT = "percent"
    CROSS_PERCENT = "cross_percent"
    VMAX = "vmax"
    VMIN = "vmin"
    CALC = "calc"


_NUMERIC_KINDS = frozenset(
    {ValKind.PIXEL, ValKind.PERCENT, ValKind.CROSS_PERCENT, ValKind.VMAX, ValKind.VMIN}
)


@dataclass(frozen=True)
class Val:
    """A layout value.

    ``PIXEL`` is in logical pixels, ``PERCENT`` relative to the parent along the
    relevant axis, ``CROSS_PERCENT`` relative to the cross axis, ``VMAX`` and
    ``VMIN`` relative to the longest and shortest axis of the viewport, and
    ``CALC`` combines other values. ``AUTO`` acts as ``NONE`` unless a context
    gives it meaning.
    """

    kind: ValKind = ValKind.NONE
    value: Any = None

    @classmethod
    def none(cls) -> Val:
        return cls(ValKind.NONE)

    @classmethod
    def auto(cls) -> Val:
        return cls(ValKind.AUTO)

    @classmethod
    def pixel(cls, value: int) -> Val:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"pixel values must be integers, got {value!r}")
        return cls(ValKind.PIXEL, value)

    @classmethod
    def percent(cls, value: float) -> Val:
        return cls(ValKind.PERCENT, float(value))

    @classmethod
    def cross_percent(cls, value: float) -> Val:
        return cls(ValKind.CROSS_PERCENT, float(value))

    @classmethod
    def vmax(cls, value: float) -> Val:
        return cls(ValKind.VMAX, float(value))

    @classmethod
    def vmin(cls, value: float) -> Val:
        return cls(ValKind.VMIN, float(value))

    @classmethod
    def calc(cls, expr: Expr) -> Val:
        if not isinstance(expr, Expr):
            raise TypeError(f"calc needs an expression, got {expr!r}")
        return cls(ValKind.CALC, expr)

    def evaluate(self, axis_scaling: AxisScaling) -> float:
        """Return the value as a fraction of the parent along the axis."""
        kind = self.kind
        if kind in (ValKind.NONE, ValKind.AUTO):
            return 0.0
        if kind is ValKind.PIXEL:
            return axis_scaling.pixel_scale * float(self.value)
        if kind is ValKind.PERCENT:
            return self.value * 0.01
        if kind is ValKind.CROSS_PERCENT:
            return axis_scaling.axis_ratio * self.value * 0.01
        if kind is ValKind.VMAX:
            return axis_scaling.vmax_scale * self.value
        if kind is ValKind.VMIN:
            return axis_scaling.vmin_scale * self.value
        return self.value.evaluate(axis_scaling)

    def __add__(self, other: Any) -> Val:
        if not isinstance(other, Val):
            return NotImplemented
        if other.kind is ValKind.NONE:
            return self
        if self.kind in (ValKind.NONE, ValKind.AUTO):
            return other
        if self.kind in _NUMERIC_KINDS and self.kind is other.kind:
            return Val(self.kind, self.value + other.value)
        return Val.calc(Expr(self, Operator.PLUS, other))

    def __sub__(self, other: Any) -> Val:
        if not isinstance(other, Val):
            return NotImplemented
        if other.kind is ValKind.NONE:
            return self
        if self.kind is ValKind.NONE:
            return Val.none()
        if self.kind is ValKind.AUTO and other.kind is ValKind.AUTO:
            return Val.none()
        if self.kind in _NUMERIC_KINDS and self.kind is other.kind:
            return Val(self.kind, self.value - other.value)
        return Val.calc(Expr(self, Operator.MINUS, other))

    def __rmul__(self, factor: Any) -> Val:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        if self.kind in (ValKind.NONE, ValKind.AUTO):
            return self
        if self.kind is ValKind.PIXEL:
            return Val.pixel(int(factor * self.value))
        if self.kind is ValKind.CALC:
            return Val.calc(factor * self.value)
        return Val(self.kind, factor * self.value)


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: Val = field(default_factory=Val)
    height: Val = field(default_factory=Val)

    @classmethod
    def all(cls, val: Val) -> Size:
        """Return a size with the same width and height."""
        return cls(val, val)

    def for_direction(self, direction: FlexDirection) -> Val:
        """Return the height for columns and the width for rows."""
        return self.height if direction is FlexDirection.COLUMN else self.width


@dataclass(frozen=True)
class Sides:
    """Values for the four sides of a box."""

    top: Val = field(default_factory=Val)
    right: Val = field(default_factory=Val)
    bottom: Val = field(default_factory=Val)
    left: Val = field(default_factory=Val)

    @classmethod
    def all(cls, val: Val) -> Sides:
        return cls.symmetric(val, val)

    @classmethod
    def symmetric(cls, horizontal: Val, vertical: Val) -> Sides:
        """Return sides with ``horizontal`` left and right, ``vertical`` top and bottom."""
        return cls(top=vertical, right=horizontal, bottom=vertical, left=horizontal)

    @classmethod
    def bottom_only(cls, bottom: Val) -> Sides:
        return cls(bottom=bottom)

    @classmethod
    def horizontal(cls, horizontal: Val) -> Sides:
        return cls.symmetric(horizontal, Val.none())

    @classmethod
    def left_only(cls, left: Val) -> Sides:
        return cls(left=left)

    @classmethod
    def right_only(cls, right: Val) -> Sides:
        return cls(right=right)

    @classmethod
    def top_only(cls, top: Val) -> Sides:
        return cls(top=top)

    @classmethod
    def vertical(cls, vertical: Val) -> Sides:
        return cls.symmetric(Val.none(), vertical)

    def before_for_direction(self, direction: FlexDirection) -> Val:
        """Return the side that comes first along ``direction``."""
        return self.top if direction is FlexDirection.COLUMN else self.left

    def after_for_direction(self, direction: FlexDirection) -> Val:
        """Return the side that comes last along ``direction``."""
        return self.bottom if direction is FlexDirection.COLUMN else self.right

    def with_top(self, top: Val) -> Sides:
        return replace(self, top=top)

    def with_right(self, right: Val) -> Sides:
        return replace(self, right=right)