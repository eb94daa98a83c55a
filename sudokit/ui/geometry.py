"""Transforms and computed positions for laid-out items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, NamedTuple, Optional, Sequence

from sudokit.ui.values import AxesScaling, AxisScaling


class Vec2(NamedTuple):
    """A two-dimensional vector."""

    x: float
    y: float


class Vec3(NamedTuple):
    """A three-dimensional vector."""

    x: float
    y: float
    z: float


class Quat(NamedTuple):
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


def _vec3(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return Vec3(float(x), float(y), float(z))


_DEFAULT_TRANSLATION = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Transform:
    """Translation, scale and rotation of an item."""

    translation: Vec3 = Vec3(0.0, 0.0, 0.0)
    scale: Vec3 = Vec3(1.0, 1.0, 1.0)
    rotation: Quat = Quat()

    def __post_init__(self) -> None:
        object.__setattr__(self, "translation", _vec3(self.translation))
        object.__setattr__(self, "scale", _vec3(self.scale))
        object.__setattr__(self, "rotation", Quat(*(float(v) for v in self.rotation)))

    @classmethod
    def default_2d(cls) -> Transform:
        """Return the default transform for 2D items, one step up the z axis."""
        return cls(translation=_DEFAULT_TRANSLATION)

    @classmethod
    def from_2d_scale(cls, x: float, y: float) -> Transform:
        """Return a 2D transform scaled by ``x`` and ``y``."""
        return cls(translation=_DEFAULT_TRANSLATION, scale=Vec3(float(x), float(y), 1.0))

    @classmethod
    def from_translation(cls, translation: Sequence[float]) -> Transform:
        """Return a transform that only translates."""
        return cls(translation=_vec3(translation))

    def is_identity(self) -> bool:
        """Return whether the transform changes nothing."""
        return self == Transform()


@dataclass(frozen=True)
class ComputedPosition:
    """The area an item occupies, along with the screens it appears on."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    screens: tuple[Hashable, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "screens", tuple(self.screens))

    def center(self) -> Vec2:
        """Return the center point of the area."""
        return Vec2(self.x + 0.5 * self.width, self.y + 0.5 * self.height)

    def contains(self, point: Sequence[float]) -> bool:
        """Return whether ``point`` lies within the area, edges included."""
        px, py = point
        return (
            self.x <= px
            and self.y <= py
            and self.x + self.width >= px
            and self.y + self.height >= py
        )

    def transformed(
        self,
        scale: Sequence[float],
        translation: Sequence[float],
        screens: Optional[Iterable[Hashable]] = None,
    ) -> ComputedPosition:
        """Return the position of a child with the given scale and translation.

        The child keeps these screens unless ``screens`` is given.
        """
        scale = _vec3(scale)
        translation = _vec3(translation)
        width = self.width * scale.x
        height = self.height * scale.y
        return ComputedPosition(
            x=self.x + (0.5 + translation.x) * self.width - 0.5 * width,
            y=self.y + (0.5 + translation.y) * self.height - 0.5 * height,
            width=width,
            height=height,
            screens=self.screens if screens is None else tuple(screens),
        )

    def axis_scales(self, screen_width: float, screen_height: float) -> AxesScaling:
        """Return the scales for evaluating values inside this area."""
        horizontal_scaling = screen_width / self.width * 0.01
        vertical_scaling = screen_height / self.height * 0.01
        if screen_width > screen_height:
            h_vmin = horizontal_scaling * screen_height / screen_width
            h_vmax = horizontal_scaling
            v_vmin = vertical_scaling
            v_vmax = vertical_scaling * screen_width / screen_height
        else:
            h_vmin = horizontal_scaling
            h_vmax = horizontal_scaling * screen_height / screen_width
            v_vmin = vertical_scaling * screen_width / screen_height
            v_vmax = vertical_scaling
        return AxesScaling(
            horizontal=AxisScaling(
                axis_ratio=self.height / self.width,
                pixel_scale=1.0 / self.width,
                vmin_scale=h_vmin,
                vmax_scale=h_vmax,
            ),
            vertical=AxisScaling(
                axis_ratio=self.width / self.height,
                pixel_scale=1.0 / self.height,
                vmin_scale=v_vmin,
                vmax_scale=v_vmax,
            ),
        )