"""Styles for flex items and flex containers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from sudokit.ui.geometry import Transform
from sudokit.ui.values import Alignment, FlexDirection, Sides, Size, Val

ItemStyleEnhancer = Callable[["FlexItemStyle", Any], None]
ContainerStyleEnhancer = Callable[["FlexContainerStyle", Any], None]


@dataclass
class FlexItemStyle:
    """How an item is sized and placed within its container.

    An item that does not occupy space takes no room among its siblings. The
    custom ``transform`` is applied on top of the layout's own. Each of the
    ``dynamic_styles`` adjusts a copy of the style at layout time, given the
    layout's resources.
    """

    align_self: Alignment = Alignment.CENTERED
    flex_base: Size = field(default_factory=Size)
    flex_grow: float = 0.0
    flex_shrink: float = 0.0
    margin: Size = field(default_factory=Size)
    min_size: Size = field(default_factory=Size)
    occupies_space: bool = True
    preserve_aspect_ratio: bool = False
    transform: Transform = field(default_factory=Transform)
    dynamic_styles: tuple[ItemStyleEnhancer, ...] = ()

    def __post_init__(self) -> None:
        self.dynamic_styles = tuple(self.dynamic_styles)

    @classmethod
    def available_size(cls) -> FlexItemStyle:
        """Return a style without base size that takes all available space."""
        return cls(flex_grow=1.0)

    @classmethod
    def fixed_size(cls, width: Val, height: Val) -> FlexItemStyle:
        """Return a style with a fixed size relative to the parent."""
        return cls(flex_base=Size(width, height))

    @classmethod
    def minimum_size(cls, width: Val, height: Val) -> FlexItemStyle:
        """Return a style with a minimum size that may grow."""
        return cls(flex_base=Size(width, height), flex_grow=1.0)

    @classmethod
    def preferred_size(cls, width: Val, height: Val) -> FlexItemStyle:
        """Return a style with a preferred size that may shrink."""
        return cls(flex_base=Size(width, height), flex_shrink=1.0)

    @classmethod
    def preferred_and_minimum_size(cls, flex_base: Size, min_size: Size) -> FlexItemStyle:
        """Return a style that may shrink, but not below ``min_size``."""
        return cls(flex_base=flex_base, flex_shrink=1.0, min_size=min_size)

    def with_alignment(self, align_self: Alignment) -> FlexItemStyle:
        return replace(self, align_self=align_self)

    def with_fixed_aspect_ratio(self) -> FlexItemStyle:
        return replace(self, preserve_aspect_ratio=True)

    def with_margin(self, margin: Size) -> FlexItemStyle:
        return replace(self, margin=margin)

    def with_transform(self, transform: Transform) -> FlexItemStyle:
        return replace(self, transform=transform)

    def without_occupying_space(self) -> FlexItemStyle:
        return replace(self, occupies_space=False)

    def with_dynamic_styles_applied(self, resources: Any) -> FlexItemStyle:
        """Return the style as adjusted by its dynamic styles; unchanged if none."""
        if not self.dynamic_styles:
            return self
        style = replace(self)
        for enhance in self.dynamic_styles:
            enhance(style, resources)
        return style


@dataclass
class FlexContainerStyle:
    """How a container lays out its children.

    A gap of ``Val.auto()`` spreads remaining space evenly between items.
    """

    direction: FlexDirection = FlexDirection.COLUMN
    gap: Val = field(default_factory=Val.none)
    padding: Sides = field(default_factory=Sides)
    dynamic_styles: tuple[ContainerStyleEnhancer, ...] = ()

    def __post_init__(self) -> None:
        self.dynamic_styles = tuple(self.dynamic_styles)

    @classmethod
    def column(cls) -> FlexContainerStyle:
        return cls()

    @classmethod
    def row(cls) -> FlexContainerStyle:
        return cls(direction=FlexDirection.ROW)

    def with_gap(self, gap: Val) -> FlexContainerStyle:
        return replace(self, gap=gap)

    def with_padding(self, padding: Sides) -> FlexContainerStyle:
        return replace(self, padding=padding)

    def with_dynamic_styles_applied(self, resources: Any) -> FlexContainerStyle:
        """Return the style as adjusted by its dynamic styles; unchanged if none."""
        if not self.dynamic_styles:
            return self
        style = replace(self)
        for enhance in self.dynamic_styles:
            enhance(style, resources)
        return style