"""Flex layout of node trees attached to screens."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Hashable, Iterable, Optional

from sudokit.ui.flex import FlexContainerStyle, FlexItemStyle
from sudokit.ui.geometry import ComputedPosition, Transform, Vec3
from sudokit.ui.values import (
    Alignment,
    AxesScaling,
    AxisScaling,
    FlexDirection,
    ValKind,
)

TextEnhancer = Callable[[Any, Any], None]
DynamicImage = Callable[["LayoutNode", Any], "tuple[float, float]"]


class Anchor(Enum):
    """Point of a text item that is aligned with its position."""

    CENTER = "center"
    CENTER_LEFT = "center_left"
    CENTER_RIGHT = "center_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"


_LEFT_ANCHORS = frozenset({Anchor.CENTER_LEFT, Anchor.BOTTOM_LEFT, Anchor.TOP_LEFT})
_RIGHT_ANCHORS = frozenset({Anchor.CENTER_RIGHT, Anchor.BOTTOM_RIGHT, Anchor.TOP_RIGHT})


@dataclass(eq=False)
class LayoutNode:
    """An entity taking part in the layout.

    A node with an ``item_style`` is placed by its parent container; a node
    with a ``container_style`` places its ``children``. A node with a
    ``text_anchor`` is a text item that spans its parent. The layout writes
    ``transform`` and ``computed_position``. ``interaction_screens``, when
    set, replaces the screens inherited from the parent. A ``dynamic_image``
    is called with the node and the resources, may set ``image``, and returns
    the image's width and height.
    """

    item_style: Optional[FlexItemStyle] = None
    container_style: Optional[FlexContainerStyle] = None
    children: list[LayoutNode] = field(default_factory=list)
    text_anchor: Optional[Anchor] = None
    text_sections: list[Any] = field(default_factory=list)
    text_dynamic_styles: tuple[TextEnhancer, ...] = ()
    interaction_screens: Optional[tuple[Hashable, ...]] = None
    dynamic_image: Optional[DynamicImage] = None
    image: Any = None
    transform: Transform = field(default_factory=Transform.default_2d)
    computed_position: Optional[ComputedPosition] = None


@dataclass
class Screen:
    """A root container aligned with the whole window."""

    state: Hashable
    width: float
    height: float
    root: LayoutNode
    resources: Any = None


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _axis_scales(position: ComputedPosition, width: float, height: float) -> AxesScaling:
    try:
        return position.axis_scales(width, height)
    except ZeroDivisionError:
        inf = AxisScaling(math.inf, math.inf, math.inf, math.inf)
        return AxesScaling(inf, inf)


class _LayoutPass:
    def __init__(self, screens: list[Screen]) -> None:
        self.roots: list[tuple[LayoutNode, Hashable, float, float]] = []
        self.containers: dict[int, tuple[list[LayoutNode], FlexContainerStyle]] = {}
        self.items: dict[int, FlexItemStyle] = {}
        self.texts: dict[int, Any] = {}
        seen: set[int] = set()
        for screen in screens:
            for node in self._walk(screen.root, seen):
                self._collect(node, screen.resources)
            if screen.root.container_style is not None:
                self.roots.append((screen.root, screen.state, screen.width, screen.height))

    @staticmethod
    def _walk(root: LayoutNode, seen: set[int]) -> Iterable[LayoutNode]:
        stack = [root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            yield node
            stack.extend(reversed(node.children))

    def _collect(self, node: LayoutNode, resources: Any) -> None:
        if node.container_style is not None:
            style = node.container_style.with_dynamic_styles_applied(resources)
            self.containers[id(node)] = (list(node.children), style)

        if node.text_anchor is not None:
            self.texts[id(node)] = resources
        elif node.item_style is not None:
            style = node.item_style.with_dynamic_styles_applied(resources)
            if node.dynamic_image is not None:
                width, height = node.dynamic_image(node, resources)
                style = replace(
                    style,
                    transform=Transform.from_2d_scale(_divide(1.0, width), _divide(1.0, height)),
                )
            self.items[id(node)] = style

    def apply(self) -> None:
        for root, state, width, height in self.roots:
            position = ComputedPosition(x=0.0, y=0.0, width=width, height=height, screens=(state,))
            self._apply_container(root, position, (width, height))

    def _apply_container(
        self, node: LayoutNode, position: ComputedPosition, screen_size: tuple[float, float]
    ) -> None:
        entry = self.containers.pop(id(node), None)
        if entry is None:
            return
        children, style = entry

        axes = _axis_scales(position, *screen_size)
        direction = style.direction
        scaling = axes.scaling_for_direction(direction)
        cross = direction.cross()
        cross_scaling = axes.scaling_for_direction(cross)

        before_val = style.padding.before_for_direction(direction)
        after_val = style.padding.after_for_direction(direction)
        padding_before = before_val.evaluate(scaling)
        padding = padding_before + after_val.evaluate(scaling)
        cross_padding = style.padding.before_for_direction(cross).evaluate(
            cross_scaling
        ) + style.padding.after_for_direction(cross).evaluate(cross_scaling)

        occupying = [
            self.items[id(child)]
            for child in children
            if id(child) in self.items and self.items[id(child)].occupies_space
        ]
        gap_kind = style.gap.kind
        num_gaps = 0.0 if gap_kind is ValKind.NONE else float(max(len(occupying), 1) - 1)
        gap_size = style.gap.evaluate(scaling)

        total_size = padding + num_gaps * gap_size
        total_grow = (
            (num_gaps if gap_kind is ValKind.AUTO else 0.0)
            + (1.0 if before_val.kind is ValKind.AUTO else 0.0)
            + (1.0 if after_val.kind is ValKind.AUTO else 0.0)
        )
        total_shrink = 0.0
        for item in occupying:
            total_size += item.flex_base.for_direction(direction).evaluate(
                scaling
            ) + 2.0 * item.margin.for_direction(direction).evaluate(scaling)
            total_grow += item.flex_grow
            total_shrink += item.flex_shrink

        offset = padding_before
        spare_size = 1.0 - total_size
        if spare_size > 0 and before_val.kind is ValKind.AUTO:
            offset += _divide(spare_size, total_grow)

        for child in children:
            if id(child) in self.texts:
                self._position_text(child, self.texts.pop(id(child)), position)
                continue

            item = self.items.pop(id(child), None)
            if item is None:
                continue

            base = item.flex_base
            scale_x = base.width.evaluate(axes.horizontal)
            scale_y = base.height.evaluate(axes.vertical)

            margin = item.margin.for_direction(direction).evaluate(scaling)
            cross_margin = item.margin.for_direction(cross).evaluate(cross_scaling)

            main_size: Optional[float] = None
            cross_size: Optional[float] = None
            if spare_size > 0:
                if item.flex_grow > 0:
                    base_size = base.for_direction(direction).evaluate(scaling)
                    main_size = base_size + spare_size * item.flex_grow / max(total_grow, 1.0)
                    if item.preserve_aspect_ratio:
                        base_cross = base.for_direction(cross).evaluate(cross_scaling)
                        cross_size = _divide(main_size, base_size) * base_cross
                        # Don't grow too large along the cross axis.
                        if cross_size + 2.0 * cross_margin > 1.0:
                            previous = cross_size
                            cross_size = 1.0 - 2.0 * cross_margin
                            main_size *= _divide(cross_size, previous)
            elif item.flex_shrink > 0:
                excess_size = total_size - 1.0
                base_size = base.for_direction(direction).evaluate(scaling)
                min_size = item.min_size.for_direction(direction).evaluate(scaling)
                main_size = max(
                    base_size - excess_size * item.flex_shrink / max(total_shrink, 1.0), min_size
                )
                if item.preserve_aspect_ratio:
                    base_cross = base.for_direction(cross).evaluate(cross_scaling)
                    cross_size = _divide(main_size, base_size) * base_cross
                    min_cross = item.min_size.for_direction(cross).evaluate(cross_scaling)
                    if cross_size < min_cross:
                        previous = cross_size
                        cross_size = min_cross
                        main_size *= _divide(cross_size, previous)

            if main_size is not None:
                if direction is FlexDirection.COLUMN:
                    scale_y = main_size
                    if cross_size is not None:
                        scale_x = cross_size
                else:
                    scale_x = main_size
                    if cross_size is not None:
                        scale_y = cross_size

            # Growing items without a fixed aspect ratio fill the cross axis.
            if item.flex_grow > 0 and not item.preserve_aspect_ratio:
                if direction is FlexDirection.COLUMN:
                    scale_x = (
                        1.0
                        - 2.0 * item.margin.width.evaluate(cross_scaling)
                        - style.padding.left.evaluate(cross_scaling)
                        - style.padding.right.evaluate(cross_scaling)
                    )
                else:
                    scale_y = (
                        1.0
                        - 2.0 * item.margin.height.evaluate(cross_scaling)
                        - style.padding.top.evaluate(cross_scaling)
                        - style.padding.bottom.evaluate(cross_scaling)
                    )

            if direction is FlexDirection.COLUMN:
                if item.align_self is Alignment.CENTERED:
                    tx = 0.0
                elif item.align_self is Alignment.END:
                    tx = 0.5 - cross_padding - cross_margin - 0.5 * scale_x
                else:
                    tx = -0.5 + cross_padding + cross_margin + 0.5 * scale_x
                ty = 0.5 - offset - margin - 0.5 * scale_y
            else:
                tx = -0.5 + offset + margin + 0.5 * scale_x
                if item.align_self is Alignment.CENTERED:
                    ty = 0.0
                elif item.align_self is Alignment.END:
                    ty = -0.5 + cross_padding + cross_margin + 0.5 * scale_y
                else:
                    ty = 0.5 - cross_padding - cross_margin - 0.5 * scale_y

            scale = Vec3(scale_x, scale_y, 1.0)
            translation = Vec3(tx, ty, 1.0)

            layout_transform = Transform(translation=translation, scale=scale)
            custom = item.transform
            if not custom.is_identity():
                layout_transform = Transform(
                    translation=Vec3(*(a + b for a, b in zip(translation, custom.translation))),
                    scale=Vec3(*(a * b for a, b in zip(scale, custom.scale))),
                    rotation=custom.rotation,
                )
            if child.transform != layout_transform:
                child.transform = layout_transform

            item_position = position.transformed(scale, translation, child.interaction_screens)
            child.computed_position = item_position

            if item.occupies_space:
                if gap_kind is ValKind.AUTO and spare_size > 0:
                    gap_step = _divide(spare_size, total_grow)
                else:
                    gap_step = gap_size
                offset += 2.0 * margin + gap_step + (
                    scale_y if direction is FlexDirection.COLUMN else scale_x
                )

            self._apply_container(child, item_position, screen_size)

    @staticmethod
    def _position_text(node: LayoutNode, resources: Any, position: ComputedPosition) -> None:
        scale = Vec3(_divide(0.5, position.width), _divide(0.5, position.height), 1.0)
        if node.text_anchor in _LEFT_ANCHORS:
            x = -0.5
        elif node.text_anchor in _RIGHT_ANCHORS:
            x = 0.5
        else:
            x = 0.0
        translation = Vec3(x, 0.0, 1.0)
        node.transform = Transform(
            translation=translation, scale=scale, rotation=node.transform.rotation
        )
        node.computed_position = position.transformed(scale, translation)
        for enhance in node.text_dynamic_styles:
            for section in node.text_sections:
                enhance(section, resources)


def layout(screens: Iterable[Screen]) -> None:
    """Lay out every node reachable from the given screens.

    Each node's ``transform`` and ``computed_position`` are updated in place.
    """
    _LayoutPass(list(screens)).apply()