"""Rendering of hierarchy tree nodes as styled lines, with colours for mapping coverage."""

from __future__ import annotations

import logging
from typing import Protocol

from dynmig.field_renderer import (
    FieldDisplayInfo,
    FieldInfo,
    FieldMapping,
    MappingSource,
    render_field_line_with_context,
)
from dynmig.hierarchy import FieldRenderingInfo, TreeNode
from dynmig.terminal import Color, Line, Span, Style

logger = logging.getLogger(__name__)


class ExamplesSource(Protocol):
    """Example record values shown next to fields when examples mode is on."""

    examples_mode_enabled: bool

    def get_example_value(self, field_name: str, is_source: bool) -> str | None: ...


def has_any_unmapped_descendant(node: TreeNode) -> bool:
    """True when any node below this one, at any depth, has no mapping."""
    return any(
        child.data.mapping_target() is None or has_any_unmapped_descendant(child)
        for child in node.children
    )


def hierarchical_node_color(node: TreeNode) -> Color:
    """Red when unmapped, yellow when mapped with an unmapped descendant, else green."""
    if node.data.mapping_target() is None:
        return Color.RED
    if has_any_unmapped_descendant(node):
        return Color.YELLOW
    return Color.GREEN


def hierarchical_color(children: list[TreeNode]) -> Color:
    """A colour for a container from how many of its children are mapped."""
    if not children:
        return Color.GREEN
    matched = 0
    for child in children:
        if child.data.mapping_target() is not None:
            matched += 1
        if hierarchical_color(child.children) is Color.YELLOW:
            return Color.YELLOW
    if matched == 0:
        return Color.RED
    if matched == len(children):
        return Color.GREEN
    return Color.YELLOW


def _indent(level: int) -> list[Span]:
    return [Span("  " * level, Style())] if level > 0 else []


def _default_spans(node: TreeNode) -> list[Span]:
    data = node.data
    spans: list[Span] = []
    if data.is_expandable():
        indicator = "▼" if node.is_expanded else "►"
        spans.append(Span(f"{indicator} ", Style(fg=Color.CYAN)))
    else:
        spans.append(Span("  ", Style()))

    spans.append(Span(data.display_name(), Style(fg=hierarchical_node_color(node))))

    if data.is_expandable() and not node.is_expanded:
        spans.append(Span(f" [{data.item_count()}]", Style(fg=Color.GRAY)))

    target = data.mapping_target()
    if target is not None and not data.is_field_node():
        spans.append(Span(" → ", Style(fg=Color.GRAY)))
        spans.append(Span(target, Style(fg=Color.BLUE)))
        mapping_type = data.mapping_type()
        if mapping_type is not None:
            spans.append(Span(f" [{mapping_type}]", Style(fg=Color.GRAY)))
    return spans


def render_node_line(node: TreeNode, level: int) -> Line:
    """Indent, expansion marker, coloured name, collapsed count and container mapping."""
    return Line(_indent(level) + _default_spans(node))


def _display_info(
    field: FieldInfo,
    info: FieldRenderingInfo,
    source_value: str | None,
    target_value: str | None,
) -> FieldDisplayInfo:
    if info.mapping_target is not None:
        mapping = FieldMapping(
            mapped_field_name=info.mapping_target,
            mapping_source=info.mapping_source or MappingSource.MANUAL,
            match_state=info.match_state,
        )
        display = FieldDisplayInfo.with_mapping(field, mapping)
    else:
        display = FieldDisplayInfo(field)
    return display.with_example_values(source_value, target_value)


def render_node_line_with_field_data(
    node: TreeNode,
    level: int,
    fields: list[FieldInfo],
    examples_state: ExamplesSource,
    is_source: bool,
) -> Line:
    """Like render_node_line, but field nodes are drawn as full field lines."""
    spans = _indent(level)
    info = node.data.field_info() if node.data.is_field_node() else None
    if info is None:
        return Line(spans + _default_spans(node))

    examples_on = examples_state.examples_mode_enabled
    field = next((f for f in fields if f.name == info.field_name), None)
    source_value: str | None = None
    target_value: str | None = None

    if field is not None:
        if examples_on:
            other_name = info.mapping_target or field.name
            if is_source:
                logger.debug(
                    "source field %s: mapping target %r, looking up %s",
                    field.name, info.mapping_target, other_name,
                )
                source_value = examples_state.get_example_value(field.name, True)
                target_value = examples_state.get_example_value(other_name, False)
            else:
                logger.debug(
                    "target field %s: mapping target %r, looking up %s",
                    field.name, info.mapping_target, other_name,
                )
                target_value = examples_state.get_example_value(field.name, False)
                source_value = examples_state.get_example_value(other_name, True)
    else:
        field = FieldInfo(
            name=info.field_name,
            field_type=info.field_type,
            is_required=info.is_required,
            is_custom=False,
        )
        if examples_on:
            source_value = examples_state.get_example_value(field.name, True)
            target_value = examples_state.get_example_value(
                info.mapping_target or field.name, False
            )

    display = _display_info(field, info, source_value, target_value)
    field_line = render_field_line_with_context(display, is_source, examples_on)
    return Line(spans + list(field_line.spans))