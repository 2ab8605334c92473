"""Field metadata with mapping state, and its rendering as styled lines or plain strings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from dynmig.relationship_types import RelationshipType
from dynmig.terminal import Color, Line, Span, Style


@dataclass(frozen=True)
class FieldInfo:
    """Metadata of one entity field."""

    name: str
    field_type: str
    is_required: bool = False
    is_custom: bool = False


class MappingSource(Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    MANUAL = "manual"


class MatchState(Enum):
    FULL_MATCH = "full_match"
    TYPE_MISMATCH = "type_mismatch"
    MIXED_MATCH = "mixed_match"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class FieldMapping:
    mapped_field_name: str
    mapping_source: MappingSource
    match_state: MatchState


@dataclass(frozen=True)
class RegularFieldType:
    mapping: FieldMapping | None = None


@dataclass(frozen=True)
class RelationshipFieldType:
    target_entity: str
    relationship_type: RelationshipType
    mapping: FieldMapping | None = None


@dataclass(frozen=True)
class FieldDisplayInfo:
    """A field together with its kind, mapping, match state and example values."""

    field: FieldInfo
    field_type: RegularFieldType | RelationshipFieldType = field(
        default_factory=RegularFieldType
    )
    match_state: MatchState = MatchState.NO_MATCH
    source_example_value: str | None = None
    target_example_value: str | None = None

    @classmethod
    def with_mapping(cls, field: FieldInfo, mapping: FieldMapping) -> FieldDisplayInfo:
        return cls(field, RegularFieldType(mapping), mapping.match_state)

    @classmethod
    def relationship(
        cls, field: FieldInfo, target_entity: str, relationship_type: RelationshipType
    ) -> FieldDisplayInfo:
        return cls(field, RelationshipFieldType(target_entity, relationship_type))

    @classmethod
    def relationship_with_mapping(
        cls,
        field: FieldInfo,
        target_entity: str,
        relationship_type: RelationshipType,
        mapping: FieldMapping,
    ) -> FieldDisplayInfo:
        return cls(
            field,
            RelationshipFieldType(target_entity, relationship_type, mapping),
            mapping.match_state,
        )

    def mapping(self) -> FieldMapping | None:
        """The field's mapping, whatever its kind."""
        return self.field_type.mapping

    def with_example_values(
        self, source_value: str | None, target_value: str | None
    ) -> FieldDisplayInfo:
        return dataclasses.replace(
            self, source_example_value=source_value, target_example_value=target_value
        )

    def has_example_values(self) -> bool:
        return self.source_example_value is not None or self.target_example_value is not None


def truncate_value(value: str, max_len: int) -> str:
    """Shorten a value to max_len characters, ending it with '...' when cut."""
    if len(value) <= max_len:
        return value
    return value[: max(max_len - 3, 0)] + "..."


def _fg(color: Color) -> Style:
    return Style(fg=color)


_NAME_COLORS = {
    MatchState.FULL_MATCH: Color.GREEN,
    MatchState.TYPE_MISMATCH: Color.YELLOW,
    MatchState.MIXED_MATCH: Color.YELLOW,
    MatchState.NO_MATCH: Color.RED,
}


def render_field_line(field_info: FieldDisplayInfo) -> Line:
    """A styled line with the field's name, mapping, type and example values."""
    return render_field_line_with_context(field_info, None, False)


def render_field_line_with_context(
    field_info: FieldDisplayInfo, is_source: bool | None, examples_mode: bool
) -> Line:
    """Render compactly with one side's example value in examples mode, fully otherwise."""
    if examples_mode and is_source is not None:
        return _render_examples_mode(field_info, is_source)
    return _render_normal_mode(field_info)


def _render_examples_mode(field_info: FieldDisplayInfo, is_source: bool) -> Line:
    spans = [Span(field_info.field.name, _fg(_NAME_COLORS[field_info.match_state]))]
    if field_info.field.is_required:
        spans.append(Span(" *", _fg(Color.RED)))

    value = field_info.source_example_value if is_source else field_info.target_example_value
    spans.append(Span(": ", _fg(Color.GRAY)))
    if value is not None:
        spans.append(Span(truncate_value(value, 100), _fg(Color.CYAN)))
    else:
        spans.append(Span("[no data]", _fg(Color.DARK_GRAY)))
    return Line(spans)


def _render_normal_mode(field_info: FieldDisplayInfo) -> Line:
    spans = [Span(field_info.field.name, _fg(_NAME_COLORS[field_info.match_state]))]
    if field_info.field.is_required:
        spans.append(Span(" *", _fg(Color.RED)))

    kind = field_info.field_type
    mapping = kind.mapping
    if isinstance(kind, RegularFieldType):
        if mapping is not None:
            spans.append(Span(" → ", _fg(Color.GRAY)))
            spans.append(Span(mapping.mapped_field_name, _fg(Color.BLUE)))
        spans.append(Span(f" <{field_info.field.field_type}>", _fg(Color.GRAY)))
        if mapping is not None:
            spans.append(Span(f" [{mapping.mapping_source.value}]", _fg(Color.GRAY)))
    else:
        target = mapping.mapped_field_name if mapping is not None else kind.target_entity
        spans.append(Span(" → ", _fg(Color.GRAY)))
        spans.append(Span(target, _fg(Color.BLUE)))
        spans.append(Span(f" <{kind.relationship_type.short_name()}>", _fg(Color.GRAY)))
        if mapping is not None:
            spans.append(Span(f" [{mapping.mapping_source.value}]", _fg(Color.GRAY)))

    if field_info.has_example_values():
        spans.append(Span(" | ", _fg(Color.GRAY)))
        source, target = field_info.source_example_value, field_info.target_example_value
        if source is not None:
            spans.append(Span("Source: ", _fg(Color.GRAY)))
            spans.append(Span(truncate_value(source, 60), _fg(Color.CYAN)))
        if source is not None and target is not None:
            spans.append(Span(" | ", _fg(Color.GRAY)))
        if target is not None:
            spans.append(Span("Target: ", _fg(Color.GRAY)))
            spans.append(Span(truncate_value(target, 60), _fg(Color.CYAN)))
    return Line(spans)


def render_field_string(field_info: FieldDisplayInfo) -> str:
    """The field rendered as plain text for string-based lists."""
    parts = [field_info.field.name]
    if field_info.field.is_required:
        parts.append(" *")

    kind = field_info.field_type
    mapping = kind.mapping
    if isinstance(kind, RegularFieldType):
        if mapping is not None:
            parts.append(f" → {mapping.mapped_field_name}")
        parts.append(f" <{field_info.field.field_type}>")
        if mapping is not None:
            parts.append(f" [{mapping.mapping_source.value}]")
    else:
        target = mapping.mapped_field_name if mapping is not None else kind.target_entity
        parts.append(f" → {target}")
        parts.append(f" <{kind.relationship_type.short_name()}>")
        if mapping is not None:
            parts.append(f" [{mapping.mapping_source.value}]")

    if field_info.has_example_values():
        parts.append(" | ")
        source, target = field_info.source_example_value, field_info.target_example_value
        if source is not None:
            parts.append(f"Source: {truncate_value(source, 60)}")
        if source is not None and target is not None:
            parts.append(" | ")
        if target is not None:
            parts.append(f"Target: {truncate_value(target, 60)}")
    return "".join(parts)