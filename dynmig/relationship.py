"""Relationship fields, their grouping by kind, and their rendering."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from dynmig.field_renderer import FieldInfo, MappingSource, MatchState
from dynmig.hierarchy import FieldRenderingInfo, HierarchyNode
from dynmig.relationship_types import RelationshipType, parse_relationship_type
from dynmig.terminal import Color, Line, Span, Style

_ARROW = " → "

_SYSTEM_ENTITIES = {
    "modifiedby": "SystemUser",
    "createdby": "SystemUser",
    "owninguser": "SystemUser",
    "owningteam": "Team",
    "ownerid": "Principal",
    "owningbusinessunit": "BusinessUnit",
}


def extract_target_entity(field_type: str) -> str:
    """The entity name after the arrow in a field type such as 'N:1 → Contact'."""
    position = field_type.find(_ARROW)
    if position < 0:
        return "Unknown"
    return field_type[position + len(_ARROW):].strip()


def _capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def _target_entity_from_lookup_name(field_name: str) -> str:
    """Guess the target entity of a lookup field such as '_cgk_presidentid_value'."""
    name = field_name.removesuffix("_value")
    if name.endswith("id"):
        without_id = name.removesuffix("id")
        if "_" in without_id:
            return _capitalize_first(without_id.rsplit("_", 1)[1])
        return without_id
    if "_" in name:
        entity = name.rsplit("_", 1)[1]
        return _SYSTEM_ENTITIES.get(entity, _capitalize_first(entity))
    return "Unknown"


@dataclass(frozen=True)
class RelationshipField(HierarchyNode):
    """A field that refers to another entity."""

    field: FieldInfo
    relationship_type: RelationshipType
    target_entity: str
    target: str | None = None

    @classmethod
    def from_field_info(cls, field_info: FieldInfo) -> RelationshipField | None:
        """A relationship field for a relationship or lookup field, else None."""
        kind = parse_relationship_type(field_info.field_type)
        if kind is not None:
            return cls(field_info, kind, extract_target_entity(field_info.field_type))
        if field_info.name.endswith("_value") and field_info.field_type == "Edm.Guid":
            return cls(
                field_info,
                RelationshipType.MANY_TO_ONE,
                _target_entity_from_lookup_name(field_info.name),
            )
        return None

    def with_mapping(self, mapping_target: str) -> RelationshipField:
        return dataclasses.replace(self, target=mapping_target)

    def display_name(self) -> str:
        return (
            f"{self.field.name}{_ARROW}{self.target_entity} "
            f"<{self.relationship_type.short_name()}>"
        )

    def clean_name(self) -> str:
        return self.field.name

    def item_count(self) -> int:
        return 0

    def is_expandable(self) -> bool:
        return False

    def mapping_target(self) -> str | None:
        return self.target

    def node_key(self) -> str:
        return f"field_{self.field.name}"

    def is_field_node(self) -> bool:
        return True

    def field_info(self) -> FieldRenderingInfo:
        mapped = self.target is not None
        return FieldRenderingInfo(
            field_name=self.field.name,
            field_type=f"{self.relationship_type.short_name()}{_ARROW}{self.target_entity}",
            is_required=self.field.is_required,
            mapping_target=self.target,
            mapping_source=MappingSource.MANUAL if mapped else None,
            match_state=MatchState.FULL_MATCH if mapped else MatchState.NO_MATCH,
        )


@dataclass
class RelationshipGroup(HierarchyNode):
    """Relationship fields of one kind; with a single field it stands for that field."""

    relationship_type: RelationshipType
    fields: list[RelationshipField] = dataclasses.field(default_factory=list)

    def add_field(self, field: RelationshipField) -> None:
        self.fields.append(field)

    def is_empty(self) -> bool:
        return not self.fields

    def _single(self) -> RelationshipField | None:
        return self.fields[0] if len(self.fields) == 1 else None

    def display_name(self) -> str:
        single = self._single()
        return single.field.name if single else self.relationship_type.display_name()

    def clean_name(self) -> str:
        return self.display_name()

    def item_count(self) -> int:
        return len(self.fields)

    def is_expandable(self) -> bool:
        return len(self.fields) > 1

    def mapping_target(self) -> str | None:
        single = self._single()
        return single.target if single else None

    def node_key(self) -> str:
        single = self._single()
        if single:
            return f"field_{single.field.name}"
        return f"group_{self.relationship_type.short_name()}"


_GROUP_ORDER = (
    RelationshipType.ONE_TO_MANY,
    RelationshipType.MANY_TO_ONE,
    RelationshipType.MANY_TO_MANY,
    RelationshipType.ONE_TO_ONE,
)


def create_groups(fields: list[RelationshipField]) -> list[RelationshipGroup]:
    """Group fields by relationship kind in a fixed order, dropping empty groups."""
    groups = {kind: RelationshipGroup(kind) for kind in _GROUP_ORDER}
    for field in fields:
        groups[field.relationship_type].add_field(field)
    return [group for group in groups.values() if not group.is_empty()]


def field_node_group(field: RelationshipField) -> RelationshipGroup:
    """A group holding just one field, used as a leaf in the hierarchy."""
    return RelationshipGroup(field.relationship_type, [field])


def render_relationship_field(field: RelationshipField) -> Line:
    """A styled line: name, required marker, arrow, target entity and kind."""
    spans = [Span(field.field.name, Style(fg=Color.WHITE))]
    if field.field.is_required:
        spans.append(Span(" *", Style(fg=Color.RED)))
    spans.append(Span(_ARROW, Style(fg=Color.GRAY)))
    spans.append(Span(field.target_entity, Style(fg=Color.BLUE)))
    spans.append(
        Span(f" <{field.relationship_type.short_name()}>", Style(fg=Color.GRAY))
    )
    return Line(spans)


def extract_relationship_fields(fields: list[FieldInfo]) -> list[RelationshipField]:
    """The relationship and lookup fields among the given fields."""
    return [
        relationship
        for relationship in map(RelationshipField.from_field_info, fields)
        if relationship is not None
    ]


def filter_out_relationships(fields: list[FieldInfo]) -> list[FieldInfo]:
    """The fields whose type does not name a relationship."""
    return [f for f in fields if parse_relationship_type(f.field_type) is None]