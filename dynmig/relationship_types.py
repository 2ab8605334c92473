"""Kinds of entity relationships and parsing them from field type strings."""

from __future__ import annotations

from enum import Enum


class RelationshipType(Enum):
    ONE_TO_MANY = "1:N"
    MANY_TO_ONE = "N:1"
    MANY_TO_MANY = "N:N"
    ONE_TO_ONE = "1:1"

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def short_name(self) -> str:
        return _SHORT_NAMES[self]


_DISPLAY_NAMES = {
    RelationshipType.ONE_TO_MANY: "Lookup (1:Many)",
    RelationshipType.MANY_TO_ONE: "Reference (Many:1)",
    RelationshipType.MANY_TO_MANY: "Junction (Many:Many)",
    RelationshipType.ONE_TO_ONE: "Direct (1:1)",
}

_SHORT_NAMES = {
    RelationshipType.ONE_TO_MANY: "1:Many",
    RelationshipType.MANY_TO_ONE: "Many:1",
    RelationshipType.MANY_TO_MANY: "Many:Many",
    RelationshipType.ONE_TO_ONE: "1:1",
}

_PREFIXES = (
    ("1:N", RelationshipType.ONE_TO_MANY),
    ("N:1", RelationshipType.MANY_TO_ONE),
    ("nav", RelationshipType.MANY_TO_ONE),
    ("N:N", RelationshipType.MANY_TO_MANY),
    ("1:1", RelationshipType.ONE_TO_ONE),
)


def parse_relationship_type(field_type: str) -> RelationshipType | None:
    """The relationship a field type string starts with, or None for plain fields."""
    return next(
        (kind for prefix, kind in _PREFIXES if field_type.startswith(prefix)), None
    )