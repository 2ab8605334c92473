"""Nodes of a collapsible hierarchy and the interface their items provide."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from dynmig.field_renderer import MappingSource, MatchState


@dataclass(frozen=True)
class FieldRenderingInfo:
    """What a field node gives for rich field rendering."""

    field_name: str
    field_type: str
    is_required: bool
    mapping_target: str | None
    mapping_source: MappingSource | None
    match_state: MatchState


class HierarchyNode(ABC):
    """An item that can be shown in a hierarchical tree."""

    @abstractmethod
    def display_name(self) -> str:
        """The name shown for this node."""

    @abstractmethod
    def clean_name(self) -> str:
        """The bare name, without icon or count."""

    @abstractmethod
    def item_count(self) -> int:
        """The number of child items, shown when collapsed."""

    @abstractmethod
    def is_expandable(self) -> bool:
        """Whether the node can be expanded and collapsed."""

    @abstractmethod
    def mapping_target(self) -> str | None:
        """The name this node is mapped to, if any."""

    def mapping_type(self) -> str | None:
        """The kind of mapping, such as 'exact' or 'manual', if any."""
        return None

    @abstractmethod
    def node_key(self) -> str:
        """A unique key used to track expansion state."""

    def is_field_node(self) -> bool:
        return False

    def field_info(self) -> FieldRenderingInfo | None:
        return None


@dataclass
class TreeNode:
    """A hierarchy item with its children, expansion state and depth."""

    data: HierarchyNode
    children: list[TreeNode] = field(default_factory=list)
    is_expanded: bool = False
    level: int = 0