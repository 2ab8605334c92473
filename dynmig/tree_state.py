"""Expansion, selection, sorting and flattening state of a hierarchy tree."""

from __future__ import annotations

from enum import Enum

from dynmig.hierarchy import TreeNode
from dynmig.terminal import MouseEvent, MouseKind, Rect


class SortMode(Enum):
    ALPHABETICAL = "alphabetical"
    REVERSE_ALPHABETICAL = "reverse_alphabetical"


def _flatten(nodes: list[TreeNode], level: int, out: list[tuple[TreeNode, int]]) -> None:
    for node in nodes:
        out.append((node, level))
        if node.is_expanded:
            _flatten(node.children, level + 1, out)


def _set_expansion(nodes: list[TreeNode], target_key: str, expanded: bool) -> bool:
    """Set the expansion of the first node with the key; return True if found."""
    for node in nodes:
        if node.data.node_key() == target_key:
            node.is_expanded = expanded
            return True
        if node.children and _set_expansion(node.children, target_key, expanded):
            return True
    return False


def _sort(nodes: list[TreeNode], reverse: bool) -> None:
    nodes.sort(key=lambda node: node.data.clean_name().lower(), reverse=reverse)
    for node in nodes:
        if node.children:
            _sort(node.children, reverse)


class HierarchyTree:
    """A tree of collapsible nodes shown as a flat, selectable list."""

    def __init__(self) -> None:
        self.nodes: list[TreeNode] = []
        self.expanded_state: dict[str, bool] = {}
        self.selected: int | None = None
        self._flattened: list[tuple[TreeNode, int]] = []
        self._dirty = True

    def set_nodes(self, nodes: list[TreeNode]) -> None:
        """Replace the root nodes and select the first one."""
        self.nodes = list(nodes)
        self._dirty = True
        if self.nodes:
            self.selected = 0

    def toggle_expansion(self, node_key: str) -> None:
        expanded = not self.expanded_state.get(node_key, False)
        self.expanded_state[node_key] = expanded
        self._dirty = True
        _set_expansion(self.nodes, node_key, expanded)

    def _fresh(self) -> list[tuple[TreeNode, int]]:
        if self._dirty:
            self._flattened = []
            _flatten(self.nodes, 0, self._flattened)
            self._dirty = False
        return self._flattened

    def flattened_count(self) -> int:
        """The number of visible rows, without refreshing the cache."""
        if self._dirty:
            temp: list[tuple[TreeNode, int]] = []
            _flatten(self.nodes, 0, temp)
            return len(temp)
        return len(self._flattened)

    def visible_count(self) -> int:
        return self.flattened_count()

    def flattened_items(self) -> list[tuple[TreeNode, int]]:
        """The visible nodes with their depth, in display order."""
        return list(self._fresh())

    def next(self) -> None:
        count = len(self._fresh())
        if count == 0:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = 0 if self.selected >= count - 1 else self.selected + 1

    def previous(self) -> None:
        count = len(self._fresh())
        if count == 0:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = count - 1 if self.selected == 0 else self.selected - 1

    def selected_node(self) -> TreeNode | None:
        items = self._fresh()
        if self.selected is not None and self.selected < len(items):
            return items[self.selected][0]
        return None

    def toggle_selected(self) -> None:
        """Expand or collapse the selected node if it is expandable."""
        node = self.selected_node()
        if node is not None and node.data.is_expandable():
            self.toggle_expansion(node.data.node_key())

    def find_node_by_mapping_name(self, target_name: str) -> int | None:
        """Index of the first row whose name contains, or whose mapping equals, the name."""
        for index, (node, _) in enumerate(self._fresh()):
            if target_name in node.data.display_name():
                return index
            if node.data.mapping_target() == target_name:
                return index
        return None

    def set_selected_by_name(self, target_name: str) -> bool:
        index = self.find_node_by_mapping_name(target_name)
        if index is None:
            return False
        self.selected = index
        return True

    def selected_mapping_target(self) -> str | None:
        node = self.selected_node()
        return node.data.mapping_target() if node is not None else None

    def selected_node_name(self) -> str | None:
        node = self.selected_node()
        return node.data.clean_name() if node is not None else None

    def selected_node_expanded(self) -> bool | None:
        """Expansion of the selected node, or None if it cannot expand."""
        node = self.selected_node()
        if node is None or not node.data.is_expandable():
            return None
        return self.expanded_state.get(node.data.node_key(), False)

    def set_selected_node_expanded(self, expanded: bool) -> bool:
        node = self.selected_node()
        if node is None or not node.data.is_expandable():
            return False
        key = node.data.node_key()
        self.expanded_state[key] = expanded
        self._dirty = True
        _set_expansion(self.nodes, key, expanded)
        return True

    def node_expand_state(self, node_name: str) -> bool | None:
        """Expansion recorded for a key equal to, or overlapping, the name."""
        if node_name in self.expanded_state:
            return self.expanded_state[node_name]
        for key, expanded in self.expanded_state.items():
            if node_name in key or key in node_name:
                return expanded
        return None

    def set_node_expand_state(self, node_name: str, expanded: bool) -> bool:
        """Record expansion for the first visible node matching the name."""
        for node, _ in self._fresh():
            if node.data.clean_name() == node_name or node_name in node.data.display_name():
                self.expanded_state[node.data.node_key()] = expanded
                self._dirty = True
                return True
        return False

    def sort_nodes(self, sort_mode: SortMode) -> None:
        _sort(self.nodes, sort_mode is SortMode.REVERSE_ALPHABETICAL)
        self._dirty = True

    def handle_mouse_event(self, mouse: MouseEvent, area: Rect) -> None:
        """Scroll moves the selection; a left click selects a row and toggles it."""
        if mouse.kind is MouseKind.SCROLL_UP:
            self.previous()
        elif mouse.kind is MouseKind.SCROLL_DOWN:
            self.next()
        elif mouse.kind is MouseKind.DOWN and mouse.button == "left":
            row = max(mouse.row - (area.y + 1), 0)
            items = self._fresh()
            if row < len(items):
                self.selected = row
                node = items[row][0]
                if node.data.is_expandable():
                    self.toggle_expansion(node.data.node_key())