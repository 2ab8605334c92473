import pytest

from dynmig.field_renderer import MappingSource, MatchState
from dynmig.hierarchy import FieldRenderingInfo, HierarchyNode, TreeNode


class Folder(HierarchyNode):
    def __init__(self, name, count=0, target=None):
        self.name = name
        self.count = count
        self.target = target

    def display_name(self):
        return f"[{self.name}]"

    def clean_name(self):
        return self.name

    def item_count(self):
        return self.count

    def is_expandable(self):
        return self.count > 0

    def mapping_target(self):
        return self.target

    def node_key(self):
        return f"folder_{self.name}"


def test_abstract_node_cannot_be_created():
    with pytest.raises(TypeError):
        HierarchyNode()


def test_incomplete_subclass_cannot_be_wrapped():
    class Partial(HierarchyNode):
        def display_name(self):
            return "x"

    with pytest.raises(TypeError):
        TreeNode(Partial())


def test_default_optional_methods():
    node = Folder("accounts", 3)
    assert HierarchyNode.mapping_type(node) is None
    assert HierarchyNode.is_field_node(node) is False
    assert HierarchyNode.field_info(node) is None


def test_tree_node_keeps_subclass_data():
    tree_node = TreeNode(Folder("accounts", 3, target="clients"))
    assert tree_node.data.display_name() == "[accounts]"
    assert tree_node.data.node_key() == "folder_accounts"
    assert tree_node.data.mapping_target() == "clients"
    assert tree_node.data.is_expandable()


def test_tree_node_defaults():
    node = TreeNode(Folder("a"))
    assert node.children == []
    assert node.is_expanded is False
    assert node.level == 0


def test_tree_node_children_are_independent():
    first = TreeNode(Folder("a"))
    second = TreeNode(Folder("b"))
    first.children.append(TreeNode(Folder("c"), level=1))
    assert len(first.children) == 1
    assert second.children == []


def test_tree_node_with_children_and_level():
    child = TreeNode(Folder("child"), level=2)
    parent = TreeNode(Folder("parent", 1), [child], level=1)
    assert parent.children[0] is child
    assert parent.level == 1
    assert parent.children[0].data.clean_name() == "child"


def test_field_rendering_info_holds_values():
    info = FieldRenderingInfo(
        "name", "nvarchar", True, "fullname", MappingSource.MANUAL, MatchState.FULL_MATCH
    )
    assert info.mapping_target == "fullname"
    assert info.mapping_source is MappingSource.MANUAL
    assert info == FieldRenderingInfo(
        "name", "nvarchar", True, "fullname", MappingSource.MANUAL, MatchState.FULL_MATCH
    )