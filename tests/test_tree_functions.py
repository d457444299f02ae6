"""Tests for the in-memory tree functions: normalize, navigate, mutate."""

import pytest

from navtreelib import InvalidArgument, InvalidState
from navtreelib.aio.core import (
    TreeNode,
    normalize,
    normalize_subtree,
    get_child,
    get_descendant,
    get_tree_root,
    clear_children,
    remove_node,
)


def attach(parent, *children):
    """Attach children to parent the way a load would."""
    parent.children = list(children)
    normalize(parent, parent.children, 'content')
    parent.has_children = True
    return parent


@pytest.fixture
def sample_tree():
    """Create a small loaded tree.

    Structure:
        A
        ├── B
        │   ├── D
        │   └── E
        └── C
    """
    a = TreeNode(id='A', meta_data={'treeType': 'content'})
    b, c, d, e = (TreeNode(id=x) for x in 'BCDE')
    attach(a, b, c)
    attach(b, d, e)
    return {'A': a, 'B': b, 'C': c, 'D': d, 'E': e}


class TestNormalize:
    """Test level, route and parent assignment."""

    def test_assigns_parent_level_and_route(self):
        parent = TreeNode(id=10, level=2)
        nodes = [TreeNode(id=1), TreeNode(id=2)]

        normalize(parent, nodes, 'media')

        for node in nodes:
            assert node.parent is parent
            assert node.level == 3
        assert [n.route_path for n in nodes] == ['media/edit/1', 'media/edit/2']

    def test_keeps_existing_route(self):
        node = TreeNode(id=5, route_path='settings/custom/5')

        normalize(TreeNode(id=0), [node], 'settings')

        assert node.route_path == 'settings/custom/5'

    def test_explicit_level_wins(self):
        node = TreeNode(id=1)
        normalize(TreeNode(id=0, level=7), [node], 'content', level=1)
        assert node.level == 1

    def test_level_defaults_to_one_without_parent(self):
        node = TreeNode(id=1)
        normalize(None, [node], 'content')
        assert node.level == 1
        assert node.parent is None

    def test_idempotent(self):
        parent = TreeNode(id=0)
        nodes = [TreeNode(id=1)]
        normalize(parent, nodes, 'content')
        first = (nodes[0].level, nodes[0].route_path, nodes[0].parent)

        normalize(parent, nodes, 'content')

        assert (nodes[0].level, nodes[0].route_path, nodes[0].parent) == first

    def test_route_not_overwritten_by_other_section(self):
        node = TreeNode(id=1)
        normalize(None, [node], 'content')
        normalize(None, [node], 'media')
        assert node.route_path == 'content/edit/1'

    def test_custom_route_template(self):
        node = TreeNode(id=3)
        normalize(None, [node], 'member', route_template='{section}/view/{id}')
        assert node.route_path == 'member/view/3'

    def test_normalize_subtree_reaches_nested_batches(self):
        root = TreeNode.from_payload({
            'id': -1,
            'children': [
                {'id': 1, 'children': [{'id': 2, 'children': [{'id': 3}]}]},
                {'id': 4},
            ],
        })

        normalize_subtree(root, 'content')

        one = root.children[0]
        two = one.children[0]
        three = two.children[0]
        assert one.parent is root and one.level == 1
        assert two.parent is one and two.level == 2
        assert three.parent is two and three.level == 3
        assert three.route_path == 'content/edit/3'
        assert root.children[1].level == 1


class TestNavigator:
    """Test child, descendant and root lookups."""

    def test_get_child_compares_string_forms(self):
        parent = TreeNode(id=0)
        child = TreeNode(id=1050)
        attach(parent, child)

        assert get_child(parent, '1050') is child
        assert get_child(parent, 1050) is child

    def test_get_child_not_found(self, sample_tree):
        assert get_child(sample_tree['A'], 'D') is None

    def test_get_child_of_unloaded_node(self):
        assert get_child(TreeNode(id=1), 2) is None

    def test_get_descendant_finds_grandchild(self, sample_tree):
        assert get_descendant(sample_tree['A'], 'E') is sample_tree['E']

    def test_get_descendant_prefers_direct_children(self):
        a = TreeNode(id='A')
        b = TreeNode(id='B')
        dup_deep = TreeNode(id='X')
        dup_direct = TreeNode(id='X')
        attach(a, b, dup_direct)
        attach(b, dup_deep)

        assert get_descendant(a, 'X') is dup_direct

    def test_get_descendant_left_to_right(self):
        a = TreeNode(id='A')
        b, c = TreeNode(id='B'), TreeNode(id='C')
        left, right = TreeNode(id='X'), TreeNode(id='X')
        attach(a, b, c)
        attach(b, left)
        attach(c, right)

        assert get_descendant(a, 'X') is left

    def test_get_descendant_missing(self, sample_tree):
        assert get_descendant(sample_tree['A'], 'missing') is None

    def test_get_tree_root_from_descendant(self, sample_tree):
        assert get_tree_root(sample_tree['E']) is sample_tree['A']

    def test_get_tree_root_is_inclusive(self, sample_tree):
        sample_tree['B'].meta_data['treeType'] = 'nested'
        assert get_tree_root(sample_tree['B']) is sample_tree['B']
        assert get_tree_root(sample_tree['D']) is sample_tree['B']

    def test_get_tree_root_not_found(self):
        a = TreeNode(id='A')
        b = TreeNode(id='B')
        attach(a, b)
        assert get_tree_root(b) is None

    def test_get_tree_root_custom_marker(self, sample_tree):
        sample_tree['C'].meta_data['section'] = True
        assert get_tree_root(sample_tree['C'], marker='section') is sample_tree['C']
        assert get_tree_root(sample_tree['E'], marker='section') is None


class TestMutator:
    """Test clearing and removing nodes."""

    def test_clear_children(self, sample_tree):
        b = sample_tree['B']
        b.expanded = True

        clear_children(b)

        assert b.children == []
        assert b.expanded is False
        assert b.has_children is False

    def test_clear_children_twice_is_noop(self):
        node = TreeNode(id=1)
        clear_children(node)
        clear_children(node)
        assert node.children == [] and not node.has_children and not node.expanded

    def test_clear_children_requires_node(self):
        with pytest.raises(InvalidArgument):
            clear_children(None)

    def test_remove_root_fails(self, sample_tree):
        with pytest.raises(InvalidState):
            remove_node(sample_tree['A'])

    def test_remove_node_keeps_sibling_order(self):
        parent = TreeNode(id=0)
        kids = [TreeNode(id=i) for i in range(4)]
        attach(parent, *kids)

        remove_node(kids[1])

        assert parent.children == [kids[0], kids[2], kids[3]]
        assert all(a is b for a, b in zip(parent.children, [kids[0], kids[2], kids[3]]))

    def test_remove_node_matches_by_identity(self):
        parent = TreeNode(id=0)
        first, twin = TreeNode(id=7), TreeNode(id=7)
        attach(parent, first, twin)

        remove_node(twin)

        assert len(parent.children) == 1
        assert parent.children[0] is first

    def test_remove_detached_node_is_noop(self, sample_tree):
        b = sample_tree['B']
        stale = sample_tree['D']
        attach(b, TreeNode(id='D'), TreeNode(id='E'))  # reload replaced D
        before = list(b.children)

        remove_node(stale)

        assert b.children == before
