"""Read-only lookups over the in-memory tree.

None of these touch the data source: they only see what has been
loaded so far. Lookups that find nothing return None.
"""

from typing import Any, Optional

from ...config import ROOT_MARKER
from .node import TreeNode


def get_child(node: TreeNode, node_id: Any) -> Optional[TreeNode]:
    """Find a direct child by id.

    Ids are compared by their string form, so ``1`` matches ``'1'``.
    """
    wanted = str(node_id)
    for child in node.children or ():
        if str(child.id) == wanted:
            return child
    return None


def get_descendant(node: TreeNode, node_id: Any) -> Optional[TreeNode]:
    """Find a descendant by id.

    Direct children are checked first, then each loaded child subtree,
    depth-first and left to right. The tree must be acyclic.
    """
    found = get_child(node, node_id)
    if found is not None:
        return found

    for child in node.children or ():
        if child.children:
            found = get_descendant(child, node_id)
            if found is not None:
                return found
    return None


def get_tree_root(node: Optional[TreeNode], marker: str = ROOT_MARKER) -> Optional[TreeNode]:
    """Walk up from ``node`` (inclusive) to the node that roots its tree.

    A tree root carries ``marker`` in its metadata. Returns None when no
    ancestor has it.
    """
    current = node
    while current is not None:
        if current.meta_data and current.meta_data.get(marker):
            return current
        current = current.parent
    return None
