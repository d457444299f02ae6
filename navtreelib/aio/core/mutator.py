"""Structural edits on the in-memory tree."""

import logging

from ...exceptions import InvalidArgument, InvalidState
from .node import TreeNode


logger = logging.getLogger(__name__)


def clear_children(node: TreeNode) -> None:
    """Drop a node's children and collapse it.

    Runs before every (re)load so a node never has two live children
    lists. Safe to call on a node that is already cleared.
    """
    if node is None:
        raise InvalidArgument('node')
    node.expanded = False
    node.children = []
    node.has_children = False


def remove_node(node: TreeNode) -> None:
    """Detach a node from its parent's children.

    Raises:
        InvalidState: If the node has no parent (tree roots can't be removed)
    """
    if node is None:
        raise InvalidArgument('node')
    if node.parent is None:
        raise InvalidState("Cannot remove a node that doesn't have a parent")

    siblings = node.parent.children
    for index, sibling in enumerate(siblings):
        if sibling is node:
            del siblings[index]
            return

    # Already gone, e.g. the parent was reloaded since this node was handed out
    logger.debug("Node %r not among its parent's children; nothing removed", node.id)
