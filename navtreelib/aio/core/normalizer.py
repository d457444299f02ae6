"""Tree normalizer.

Every batch of nodes goes through here before it is attached to the
tree, so each node knows its level, its parent and its route.
"""

from typing import Iterable, Optional

from ...config import DEFAULT_ROUTE_TEMPLATE
from .node import TreeNode


def normalize(
    parent_node: Optional[TreeNode],
    nodes: Iterable[TreeNode],
    section: str,
    level: Optional[int] = None,
    route_template: str = DEFAULT_ROUTE_TEMPLATE
) -> None:
    """Assign level, default route and parent to a batch of sibling nodes.

    Running it twice with the same inputs changes nothing; an existing
    route is never overwritten.

    Args:
        parent_node: Node the batch belongs to (None for a detached batch)
        nodes: Sibling nodes, in display order
        section: Section used to build default routes
        level: Level to assign; defaults to the parent's level + 1, or 1
        route_template: Format string with ``{section}`` and ``{id}``
    """
    if level is None:
        level = parent_node.level + 1 if parent_node is not None else 1

    for node in nodes:
        node.level = level
        if not node.route_path:
            node.route_path = route_template.format(section=section, id=node.id)
        node.parent = parent_node


def normalize_subtree(
    root: TreeNode,
    section: str,
    route_template: str = DEFAULT_ROUTE_TEMPLATE
) -> None:
    """Normalize every batch already present below ``root``.

    Used for trees that arrive pre-expanded from the data source.
    """
    stack = [root]
    while stack:
        current = stack.pop()
        if not current.children:
            continue
        normalize(current, current.children, section, route_template=route_template)
        stack.extend(reversed(current.children))
