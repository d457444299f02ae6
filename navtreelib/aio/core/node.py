"""Tree node model.

Defines the nodes that make up a navigation tree, the named tree result
cached per section, and the context menu items attached to a node.
Payloads from the data source use camelCase keys; they are converted
here so the rest of the library only deals with these types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union


_NODE_KEYS = {
    'id', 'name', 'level', 'routePath', 'children', 'expanded',
    'loading', 'hasChildren', 'metaData', 'icon', 'parent',
}
_MENU_KEYS = {'alias', 'name', 'cssclass', 'separator', 'metaData'}


@dataclass(eq=False)
class TreeNode:
    """A single entry of the navigation tree.

    Nodes compare by identity: two payloads with the same id are still
    different nodes until one replaces the other on reload.

    ``parent`` and ``children`` are excluded from repr because they point
    at each other.
    """

    id: Any
    name: str = ''
    level: int = 0
    route_path: str = ''
    parent: Optional['TreeNode'] = field(default=None, repr=False)
    children: List['TreeNode'] = field(default_factory=list, repr=False)
    expanded: bool = False
    loading: bool = False
    has_children: bool = False
    meta_data: Dict[str, Any] = field(default_factory=dict)
    icon: str = ''
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Union['TreeNode', Mapping[str, Any]]) -> 'TreeNode':
        """Build a node from a data source payload.

        Nested ``children`` payloads are converted recursively. Parent links
        and levels are left for the normalizer.
        """
        if isinstance(payload, TreeNode):
            return payload

        node = cls(
            id=payload.get('id'),
            name=payload.get('name') or '',
            level=payload.get('level') or 0,
            route_path=payload.get('routePath') or '',
            expanded=bool(payload.get('expanded', False)),
            has_children=bool(payload.get('hasChildren', False)),
            meta_data=dict(payload.get('metaData') or {}),
            icon=payload.get('icon') or '',
            extra={k: v for k, v in payload.items() if k not in _NODE_KEYS},
        )
        node.children = [cls.from_payload(child) for child in payload.get('children') or []]
        return node

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        return not self.children


@dataclass(eq=False)
class TreeResult:
    """A whole tree for one section, as stored in the tree cache."""

    name: str
    alias: str
    root: TreeNode


@dataclass
class MenuItem:
    """An action in a node's context menu."""

    alias: str
    name: str = ''
    icon: str = ''
    separator: bool = False
    meta_data: Dict[str, Any] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Union['MenuItem', Mapping[str, Any]]) -> 'MenuItem':
        if isinstance(payload, MenuItem):
            return payload
        return cls(
            alias=payload.get('alias') or '',
            name=payload.get('name') or '',
            icon=payload.get('cssclass') or '',
            separator=bool(payload.get('separator', False)),
            meta_data=dict(payload.get('metaData') or {}),
            extra={k: v for k, v in payload.items() if k not in _MENU_KEYS},
        )
