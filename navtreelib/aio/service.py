"""High-level tree service for NavTreeLib.

Wires the data source, tree cache, child loader and menu resolver into
the single object a UI layer talks to. All collaborators are injected;
anything left out gets a default.
"""

from typing import Any, List, Optional

from ..config import TreeServiceConfig
from .caching import TreeCache
from .core import (
    AsyncTreeDataSource,
    IconTranslator,
    MenuItem,
    Notifier,
    TreeNode,
    TreeResult,
    clear_children,
    get_child,
    get_descendant,
    get_tree_root,
    remove_node,
)
from .error_policies import ErrorPolicy
from .events import TreeEventEmitter
from .loader import ChildLoader, LoadResult
from .menu import MenuResolver


class TreeService:
    """Navigation tree operations for an administrative UI.

    Example:
        async with TreeService(data_source) as trees:
            tree = await trees.get_tree(section='content')
            folder = trees.get_child_node(tree.root, 1050)
            await trees.load_node_children(folder, section='content')

    Args:
        data_source: Backend serving trees, children and menus
        cache: Tree cache to use; pass a shared one to reuse trees across services
        icon_translator: Converts legacy menu icon names
        notifier: Receives user-facing error notifications
        events: Event channel for ``treeNodeLoadError``
        policy: How child-load failures reach the caller
        config: Shared configuration
    """

    def __init__(
        self,
        data_source: AsyncTreeDataSource,
        cache: Optional[TreeCache] = None,
        icon_translator: Optional[IconTranslator] = None,
        notifier: Optional[Notifier] = None,
        events: Optional[TreeEventEmitter] = None,
        policy: Optional[ErrorPolicy] = None,
        config: Optional[TreeServiceConfig] = None
    ):
        self.config = config if config is not None else TreeServiceConfig()
        self.data_source = data_source
        self.events = events if events is not None else TreeEventEmitter()
        self.cache = cache if cache is not None else TreeCache(data_source, config=self.config)
        self.loader = ChildLoader(
            data_source,
            events=self.events,
            notifier=notifier,
            policy=policy,
            config=self.config,
        )
        self.menus = MenuResolver(data_source, icon_translator=icon_translator)

    # Loading

    async def get_tree(self, section: Optional[str] = None, cache_key: str = '') -> TreeResult:
        return await self.cache.get_tree(section=section, cache_key=cache_key)

    async def load_node_children(self, node: TreeNode, section: Optional[str] = None) -> LoadResult:
        return await self.loader.load_children(node, section)

    async def get_children(self, node: TreeNode, section: Optional[str] = None) -> List[TreeNode]:
        return await self.loader.get_children(node, section)

    # Menus

    async def get_menu(self, tree_node: TreeNode) -> List[MenuItem]:
        return await self.menus.get_menu(tree_node)

    async def get_menu_item_by_alias(self, tree_node: TreeNode, menu_item_alias: str) -> Optional[MenuItem]:
        return await self.menus.get_menu_item_by_alias(tree_node, menu_item_alias)

    # Navigation

    def get_child_node(self, node: TreeNode, node_id: Any) -> Optional[TreeNode]:
        return get_child(node, node_id)

    def get_descendant_node(self, node: TreeNode, node_id: Any) -> Optional[TreeNode]:
        return get_descendant(node, node_id)

    def get_tree_root(self, node: TreeNode) -> Optional[TreeNode]:
        return get_tree_root(node, marker=self.config.root_marker)

    # Mutation

    def remove_node(self, node: TreeNode) -> None:
        remove_node(node)

    def remove_child_nodes(self, node: TreeNode) -> None:
        clear_children(node)

    async def close(self):
        """Close the data source, if it can be closed."""
        if hasattr(self.data_source, 'close'):
            await self.data_source.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
