"""Context menu resolution for tree nodes."""

import logging
from typing import List, Optional

from ..exceptions import InvalidArgument, SourceFailure
from .core import AsyncTreeDataSource, IconTranslator, IdentityIconTranslator, MenuItem, TreeNode


logger = logging.getLogger(__name__)


class MenuResolver:
    """Fetches a node's menu and converts legacy icon names."""

    def __init__(
        self,
        data_source: AsyncTreeDataSource,
        icon_translator: Optional[IconTranslator] = None
    ):
        self._source = data_source
        self.icon_translator = icon_translator if icon_translator is not None else IdentityIconTranslator()

    async def get_menu(self, tree_node: TreeNode) -> List[MenuItem]:
        """Get the context menu items of a node, in display order.

        Raises:
            InvalidArgument: If tree_node is None
            SourceFailure: If the data source failed
        """
        if tree_node is None:
            raise InvalidArgument('tree_node')

        try:
            payloads = await self._source.fetch_menu(tree_node)
        except Exception as e:
            logger.warning("Fetching the menu of node %r failed: %s", tree_node.id, e)
            raise SourceFailure('get_menu', e, node=tree_node) from e

        items = [MenuItem.from_payload(payload) for payload in payloads or ()]
        for item in items:
            item.icon = self.icon_translator.translate_legacy_icon(item.icon)
        return items

    async def get_menu_item_by_alias(self, tree_node: TreeNode, menu_item_alias: str) -> Optional[MenuItem]:
        """Find a node's menu item by alias; None if the menu has none."""
        if tree_node is None:
            raise InvalidArgument('tree_node')
        if not menu_item_alias:
            raise InvalidArgument('menu_item_alias')

        for item in await self.get_menu(tree_node):
            if item.alias == menu_item_alias:
                return item
        return None
