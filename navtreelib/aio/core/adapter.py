"""Ports to the collaborators of the tree service.

The data source is the only thing that does I/O. Icon translation and
error notification are plain synchronous hooks. Implementations are
supplied by the application; simple defaults live here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, Union

from .node import MenuItem, TreeNode
from .requests import ChildrenRequest, TreeRequest


logger = logging.getLogger(__name__)

NodePayload = Union[TreeNode, Mapping[str, Any]]
MenuPayload = Union[MenuItem, Mapping[str, Any]]


class AsyncTreeDataSource(ABC):
    """Abstract base class for the backend that serves tree data.

    All methods are coroutines and may raise any exception on transport
    or server errors; the tree service turns those into SourceFailure.
    """

    @abstractmethod
    async def fetch_application_tree(self, request: TreeRequest) -> NodePayload:
        """Fetch the root node of a section's tree, with its first level.

        Args:
            request: Section and cache key of the requested tree

        Returns:
            Root node payload; its ``children`` hold the first level
        """
        pass

    @abstractmethod
    async def fetch_node_children(self, request: ChildrenRequest) -> Sequence[NodePayload]:
        """Fetch the children of a node, in display order.

        Args:
            request: Node to expand and the section it belongs to

        Returns:
            Ordered child payloads (possibly empty)
        """
        pass

    @abstractmethod
    async def fetch_menu(self, node: TreeNode) -> Sequence[MenuPayload]:
        """Fetch the context menu items of a node, in display order."""
        pass

    async def close(self):
        """Release backend resources. Override if needed."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


class IconTranslator(ABC):
    """Maps legacy icon class names to current ones."""

    @abstractmethod
    def translate_legacy_icon(self, name: str) -> str:
        pass


class IdentityIconTranslator(IconTranslator):
    """Leaves icon names untouched."""

    def translate_legacy_icon(self, name: str) -> str:
        return name


class MappingIconTranslator(IconTranslator):
    """Translates icon names through a lookup table.

    Names missing from the table are returned unchanged.

    Example:
        translator = MappingIconTranslator({'.sprTreeFolder': 'icon-folder'})
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self.mapping = dict(mapping or {})

    def translate_legacy_icon(self, name: str) -> str:
        return self.mapping.get(name, name)


class Notifier(ABC):
    """Receives user-facing error notifications."""

    @abstractmethod
    def notify_error(self, reason: Any) -> None:
        pass


class LoggingNotifier(Notifier):
    """Default notifier: writes notifications to the log."""

    def notify_error(self, reason: Any) -> None:
        logger.error("Tree error: %s", reason)
