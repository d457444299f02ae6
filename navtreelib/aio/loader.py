"""
Lazy child loading for tree nodes.

Fetches the children of a node from the data source, normalizes them and
installs them as the node's only children list. Failures reset the node,
go out on the event channel and the notifier, and come back to the
caller as a SourceFailure value (under the default policy).
"""

import asyncio
import logging
from typing import Dict, List, Optional, Union

from ..config import TreeServiceConfig
from ..exceptions import InvalidArgument, SourceFailure
from .core import (
    AsyncTreeDataSource,
    ChildrenRequest,
    LoggingNotifier,
    Notifier,
    TreeNode,
    clear_children,
    normalize,
    normalize_subtree,
)
from .error_policies import ErrorPolicy, ReturnFailurePolicy
from .events import TREE_NODE_LOAD_ERROR, TreeEventEmitter, TreeNodeLoadError


logger = logging.getLogger(__name__)

LoadResult = Union[List[TreeNode], SourceFailure]


class ChildLoader:
    """
    Loads node children on demand.

    Concurrent loads of the same node share one fetch: later callers
    wait on the future of the load already in progress.

    Example:
        loader = ChildLoader(data_source)
        children = await loader.load_children(node, 'content')
        if isinstance(children, SourceFailure):
            ...  # node is reset; call load_children again to retry
    """

    def __init__(
        self,
        data_source: AsyncTreeDataSource,
        events: Optional[TreeEventEmitter] = None,
        notifier: Optional[Notifier] = None,
        policy: Optional[ErrorPolicy] = None,
        config: Optional[TreeServiceConfig] = None
    ):
        """
        Initialize the loader.

        Args:
            data_source: Backend that serves node children
            events: Channel for ``treeNodeLoadError`` broadcasts
            notifier: Receives user-facing error notifications
            policy: Decides how failures reach the caller
            config: Shared service configuration
        """
        self._source = data_source
        self.events = events if events is not None else TreeEventEmitter()
        self.notifier = notifier if notifier is not None else LoggingNotifier()
        self.policy = policy if policy is not None else ReturnFailurePolicy()
        self.config = config if config is not None else TreeServiceConfig()
        self._loads_in_progress: Dict[int, asyncio.Future] = {}

        # Statistics
        self.loads_started = 0
        self.loads_failed = 0
        self.concurrent_waits = 0

    async def get_children(self, node: TreeNode, section: Optional[str] = None) -> List[TreeNode]:
        """
        Fetch and normalize a node's children without installing them.

        Raises:
            InvalidArgument: If node is None
            Exception: Whatever the data source raised
        """
        request = ChildrenRequest(node=node, section=section or self.config.default_section)
        payloads = await self._source.fetch_node_children(request)
        children = [TreeNode.from_payload(payload) for payload in payloads or ()]
        normalize(
            node,
            children,
            request.section,
            level=node.level + 1,
            route_template=self.config.route_template,
        )
        # Pre-expanded payloads carry their own nested batches
        for child in children:
            if child.children:
                normalize_subtree(child, request.section, route_template=self.config.route_template)
        return children

    async def load_children(self, node: TreeNode, section: Optional[str] = None) -> LoadResult:
        """
        Replace a node's children with a fresh list from the data source.

        Args:
            node: Node to (re)load
            section: Section the node belongs to

        Returns:
            The new children, or the SourceFailure under the default policy

        Raises:
            InvalidArgument: If node is None (before any side effect)
        """
        if node is None:
            raise InvalidArgument('node', "No node given to load children for")

        key = id(node)
        if self.config.coalesce_requests and key in self._loads_in_progress:
            self.concurrent_waits += 1
            logger.debug("Waiting on in-flight load of node %r", node.id)
            # A cancelled waiter must not cancel the shared load
            return await asyncio.shield(self._loads_in_progress[key])

        future = asyncio.get_running_loop().create_future()
        self._loads_in_progress[key] = future
        try:
            result = await self._load(node, section or self.config.default_section)
        except asyncio.CancelledError:
            if not future.done():
                future.cancel()
            raise
        except Exception as e:
            if not future.done():
                future.set_exception(e)
                # Mark retrieved; waiters (if any) still receive it
                future.exception()
            raise
        else:
            if not future.done():
                future.set_result(result)
            return result
        finally:
            if self._loads_in_progress.get(key) is future:
                del self._loads_in_progress[key]

    async def _load(self, node: TreeNode, section: str) -> LoadResult:
        clear_children(node)
        node.loading = True
        self.loads_started += 1

        try:
            children = await self.get_children(node, section)
        except asyncio.CancelledError:
            node.loading = False
            raise
        except Exception as e:
            node.loading = False
            return await self._handle_failure(node, e)

        node.loading = False
        node.children = children
        node.expanded = True
        node.has_children = True
        logger.debug("Loaded %d children for node %r", len(children), node.id)
        return children

    async def _handle_failure(self, node: TreeNode, error: Exception) -> LoadResult:
        self.loads_failed += 1
        failure = SourceFailure('load_children', error, node=node)
        logger.warning("Loading children of node %r failed: %s", node.id, failure.reason)

        self.events.emit(TREE_NODE_LOAD_ERROR, TreeNodeLoadError(node=node, error=failure))
        self.notifier.notify_error(failure.reason)

        return await self.policy.handle(failure, 'load_children', node)

    def is_loading(self, node: TreeNode) -> bool:
        """True while a load of ``node`` is in flight."""
        return id(node) in self._loads_in_progress

    def get_stats(self) -> dict:
        """
        Get loader statistics for monitoring and debugging.
        """
        return {
            'loads_started': self.loads_started,
            'loads_failed': self.loads_failed,
            'concurrent_waits': self.concurrent_waits,
            'loads_in_progress': len(self._loads_in_progress),
        }
