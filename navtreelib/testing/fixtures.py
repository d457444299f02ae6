"""Test fixtures for NavTreeLib consumers.

An in-memory data source with call counting and failure injection, and
a notifier that records what it was told. Both are meant for test suites
of applications built on NavTreeLib.
"""

import asyncio
import copy
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..aio.core import AsyncTreeDataSource, ChildrenRequest, Notifier, TreeNode, TreeRequest


class InMemoryDataSource(AsyncTreeDataSource):
    """Data source serving canned payloads.

    Payloads are deep-copied on every call, like a real backend returning
    fresh objects for each response.

    Example:
        source = InMemoryDataSource(
            trees={'content': {'id': -1, 'children': [{'id': 1, 'name': 'Home'}]}},
            children={1: [{'id': 2, 'name': 'About'}]},
        )
        source.fail_children(1, ConnectionError('offline'))
    """

    def __init__(
        self,
        trees: Optional[Mapping[str, Any]] = None,
        children: Optional[Mapping[Any, Sequence[Any]]] = None,
        menus: Optional[Mapping[Any, Sequence[Any]]] = None
    ):
        """Initialize with canned payloads.

        Args:
            trees: Root payload per section
            children: Child payloads per node id (looked up by ``str(id)``)
            menus: Menu item payloads per node id (looked up by ``str(id)``)
        """
        self.trees = dict(trees or {})
        self.children = {str(k): list(v) for k, v in (children or {}).items()}
        self.menus = {str(k): list(v) for k, v in (menus or {}).items()}
        self._failures: Dict[tuple, BaseException] = {}
        self.gate: Optional[asyncio.Event] = None
        self.closed = False

        # Call log
        self.tree_requests: List[TreeRequest] = []
        self.children_requests: List[ChildrenRequest] = []
        self.menu_requests: List[TreeNode] = []

    def set_children(self, node_id: Any, payloads: Sequence[Any]) -> None:
        """Replace the canned children of a node."""
        self.children[str(node_id)] = list(payloads)

    def fail_tree(self, section: str, error: BaseException) -> None:
        self._failures[('tree', section)] = error

    def fail_children(self, node_id: Any, error: BaseException) -> None:
        self._failures[('children', str(node_id))] = error

    def fail_menu(self, node_id: Any, error: BaseException) -> None:
        self._failures[('menu', str(node_id))] = error

    def recover(self) -> None:
        """Stop injecting failures."""
        self._failures.clear()

    async def _respond(self, failure_key: tuple, payload: Any) -> Any:
        # Always suspend so callers observe the in-flight state
        await asyncio.sleep(0)
        if self.gate is not None:
            await self.gate.wait()
        if failure_key in self._failures:
            raise self._failures[failure_key]
        return copy.deepcopy(payload)

    async def fetch_application_tree(self, request: TreeRequest) -> Any:
        self.tree_requests.append(request)
        if request.section not in self.trees and ('tree', request.section) not in self._failures:
            raise LookupError(f"No tree for section {request.section!r}")
        return await self._respond(('tree', request.section), self.trees.get(request.section))

    async def fetch_node_children(self, request: ChildrenRequest) -> List[Any]:
        self.children_requests.append(request)
        key = str(request.node.id)
        return await self._respond(('children', key), self.children.get(key, []))

    async def fetch_menu(self, node: TreeNode) -> List[Any]:
        self.menu_requests.append(node)
        key = str(node.id)
        return await self._respond(('menu', key), self.menus.get(key, []))

    async def close(self):
        self.closed = True


class RecordingNotifier(Notifier):
    """Notifier that keeps every error reason it receives."""

    def __init__(self):
        self.errors: List[Any] = []

    def notify_error(self, reason: Any) -> None:
        self.errors.append(reason)
