"""Event channel for tree notifications.

Listeners subscribe by event name. The service owns one emitter and
passes it to the components that broadcast; there is no global bus.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .core.node import TreeNode


logger = logging.getLogger(__name__)

TREE_NODE_LOAD_ERROR = "treeNodeLoadError"

Listener = Callable[[Any], None]


@dataclass
class TreeNodeLoadError:
    """Payload of the ``treeNodeLoadError`` event."""

    node: TreeNode
    error: Any


class TreeEventEmitter:
    """Synchronous publish/subscribe channel."""

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> Listener:
        """Subscribe ``listener`` to ``event``. Returns the listener."""
        self._listeners[event].append(listener)
        return listener

    def off(self, event: str, listener: Listener) -> None:
        """Unsubscribe a listener; unknown listeners are ignored."""
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: str, payload: Any = None) -> int:
        """Deliver ``payload`` to every listener of ``event``.

        A listener that raises is logged and the rest still run.

        Returns:
            Number of listeners that handled the event without error
        """
        delivered = 0
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event)
            else:
                delivered += 1
        return delivered

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))
