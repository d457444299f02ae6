"""Asynchronous implementation of NavTreeLib.

All data source access is async; everything that only looks at the
in-memory tree is plain synchronous code.
"""

# Core abstractions
from .core import (
    TreeNode,
    TreeResult,
    MenuItem,
    TreeRequest,
    ChildrenRequest,
    AsyncTreeDataSource,
    IconTranslator,
    IdentityIconTranslator,
    MappingIconTranslator,
    Notifier,
    LoggingNotifier,
    normalize,
    normalize_subtree,
    get_child,
    get_descendant,
    get_tree_root,
    clear_children,
    remove_node,
)

# Events and error policies
from .events import TREE_NODE_LOAD_ERROR, TreeEventEmitter, TreeNodeLoadError
from .error_policies import (
    ErrorPolicy,
    ReturnFailurePolicy,
    FailFastPolicy,
    CollectFailuresPolicy,
)

# Components
from .loader import ChildLoader
from .caching import TreeCache
from .menu import MenuResolver

# High-level API
from .service import TreeService

__all__ = [
    # Model
    'TreeNode',
    'TreeResult',
    'MenuItem',
    'TreeRequest',
    'ChildrenRequest',
    # Ports
    'AsyncTreeDataSource',
    'IconTranslator',
    'IdentityIconTranslator',
    'MappingIconTranslator',
    'Notifier',
    'LoggingNotifier',
    # Tree functions
    'normalize',
    'normalize_subtree',
    'get_child',
    'get_descendant',
    'get_tree_root',
    'clear_children',
    'remove_node',
    # Events
    'TREE_NODE_LOAD_ERROR',
    'TreeEventEmitter',
    'TreeNodeLoadError',
    # Error policies
    'ErrorPolicy',
    'ReturnFailurePolicy',
    'FailFastPolicy',
    'CollectFailuresPolicy',
    # Components
    'ChildLoader',
    'TreeCache',
    'MenuResolver',
    # High-level API
    'TreeService',
]
