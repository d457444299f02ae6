"""Core abstractions for the navigation tree.

Node model, request types, collaborator ports, and the pure functions
that normalize, search and edit the in-memory tree.
"""

from .node import TreeNode, TreeResult, MenuItem
from .requests import TreeRequest, ChildrenRequest
from .adapter import (
    AsyncTreeDataSource,
    IconTranslator,
    IdentityIconTranslator,
    MappingIconTranslator,
    Notifier,
    LoggingNotifier,
)
from .normalizer import normalize, normalize_subtree
from .navigator import get_child, get_descendant, get_tree_root
from .mutator import clear_children, remove_node

__all__ = [
    # Model
    'TreeNode',
    'TreeResult',
    'MenuItem',
    # Requests
    'TreeRequest',
    'ChildrenRequest',
    # Ports
    'AsyncTreeDataSource',
    'IconTranslator',
    'IdentityIconTranslator',
    'MappingIconTranslator',
    'Notifier',
    'LoggingNotifier',
    # Normalizer
    'normalize',
    'normalize_subtree',
    # Navigator
    'get_child',
    'get_descendant',
    'get_tree_root',
    # Mutator
    'clear_children',
    'remove_node',
]
