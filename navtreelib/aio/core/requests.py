"""Typed request objects passed to the data source.

Each data source call receives one of these instead of a loose mapping,
so required fields are checked once, when the request is built.
"""

from dataclasses import dataclass

from ...config import DEFAULT_SECTION
from ...exceptions import InvalidArgument
from .node import TreeNode


@dataclass(frozen=True)
class TreeRequest:
    """Request for the whole application tree of a section."""

    section: str = DEFAULT_SECTION
    cache_key: str = ''

    def __post_init__(self):
        if not self.section:
            raise InvalidArgument('section')
        if self.cache_key is None:
            object.__setattr__(self, 'cache_key', '')

    @property
    def composite_key(self) -> str:
        """Key under which the tree is cached, e.g. ``'_content'``."""
        return f"{self.cache_key}_{self.section}"


@dataclass(frozen=True)
class ChildrenRequest:
    """Request for the children of one node."""

    node: TreeNode
    section: str = DEFAULT_SECTION

    def __post_init__(self):
        if self.node is None:
            raise InvalidArgument('node')
        if not self.section:
            raise InvalidArgument('section')
