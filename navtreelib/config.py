"""Configuration for NavTreeLib.

Holds the few knobs a tree service needs: which section is the default,
how default routes are built, which metadata key marks a tree root, and
how the tree cache behaves.
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidArgument


DEFAULT_SECTION = "content"
DEFAULT_ROUTE_TEMPLATE = "{section}/edit/{id}"
ROOT_MARKER = "treeType"


@dataclass
class TreeServiceConfig:
    """Configuration shared by the tree service components.

    Setting ``cache_max_entries`` gives up the guarantee that a section/cache
    key pair maps to one TreeResult for the cache's lifetime: evicted trees
    are fetched again as new objects, and old references go stale.
    """

    default_section: str = DEFAULT_SECTION         # Section used when none is given
    route_template: str = DEFAULT_ROUTE_TEMPLATE   # Default routePath for nodes without one
    root_marker: str = ROOT_MARKER                 # metaData key identifying a tree root
    coalesce_requests: bool = True                 # Share in-flight loads for the same key/node
    cache_max_entries: Optional[int] = None        # None = unbounded tree cache

    def __post_init__(self):
        if not self.default_section:
            raise InvalidArgument('default_section')
        if '{id}' not in self.route_template:
            raise InvalidArgument(
                'route_template',
                f"route_template must contain '{{id}}': {self.route_template!r}"
            )
        if self.cache_max_entries is not None and self.cache_max_entries < 1:
            raise InvalidArgument(
                'cache_max_entries',
                f"cache_max_entries must be positive, got {self.cache_max_entries}"
            )

    def route_for(self, section: str, node_id) -> str:
        """Build the default route for a node in a section."""
        return self.route_template.format(section=section, id=node_id)
