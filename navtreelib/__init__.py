"""NavTreeLib - Lazily loaded navigation trees for admin UIs.

NavTreeLib keeps an in-memory tree of navigation nodes per section,
fetching the first level on demand and each node's children when the
node is expanded. The backend is any object implementing
``AsyncTreeDataSource``.

    from navtreelib.aio import TreeService

    service = TreeService(my_data_source)
    tree = await service.get_tree(section='content')
"""

import logging

__version__ = "0.1.0"

from . import aio
from .config import TreeServiceConfig
from .exceptions import NavTreeError, InvalidArgument, InvalidState, SourceFailure

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "aio",
    "TreeServiceConfig",
    "NavTreeError",
    "InvalidArgument",
    "InvalidState",
    "SourceFailure",
]
