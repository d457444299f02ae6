"""
Per-section cache of whole navigation trees.

A tree is fetched from the data source the first time a section/cache key
pair is asked for, then served from memory for the lifetime of the cache
object. Entries never expire; ``clear()`` is the only reset. A bounded
cache (``cache_max_entries``) is the exception: an evicted key is fetched
again and comes back as a new TreeResult.
"""

import asyncio
import logging
from typing import Dict, Optional

from cachetools import Cache, LRUCache

from ...config import TreeServiceConfig
from ...exceptions import SourceFailure
from ..core import AsyncTreeDataSource, TreeNode, TreeRequest, TreeResult, normalize_subtree


logger = logging.getLogger(__name__)


class TreeCache:
    """
    Keyed store of TreeResult objects, one per ``cache_key + '_' + section``.

    Construct one per application or session and hand it to the service;
    there is no module-level instance. Uses Future-based coordination so
    concurrent misses for the same key run a single fetch.

    Example:
        cache = TreeCache(data_source)
        tree = await cache.get_tree(section='media')
        assert tree is await cache.get_tree(section='media')
    """

    def __init__(
        self,
        data_source: AsyncTreeDataSource,
        config: Optional[TreeServiceConfig] = None
    ):
        """
        Initialize the tree cache.

        Args:
            data_source: Backend that serves whole application trees
            config: Shared service configuration
        """
        self._source = data_source
        self.config = config if config is not None else TreeServiceConfig()
        if self.config.cache_max_entries is None:
            self._cache = Cache(maxsize=float('inf'))
        else:
            self._cache = LRUCache(maxsize=self.config.cache_max_entries)
        self._fetches_in_progress: Dict[str, asyncio.Future] = {}

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0
        self.concurrent_waits = 0

    async def get_tree(self, section: Optional[str] = None, cache_key: str = '') -> TreeResult:
        """
        Get the tree of a section, fetching it on first use.

        This method:
        1. Returns the cached tree if there is one
        2. Waits for a fetch of the same key already in progress
        3. Otherwise fetches, normalizes and caches the tree

        Raises:
            InvalidArgument: If section is empty
            SourceFailure: If the data source failed; nothing is cached
        """
        request = TreeRequest(section=section or self.config.default_section, cache_key=cache_key)
        key = request.composite_key

        # 1. Check cache
        cached = self._cache.get(key)
        if cached is not None:
            self.cache_hits += 1
            logger.debug("Tree cache hit for %s", key)
            return cached

        # 2. Check if fetch already in progress
        if self.config.coalesce_requests and key in self._fetches_in_progress:
            self.concurrent_waits += 1
            logger.debug("Waiting on in-flight tree fetch for %s", key)
            # A cancelled waiter must not cancel the shared fetch
            return await asyncio.shield(self._fetches_in_progress[key])

        # 3. Cache miss - need to fetch
        self.cache_misses += 1
        logger.debug("Tree cache miss for %s", key)

        future = asyncio.get_running_loop().create_future()
        self._fetches_in_progress[key] = future
        try:
            result = await self._fetch(request)
        except asyncio.CancelledError:
            if not future.done():
                future.cancel()
            raise
        except Exception as e:
            if not future.done():
                future.set_exception(e)
                future.exception()
            raise
        else:
            self._cache[key] = result
            if not future.done():
                future.set_result(result)
            return result
        finally:
            if self._fetches_in_progress.get(key) is future:
                del self._fetches_in_progress[key]

    async def _fetch(self, request: TreeRequest) -> TreeResult:
        try:
            payload = await self._source.fetch_application_tree(request)
        except Exception as e:
            logger.warning("Fetching the %s tree failed: %s", request.section, e)
            raise SourceFailure('get_tree', e) from e

        root = TreeNode.from_payload(payload)
        result = TreeResult(name=request.section, alias=request.section, root=root)
        normalize_subtree(root, request.section, route_template=self.config.route_template)
        return result

    def __contains__(self, key) -> bool:
        """Check for a cached tree by composite key or ``(section, cache_key)``."""
        if isinstance(key, tuple):
            section, cache_key = key
            key = TreeRequest(section=section, cache_key=cache_key).composite_key
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def get_cache_stats(self) -> dict:
        """
        Get cache statistics for monitoring and debugging.
        """
        total_requests = self.cache_hits + self.cache_misses
        hit_rate = self.cache_hits / total_requests if total_requests > 0 else 0

        return {
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'hit_rate': hit_rate,
            'concurrent_waits': self.concurrent_waits,
            'cache_size': len(self._cache),
            'max_size': self._cache.maxsize,
        }

    def clear(self) -> None:
        """
        Drop every cached tree and reset statistics.
        """
        self._cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0
        self.concurrent_waits = 0
