"""
Error handling policies for NavTreeLib.

A policy decides how a data source failure during a child load reaches
the caller. By the time a policy runs, the node's state has already been
reset and the failure has been broadcast and notified; the policy only
picks the return value (or raises).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..exceptions import SourceFailure


logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for failure policies.

    Subclasses implement different strategies for surfacing a
    SourceFailure to the code that started the load.
    """

    @abstractmethod
    async def handle(self, failure: SourceFailure, method_name: str, node: Any) -> Any:
        """
        Handle a failed data source call.

        Args:
            failure: The failure, with the original error as ``cause``
            method_name: Name of the operation that failed (e.g. 'load_children')
            node: The tree node being loaded when the failure occurred

        Returns:
            The value handed back to the caller of the failed operation,
            or raises to propagate the failure.
        """
        pass


class ReturnFailurePolicy(ErrorPolicy):
    """
    Policy that hands the failure back as the operation's result.

    This is the default: callers check ``isinstance(result, SourceFailure)``
    and may retry by loading again.
    """

    async def handle(self, failure: SourceFailure, method_name: str, node: Any) -> Any:
        return failure


class FailFastPolicy(ErrorPolicy):
    """
    Policy that raises the failure to the caller.

    Useful for scripts and background jobs that have no UI to show
    the notification.
    """

    async def handle(self, failure: SourceFailure, method_name: str, node: Any) -> Any:
        raise failure from failure.cause


class CollectFailuresPolicy(ErrorPolicy):
    """
    Policy that records every failure and returns it.

    Failures are kept for later inspection, e.g. to show a summary after
    expanding many nodes at once.
    """

    def __init__(self, max_records: int = 1000):
        """
        Initialize the policy.

        Args:
            max_records: Oldest records are dropped beyond this many
        """
        self.max_records = max_records
        self.failures: List[Dict[str, Any]] = []

    async def handle(self, failure: SourceFailure, method_name: str, node: Any) -> Any:
        self.failures.append({
            'node_id': getattr(node, 'id', None),
            'method': method_name,
            'failure': failure,
            'error_type': type(failure.cause).__name__,
            'error_message': failure.reason,
        })
        if len(self.failures) > self.max_records:
            del self.failures[0]
        logger.debug("Collected failure %d for %s", len(self.failures), method_name)
        return failure

    def get_statistics(self) -> dict:
        """
        Get statistics about failures collected so far.

        Returns:
            Dictionary with failure counts and details
        """
        by_type: Dict[str, int] = {}
        for record in self.failures:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_failures': len(self.failures),
            'by_error_type': by_type,
            'failed_node_ids': [r['node_id'] for r in self.failures],
            'failures': self.failures,
        }

    def clear(self) -> None:
        self.failures.clear()
