"""Testing utilities for NavTreeLib consumers."""

from .fixtures import InMemoryDataSource, RecordingNotifier

__all__ = ['InMemoryDataSource', 'RecordingNotifier']
