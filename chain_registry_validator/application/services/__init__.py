"""Application services used by the validation use case."""

from .directory_walker import ChainEntry, DirectoryWalker
from .error_aggregator import ErrorAggregator, Violation
from .group_tracker import GroupTracker

__all__ = [
    "ChainEntry",
    "DirectoryWalker",
    "ErrorAggregator",
    "GroupTracker",
    "Violation",
]
