"""
Describes the run-scoped mutable state shared by every check invocation.
"""

import threading
from typing import Iterator, Optional, Set, TYPE_CHECKING

from core.config import Configuration

if TYPE_CHECKING:
    from graph.model import RoadGraph


class ProcessedMarkers:
    """
    Edge ids already placed into a component (or evaluated as a seed).

    The set only grows. Every read and write goes through one lock so that
    checks evaluating seeds from several threads still never put an edge into
    two components.
    """

    def __init__(self):
        self._ids: Set[int] = set()
        self._lock = threading.Lock()

    def is_processed(self, identifier: int) -> bool:
        with self._lock:
            return identifier in self._ids

    def mark_processed(self, identifier: int) -> None:
        with self._lock:
            self._ids.add(identifier)

    def claim(self, identifier: int) -> bool:
        """Mark `identifier` processed; False if it already was."""
        with self._lock:
            if identifier in self._ids:
                return False
            self._ids.add(identifier)
            return True

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        with self._lock:
            return iter(sorted(self._ids))


class RunContext:
    """
    Everything one check run owns: the graph under analysis, the
    configuration and the processed-marker set.
    """

    def __init__(self, graph: "RoadGraph", configuration: Optional[Configuration] = None):
        self.graph = graph
        self.configuration = configuration or Configuration.empty()
        self.processed = ProcessedMarkers()
