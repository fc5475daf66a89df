from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .cell import Cell
from .order import TopologicalOrder

if TYPE_CHECKING:
    from ..core.graph import DependencyGraph


def _empty_graph():
    from ..core.graph import DependencyGraph
    return DependencyGraph()


@dataclass
class Notebook:
    """Owner of a dependency graph, used by the cached ordering wrapper."""
    id: str
    cells: List[Cell] = field(default_factory=list)
    topology: "DependencyGraph" = field(default_factory=_empty_graph)
    cached_order: Optional[TopologicalOrder] = field(default=None, repr=False, compare=False)
    cached_allow_multiple_defs: bool = field(default=False, repr=False, compare=False)
    revision: int = 0

    def update_topology(self, topology: "DependencyGraph") -> None:
        """Swap in a freshly built graph. The cached order goes stale by identity."""
        self.topology = topology
        self.cells = list(topology.cells)
        self.revision += 1
