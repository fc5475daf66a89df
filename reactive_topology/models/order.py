from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, List, Mapping, Tuple

from .cell import Cell
from .errors import ReactivityError

if TYPE_CHECKING:
    from ..core.graph import DependencyGraph


@dataclass(frozen=True)
class TopologicalOrder:
    """
    Result of one ordering run.

    runnable: cells to execute, in dependency order, none of them errable
    errable: cells that cannot be ordered, mapped to the reason why
    input_graph: the graph snapshot this order was computed from
    """
    input_graph: "DependencyGraph" = field(compare=False, repr=False)
    runnable: Tuple[Cell, ...]
    errable: Mapping[Cell, ReactivityError]

    def __post_init__(self):
        # Cached orders are shared between callers: freeze the collections
        object.__setattr__(self, "runnable", tuple(self.runnable))
        object.__setattr__(self, "errable", MappingProxyType(dict(self.errable)))

    def all_cells(self) -> List[Cell]:
        """Runnable cells followed by errable cells."""
        cells = list(self.runnable)
        seen = set(cells)
        cells.extend(c for c in self.errable if c not in seen)
        return cells

    def __iter__(self):
        return iter(self.runnable)

    def __len__(self):
        return len(self.runnable)
