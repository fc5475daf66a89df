from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Iterable, Tuple, Union

from .cell import Cell, Symbol

if TYPE_CHECKING:
    from ..core.graph import DependencyGraph


def join_symbols(symbols: Iterable[Symbol]) -> str:
    """Join names for a diagnostic: 'x', 'x and y', 'x, y and z'."""
    names = sorted(symbols)
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


@dataclass(frozen=True)
class CyclicReferenceError:
    """Attached to every cell of an illegal dependency cycle."""
    topology: "DependencyGraph" = field(compare=False, repr=False)
    cycle: Tuple[Cell, ...]

    @property
    def cyclic_variables(self) -> FrozenSet[Symbol]:
        from ..core.cycles import cyclic_variables
        return frozenset(cyclic_variables(self.topology, self.cycle))

    @property
    def message(self) -> str:
        return f"Cyclic references among {join_symbols(self.cyclic_variables)}"


@dataclass(frozen=True)
class MultipleDefinitionsError:
    """Attached to every cell that assigns a symbol another cell also assigns."""
    topology: "DependencyGraph" = field(compare=False, repr=False)
    cell: Cell
    conflicting_cells: FrozenSet[Cell]

    @property
    def symbols(self) -> FrozenSet[Symbol]:
        """Symbols this cell shares with the other conflicting cells."""
        mine = self.topology.nodes[self.cell]
        shared = set()
        for other in self.conflicting_cells:
            if other == self.cell:
                continue
            theirs = self.topology.nodes[other]
            shared |= mine.hard_definitions & theirs.hard_definitions
            shared |= mine.funcdefs_with_signatures & theirs.funcdefs_with_signatures
        return frozenset(shared)

    @property
    def message(self) -> str:
        return f"Multiple definitions for {join_symbols(self.symbols)}"


ReactivityError = Union[CyclicReferenceError, MultipleDefinitionsError]
