"""Symbol dependency graph between notebook cells."""
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional

import networkx as nx

from ..models import Cell, DependencyNode, Symbol


class UnknownCellError(KeyError):
    """Raised when a cell is not part of the dependency graph."""

    def __init__(self, cell):
        super().__init__(cell)
        self.cell = cell

    def __str__(self):
        return f"Cell {getattr(self.cell, 'id', self.cell)!r} is not in the dependency graph"


class DependencyGraph:
    """
    Read-only snapshot of which symbols each cell reads and writes.

    Cells are enumerated in insertion order; that order is the stable base
    order every query returns its cells in. A graph is never mutated after
    construction: `with_node` and `without_cell` return new graphs, so a
    changed topology always has a new identity.
    """

    def __init__(
        self,
        nodes: Optional[Mapping[Cell, DependencyNode]] = None,
        module_usings: Optional[Mapping[Cell, Iterable[str]]] = None,
    ):
        self._nodes: Dict[Cell, DependencyNode] = dict(nodes or {})
        self._module_usings: Dict[Cell, FrozenSet[str]] = {}
        for cell, usings in (module_usings or {}).items():
            if cell not in self._nodes:
                raise UnknownCellError(cell)
            self._module_usings[cell] = frozenset(usings)

    def __contains__(self, cell) -> bool:
        return cell in self._nodes

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DependencyGraph({len(self._nodes)} cells)"

    @property
    def nodes(self) -> Mapping[Cell, DependencyNode]:
        return MappingProxyType(self._nodes)

    @property
    def cells(self) -> List[Cell]:
        return list(self._nodes)

    def node(self, cell: Cell) -> DependencyNode:
        """Return the symbol sets of a cell, failing fast on unknown cells."""
        try:
            return self._nodes[cell]
        except KeyError:
            raise UnknownCellError(cell) from None

    def module_usings(self, cell: Cell) -> FrozenSet[str]:
        self.node(cell)
        return self._module_usings.get(cell, frozenset())

    def uses_import(self, cell: Cell) -> bool:
        """Whether the cell has a module-level blanket import (`using X`)."""
        return bool(self.module_usings(cell))

    def with_node(
        self,
        cell: Cell,
        node: DependencyNode,
        module_usings: Iterable[str] = (),
    ) -> "DependencyGraph":
        """Return a new graph with `cell` added, or replaced in place."""
        nodes = dict(self._nodes)
        nodes[cell] = node
        usings = dict(self._module_usings)
        usings.pop(cell, None)
        if module_usings:
            usings[cell] = frozenset(module_usings)
        return DependencyGraph(nodes, usings)

    def without_cell(self, cell: Cell) -> "DependencyGraph":
        """Return a new graph with `cell` removed."""
        self.node(cell)
        nodes = {c: n for c, n in self._nodes.items() if c != cell}
        usings = {c: u for c, u in self._module_usings.items() if c != cell}
        return DependencyGraph(nodes, usings)

    # Queries. All of them are non-recursive: only direct dependencies are found.

    def referencers_of(self, symbols: Iterable[Symbol]) -> List[Cell]:
        """Return the cells that reference any of the given symbols."""
        symbols = frozenset(symbols)
        return [
            cell for cell, node in self._nodes.items()
            if not node.references.isdisjoint(symbols)
        ]

    def referencers_of_cell(self, cell: Cell) -> List[Cell]:
        """Return the cells that reference any symbol the given cell defines."""
        return self.referencers_of(self.node(cell).all_definitions)

    def assigners_of(self, cell: Cell) -> List[Cell]:
        """
        Return the cells that also assign a variable or method `cell` assigns.

        The result includes `cell` itself whenever it assigns anything, so a
        conflict exists only when more than one cell is returned.
        """
        me = self.node(cell)
        mine = me.hard_definitions
        return [
            other for other, node in self._nodes.items()
            if not mine.isdisjoint(node.hard_definitions)
            or not me.funcdefs_with_signatures.isdisjoint(node.funcdefs_with_signatures)
        ]

    def assigners_of_symbols(self, symbols: Iterable[Symbol]) -> List[Cell]:
        """Return the cells that assign any of the given symbols."""
        symbols = frozenset(symbols)
        return [
            cell for cell, node in self._nodes.items()
            if not node.hard_definitions.isdisjoint(symbols)
        ]

    def is_soft_edge(self, parent: Cell, child: Cell) -> bool:
        """Whether `child` depends on `parent` only through soft definitions."""
        producer = self.node(parent)
        reads = self.node(child).references
        return reads.isdisjoint(producer.hard_definitions) and not reads.isdisjoint(producer.soft_definitions)

    def is_referenced_anywhere(self, symbol: Symbol) -> bool:
        return any(symbol in node.references for node in self._nodes.values())

    def is_assigned_anywhere(self, symbol: Symbol) -> bool:
        return any(symbol in node.definitions for node in self._nodes.values())

    def to_networkx(self) -> nx.DiGraph:
        """
        Export the producer → reader edges as a networkx DiGraph.

        Edge A→B means "B reads a symbol A writes". Each edge carries the
        shared `symbols` and `soft=True` when B only reads A's soft
        definitions. Self-references are left out.
        """
        digraph = nx.DiGraph()
        digraph.add_nodes_from(self._nodes)
        for parent, producer in self._nodes.items():
            written = producer.all_definitions
            if not written:
                continue
            for child in self.referencers_of(written):
                if child == parent:
                    continue
                shared = written & self._nodes[child].references
                digraph.add_edge(
                    parent,
                    child,
                    symbols=shared,
                    soft=self.is_soft_edge(parent, child),
                )
        return digraph


def is_referenced_anywhere(graph: DependencyGraph, symbol: Symbol) -> bool:
    """Return whether any cell references the given symbol."""
    return graph.is_referenced_anywhere(symbol)


def is_assigned_anywhere(graph: DependencyGraph, symbol: Symbol) -> bool:
    """Return whether any cell defines the given symbol."""
    return graph.is_assigned_anywhere(symbol)
