"""Classification of dependency cycles between cells."""
from typing import Sequence, Set

from ..models import Cell, Symbol
from .graph import DependencyGraph


def cyclic_variables(graph: DependencyGraph, cycle: Sequence[Cell]) -> Set[Symbol]:
    """Symbols both referenced and assigned by cells of the cycle."""
    referenced: Set[Symbol] = set()
    assigned: Set[Symbol] = set()
    for cell in cycle:
        node = graph.node(cell)
        referenced |= node.references
        assigned |= node.all_definitions
    return referenced & assigned


def cycle_is_benign(graph: DependencyGraph, cycle: Sequence[Cell]) -> bool:
    """
    Whether the cycle only exists because of mutually recursive functions.

    Every cyclic variable must be defined as a function without signature by
    some cell of the cycle. A single plain value or signatured function among
    them makes the cycle illegal.
    """
    nodes = [graph.node(cell) for cell in cycle]
    return all(
        any(symbol in node.funcdefs_without_signatures for node in nodes)
        for symbol in cyclic_variables(graph, cycle)
    )
