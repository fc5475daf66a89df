"""Execution ordering for reactive notebook cells."""
from .models import (
    Cell,
    CyclicReferenceError,
    DependencyNode,
    MultipleDefinitionsError,
    Notebook,
    ReactivityError,
    TopologicalOrder,
)
from .core import (
    DependencyGraph,
    UnknownCellError,
    compute_order,
    compute_order_cached,
    cycle_is_benign,
    cyclic_variables,
    is_assigned_anywhere,
    is_referenced_anywhere,
    precedence,
    settings,
)

__version__ = "0.1.0"

__all__ = [
    "Cell", "CyclicReferenceError", "DependencyNode", "MultipleDefinitionsError",
    "Notebook", "ReactivityError", "TopologicalOrder",
    "DependencyGraph", "UnknownCellError", "compute_order", "compute_order_cached",
    "cycle_is_benign", "cyclic_variables", "is_assigned_anywhere", "is_referenced_anywhere",
    "precedence", "settings"
]
