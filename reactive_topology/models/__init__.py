from .cell import Cell, DependencyNode, Symbol
from .errors import CyclicReferenceError, MultipleDefinitionsError, ReactivityError
from .order import TopologicalOrder
from .notebook import Notebook

__all__ = [
    "Cell", "DependencyNode", "Symbol",
    "CyclicReferenceError", "MultipleDefinitionsError", "ReactivityError",
    "TopologicalOrder",
    "Notebook"
]
