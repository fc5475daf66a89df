from .config import settings
from .logger import configure_logging
from .graph import (
    DependencyGraph,
    UnknownCellError,
    is_assigned_anywhere,
    is_referenced_anywhere,
)
from .precedence import DEFAULT_PRECEDENCE, precedence
from .cycles import cycle_is_benign, cyclic_variables
from .topological_order import (
    CycleFound,
    Exploration,
    Resolved,
    compute_order,
    compute_order_cached,
)

__all__ = [
    "settings", "configure_logging",
    "DependencyGraph", "UnknownCellError", "is_assigned_anywhere", "is_referenced_anywhere",
    "DEFAULT_PRECEDENCE", "precedence",
    "cycle_is_benign", "cyclic_variables",
    "CycleFound", "Exploration", "Resolved", "compute_order", "compute_order_cached"
]
