"""
Ordering hints for cells whose dependencies static analysis cannot see.

Cells that set up the package environment, change the load path or do
blanket imports must run before ordinary cells, even though no symbol links
them. The hint only orders otherwise independent roots; it never overrides a
real dependency edge.
"""
from ..models import Cell
from .graph import DependencyGraph

DEFAULT_PRECEDENCE = 9

PACKAGE_MANAGER = "Pkg"
ENVIRONMENT_MANAGER = "DrWatson"
CODE_RELOADER = "Revise"
LOAD_PATH = "LOAD_PATH"
DYNAMIC_INCLUDE = "include"

ACTIVATE_CALLS = frozenset({
    "Pkg.API.activate",
    "Pkg.activate",
    "@pkg_str",
    "quickactivate",
    "@quickactivate",
    "DrWatson.@quickactivate",
    "DrWatson.quickactivate",
})

INSTALL_CALLS = frozenset({
    "Pkg.API.add",
    "Pkg.add",
    "Pkg.API.develop",
    "Pkg.develop",
})


def precedence(graph: DependencyGraph, cell: Cell) -> int:
    """Assign a number to a cell. Cells with a lower number may run first."""
    node = graph.node(cell)

    if PACKAGE_MANAGER in node.definitions:
        return 1
    if ENVIRONMENT_MANAGER in node.definitions:
        return 2
    if not ACTIVATE_CALLS.isdisjoint(node.references):
        return 3
    if not INSTALL_CALLS.isdisjoint(node.references):
        return 4
    if LOAD_PATH in node.references:
        return 5
    if CODE_RELOADER in node.definitions:
        # Load the reloader before the packages it has to track
        return 6
    if graph.uses_import(cell):
        # We don't know which cells depend on a blanket import
        return 7
    if DYNAMIC_INCLUDE in node.references:
        return 8
    return DEFAULT_PRECEDENCE
