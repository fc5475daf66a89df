"""Topological ordering of cells for a single reactive run."""
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple, Union

from ..models import (
    Cell,
    CyclicReferenceError,
    MultipleDefinitionsError,
    Notebook,
    ReactivityError,
    TopologicalOrder,
)
from .config import settings
from .cycles import cycle_is_benign
from .graph import DependencyGraph
from .precedence import precedence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    """The cell and everything it leads to has been settled."""


@dataclass(frozen=True)
class CycleFound:
    """An illegal cycle was found; an ancestor may still be able to break it."""
    cycle: Tuple[Cell, ...]


ExplorationResult = Union[Resolved, CycleFound]

RESOLVED = Resolved()


@dataclass
class _Frame:
    """One cell on the exploration stack, with the depths to roll back to."""
    cell: Cell
    children: Iterator[Cell]
    entries_depth: int
    exits_depth: int
    child: Optional[Cell] = None


class Exploration:
    """
    State of one depth-first exploration of the dependency graph.

    entries: cells in the order they were entered (the DFS stack)
    exits: cells in the order they were fully resolved (reverse topological)
    errable: cells that cannot be ordered, with the reason

    The traversal keeps its own stack of frames, so its depth is not bound
    by the interpreter's recursion limit. A fresh instance is used for every
    run.
    """

    def __init__(self, graph: DependencyGraph, allow_multiple_defs: bool = False):
        self.graph = graph
        self.allow_multiple_defs = allow_multiple_defs
        self.entries: List[Cell] = []
        self.exits: List[Cell] = []
        self.errable: Dict[Cell, ReactivityError] = {}
        self._exited: Set[Cell] = set()

    def visit(self, cell: Cell) -> ExplorationResult:
        settled = self._settled(cell)
        if settled is not None:
            return settled

        stack = [self._enter(cell)]
        # Outcome of the frame that was just popped, for its parent to handle
        result: Optional[ExplorationResult] = None

        while stack:
            frame = stack[-1]

            if result is not None:
                child, outcome = frame.child, result
                result = None
                if isinstance(outcome, CycleFound) and frame.cell in outcome.cycle:
                    if not self.graph.is_soft_edge(frame.cell, child):
                        # The cycle is not ours to break: hand it to the parent
                        self._rollback(frame.entries_depth, frame.exits_depth)
                        logger.debug(
                            "Cycle %s propagated past %s",
                            _ids(outcome.cycle),
                            frame.cell.id,
                        )
                        stack.pop()
                        result = outcome
                        continue

                    # Only soft definitions link us to the child: drop that edge
                    logger.debug(
                        "Soft edge %s -> %s breaks cycle %s",
                        frame.cell.id,
                        child.id,
                        _ids(outcome.cycle),
                    )
                    for cycled in outcome.cycle:
                        self.errable.pop(cycled, None)
                    if self.entries and self.entries[-1] == child:
                        self.entries.pop()

            child = next(frame.children, None)
            if child is None:
                self.exits.append(frame.cell)
                self._exited.add(frame.cell)
                stack.pop()
                result = RESOLVED
                continue

            frame.child = child
            settled = self._settled(child)
            if settled is not None:
                result = settled
            else:
                stack.append(self._enter(child))

        return result

    def _settled(self, cell: Cell) -> Optional[ExplorationResult]:
        """Outcome of visiting a cell that needs no exploration, else None."""
        if cell in self._exited or cell in self.errable:
            return RESOLVED
        if self.entries and self.entries[-1] == cell:
            # A cell referencing itself is legal
            return RESOLVED
        if cell in self.entries:
            return self._close_cycle(cell)
        return None

    def _enter(self, cell: Cell) -> _Frame:
        # Depths to roll back to if a hard cycle runs through this cell
        frame_depths = (len(self.entries), len(self.exits))
        self.entries.append(cell)

        assigners = self.graph.assigners_of(cell)
        # assigners_of includes the cell itself
        if not self.allow_multiple_defs and len(assigners) > 1:
            conflicting = frozenset(assigners)
            logger.debug(
                "Multiple definitions among cells %s",
                ", ".join(c.id for c in assigners),
            )
            for c in assigners:
                self.errable[c] = MultipleDefinitionsError(self.graph, c, conflicting)

        children = (c for c in self._children(cell, assigners) if c != cell)
        return _Frame(cell, children, *frame_depths)

    def _children(self, cell: Cell, assigners: Sequence[Cell]) -> List[Cell]:
        referencers = list(reversed(self.graph.referencers_of_cell(cell)))
        if self.allow_multiple_defs:
            return referencers
        seen = set(referencers)
        return referencers + [c for c in assigners if c not in seen]

    def _close_cycle(self, cell: Cell) -> ExplorationResult:
        currently_in = [c for c in dict.fromkeys(self.entries) if c not in self._exited]
        cycle = tuple(currently_in[currently_in.index(cell):])

        if cycle_is_benign(self.graph, cycle):
            return RESOLVED

        logger.debug("Cyclic reference among cells %s", _ids(cycle))
        error = CyclicReferenceError(self.graph, cycle)
        for c in cycle:
            self.errable[c] = error
        return CycleFound(cycle)

    def _rollback(self, entries_depth: int, exits_depth: int) -> None:
        del self.entries[entries_depth:]
        for c in self.exits[exits_depth:]:
            self._exited.discard(c)
        del self.exits[exits_depth:]


def compute_order(
    graph: DependencyGraph,
    roots: Sequence[Cell],
    allow_multiple_defs: bool = False,
) -> TopologicalOrder:
    """
    Return the cells to evaluate in one reactive run, in topological order.

    The roots are included, along with every cell that transitively depends
    on them. Cells caught in an illegal cycle or a multiple definition are
    left out of `runnable` and reported in `errable` instead.

    Raises:
        UnknownCellError: If a root is not part of the graph
    """
    roots = list(roots)
    for root in roots:
        graph.node(root)

    # sorted() is stable: roots with the same precedence keep their order
    prelim_order = sorted(roots, key=lambda c: precedence(graph, c))

    exploration = Exploration(graph, allow_multiple_defs)
    # Reversed because the exits come out in reverse order
    for root in reversed(prelim_order):
        exploration.visit(root)

    errable = exploration.errable
    runnable = tuple(c for c in reversed(exploration.exits) if c not in errable)
    return TopologicalOrder(input_graph=graph, runnable=runnable, errable=errable)


def compute_order_cached(notebook: Notebook, allow_multiple_defs: Optional[bool] = None) -> TopologicalOrder:
    """
    Return the topological order of all cells of the notebook.

    The previous result is reused as long as the notebook still holds the
    very graph object it was computed from.
    """
    if allow_multiple_defs is None:
        allow_multiple_defs = settings.ALLOW_MULTIPLE_DEFS

    cached = notebook.cached_order
    if (
        cached is not None
        and cached.input_graph is notebook.topology
        and notebook.cached_allow_multiple_defs == allow_multiple_defs
    ):
        logger.debug("Reusing topological order of notebook %s", notebook.id)
        return cached

    logger.debug(
        "Computing topological order of notebook %s (revision %d)",
        notebook.id,
        notebook.revision,
    )
    order = compute_order(notebook.topology, notebook.cells, allow_multiple_defs)
    notebook.cached_order = order
    notebook.cached_allow_multiple_defs = allow_multiple_defs
    return order


def _ids(cells: Sequence[Cell]) -> str:
    return " -> ".join(c.id for c in cells)
