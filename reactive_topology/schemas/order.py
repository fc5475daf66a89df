from pydantic import BaseModel
from typing import Dict, List, Literal

from reactive_topology.models import (
    Cell,
    CyclicReferenceError,
    ReactivityError,
    TopologicalOrder,
)


class ReactivityErrorResponse(BaseModel):
    kind: Literal["cyclic_reference", "multiple_definitions"]
    cell_id: str
    message: str
    cells: List[str]

    @classmethod
    def from_error(cls, cell: Cell, error: ReactivityError) -> "ReactivityErrorResponse":
        if isinstance(error, CyclicReferenceError):
            return cls(
                kind="cyclic_reference",
                cell_id=cell.id,
                message=error.message,
                cells=[c.id for c in error.cycle],
            )
        # Conflicting cells are a set: list them in graph order
        cells = [c.id for c in error.topology.cells if c in error.conflicting_cells]
        return cls(
            kind="multiple_definitions",
            cell_id=cell.id,
            message=error.message,
            cells=cells,
        )


class TopologicalOrderResponse(BaseModel):
    runnable: List[str]
    errable: Dict[str, ReactivityErrorResponse]

    @classmethod
    def from_order(cls, order: TopologicalOrder) -> "TopologicalOrderResponse":
        return cls(
            runnable=[c.id for c in order.runnable],
            errable={
                cell.id: ReactivityErrorResponse.from_error(cell, error)
                for cell, error in order.errable.items()
            },
        )
