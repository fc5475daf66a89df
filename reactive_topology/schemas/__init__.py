from .order import ReactivityErrorResponse, TopologicalOrderResponse

__all__ = ["ReactivityErrorResponse", "TopologicalOrderResponse"]
