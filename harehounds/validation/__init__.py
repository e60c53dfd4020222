from .checks import GraphDataError, validate_memo, validate_position_graph, validate_state

__all__ = ["GraphDataError", "validate_memo", "validate_position_graph", "validate_state"]
