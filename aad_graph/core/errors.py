# aad_graph/core/errors.py


class AADGraphError(Exception):
    """Base class for programmer errors raised by the engine."""


class GraphConstructionError(AADGraphError, ValueError):
    """A node could not be built: cyclic children, bad operand or parameter."""


class EvaluationStateError(AADGraphError, RuntimeError):
    """A pass was run out of order, e.g. backward before forward."""
