# aad_graph/core/__init__.py

"""
Core engine for the aad_graph package.

Node variants, the graph-level forward/backward/invalidate passes and graph
queries. Builders (add, mul, exp, ...) live in `aad_graph.ops`; importing that
package also registers the Python operators on Node and the builtin entries of
the special-function table.

Exports:
    Node, Constant, Variable            : leaf and base types
    Plus, Minus, Mul, Div               : binary operators
    WeightedPower                       : a * x^m
    FunctionNode, register_function     : table-driven special functions
    forward_evaluate, backward_accumulate, invalidate : graph passes
    query, variables                    : graph search
    Session, use_session, EngineConfig  : naming session and configuration
"""

from .config import EngineConfig
from .errors import AADGraphError, EvaluationStateError, GraphConstructionError
from .session import Session, current_session, use_session
from .node import Node
from .var import Constant, Variable
from .binary import BinaryOp, Plus, Minus, Mul, Div
from .power import WeightedPower
from .function import FunctionNode, register_function, unregister_function, registered_functions
from .engine import (
    forward_evaluate, backward_accumulate, invalidate,
    read_value, read_derivative, node_name, render,
)
from .graph_utils import (
    query, variables, variables_by_name, topological_order,
    get_graph_stats, analyze_graph_complexity,
)
from .seeds import evaluate, gradients, grads
from .bumping import GradientCheck, finite_difference, check_gradients

__all__ = [
    "EngineConfig",
    "AADGraphError", "EvaluationStateError", "GraphConstructionError",
    "Session", "current_session", "use_session",
    "Node", "Constant", "Variable",
    "BinaryOp", "Plus", "Minus", "Mul", "Div",
    "WeightedPower",
    "FunctionNode", "register_function", "unregister_function", "registered_functions",
    "forward_evaluate", "backward_accumulate", "invalidate",
    "read_value", "read_derivative", "node_name", "render",
    "query", "variables", "variables_by_name", "topological_order",
    "get_graph_stats", "analyze_graph_complexity",
    "evaluate", "gradients", "grads",
    "GradientCheck", "finite_difference", "check_gradients",
]
