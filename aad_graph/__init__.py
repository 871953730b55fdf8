# aad_graph/__init__.py
# Reverse-mode automatic differentiation over a scalar expression DAG

from .core.config import EngineConfig
from .core.errors import AADGraphError, EvaluationStateError, GraphConstructionError
from .core.session import Session, use_session
from .core.node import Node
from .core.var import Constant, Variable
from .core.binary import Plus, Minus, Mul, Div
from .core.power import WeightedPower
from .core.function import FunctionNode, register_function, registered_functions
from .core.engine import (
    forward_evaluate,
    backward_accumulate,
    invalidate,
    read_value,
    read_derivative,
    node_name,
    render,
)
from .core.graph_utils import query, variables, get_graph_stats, analyze_graph_complexity
from .core.seeds import evaluate, gradients, grads
from .core.bumping import finite_difference, check_gradients

# Builders (importing ops registers operators on Node and the function table)
from . import ops
from .ops import (
    make_constant, make_variable,
    add, sub, mul, div, neg, power, weighted_power,
    apply, exp, sin, cos, log, sqrt, tan, sinh, cosh, tanh,
    erf, norm_cdf,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    'EngineConfig',
    'AADGraphError',
    'EvaluationStateError',
    'GraphConstructionError',
    'Session',
    'use_session',
    'Node',
    'Constant',
    'Variable',
    'Plus',
    'Minus',
    'Mul',
    'Div',
    'WeightedPower',
    'FunctionNode',
    'register_function',
    'registered_functions',
    # Engine
    'forward_evaluate',
    'backward_accumulate',
    'invalidate',
    'read_value',
    'read_derivative',
    'node_name',
    'render',
    # Query
    'query',
    'variables',
    'get_graph_stats',
    'analyze_graph_complexity',
    # Drivers
    'evaluate',
    'gradients',
    'grads',
    'finite_difference',
    'check_gradients',
    # Builders
    'make_constant',
    'make_variable',
    'add', 'sub', 'mul', 'div', 'neg', 'power', 'weighted_power',
    'apply', 'exp', 'sin', 'cos', 'log', 'sqrt', 'tan', 'sinh', 'cosh', 'tanh',
    'erf', 'norm_cdf',
]
