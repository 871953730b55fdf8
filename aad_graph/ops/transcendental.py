# aad_graph/ops/transcendental.py
import numpy as np

from ..core.function import FunctionNode, register_function
from .arithmetic import _as_node

register_function("exp", np.exp, np.exp)
register_function("sin", np.sin, np.cos)
register_function("cos", np.cos, lambda x: -np.sin(x))
register_function("log", np.log, lambda x: 1.0 / x)
register_function("sqrt", np.sqrt, lambda x: 0.5 / np.sqrt(x))
register_function("tan", np.tan, lambda x: 1.0 / np.cos(x) ** 2)
register_function("sinh", np.sinh, np.cosh)
register_function("cosh", np.cosh, np.sinh)
register_function("tanh", np.tanh, lambda x: 1.0 - np.tanh(x) ** 2)


def apply(tag: str, x) -> FunctionNode:
    """Apply any registered function by tag."""
    return FunctionNode(tag, _as_node(x))


def exp(x):  return FunctionNode("exp", _as_node(x))
def sin(x):  return FunctionNode("sin", _as_node(x))
def cos(x):  return FunctionNode("cos", _as_node(x))
def log(x):  return FunctionNode("log", _as_node(x))
def sqrt(x): return FunctionNode("sqrt", _as_node(x))
def tan(x):  return FunctionNode("tan", _as_node(x))
def sinh(x): return FunctionNode("sinh", _as_node(x))
def cosh(x): return FunctionNode("cosh", _as_node(x))
def tanh(x): return FunctionNode("tanh", _as_node(x))
