# aad_graph/ops/arithmetic.py
from typing import Optional

from ..core.node import Node
from ..core.var import Constant, Variable
from ..core.binary import Plus, Minus, Mul, Div
from ..core.power import WeightedPower


def _as_node(x) -> Node:
    """Ensure x is a Node; otherwise wrap the scalar literal as a Constant."""
    return x if isinstance(x, Node) else Constant(x)


def make_constant(value, name: Optional[str] = None) -> Constant:
    return Constant(value, name=name)


def make_variable(name: str) -> Variable:
    return Variable(name)


def add(a, b): return Plus(_as_node(a), _as_node(b))
def sub(a, b): return Minus(_as_node(a), _as_node(b))
def mul(a, b): return Mul(_as_node(a), _as_node(b))
def div(a, b): return Div(_as_node(a), _as_node(b))


def power(x, m: int) -> WeightedPower:
    """x^m for integer m (coefficient 1)."""
    return WeightedPower(1.0, _as_node(x), m)


def weighted_power(coefficient, x, m: int) -> WeightedPower:
    """coefficient * x^m."""
    return WeightedPower(coefficient, _as_node(x), m)


def neg(x) -> WeightedPower:
    """
    Unary negation as the weighted power  -1 * x^1.
    """
    return WeightedPower(-1.0, _as_node(x), 1)


# Bind Python operators to Node
Node.__add__      = lambda self, other: add(self, other)
Node.__radd__     = lambda self, other: add(other, self)
Node.__sub__      = lambda self, other: sub(self, other)
Node.__rsub__     = lambda self, other: sub(other, self)
Node.__mul__      = lambda self, other: mul(self, other)
Node.__rmul__     = lambda self, other: mul(other, self)
Node.__truediv__  = lambda self, other: div(self, other)
Node.__rtruediv__ = lambda self, other: div(other, self)
Node.__neg__      = lambda self: neg(self)
Node.__pow__      = lambda self, m: power(self, m)
