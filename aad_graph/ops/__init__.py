# aad_graph/ops/__init__.py

# Ensure operator overloading and the function table are registered
from . import arithmetic
from . import transcendental
from . import special

# Convenience re-exports so users can do: from aad_graph.ops import mul, exp, ...
from .arithmetic import make_constant, make_variable, add, sub, mul, div, neg, power, weighted_power
from .transcendental import apply, exp, sin, cos, log, sqrt, tan, sinh, cosh, tanh
from .special import erf, norm_cdf

__all__ = [
    "make_constant", "make_variable",
    "add", "sub", "mul", "div", "neg", "power", "weighted_power",
    "apply", "exp", "sin", "cos", "log", "sqrt", "tan", "sinh", "cosh", "tanh",
    "erf", "norm_cdf",
]
