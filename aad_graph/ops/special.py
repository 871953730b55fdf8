# aad_graph/ops/special.py
import numpy as np
from scipy.special import erf as scipy_erf, ndtr

from ..core.function import FunctionNode, register_function
from .arithmetic import _as_node

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)


def norm_pdf(x):
    return np.exp(-0.5 * x * x) / SQRT_TWO_PI


def _erf_prime(x):
    # d/dx erf(x) = (2/√π) * e^(-x²)
    return (2.0 / np.sqrt(np.pi)) * np.exp(-x * x)


register_function("erf", scipy_erf, _erf_prime)
register_function("norm_cdf", ndtr, norm_pdf)


def erf(x):
    return FunctionNode("erf", _as_node(x))


def norm_cdf(x):
    """Standard normal CDF N(x); local partial dN/dx = phi(x)."""
    return FunctionNode("norm_cdf", _as_node(x))
