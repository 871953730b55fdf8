"""
Bumping (finite-difference) checks

Independent check of the backward pass: perturb one context entry at a time
and difference the root value.

Formula:
    dr/dx ≈ [r(x+ε) - r(x-ε)] / (2ε)
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import numpy as np

from .node import Node
from .seeds import evaluate, gradients

logger = logging.getLogger(__name__)


@dataclass
class GradientCheck:
    name: str
    adjoint: float
    bumped: float
    abs_error: float
    ok: bool


def finite_difference(root: Node, context: Mapping[str, float], name: str,
                      eps: Optional[float] = None) -> float:
    """
    Central difference of the root value w.r.t. context entry `name`.

    The graph is left evaluated at `context` with cleared derivatives.
    """
    eps = root.session.config.fd_epsilon if eps is None else eps
    if name not in context:
        raise KeyError(f"{name!r} is not bound in the context")
    x = float(context[name])

    up = dict(context)
    up[name] = x + eps
    dn = dict(context)
    dn[name] = x - eps

    v_up = evaluate(root, up)
    v_dn = evaluate(root, dn)
    evaluate(root, context)
    return (v_up - v_dn) / (2.0 * eps)


def check_gradients(root: Node, context: Mapping[str, float], eps: Optional[float] = None,
                    tol: Optional[float] = None) -> Dict[str, GradientCheck]:
    """
    Compare the backward-pass derivative of every Variable bound in `context`
    with its central difference.

    A derivative passes when |adjoint - bumped| <= tol * max(1, |adjoint|).
    On return the graph holds value and derivatives at `context`.

    Returns:
        dict {variable name: GradientCheck}
    """
    config = root.session.config
    eps = config.fd_epsilon if eps is None else eps
    tol = config.fd_tolerance if tol is None else tol

    adjoints = gradients(root, context)
    results: Dict[str, GradientCheck] = {}
    for name in sorted(adjoints):
        if name not in context:
            continue
        bumped = finite_difference(root, context, name, eps)
        adj = adjoints[name]
        err = abs(adj - bumped)
        ok = bool(err <= tol * max(1.0, abs(adj))) or (np.isnan(adj) and np.isnan(bumped))
        if not ok:
            logger.warning("gradient check failed for %s: adjoint=%r bumped=%r (err=%.3e)",
                           name, adj, bumped, err)
        results[name] = GradientCheck(name, adj, bumped, err, ok)

    # leave the graph as a plain forward/backward at the base point
    gradients(root, context)
    return results
