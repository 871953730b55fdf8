# aad_graph/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dr/dr = 1) at the root and let derivatives flow back to
# every Variable feeding it.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Callable, Dict, Mapping, Tuple

from .engine import backward_accumulate, forward_evaluate, invalidate
from .graph_utils import variables
from .node import Node
from .session import use_session
from .var import Constant, Variable


def evaluate(root: Node, context: Mapping[str, float]) -> float:
    """Invalidate, run the forward pass under `context` and return the root value."""
    invalidate(root)
    return float(forward_evaluate(root, context))


def gradients(root: Node, context: Mapping[str, float], seed=1.0) -> Dict[str, float]:
    """
    One full (invalidate, forward, backward) cycle.

    Returns:
        dict {variable name: d root / d variable}. Distinct Variable nodes
        sharing a name are bound to the same context entry, so their
        derivatives are summed.
    """
    evaluate(root, context)
    backward_accumulate(root, seed)
    out: Dict[str, float] = {}
    for v in sorted(variables(root), key=lambda v: v.name):
        out[v.name] = out.get(v.name, 0.0) + float(v.derivative)
    return out


def grads(f: Callable[[Dict[str, Variable]], Node],
          inputs: Mapping[str, float]) -> Tuple[float, Dict[str, float]]:
    """
    Value and gradient of r = f(vars) w.r.t. ALL inputs (dict form).

    The graph is built in a fresh, isolated session. Inputs the function does
    not use get a zero derivative.

    Example
    -------
    f = lambda v: v["x"] * v["x"] + v["x"] * v["y"]
    grads(f, {"x": 2.0, "y": 3.0}) -> (10.0, {"x": 7.0, "y": 2.0})
    """
    with use_session():
        vars_ad = {k: Variable(k) for k in inputs}
        r = f(vars_ad)
        if not isinstance(r, Node):
            r = Constant(r, name="r")
        evaluate(r, inputs)
        backward_accumulate(r, 1.0)
        return float(r.value), {k: float(vars_ad[k].derivative) for k in inputs}
