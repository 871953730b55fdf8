# aad_graph/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import Dict, Mapping, Optional

from .errors import EvaluationStateError
from .graph_utils import topological_order
from .node import Node

logger = logging.getLogger(__name__)


def _errstate(root: Node):
    return root._errstate()


def forward_evaluate(root: Node, context: Optional[Mapping[str, float]] = None):
    """
    Forward pass: compute the value of every stale node below `root`.

    Equivalent to root.forward_evaluate(context) (children left to right,
    fresh nodes skipped together with everything beneath them) but runs as a
    loop over the post-order, so graph depth is not bounded by the Python
    recursion limit.
    """
    context = {} if context is None else context
    order = topological_order(root, expand=lambda n: n.stale)
    with _errstate(root):
        for node in order:
            node._forward_self(context)
    logger.debug("forward %s: evaluated %d node(s)", root.name, len(order))
    return root.value


def backward_accumulate(root: Node, seed=1.0):
    """
    Backward pass: propagate `seed` (d root / d root) to every node below `root`.

    Each node's derivative receives the sum of the adjoints arriving along
    every path from the root. Nodes are processed in reverse topological
    order, so a node is handled once all of its parents have contributed.

    Raises:
        EvaluationStateError: if any reachable node is stale (no forward pass
            since construction or the last invalidation). Nothing is mutated.
    """
    order = topological_order(root)
    stale = [n.name for n in order if n.stale]
    if stale:
        raise EvaluationStateError(
            f"backward_accumulate({root.name!r}) needs a completed forward pass; "
            f"stale node(s): {', '.join(stale[:5])}" + (" ..." if len(stale) > 5 else "")
        )

    pending: Dict[int, np.float64] = {id(root): np.float64(seed)}
    with _errstate(root):
        for node in reversed(order):
            t = pending.pop(id(node), None)
            if t is None:
                continue  # nothing to propagate
            for child, adjoint in node._backward_self(t):
                # Accumulate: child.adj += adjoint along this edge
                pending[id(child)] = pending.get(id(child), np.float64(0.0)) + adjoint
    logger.debug("backward %s: seed=%r over %d node(s)", root.name, seed, len(order))


def invalidate(root: Node):
    """
    Reset value/derivative caches below `root` and mark them stale.
    Already-stale nodes are not re-entered.
    """
    stack = [root]
    count = 0
    while stack:
        node = stack.pop()
        if node.stale:
            continue
        node._invalidate_self()
        count += 1
        stack.extend(reversed(node.children()))
    logger.debug("invalidate %s: reset %d node(s)", root.name, count)


def read_value(node: Node) -> float:
    return float(node.value)


def read_derivative(node: Node) -> float:
    return float(node.derivative)


def node_name(node: Node) -> str:
    return node.name


def render(node: Node) -> str:
    """
    Fully parenthesised infix text of the expression below `node`.
    """
    return node.render()
