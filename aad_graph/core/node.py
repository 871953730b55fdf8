# aad_graph/core/node.py
from __future__ import annotations
import numpy as np
from typing import Any, Callable, List, Mapping, Optional, Sequence, Set, Tuple

from .errors import EvaluationStateError, GraphConstructionError
from .session import Session, current_session

Context = Mapping[str, float]


def format_number(v) -> str:
    """Literal numeral for rendering: integral values print without a decimal point."""
    v = float(v)
    if np.isfinite(v) and v.is_integer():
        return str(int(v))
    return repr(v)


class Node:
    """
    One node of the expression DAG.

    Structure (children, variant parameters) is fixed at construction. The only
    mutable state is the cached (value, derivative, stale) triple, touched by
    forward_evaluate, backward_accumulate and invalidate.

    Attributes
    ----------
    name : str
        User-supplied name or a session symbol such as "mul_4".
    kind : str
        Variant discriminator ("const", "var", "plus", ..., "function").
    evaluations : int
        How many times this node's own value has been computed.
    invalidations : int
        How many times invalidate() actually reset this node.
    """

    kind = "node"
    prefix = "node"

    __array_ufunc__ = None  # numpy scalars defer to our reflected operators

    def __init__(self, children: Sequence["Node"] = (), *,
                 name: Optional[str] = None, session: Optional[Session] = None):
        self.session = session or current_session()
        for c in children:
            if not isinstance(c, Node):
                raise GraphConstructionError(
                    f"{type(self).__name__} children must be Node instances, got {type(c)}"
                )
        self._operands: Tuple[Node, ...] = tuple(children)
        self.name = name if name is not None else self.session.nextsym(self.prefix)

        self._value = np.float64(0.0)
        self._derivative = np.float64(0.0)
        self._stale = True

        self.evaluations = 0
        self.invalidations = 0

        self._acyclic = False
        if self.session.config.check_acyclic:
            _assert_acyclic(self)

    # ------------------------------------------------------------------ state
    @property
    def value(self) -> np.float64:
        return self._value

    @property
    def derivative(self) -> np.float64:
        return self._derivative

    @property
    def stale(self) -> bool:
        return self._stale

    def children(self) -> Tuple["Node", ...]:
        return self._operands

    # --------------------------------------------------------- variant hooks
    def _compute(self, context: Context):
        """Value of this node from its (already evaluated) children."""
        raise NotImplementedError

    def _local_adjoints(self, t: np.float64) -> Sequence[np.float64]:
        """Adjoints to send to each child, aligned with children()."""
        return ()

    def _reset_value(self):
        self._value = np.float64(0.0)

    def render(self) -> str:
        raise NotImplementedError

    # ---------------------------------------------------------------- passes
    def _forward_self(self, context: Context):
        self._value = np.float64(self._compute(context))
        self._stale = False
        self.evaluations += 1

    def _backward_self(self, t) -> List[Tuple["Node", np.float64]]:
        """Accumulate t into own derivative and return (child, adjoint) pairs."""
        if self._stale:
            raise EvaluationStateError(
                f"backward pass reached stale node {self.name!r}; "
                f"run forward_evaluate after construction or invalidate()"
            )
        t = np.float64(t)
        self._derivative = self._derivative + t
        return list(zip(self._operands, self._local_adjoints(t)))

    def _errstate(self):
        return np.errstate(all=self.session.config.float_errors)

    def forward_evaluate(self, context: Context):
        """
        Evaluate children (in order) then this node, unless already fresh.
        A non-stale node is a no-op, so shared subexpressions run once per epoch.
        """
        with self._errstate():
            self._forward_recursive(context)

    def _forward_recursive(self, context: Context):
        if self._stale:
            for c in self._operands:
                c._forward_recursive(context)
            self._forward_self(context)

    def backward_accumulate(self, adjoint):
        """
        Add `adjoint` into this node's derivative and push the chain-rule
        adjoints to every child. Called once per incoming path; contributions sum.
        """
        with self._errstate():
            self._backward_recursive(adjoint)

    def _backward_recursive(self, adjoint):
        for child, child_adjoint in self._backward_self(adjoint):
            child._backward_recursive(child_adjoint)

    def invalidate(self):
        """Reset cached state and mark stale; already-stale subgraphs are skipped."""
        if self._stale:
            return
        self._invalidate_self()
        for c in self._operands:
            c.invalidate()

    def _invalidate_self(self):
        self._stale = True
        self._derivative = np.float64(0.0)
        self._reset_value()
        self.invalidations += 1

    # ----------------------------------------------------------------- query
    def find_descendants_matching(self, predicate: Callable[["Node"], bool],
                                  deep: bool = False) -> Set["Node"]:
        """
        Nodes reachable from (but excluding) this node for which predicate holds.

        Once a node matches, its own descendants are not searched unless
        `deep=True`.
        """
        found: Set[Node] = set()
        seen: Set[int] = set()
        stack = list(reversed(self._operands))
        while stack:
            n = stack.pop()
            if id(n) in seen:
                continue
            seen.add(id(n))
            if predicate(n):
                found.add(n)
                if not deep:
                    continue
            stack.extend(reversed(n.children()))
        return found

    # ----------------------------------------------------------------- dunder
    def __str__(self):
        return self.render()

    def __repr__(self):
        state = "stale" if self._stale else f"value={self._value!r}"
        return f"<{type(self).__name__} {self.name} {state}>"


def _assert_acyclic(root: Node):
    """
    Iterative three-colour DFS below `root`. Nodes already verified by an
    earlier check count as black and are not entered, so a graph built through
    a checking session costs O(arity) per new node.
    Raises GraphConstructionError on the first back edge found.
    """
    GREY, BLACK = 1, 2
    colour: dict = {id(root): GREY}
    stack: List[Tuple[Node, Any]] = [(root, iter(root.children()))]
    while stack:
        node, it = stack[-1]
        child = next(it, None)
        if child is None:
            colour[id(node)] = BLACK
            node._acyclic = True
            stack.pop()
            continue
        if child._acyclic:
            continue
        state = colour.get(id(child))
        if state == GREY:
            raise GraphConstructionError(
                f"cycle detected: {child.name!r} is reachable from itself via {node.name!r}"
            )
        if state is None:
            colour[id(child)] = GREY
            stack.append((child, iter(child.children())))
