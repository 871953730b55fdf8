# aad_graph/core/binary.py
from __future__ import annotations
from typing import Optional

from .node import Context, Node
from .session import Session


class BinaryOp(Node):
    """
    Generic binary node  y = f(a, b).

    Children are evaluated a first, then b. Subclasses supply the combining
    rule and the reverse rule (adjoint sent to a, adjoint sent to b).
    """
    symbol = "?"

    def __init__(self, a: Node, b: Node, *, name: Optional[str] = None,
                 session: Optional[Session] = None):
        super().__init__((a, b), name=name, session=session)

    @property
    def a(self) -> Node:
        return self._operands[0]

    @property
    def b(self) -> Node:
        return self._operands[1]

    def _combine(self, a, b):
        raise NotImplementedError

    def _compute(self, context: Context):
        return self._combine(self.a.value, self.b.value)

    def render(self) -> str:
        return f"( {self.a.render()} {self.symbol} {self.b.render()} )"


class Plus(BinaryOp):
    kind = prefix = "plus"
    symbol = "+"

    def _combine(self, a, b):
        return a + b

    def _local_adjoints(self, t):
        # dy/da = 1, dy/db = 1
        return t, t


class Minus(BinaryOp):
    kind = prefix = "minus"
    symbol = "-"

    def _combine(self, a, b):
        return a - b

    def _local_adjoints(self, t):
        # dy/da = 1, dy/db = -1
        return t, -t


class Mul(BinaryOp):
    kind = prefix = "mul"
    symbol = "*"

    def _combine(self, a, b):
        return a * b

    def _local_adjoints(self, t):
        # dy/da = b, dy/db = a
        return t * self.b.value, t * self.a.value


class Div(BinaryOp):
    kind = prefix = "div"
    symbol = "/"

    def _combine(self, a, b):
        return a / b

    def _local_adjoints(self, t):
        # dy/da = 1/b, dy/db = -a/b^2  (b == 0 gives inf/nan, no guard)
        a, b = self.a.value, self.b.value
        return t / b, -t * a / (b * b)
