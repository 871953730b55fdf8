# aad_graph/core/power.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Optional

from .errors import GraphConstructionError
from .node import Context, Node, format_number
from .session import Session


class WeightedPower(Node):
    """
    Weighted power  y = a * x^m  with fixed real coefficient `a` and integer
    exponent `m` (zero and negative allowed).

    Reverse rule: dy/dx = a * m * x^(m-1). With m = 0 the gradient is exactly
    zero; a negative m at x = 0 yields IEEE inf, propagated without a guard.
    """
    kind = "wpoly"
    prefix = "wpoly"

    def __init__(self, coefficient, x: Node, exponent: int, *, name: Optional[str] = None,
                 session: Optional[Session] = None):
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise GraphConstructionError(
                f"WeightedPower exponent must be an integer, got {exponent!r}"
            )
        if isinstance(coefficient, bool) or not isinstance(coefficient, numbers.Real):
            raise GraphConstructionError(
                f"WeightedPower coefficient must be a real scalar, got {coefficient!r}"
            )
        super().__init__((x,), name=name, session=session)
        self.coefficient = np.float64(coefficient)
        self.exponent = int(exponent)

    @property
    def x(self) -> Node:
        return self._operands[0]

    def _compute(self, context: Context):
        return self.coefficient * np.power(self.x.value, np.float64(self.exponent))

    def _local_adjoints(self, t):
        if self.exponent == 0:
            return (np.float64(0.0),)
        m = self.exponent
        return (t * self.coefficient * m * np.power(self.x.value, np.float64(m - 1)),)

    def render(self) -> str:
        base = f"{self.x.render()}^{self.exponent}"
        if self.coefficient == 1.0:
            return base
        return f"{format_number(self.coefficient)} {base}"
