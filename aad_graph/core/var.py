# aad_graph/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Optional

from .errors import GraphConstructionError
from .node import Context, Node, format_number
from .session import Session


class Constant(Node):
    """
    Leaf holding a fixed value. Forward never reads the context and backward
    stops here (the derivative field still accumulates, but feeds nothing).
    """
    kind = "const"
    prefix = "const"

    def __init__(self, value, *, name: Optional[str] = None, session: Optional[Session] = None):
        if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.floating, np.integer)):
            raise GraphConstructionError(
                f"Constant only accepts real scalars, but got {type(value)}"
            )
        super().__init__((), name=name, session=session)
        self._constant = np.float64(value)
        self._value = self._constant

    def _compute(self, context: Context):
        return self._constant

    def _reset_value(self):
        self._value = self._constant

    def render(self) -> str:
        return format_number(self._constant)


class Variable(Node):
    """
    Named leaf bound through the evaluation context.

    An absent binding is not an error: the variable keeps the value it last
    held (the session's `variable_default` if it has never been bound).
    Invalidation keeps that value too; only the derivative is cleared.
    """
    kind = "var"
    prefix = "var"

    def __init__(self, name: str, *, session: Optional[Session] = None):
        if not isinstance(name, str) or not name:
            raise GraphConstructionError(f"Variable needs a non-empty name, got {name!r}")
        super().__init__((), name=name, session=session)
        self._value = np.float64(self.session.config.variable_default)

    def _compute(self, context: Context):
        if self.name in context:
            return context[self.name]
        return self._value

    def _reset_value(self):
        pass

    def render(self) -> str:
        return self.name
