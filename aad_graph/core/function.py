# aad_graph/core/function.py
"""
Special-function nodes  y = f(x)  driven by a registry keyed by tag.

Each registry entry pairs the function with its derivative; the reverse rule
is always  adjoint_x = t * f'(x). Adding a new elementary function means
registering one entry, not writing a new node type:

    register_function("tanh", np.tanh, lambda x: 1.0 - np.tanh(x) ** 2)

The builtin entries are registered by aad_graph.ops on import.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np

from .errors import GraphConstructionError
from .node import Context, Node
from .session import Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionEntry:
    tag: str
    function: Callable
    derivative: Callable


_REGISTRY: Dict[str, FunctionEntry] = {}


def register_function(tag: str, function: Callable, derivative: Callable, *,
                      replace: bool = False) -> FunctionEntry:
    """
    Add `tag` to the function table.

    Args:
        tag: Name used by FunctionNode and in rendering, e.g. "exp"
        function: Scalar callable f(x)
        derivative: Scalar callable f'(x)
        replace: Allow overwriting an existing entry

    Raises:
        ValueError: if the tag is already registered and replace is False
    """
    if not isinstance(tag, str) or not tag:
        raise ValueError(f"function tag must be a non-empty string, got {tag!r}")
    if not callable(function) or not callable(derivative):
        raise ValueError(f"function and derivative for {tag!r} must be callable")
    if tag in _REGISTRY and not replace:
        raise ValueError(f"function {tag!r} is already registered")
    entry = FunctionEntry(tag, function, derivative)
    _REGISTRY[tag] = entry
    logger.debug("registered function %r", tag)
    return entry


def unregister_function(tag: str):
    _REGISTRY.pop(tag, None)


def get_function(tag: str) -> FunctionEntry:
    try:
        return _REGISTRY[tag]
    except KeyError:
        raise GraphConstructionError(
            f"unknown function {tag!r}; registered: {sorted(_REGISTRY)}"
        ) from None


def registered_functions():
    return sorted(_REGISTRY)


class FunctionNode(Node):
    """Unary special-function node; `tag` selects the registry entry."""
    kind = "function"

    def __init__(self, tag: str, x: Node, *, name: Optional[str] = None,
                 session: Optional[Session] = None):
        self.entry = get_function(tag)
        self.prefix = tag
        super().__init__((x,), name=name, session=session)

    @property
    def tag(self) -> str:
        return self.entry.tag

    @property
    def x(self) -> Node:
        return self._operands[0]

    def _compute(self, context: Context):
        return self.entry.function(self.x.value)

    def _local_adjoints(self, t):
        return (t * np.float64(self.entry.derivative(self.x.value)),)

    def render(self) -> str:
        return f"{self.tag}( {self.x.render()} )"
