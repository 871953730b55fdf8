# aad_graph/core/session.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Optional

from .config import EngineConfig

logger = logging.getLogger(__name__)


class Session:
    """
    Graph-building session: owns the symbol counter used to name unlabeled
    nodes and the EngineConfig every node built under it refers to.
    """
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self._counter = 0

    def nextsym(self, prefix: str) -> str:
        """Return a fresh symbol such as 'plus_3'."""
        self._counter += 1
        return f"{prefix}_{self._counter}"

    @property
    def symbols_issued(self) -> int:
        return self._counter

    def reset(self):
        """Restart symbol numbering. Existing nodes keep their names."""
        self._counter = 0

    def __repr__(self):
        return f"Session(symbols={self.symbols_issued}, config={self.config!r})"


# Default session used when the caller does not open one explicitly
default_session = Session()


def current_session() -> Session:
    return default_session


@contextmanager
def use_session(session: Optional[Session] = None, *, config: Optional[EngineConfig] = None):
    """
    Context manager to build nodes under a fresh (or given) session:
        with use_session() as s:
            x = make_variable("x")
            ...
    """
    from . import session as _session_mod  # local import to avoid cycles
    prev = _session_mod.default_session
    try:
        _session_mod.default_session = session or Session(config)
        logger.debug("entering %r", _session_mod.default_session)
        yield _session_mod.default_session
    finally:
        _session_mod.default_session = prev
