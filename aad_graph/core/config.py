"""
Engine configuration

Settings shared by every node built under one Session: the default value of an
unbound Variable, whether construction checks for cycles, how numpy reports
floating-point edge cases during the passes, and the bump sizes used by the
finite-difference checks.
"""

from dataclasses import dataclass, replace

_ERRSTATE_MODES = ("ignore", "warn", "raise", "call", "print", "log")


@dataclass(frozen=True)
class EngineConfig:
    """
    Attributes:
        variable_default (float): Value of a Variable that has never been bound
        check_acyclic (bool): Reject cyclic graphs when a node is constructed
        float_errors (str): numpy errstate mode used during forward/backward
        fd_epsilon (float): Central-difference bump size
        fd_tolerance (float): Max abs error accepted by check_gradients
    """
    variable_default: float = 0.0
    check_acyclic: bool = True
    float_errors: str = "ignore"
    fd_epsilon: float = 1e-6
    fd_tolerance: float = 1e-6

    def __post_init__(self):
        if self.float_errors not in _ERRSTATE_MODES:
            raise ValueError(
                f"float_errors must be one of {_ERRSTATE_MODES}, got {self.float_errors!r}"
            )
        if self.fd_epsilon <= 0.0:
            raise ValueError(f"fd_epsilon must be positive, got {self.fd_epsilon}")
        if self.fd_tolerance < 0.0:
            raise ValueError(f"fd_tolerance must be non-negative, got {self.fd_tolerance}")

    def with_overrides(self, **kwargs) -> "EngineConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)
