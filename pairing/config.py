"""
Solver Configuration Module

Numeric settings shared by every stage of the pairing engine. The zero test
used for the zero mask, the cover search and the cost adjustment all read the
same tolerance from one SolverConfig, so the stages cannot disagree on what
counts as a zero.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SolverConfig:
    """Immutable settings for one or many solve calls."""

    tolerance: float = 1e-6
    padding_cost: float = 1e9
    max_iterations: Optional[int] = None

    def validate(self) -> "SolverConfig":
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if not self.padding_cost > 0:
            raise ValueError(f"padding_cost must be positive, got {self.padding_cost}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        return self

    def with_overrides(self, **kwargs) -> "SolverConfig":
        """Return a validated copy with some fields replaced."""
        return replace(self, **kwargs).validate()


DEFAULT_CONFIG = SolverConfig()
