"""Exceptions raised by the pairing engine."""


class PairingError(Exception):
    """Base class for every failure reported by the pairing engine."""


class MalformedCostMatrixError(PairingError, ValueError):
    """Cost matrix rejected before reduction (empty, ragged, negative, non-finite)."""


class InfeasibleTargetError(PairingError, RuntimeError):
    """The requested number of pairs cannot be formed on the zero graph."""


class IterationLimitError(PairingError, RuntimeError):
    """A caller-imposed cap on adjustment rounds was reached before termination.

    Distinct from infeasibility: a solution may still exist.
    """

    def __init__(self, iterations: int, matching_size: int, target_pairs: int):
        self.iterations = iterations
        self.matching_size = matching_size
        self.target_pairs = target_pairs
        super().__init__(
            f"stopped after {iterations} adjustment rounds with "
            f"{matching_size}/{target_pairs} pairs on the zero graph"
        )
