"""
Timing Module

Repeated-run timing for pairing solver benchmarks.
Reports the median of many runs after a few warmups.
"""

import time
import statistics
from typing import Callable, Dict


def time_solver_rigorous(solver_func: Callable, num_warmups: int = 3, num_repeats: int = 10) -> Dict[str, float]:
    """
    Time a zero-argument callable.

    - Warmup runs stabilize caches and imports; a failing warmup aborts
    - Timed runs are collected with time.perf_counter
    - Median is the headline number (robust to outliers)

    Args:
        solver_func: Function to time (should take no arguments)
        num_warmups: Number of warmup runs
        num_repeats: Number of timed runs

    Returns:
        Dictionary with timing statistics, or success=False and the error
    """
    if num_repeats < 1:
        raise ValueError(f"num_repeats must be >= 1, got {num_repeats}")

    times = []
    try:
        for _ in range(num_warmups):
            solver_func()

        for _ in range(num_repeats):
            start = time.perf_counter()
            solver_func()
            times.append(time.perf_counter() - start)
    except Exception as e:
        return {'success': False, 'error': f"{type(e).__name__}: {e}"}

    return {
        'success': True,
        'median': statistics.median(times),
        'mean': statistics.mean(times),
        'std': statistics.stdev(times) if len(times) > 1 else 0.0,
        'min': min(times),
        'max': max(times),
        'num_samples': len(times)
    }
