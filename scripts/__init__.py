"""
Scripts Module

Command line entry points for the pairing harness: solver benchmarking and
the pair-based scheduling demo.
"""

__all__ = [
    'main_benchmark',
    'pairing_demo',
]
