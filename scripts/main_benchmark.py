#!/usr/bin/env python3
"""
Main Benchmark Script: Hungarian vs SciPy vs LAP

Compares three pairing solvers on generated cost matrices:
1. Hungarian zero-cover engine (this repository)
2. SciPy linear_sum_assignment (baseline reference)
3. lap.lapjv (high-performance reference)

Every problem is verified first (all solvers must reach the same cost), then
timed, and the results are written through BenchmarkLogger.
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set thread limits for fair and consistent comparison
os.environ.setdefault("OMP_NUM_THREADS", "1")
os.environ.setdefault("MKL_NUM_THREADS", "1")
os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
os.environ.setdefault("PYTHONHASHSEED", "0")

import numpy as np
from typing import Dict, List, Optional

from pairing import (
    COST_FAMILIES,
    BenchmarkLogger,
    HungarianSolver,
    LAPSolver,
    PairingError,
    SciPySolver,
    SolverConfig,
    assignment_cost,
    generate_costs,
    greedy_assignment,
    time_solver_rigorous,
    verify_solver_correctness,
)


def parse_shape(text: str):
    """Parse "n" or "RxC" into a (rows, cols) tuple."""
    if "x" in text:
        rows, cols = text.lower().split("x", 1)
        return int(rows), int(cols)
    return int(text), int(text)


def benchmark_problem(dataset_name: str, family: str, C: np.ndarray,
                      logger: Optional[BenchmarkLogger] = None,
                      config: Optional[SolverConfig] = None,
                      num_warmups: int = 2, num_repeats: int = 5) -> Dict[str, object]:
    """Verify and time all three solvers on a single problem."""

    shape = C.shape
    print(f"\n=== {dataset_name} ===")
    print(f"Problem size: {shape[0]}x{shape[1]}")

    try:
        report = verify_solver_correctness(C)
    except PairingError as e:
        print(f"❌ Hungarian solver rejected the problem: {e}")
        if logger:
            logger.log_result(dataset_name, shape, family, "Hungarian", 0.0, float("nan"),
                              status="error", notes=str(e))
        return {'success': False, 'dataset': dataset_name}

    if not report['agree']:
        print("❌ CORRECTNESS CHECK FAILED")
        return {'success': False, 'dataset': dataset_name, 'costs': report['costs']}
    print("✅ Correctness verified - all solvers agree")

    greedy_cost = assignment_cost(C, greedy_assignment(C))
    print(f"Optimal cost: {report['costs']['SciPy']:.4f}  (greedy baseline: {greedy_cost:.4f})")

    hungarian = HungarianSolver(config)
    solvers = [hungarian, SciPySolver(), LAPSolver()]

    results = {}
    for solver in solvers:
        print(f"  {solver.name}...", end=' ')
        timing = time_solver_rigorous(lambda: solver.solve(C), num_warmups, num_repeats)
        if not timing['success']:
            print(f"FAILED ({timing['error']})")
            results[solver.name] = {'status': 'error', 'time': 0.0, 'cost': float('nan'),
                                    'notes': timing['error']}
            continue
        print(f"{timing['median']*1000:.2f} ms (median)")
        results[solver.name] = {
            'status': 'success',
            'time': timing['median'],
            'cost': report['costs'][solver.name],
        }

    if hungarian.last_result is not None and 'Hungarian' in results:
        results['Hungarian']['iterations'] = hungarian.last_result.iterations

    if logger:
        logger.log_comparison(dataset_name, shape, family, results)

    return {
        'success': all(r['status'] == 'success' for r in results.values()),
        'dataset': dataset_name,
        'shape': shape,
        'greedy_cost': greedy_cost,
        'results': results,
    }


def run_main_benchmark(shapes: List[tuple], families: List[str], seed: int,
                       log_dir: str, num_repeats: int) -> List[Dict[str, object]]:
    """Run the benchmark grid and print a summary table."""

    print("=" * 80)
    print("PAIRING BENCHMARK: Hungarian vs SciPy vs LAP")
    print("=" * 80)
    print(f"Thread settings: OMP={os.environ.get('OMP_NUM_THREADS')}, MKL={os.environ.get('MKL_NUM_THREADS')}")
    print(f"Timing methodology: 2 warmups, {num_repeats} repeats, median reporting")

    logger = BenchmarkLogger(log_dir, experiment_name="pairing_benchmark")
    all_results = []

    for family in families:
        for shape in shapes:
            C = generate_costs(family, shape, seed=seed)
            name = f"{family}_{shape[0]}x{shape[1]}"
            result = benchmark_problem(name, family, C, logger, num_repeats=num_repeats)
            if result['success']:
                all_results.append(result)

    logger.save_experiment()

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    if not all_results:
        print("❌ No successful benchmarks!")
        return all_results

    print(f"\n{'Dataset':<28} {'Hungarian(ms)':<14} {'SciPy(ms)':<10} {'LAP(ms)':<10} {'Rounds':<7}")
    print("-" * 72)
    for result in all_results:
        r = result['results']
        print(f"{result['dataset']:<28} "
              f"{r['Hungarian']['time']*1000:<14.2f} "
              f"{r['SciPy']['time']*1000:<10.2f} "
              f"{r['LAP']['time']*1000:<10.2f} "
              f"{r['Hungarian'].get('iterations', '-'):<7}")

    print()
    print(logger.generate_summary())
    return all_results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark pairing solvers")
    parser.add_argument("--shapes", nargs="+", default=["10", "50", "100", "40x60"],
                        help="Problem shapes, n or RxC")
    parser.add_argument("--families", nargs="+", default=["uniform", "integer", "tie"],
                        choices=sorted(COST_FAMILIES), help="Cost families to generate")
    parser.add_argument("--seed", type=int, default=42, help="Generator seed")
    parser.add_argument("--repeats", type=int, default=5, help="Timed runs per solver")
    parser.add_argument("--log-dir", type=str, default="logs", help="Experiment log directory")
    args = parser.parse_args(argv)

    shapes = [parse_shape(s) for s in args.shapes]
    run_main_benchmark(shapes, args.families, args.seed, args.log_dir, args.repeats)


if __name__ == "__main__":
    main()
