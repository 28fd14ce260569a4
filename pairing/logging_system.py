"""
Logging Module for Pairing Experiments

Structured logging of solver runs: one CSV row per result, one JSON document
per experiment, a timestamped detail log and human-readable summaries, all
under a single log directory.
"""

import os
import json
import csv
import datetime
from importlib import metadata
from typing import Dict, Any, List, Optional
from pathlib import Path
import platform

import numpy as np
import scipy

CSV_HEADERS = [
    "timestamp", "experiment_id", "dataset", "n_rows", "n_cols",
    "problem_type", "solver_name", "time_ms", "cost", "iterations",
    "status", "notes"
]


class BenchmarkLogger:
    """
    Logging system for pairing solver experiments.

    Layout under ``log_dir``:
    - performance/<id>.csv   one row per solver result
    - experiments/<id>.json  metadata, environment and all results
    - detailed/<id>.log      timestamped narrative
    - summaries/             generated summaries
    """

    def __init__(self, log_dir: str = "logs", experiment_name: str = None):
        """
        Initialize experiment logger.

        Args:
            log_dir: Directory for log files
            experiment_name: Name for this experiment session
        """
        self.log_dir = Path(log_dir)
        for sub in ("experiments", "performance", "detailed", "summaries"):
            (self.log_dir / sub).mkdir(parents=True, exist_ok=True)

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        prefix = experiment_name or "exp"
        self.experiment_id = f"{prefix}_{timestamp}"

        self.csv_file = self.log_dir / "performance" / f"{self.experiment_id}.csv"
        self.json_file = self.log_dir / "experiments" / f"{self.experiment_id}.json"
        self.detail_file = self.log_dir / "detailed" / f"{self.experiment_id}.log"

        self.metadata = {
            "experiment_id": self.experiment_id,
            "start_time": datetime.datetime.now().isoformat(),
            "environment": self._get_environment_info(),
            "results": []
        }

        with open(self.csv_file, 'w', newline='') as f:
            csv.writer(f).writerow(CSV_HEADERS)

        self._log_detail(f"Experiment {self.experiment_id} started")
        self._log_detail(f"Environment: {self.metadata['environment']}")

    def _get_environment_info(self) -> Dict[str, str]:
        """Collect environment information for reproducibility."""
        env_info = {
            "python_version": platform.python_version(),
            "platform": platform.platform(),
            "processor": platform.processor(),
            "hostname": platform.node(),
            "numpy_version": np.__version__,
            "scipy_version": scipy.__version__,
        }
        try:
            env_info["lap_version"] = metadata.version("lap")
        except metadata.PackageNotFoundError:
            env_info["lap_version"] = "not_available"

        for var in ["OMP_NUM_THREADS", "MKL_NUM_THREADS", "OPENBLAS_NUM_THREADS", "PYTHONHASHSEED"]:
            env_info[var] = os.environ.get(var, "not_set")
        return env_info

    def _log_detail(self, message: str):
        """Write detailed log message."""
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(self.detail_file, 'a') as f:
            f.write(f"[{timestamp}] {message}\n")

    def log_result(self,
                   dataset: str,
                   shape: tuple,
                   problem_type: str,
                   solver_name: str,
                   time_seconds: float,
                   cost: float,
                   iterations: Optional[int] = None,
                   status: str = "success",
                   notes: str = "",
                   extra_data: Optional[Dict[str, Any]] = None):
        """
        Log a single solver result.

        Args:
            dataset: Name of the problem instance
            shape: (n_rows, n_cols) of the cost matrix
            problem_type: Cost family (uniform, tie, lease, ...)
            solver_name: Name of the solver used
            time_seconds: Execution time in seconds
            cost: Total pairing cost found
            iterations: Adjustment rounds, for solvers that report them
            status: success/failure/error
            notes: Additional notes
            extra_data: Additional structured data
        """
        timestamp = datetime.datetime.now().isoformat()
        n_rows, n_cols = shape

        with open(self.csv_file, 'a', newline='') as f:
            csv.writer(f).writerow([
                timestamp, self.experiment_id, dataset, n_rows, n_cols,
                problem_type, solver_name, time_seconds * 1000, cost,
                "" if iterations is None else iterations, status, notes
            ])

        self._log_detail(
            f"{solver_name} on {dataset} ({n_rows}x{n_cols}): "
            f"{time_seconds*1000:.2f}ms, cost={cost:.6f}, status={status}"
        )

        result_data = {
            "timestamp": timestamp,
            "dataset": dataset,
            "n_rows": n_rows,
            "n_cols": n_cols,
            "problem_type": problem_type,
            "solver_name": solver_name,
            "time_seconds": time_seconds,
            "time_ms": time_seconds * 1000,
            "cost": cost,
            "iterations": iterations,
            "status": status,
            "notes": notes
        }
        if extra_data:
            result_data["extra_data"] = extra_data

        self.metadata["results"].append(result_data)

    def log_comparison(self,
                       dataset: str,
                       shape: tuple,
                       problem_type: str,
                       results: Dict[str, Dict[str, Any]],
                       reference: str = "SciPy"):
        """
        Log results for several solvers on the same problem.

        Args:
            dataset: Name of the problem instance
            shape: (n_rows, n_cols)
            problem_type: Cost family
            results: solver_name -> {time, cost, status, iterations}
            reference: Solver whose time and cost the others are compared to
        """
        self._log_detail(f"=== Comparison: {dataset} ({shape[0]}x{shape[1]}) ===")

        for solver_name, result in results.items():
            self.log_result(
                dataset=dataset,
                shape=shape,
                problem_type=problem_type,
                solver_name=solver_name,
                time_seconds=result.get('time', 0.0),
                cost=result.get('cost', 0.0),
                iterations=result.get('iterations'),
                status=result.get('status', 'unknown'),
                notes=result.get('notes', '')
            )

        ref = results.get(reference)
        if not ref or ref.get('status') != 'success':
            return
        for solver_name, result in results.items():
            if solver_name == reference or result.get('status') != 'success':
                continue
            if result['time'] > 0:
                self._log_detail(f"Time ratio ({solver_name} vs {reference}): "
                                 f"{result['time'] / ref['time']:.2f}x")
            self._log_detail(f"Cost gap ({solver_name} - {reference}): "
                             f"{result['cost'] - ref['cost']:.3e}")

    def save_experiment(self):
        """Save complete experiment data to JSON."""
        self.metadata["end_time"] = datetime.datetime.now().isoformat()

        with open(self.json_file, 'w') as f:
            json.dump(self.metadata, f, indent=2, default=str)

        self._log_detail(f"Experiment {self.experiment_id} completed")
        self._log_detail(f"Results saved to {self.json_file}")

    def generate_summary(self, output_file: Optional[str] = None) -> str:
        """
        Generate a human-readable summary of the experiment.

        Args:
            output_file: Optional file name under summaries/

        Returns:
            Summary text
        """
        if not self.metadata["results"]:
            return "No results to summarize."

        lines = [
            f"Experiment Summary: {self.experiment_id}",
            "=" * 60,
            f"Start Time: {self.metadata['start_time']}",
            f"Total Results: {len(self.metadata['results'])}",
            "",
            "Solver Performance Summary:",
            "-" * 40,
        ]

        solver_stats = {}
        for result in self.metadata["results"]:
            stats = solver_stats.setdefault(result["solver_name"], {"times": [], "count": 0, "failed": 0})
            stats["count"] += 1
            if result["status"] == "success":
                stats["times"].append(result["time_ms"])
            else:
                stats["failed"] += 1

        for solver, stats in solver_stats.items():
            if stats["times"]:
                lines.append(
                    f"{solver:12}: {stats['count']:3} runs, "
                    f"avg={np.mean(stats['times']):8.2f}ms, med={np.median(stats['times']):8.2f}ms, "
                    f"failed={stats['failed']}"
                )
            else:
                lines.append(f"{solver:12}: {stats['count']:3} runs, all failed")

        problem_types = {}
        for result in self.metadata["results"]:
            problem_types[result["problem_type"]] = problem_types.get(result["problem_type"], 0) + 1

        lines += ["", "Problem Types Tested:", "-" * 25]
        for ptype, count in problem_types.items():
            lines.append(f"{ptype:15}: {count:3} results")

        summary_text = "\n".join(lines)

        summary_file = self.log_dir / "summaries" / (output_file or f"{self.experiment_id}_summary.txt")
        with open(summary_file, 'w') as f:
            f.write(summary_text)

        self._log_detail(f"Summary saved to {summary_file}")
        return summary_text


def get_latest_experiment(log_dir: str = "logs") -> Optional[str]:
    """Get the most recent experiment ID from logs."""
    experiments = list_experiments(log_dir)
    return experiments[0] if experiments else None


def load_experiment(experiment_id: str, log_dir: str = "logs") -> Optional[Dict[str, Any]]:
    """Load experiment data from JSON file."""
    json_file = Path(log_dir) / "experiments" / f"{experiment_id}.json"

    if not json_file.exists():
        return None

    with open(json_file, 'r') as f:
        return json.load(f)


def list_experiments(log_dir: str = "logs") -> List[str]:
    """List all available experiment IDs, newest first."""
    log_path = Path(log_dir) / "experiments"
    if not log_path.exists():
        return []

    json_files = list(log_path.glob("*.json"))
    return [f.stem for f in sorted(json_files, key=lambda f: f.stat().st_mtime, reverse=True)]
