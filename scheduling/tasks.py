"""Task metadata for pair-based scheduling: daily time windows and workload."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

MINUTES_PER_DAY = 24 * 60
TRANSFER_TIME_MIN = 60
UNIT_MINUTES = 15

# Window used when a task carries no start/duration metadata.
FALLBACK_START_MIN = 8 * 60
FALLBACK_STEP_MIN = 30
FALLBACK_DURATION_MIN = 60

EXAMPLE_STARTS = ["08:30", "11:00", "15:00", "18:00", "22:00",
                  "09:00", "13:00", "17:00", "19:45", "21:30"]
EXAMPLE_DURATIONS = [75, 90, 75, 90, 90, 60, 75, 75, 90, 135]


@dataclass(frozen=True)
class Task:
    """A pending job ("cloudlet") with an optional daily time window."""

    task_id: int
    start: Optional[str] = None
    duration_min: Optional[int] = None
    length_mi: int = 0


@dataclass(frozen=True)
class TaskWindow:
    start_min: int
    end_min: int


def parse_hhmm(hhmm: str) -> int:
    """Minutes from midnight for an "HH:mm" string; hours and minutes wrap."""
    parts = hhmm.split(":")
    if len(parts) != 2:
        raise ValueError(f"expected HH:mm, got {hhmm!r}")
    try:
        hh, mm = int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise ValueError(f"expected HH:mm, got {hhmm!r}") from None
    return (hh % 24) * 60 + (mm % 60)


def minutes_to_units(minutes):
    """Convert minutes to 15-minute units (1 hour = 4 units), rounding half up.

    Negative minutes are first wrapped into the day. Accepts scalars or arrays.
    """
    minutes = np.asarray(minutes, dtype=np.float64)
    minutes = np.where(minutes < 0, np.mod(minutes, MINUTES_PER_DAY), minutes)
    units = np.floor(minutes / UNIT_MINUTES + 0.5).astype(np.int64)
    return int(units) if units.ndim == 0 else units


def task_window(task: Task) -> TaskWindow:
    """Start and end minute of the task's window; end wraps past midnight."""
    if task.start is None or task.duration_min is None:
        start = (FALLBACK_START_MIN + task.task_id * FALLBACK_STEP_MIN) % MINUTES_PER_DAY
        return TaskWindow(start, (start + FALLBACK_DURATION_MIN) % MINUTES_PER_DAY)
    start = parse_hhmm(task.start)
    return TaskWindow(start, (start + task.duration_min) % MINUTES_PER_DAY)


def example_tasks(n: int, seed: int = 42) -> List[Task]:
    """Deterministic demo workload cycling through a day of sample windows."""
    rng = np.random.default_rng(seed)
    tasks = []
    for i in range(n):
        idx = i % len(EXAMPLE_STARTS)
        tasks.append(Task(
            task_id=i,
            start=EXAMPLE_STARTS[idx],
            duration_min=EXAMPLE_DURATIONS[idx],
            length_mi=int(3000 + rng.integers(0, 9000)),
        ))
    return tasks
