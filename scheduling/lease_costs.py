"""
Lease Cost Module

Time-window cost model for pairing two groups of tasks on one VM. The lease
time between a task of the first group and one of the second is the gap from
the first task's end to the second task's start; the converse lease runs the
other way. Gaps shorter than the transfer time push the lease into the next
day. The pairing cost is the smaller of the two, in 15-minute units.
"""

from typing import Sequence

import numpy as np

from .tasks import MINUTES_PER_DAY, TRANSFER_TIME_MIN, Task, minutes_to_units, task_window


def _windows(tasks: Sequence[Task]):
    windows = [task_window(t) for t in tasks]
    starts = np.array([w.start_min for w in windows], dtype=np.int64)
    ends = np.array([w.end_min for w in windows], dtype=np.int64)
    return starts, ends


def _lease(ends: np.ndarray, starts: np.ndarray) -> np.ndarray:
    """Lease minutes from each end (rows) to each start (columns)."""
    end = ends[:, None]
    start = starts[None, :]
    lease = end - start
    lease = np.where(lease < 0, lease + MINUTES_PER_DAY, lease)

    short = lease < TRANSFER_TIME_MIN
    adjusted = np.where(end > start,
                        MINUTES_PER_DAY - (start - end),
                        MINUTES_PER_DAY + (start - end))
    return np.where(short, adjusted, lease).astype(np.float64)


def lease_time_matrix(group1: Sequence[Task], group2: Sequence[Task]) -> np.ndarray:
    """LT[i, j] = ET(group1[i]) - ST(group2[j]) in minutes, day-wrapped."""
    _, ends1 = _windows(group1)
    starts2, _ = _windows(group2)
    return _lease(ends1, starts2)


def converse_lease_time_matrix(group1: Sequence[Task], group2: Sequence[Task]) -> np.ndarray:
    """CLT[i, j] = ET(group2[j]) - ST(group1[i]) in minutes, day-wrapped."""
    starts1, _ = _windows(group1)
    _, ends2 = _windows(group2)
    return _lease(ends2, starts1).T


def least_time_matrix(group1: Sequence[Task], group2: Sequence[Task]) -> np.ndarray:
    """Pairing cost: min(LT, CLT) converted to units. Always non-negative."""
    if not group1 or not group2:
        raise ValueError("both task groups must be non-empty")
    lt_units = minutes_to_units(np.round(lease_time_matrix(group1, group2)))
    clt_units = minutes_to_units(np.round(converse_lease_time_matrix(group1, group2)))
    return np.minimum(lt_units, clt_units).astype(np.float64)
