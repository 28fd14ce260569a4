"""Pair-based task scheduling on top of the pairing engine."""

from .tasks import (
    MINUTES_PER_DAY,
    TRANSFER_TIME_MIN,
    UNIT_MINUTES,
    Task,
    TaskWindow,
    parse_hhmm,
    minutes_to_units,
    task_window,
    example_tasks,
)
from .lease_costs import (
    lease_time_matrix,
    converse_lease_time_matrix,
    least_time_matrix,
)
from .pair_broker import PairBasedBroker, PairingPlan, TaskPair

__all__ = [
    "MINUTES_PER_DAY",
    "TRANSFER_TIME_MIN",
    "UNIT_MINUTES",
    "Task",
    "TaskWindow",
    "parse_hhmm",
    "minutes_to_units",
    "task_window",
    "example_tasks",
    "lease_time_matrix",
    "converse_lease_time_matrix",
    "least_time_matrix",
    "PairBasedBroker",
    "PairingPlan",
    "TaskPair",
]
