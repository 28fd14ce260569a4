"""
Pair-Based Broker Module

Splits pending tasks into two equal groups, pairs them at minimum total lease
cost with the Hungarian engine and binds every formed pair to one VM, walking
the VM list round-robin.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from pairing import UNPAIRED, SolverConfig, compute_assignments

from .lease_costs import least_time_matrix
from .tasks import Task


@dataclass(frozen=True)
class TaskPair:
    first: Task
    second: Task
    cost: float
    vm_id: int


@dataclass
class PairingPlan:
    """Outcome of one broker run."""

    pairs: List[TaskPair] = field(default_factory=list)
    dropped: List[Task] = field(default_factory=list)

    @property
    def total_cost(self) -> float:
        return float(sum(p.cost for p in self.pairs))

    @property
    def bindings(self) -> Dict[int, int]:
        """task_id -> vm_id for every scheduled task."""
        out = {}
        for pair in self.pairs:
            out[pair.first.task_id] = pair.vm_id
            out[pair.second.task_id] = pair.vm_id
        return out

    def vm_loads(self) -> Dict[int, int]:
        """Number of tasks bound to each VM."""
        loads: Dict[int, int] = {}
        for vm_id in self.bindings.values():
            loads[vm_id] = loads.get(vm_id, 0) + 1
        return loads


class PairBasedBroker:
    """Broker that schedules tasks two at a time on shared VMs."""

    def __init__(self, name: str = "PairBasedBroker", config: Optional[SolverConfig] = None):
        self.name = name
        self.config = config

    def split_groups(self, tasks: Sequence[Task]):
        """First half and second half of the task list, in submission order."""
        mid = len(tasks) // 2
        return list(tasks[:mid]), list(tasks[mid:])

    def plan(self, tasks: Sequence[Task], vm_ids: Sequence[int]) -> PairingPlan:
        """
        Pair tasks and bind each pair to a VM.

        Args:
            tasks: Pending tasks in submission order
            vm_ids: Available VM identifiers

        Returns:
            PairingPlan with the bound pairs and any task left out
        """
        if not vm_ids:
            raise ValueError(f"{self.name}: no VMs available for binding")

        tasks = list(tasks)
        plan = PairingPlan()
        if len(tasks) % 2:
            print(f"{self.name}: odd number of tasks - dropping task {tasks[-1].task_id} for pairing.")
            plan.dropped.append(tasks.pop())
        if not tasks:
            return plan

        group1, group2 = self.split_groups(tasks)
        costs = least_time_matrix(group1, group2)
        assignment = compute_assignments(costs, config=self.config)

        vm_index = 0
        for i, j in enumerate(assignment):
            if j == UNPAIRED:
                plan.dropped.append(group1[i])
                continue
            vm_id = vm_ids[vm_index % len(vm_ids)]
            plan.pairs.append(TaskPair(group1[i], group2[j], float(costs[i, j]), vm_id))
            vm_index += 1

        paired = {int(j) for j in assignment if j != UNPAIRED}
        plan.dropped.extend(t for k, t in enumerate(group2) if k not in paired)
        return plan

    def cost_matrix(self, tasks: Sequence[Task]) -> np.ndarray:
        """Least-time cost matrix the broker would solve for these tasks."""
        tasks = list(tasks)
        if len(tasks) % 2:
            tasks = tasks[:-1]
        group1, group2 = self.split_groups(tasks)
        return least_time_matrix(group1, group2)
