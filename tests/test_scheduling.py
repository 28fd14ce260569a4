import numpy as np
import pytest
import scipy.optimize

from pairing import assignment_cost, greedy_assignment
from scheduling import (
    PairBasedBroker,
    Task,
    converse_lease_time_matrix,
    example_tasks,
    lease_time_matrix,
    least_time_matrix,
    minutes_to_units,
    parse_hhmm,
    task_window,
)


@pytest.mark.parametrize("text,expected", [
    ("00:00", 0),
    ("08:30", 510),
    (" 23:59 ", 1439),
    ("25:70", 70),
])
def test_parse_hhmm(text, expected):
    assert parse_hhmm(text) == expected


@pytest.mark.parametrize("text", ["8", "aa:bb", "1:2:3"])
def test_parse_hhmm_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_hhmm(text)


def test_minutes_to_units():
    assert minutes_to_units(60) == 4
    assert minutes_to_units(7) == 0
    assert minutes_to_units(7.5) == 1
    assert minutes_to_units(8) == 1
    assert minutes_to_units(-15) == 95
    np.testing.assert_array_equal(minutes_to_units(np.array([0, 15, 1440])), [0, 1, 96])


def test_task_window_wraps_midnight():
    window = task_window(Task(0, "23:30", 60))
    assert (window.start_min, window.end_min) == (1410, 30)


def test_task_window_fallback():
    window = task_window(Task(3))
    assert (window.start_min, window.end_min) == (570, 630)


def test_lease_matrices():
    g1 = [Task(0, "08:00", 60)]
    g2 = [Task(1, "10:00", 60)]
    np.testing.assert_array_equal(lease_time_matrix(g1, g2), [[1380.0]])
    np.testing.assert_array_equal(converse_lease_time_matrix(g1, g2), [[180.0]])
    np.testing.assert_array_equal(least_time_matrix(g1, g2), [[12.0]])


def test_short_lease_moves_to_next_day():
    g1 = [Task(0, "08:00", 60)]
    g2 = [Task(1, "08:30", 60)]
    assert lease_time_matrix(g1, g2)[0, 0] == 1470.0


def test_lease_matrix_shape_and_orientation():
    g1 = example_tasks(3)
    g2 = [Task(10, "12:00", 30), Task(11, "20:00", 45)]
    assert lease_time_matrix(g1, g2).shape == (3, 2)
    assert converse_lease_time_matrix(g1, g2).shape == (3, 2)
    # the converse lease of (g1, g2) is the lease of (g2, g1)
    np.testing.assert_array_equal(converse_lease_time_matrix(g1, g2), lease_time_matrix(g2, g1).T)


def test_least_time_matrix_non_negative():
    tasks = example_tasks(20)
    costs = least_time_matrix(tasks[:10], tasks[10:])
    assert costs.min() >= 0.0
    assert costs.dtype == np.float64


def test_least_time_requires_tasks():
    with pytest.raises(ValueError):
        least_time_matrix([], example_tasks(2))


def test_example_tasks_are_deterministic():
    a, b = example_tasks(12, seed=1), example_tasks(12, seed=1)
    assert a == b
    assert a[0].start == a[10].start == "08:30"
    assert all(3000 <= t.length_mi < 12000 for t in a)


def test_broker_pairs_halves_round_robin():
    tasks = example_tasks(8)
    broker = PairBasedBroker()
    plan = broker.plan(tasks, vm_ids=[100, 200, 300])

    assert len(plan.pairs) == 4
    assert plan.dropped == []
    assert [p.vm_id for p in plan.pairs] == [100, 200, 300, 100]
    assert {p.first.task_id for p in plan.pairs} == {0, 1, 2, 3}
    assert {p.second.task_id for p in plan.pairs} == {4, 5, 6, 7}
    assert plan.vm_loads() == {100: 4, 200: 2, 300: 2}
    assert set(plan.bindings) == set(range(8))


def test_broker_cost_is_optimal():
    tasks = example_tasks(20)
    broker = PairBasedBroker()
    plan = broker.plan(tasks, vm_ids=[0, 1, 2])

    costs = broker.cost_matrix(tasks)
    rows, cols = scipy.optimize.linear_sum_assignment(costs)
    assert plan.total_cost == pytest.approx(costs[rows, cols].sum())
    assert plan.total_cost <= assignment_cost(costs, greedy_assignment(costs))


def test_broker_drops_last_of_odd_count(capsys):
    tasks = example_tasks(5)
    plan = PairBasedBroker("Odd").plan(tasks, vm_ids=[0])
    assert [t.task_id for t in plan.dropped] == [4]
    assert len(plan.pairs) == 2
    assert "dropping task 4" in capsys.readouterr().out


def test_broker_single_task():
    plan = PairBasedBroker().plan(example_tasks(1), vm_ids=[0])
    assert plan.pairs == []
    assert len(plan.dropped) == 1
    assert plan.total_cost == 0.0


def test_broker_requires_vms():
    with pytest.raises(ValueError):
        PairBasedBroker().plan(example_tasks(4), vm_ids=[])
