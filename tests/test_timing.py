import pytest

from pairing import HungarianSolver, time_solver_rigorous


def test_successful_timing(textbook_3x3):
    solver = HungarianSolver()
    stats = time_solver_rigorous(lambda: solver.solve(textbook_3x3), num_warmups=1, num_repeats=3)
    assert stats["success"]
    assert stats["num_samples"] == 3
    assert 0.0 <= stats["min"] <= stats["median"] <= stats["max"]


def test_failure_is_reported():
    def boom():
        raise RuntimeError("solver exploded")

    stats = time_solver_rigorous(boom, num_warmups=0, num_repeats=2)
    assert stats["success"] is False
    assert "solver exploded" in stats["error"]


def test_single_sample_has_zero_std():
    stats = time_solver_rigorous(lambda: None, num_warmups=0, num_repeats=1)
    assert stats["std"] == 0.0


def test_repeats_must_be_positive():
    with pytest.raises(ValueError):
        time_solver_rigorous(lambda: None, num_repeats=0)
