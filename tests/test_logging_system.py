import csv
import json

import pytest

from pairing import BenchmarkLogger, get_latest_experiment, list_experiments, load_experiment


def _logger(tmp_path):
    return BenchmarkLogger(log_dir=str(tmp_path), experiment_name="unit")


def test_layout_and_csv(tmp_path):
    logger = _logger(tmp_path)
    logger.log_result("uniform_3x3", (3, 3), "uniform", "Hungarian", 0.002, 5.0, iterations=1)

    for sub in ("experiments", "performance", "detailed", "summaries"):
        assert (tmp_path / sub).is_dir()

    with open(logger.csv_file, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["solver_name"] == "Hungarian"
    assert rows[0]["n_rows"] == "3"
    assert float(rows[0]["time_ms"]) == pytest.approx(2.0)
    assert rows[0]["iterations"] == "1"


def test_save_and_load(tmp_path):
    logger = _logger(tmp_path)
    logger.log_comparison("tie_4x6", (4, 6), "tie", {
        "Hungarian": {"time": 0.004, "cost": 1.5, "status": "success", "iterations": 2},
        "SciPy": {"time": 0.001, "cost": 1.5, "status": "success"},
    })
    logger.save_experiment()

    assert list_experiments(str(tmp_path)) == [logger.experiment_id]
    assert get_latest_experiment(str(tmp_path)) == logger.experiment_id

    data = load_experiment(logger.experiment_id, str(tmp_path))
    assert data["experiment_id"] == logger.experiment_id
    assert [r["solver_name"] for r in data["results"]] == ["Hungarian", "SciPy"]
    assert "end_time" in data
    assert "numpy_version" in data["environment"]

    detail = logger.detail_file.read_text()
    assert "Time ratio (Hungarian vs SciPy): 4.00x" in detail

    with open(logger.json_file) as f:
        assert json.load(f)["results"][0]["iterations"] == 2


def test_summary(tmp_path):
    logger = _logger(tmp_path)
    assert logger.generate_summary() == "No results to summarize."

    logger.log_result("a", (2, 2), "uniform", "Hungarian", 0.001, 1.0)
    logger.log_result("b", (2, 2), "uniform", "Hungarian", 0.0, float("nan"), status="error")
    text = logger.generate_summary("summary.txt")
    assert "Hungarian" in text
    assert "failed=1" in text
    assert (tmp_path / "summaries" / "summary.txt").read_text() == text


def test_missing_experiment(tmp_path):
    assert load_experiment("missing", str(tmp_path)) is None
    assert list_experiments(str(tmp_path / "nowhere")) == []
    assert get_latest_experiment(str(tmp_path / "nowhere")) is None
