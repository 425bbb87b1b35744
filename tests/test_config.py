from pathlib import Path

import pytest

from munkres import BenchmarkConfig, MunkresConfig, load_config

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"


def test_defaults():
    config = MunkresConfig()
    assert config.tolerance == 1e-6
    assert config.max_dimension == 100
    assert config.iteration_cap(3) == 16 * 9 + 64
    assert MunkresConfig(max_iterations=10).iteration_cap(50) == 10


@pytest.mark.parametrize("kwargs", [
    {"tolerance": 0.0},
    {"tolerance": -1e-6},
    {"max_dimension": 0},
    {"max_iterations": 0},
])
def test_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        MunkresConfig(**kwargs)


def test_shipped_config_loads():
    solver, bench = load_config(CONFIG_DIR / "benchmark.yaml")
    assert solver.tolerance == pytest.approx(1e-6)
    assert solver.max_iterations is None
    assert bench.sizes == [8, 16, 32, 64]
    assert bench.experiment_name == "munkres_vs_references"


def test_missing_sections_use_defaults(tmp_path):
    path = tmp_path / "solver_only.yaml"
    path.write_text("solver:\n  tolerance: 1.0e-9\n  track_duals: true\n")
    solver, bench = load_config(path)
    assert solver.tolerance == pytest.approx(1e-9)
    assert solver.track_duals is True
    assert bench == BenchmarkConfig()


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    solver, bench = load_config(path)
    assert solver == MunkresConfig()


@pytest.mark.parametrize("text", [
    "solver:\n  tolerence: 1.0e-6\n",
    "solvers:\n  tolerance: 1.0e-6\n",
    "benchmark: [1, 2]\n",
    "- solver\n",
])
def test_rejects_malformed_files(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_config(path)
