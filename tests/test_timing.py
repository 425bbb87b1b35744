import numpy as np

from munkres import AssignmentFailedError, FailureReason, MunkresSolver, time_solver_rigorous


def test_reports_statistics(square_850):
    solver = MunkresSolver()
    stats = time_solver_rigorous(lambda: solver.solve(square_850), num_warmups=1, num_repeats=4)
    assert stats["success"] is True
    assert stats["num_samples"] == 4
    assert stats["min"] <= stats["median"] <= stats["max"]
    assert stats["std"] >= 0.0


def test_single_repeat_has_zero_spread(square_850):
    stats = time_solver_rigorous(lambda: MunkresSolver().solve(square_850), num_warmups=0, num_repeats=1)
    assert stats["std"] == 0.0


def test_failure_is_reported_not_raised():
    def infeasible():
        return MunkresSolver().solve(np.array([[np.inf, 1.0], [np.inf, 2.0]]))

    stats = time_solver_rigorous(infeasible, num_warmups=2, num_repeats=3)
    assert stats["success"] is False
    assert "No allowed cell" in stats["error"]


def test_failure_during_timed_runs():
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) > 2:
            raise AssignmentFailedError(FailureReason.ITERATION_LIMIT, "gave up")

    stats = time_solver_rigorous(flaky, num_warmups=1, num_repeats=5)
    assert stats == {"success": False, "error": "gave up"}


def test_no_repeats():
    stats = time_solver_rigorous(lambda: None, num_warmups=0, num_repeats=0)
    assert stats["success"] is False
