import logging

import numpy as np
import pytest

from munkres import (
    DISALLOWED as D,
    DualTracker,
    FailureReason,
    Mark,
    MunkresConfig,
    Step,
    StepEngine,
    check_dual_and_match,
    pad_matrix,
    to_cost_array,
)


def make_engine(costs, config=None, track=False):
    values, mask = to_cost_array(costs)
    problem = pad_matrix(values, mask)
    tracker = DualTracker(problem.working, problem.working_forbidden) if track else None
    return problem, StepEngine(problem, config, tracker=tracker)


class TestStates:
    def test_row_reduce_subtracts_allowed_minimum(self):
        _, engine = make_engine([[3, 5, D], [D, 7, 2]])
        assert engine._row_reduce() is Step.STAR_ZEROS
        np.testing.assert_allclose(engine.working[0, :2], [0, 2])
        np.testing.assert_allclose(engine.working[1, 1:3], [5, 0])
        assert np.isinf(engine.working[0, 2])

    def test_star_zeros_is_greedy_row_major(self):
        _, engine = make_engine(np.array([[0.0, 0.0], [0.0, 5.0]]))
        engine._star_zeros()
        assert engine.state.tentative_cells() == [(0, 0)]
        assert not engine.state.row_covered.any()
        assert not engine.state.col_covered.any()

    def test_star_zeros_skips_forbidden(self):
        _, engine = make_engine([[D, 0.0], [0.0, 0.0]])
        engine._star_zeros()
        assert engine.state.tentative_cells() == [(0, 1), (1, 0)]

    def test_zero_uses_tolerance(self):
        _, engine = make_engine(np.array([[1e-9, 1.0], [1.0, 2e-7]]), MunkresConfig(tolerance=1e-6))
        engine._star_zeros()
        assert engine.state.tentative_cells() == [(0, 0), (1, 1)]

    def test_cover_columns_done_when_all_covered(self):
        _, engine = make_engine(np.eye(2))
        engine.state.marks[0, 1] = Mark.TENTATIVE
        engine.state.marks[1, 0] = Mark.TENTATIVE
        assert engine._cover_columns() is Step.DONE

    def test_find_zero_goes_to_adjust_without_zeros(self):
        _, engine = make_engine(np.array([[1.0, 2.0], [3.0, 4.0]]))
        assert engine._find_zero() is Step.ADJUST

    def test_adjust_preserves_covered_zeros_and_exposes_new_one(self):
        _, engine = make_engine(np.array([[0.0, 3.0], [0.0, 5.0]]))
        engine.state.marks[0, 0] = Mark.TENTATIVE
        engine.state.cover_tentative_columns()
        assert engine._adjust() is Step.FIND_ZERO
        np.testing.assert_allclose(engine.working, [[0.0, 0.0], [0.0, 2.0]])

    def test_adjust_leaves_forbidden_cells_alone(self):
        _, engine = make_engine([[0.0, D, 4.0], [0.0, 2.0, 6.0], [0.0, 3.0, D]])
        engine.state.marks[0, 0] = Mark.TENTATIVE
        engine.state.cover_tentative_columns()
        engine._adjust()
        assert np.isinf(engine.working[0, 1])
        assert np.isinf(engine.working[2, 2])
        np.testing.assert_allclose(engine.working[1], [0.0, 0.0, 4.0])


class TestRun:
    def test_trace_of_wide_problem(self, wide_15):
        problem, engine = make_engine(wide_15, track=True)
        assert engine.run() is Step.DONE
        assert engine.state.tentative_cells() == [(0, 0), (1, 3), (2, 2), (3, 1)]
        labels = engine.tracker.labels
        np.testing.assert_allclose(labels.row, [8, 1, 4, -2])
        np.testing.assert_allclose(labels.col, [2, 2, 0, 0])
        assert labels.objective == pytest.approx(15.0)
        check_dual_and_match(problem.working, problem.working_forbidden, labels,
                             engine.state.tentative_cells())

    def test_one_tentative_mark_per_row_and_column(self, rng):
        _, engine = make_engine(rng.integers(0, 5, size=(7, 7)).astype(float))
        assert engine.run() is Step.DONE
        tentative = engine.state.marks == Mark.TENTATIVE
        np.testing.assert_array_equal(tentative.sum(axis=0), np.ones(7))
        np.testing.assert_array_equal(tentative.sum(axis=1), np.ones(7))

    def test_row_unsolvable(self):
        _, engine = make_engine([[1, 2], [D, D]])
        assert engine.run() is Step.FAILED
        assert engine.failure is FailureReason.ROW_UNSOLVABLE
        assert "Row 1" in engine.failure_message

    def test_no_feasible_adjustment(self):
        _, engine = make_engine([[1, D], [2, D]])
        assert engine.run() is Step.FAILED
        assert engine.failure is FailureReason.NO_FEASIBLE_ADJUSTMENT

    def test_iteration_cap(self, square_850):
        _, engine = make_engine(square_850, MunkresConfig(max_iterations=3))
        assert engine.run() is Step.FAILED
        assert engine.failure is FailureReason.ITERATION_LIMIT
        assert engine.iterations == 3

    def test_failures_are_logged(self, caplog):
        _, engine = make_engine([[D, D], [1, 2]])
        with caplog.at_level(logging.WARNING, logger="munkres.step_engine"):
            engine.run()
        assert "row_unsolvable" in caplog.text

    def test_debug_trace(self, caplog, square_850):
        _, engine = make_engine(square_850)
        with caplog.at_level(logging.DEBUG, logger="munkres.step_engine"):
            engine.run()
        assert "Cost matrix:" in caplog.text
        assert "row covers" in caplog.text
        assert "cover_columns -> done" in caplog.text
