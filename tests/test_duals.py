import numpy as np
import pytest

from munkres import (
    DualLabels,
    DualTracker,
    MunkresConfig,
    check_dual_and_match,
    check_dual_feasible,
    generate_forbidden_mask,
    pad_matrix,
    solve,
    to_cost_array,
)


def test_objective_and_reduced_costs():
    labels = DualLabels(row=np.array([1.0, 2.0]), col=np.array([0.5, 0.0]))
    assert labels.objective == pytest.approx(3.5)
    np.testing.assert_allclose(labels.reduced_costs(np.full((2, 2), 3.0)),
                               [[1.5, 2.0], [0.5, 1.0]])


def test_tracker_updates():
    tracker = DualTracker(np.zeros((3, 3)), np.zeros((3, 3), dtype=bool))
    tracker.on_row_reduce(np.array([1.0, 2.0, 3.0]))
    tracker.on_adjust(0.5, np.array([True, False, False]), np.array([False, True, False]))
    np.testing.assert_allclose(tracker.labels.row, [0.5, 2.0, 3.0])
    np.testing.assert_allclose(tracker.labels.col, [0.5, 0.0, 0.5])


def test_infeasible_labels_are_reported():
    labels = DualLabels(row=np.array([5.0, 0.0]), col=np.zeros(2))
    with pytest.raises(AssertionError, match="Dual infeasible"):
        check_dual_feasible(np.ones((2, 2)), np.zeros((2, 2), dtype=bool), labels)


def test_forbidden_cells_are_ignored():
    forbidden = np.array([[False, True], [False, False]])
    labels = DualLabels(row=np.array([1.0, 1.0]), col=np.zeros(2))
    assert check_dual_feasible(np.array([[1.0, np.inf], [1.0, 1.0]]), forbidden, labels)


def test_slack_matched_cell_is_reported():
    labels = DualLabels(row=np.zeros(2), col=np.zeros(2))
    with pytest.raises(AssertionError, match="Complementary slackness"):
        check_dual_and_match(np.ones((2, 2)), np.zeros((2, 2), dtype=bool), labels, [(0, 0)])


@pytest.mark.parametrize("shape", [(6, 6), (4, 7), (7, 4)])
def test_labels_certify_optimality(rng, shape):
    config = MunkresConfig(track_duals=True)
    for _ in range(5):
        C = rng.uniform(0, 10, shape)
        mask = generate_forbidden_mask(*shape, rng=rng, forbidden_ratio=0.3)
        result = solve(C, mask, config=config)
        assert result.duals.objective == pytest.approx(result.total_cost)

        problem = pad_matrix(*to_cost_array(C, mask))
        check_dual_feasible(problem.working, problem.working_forbidden, result.duals, tol=1e-6)
        check_dual_and_match(problem.working, problem.working_forbidden, result.duals,
                             result.assignments, tol=1e-6)
