import numpy as np
import pytest

from munkres import DISALLOWED, InvalidCostMatrixError, pad_matrix, to_cost_array
from munkres.padding import check_dimensions


class TestToCostArray:
    def test_numpy_input(self):
        values, mask = to_cost_array(np.array([[1, 2], [3, 4]]))
        assert values.dtype == np.float64
        assert not mask.any()

    def test_disallowed_sentinel(self):
        values, mask = to_cost_array([[1, DISALLOWED], [DISALLOWED, 4]])
        np.testing.assert_array_equal(mask, [[False, True], [True, False]])
        assert values[0, 0] == 1.0
        assert values[1, 1] == 4.0

    def test_positive_inf_is_forbidden(self):
        _, mask = to_cost_array(np.array([[1.0, np.inf], [2.0, 3.0]]))
        assert mask[0, 1]
        assert mask.sum() == 1

    def test_explicit_mask_is_merged(self):
        _, mask = to_cost_array([[1, DISALLOWED], [3, 4]], forbidden=[[False, False], [True, False]])
        np.testing.assert_array_equal(mask, [[False, True], [True, False]])

    def test_sentinel_is_singleton(self):
        from munkres.padding import _Disallowed
        assert _Disallowed() is DISALLOWED
        assert repr(DISALLOWED) == "DISALLOWED"

    @pytest.mark.parametrize("bad", [
        np.array([1.0, 2.0]),
        np.zeros((2, 2, 2)),
        [[1, 2], [3]],
        [],
        [[1, "x"]],
        np.array([[1.0, np.nan]]),
        np.array([[1.0, -np.inf]]),
    ])
    def test_rejects_malformed(self, bad):
        with pytest.raises(InvalidCostMatrixError):
            to_cost_array(bad)

    def test_rejects_mask_shape_mismatch(self):
        with pytest.raises(InvalidCostMatrixError):
            to_cost_array(np.zeros((2, 3)), forbidden=np.zeros((3, 2), dtype=bool))


class TestPadMatrix:
    def test_wide_matrix_gets_padded_rows(self, wide_15):
        values, mask = to_cost_array(wide_15)
        problem = pad_matrix(values, mask)
        assert problem.n == 4
        assert (problem.rows, problem.cols) == (3, 4)
        np.testing.assert_array_equal(problem.working[3], np.zeros(4))
        assert not problem.working_forbidden[3].any()
        assert problem.original_forbidden[3].all()
        np.testing.assert_array_equal(problem.original[:3, :4], wide_15)

    def test_tall_matrix_gets_padded_columns(self):
        values, mask = to_cost_array(np.arange(6, dtype=float).reshape(3, 2))
        problem = pad_matrix(values, mask)
        assert problem.n == 3
        assert problem.original_forbidden[:, 2].all()
        assert not problem.working_forbidden[:, 2].any()
        np.testing.assert_array_equal(problem.padding[:, 2], [True, True, True])
        assert not problem.padding[:, :2].any()

    def test_forbidden_status_is_kept(self):
        values, mask = to_cost_array([[1, DISALLOWED], [2, 3]])
        problem = pad_matrix(values, mask)
        assert problem.working_forbidden[0, 1]
        assert problem.original_forbidden[0, 1]

    def test_leading_block(self):
        values, mask = to_cost_array(np.arange(16, dtype=float).reshape(4, 4))
        problem = pad_matrix(values, mask, rows=2, cols=3)
        assert problem.n == 3
        np.testing.assert_array_equal(problem.original[:2, :3], [[0, 1, 2], [4, 5, 6]])

    def test_block_larger_than_matrix(self):
        values, mask = to_cost_array(np.ones((2, 2)))
        with pytest.raises(InvalidCostMatrixError):
            pad_matrix(values, mask, rows=3, cols=2)

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2), (101, 5), (5, 101)])
    def test_dimension_bounds(self, rows, cols):
        with pytest.raises(InvalidCostMatrixError):
            check_dimensions(rows, cols, max_dimension=100)

    def test_max_dimension_is_configurable(self):
        values, mask = to_cost_array(np.ones((5, 5)))
        with pytest.raises(InvalidCostMatrixError):
            pad_matrix(values, mask, max_dimension=4)
