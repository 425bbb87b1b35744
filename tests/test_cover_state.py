import numpy as np
import pytest

from munkres import CoverState, Mark


def test_initial_state():
    state = CoverState(3)
    assert (state.marks == Mark.UNMARKED).all()
    assert not state.row_covered.any()
    assert not state.col_covered.any()
    assert state.origin is None
    assert state.path == []


def test_lookups_return_first_match_or_minus_one():
    state = CoverState(3)
    state.marks[1, 2] = Mark.TENTATIVE
    state.marks[1, 0] = Mark.CANDIDATE
    assert state.tentative_in_row(1) == 2
    assert state.tentative_in_row(0) == -1
    assert state.tentative_in_col(2) == 1
    assert state.tentative_in_col(0) == -1
    assert state.candidate_in_row(1) == 0
    assert state.candidate_in_row(2) == -1


def test_cover_tentative_columns_counts_covered_columns():
    state = CoverState(4)
    state.marks[0, 1] = Mark.TENTATIVE
    state.marks[2, 3] = Mark.TENTATIVE
    assert state.cover_tentative_columns() == 2
    np.testing.assert_array_equal(state.col_covered, [False, True, False, True])


def test_clear_covers_and_erase_candidates():
    state = CoverState(2)
    state.cover(0, 1)
    state.marks[0, 0] = Mark.CANDIDATE
    state.marks[1, 1] = Mark.TENTATIVE
    state.clear_covers()
    state.erase_candidates()
    assert not state.row_covered.any() and not state.col_covered.any()
    assert state.marks[0, 0] == Mark.UNMARKED
    assert state.marks[1, 1] == Mark.TENTATIVE


def test_build_and_flip_path_grows_matching_by_one():
    # tentative: (0,2), (3,0); candidates: (2,2), (0,0), (3,1)
    state = CoverState(4)
    state.marks[0, 2] = Mark.TENTATIVE
    state.marks[1, 3] = Mark.TENTATIVE
    state.marks[3, 0] = Mark.TENTATIVE
    state.marks[0, 0] = Mark.CANDIDATE
    state.marks[3, 1] = Mark.CANDIDATE
    state.marks[2, 2] = Mark.CANDIDATE
    state.origin = (2, 2)

    path = state.build_path()
    assert path == [(2, 2), (0, 2), (0, 0), (3, 0), (3, 1)]

    state.flip_path()
    assert state.tentative_cells() == [(0, 0), (1, 3), (2, 2), (3, 1)]
    assert state.path == []
    assert state.origin is None


def test_build_path_without_origin():
    with pytest.raises(RuntimeError):
        CoverState(2).build_path()
