import numpy as np
import pytest

from munkres import DISALLOWED

D = DISALLOWED


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def square_850():
    return np.array([[400, 150, 400],
                     [400, 450, 600],
                     [300, 225, 300]], dtype=np.float64)


@pytest.fixture
def wide_15():
    return np.array([[10, 10, 8, 11],
                     [9, 8, 1, 1],
                     [9, 7, 4, 10]], dtype=np.float64)


@pytest.fixture
def forced_diagonal():
    return [[1, D, D, D],
            [D, 2, D, D],
            [D, D, 3, D],
            [D, D, D, 4]]


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"
