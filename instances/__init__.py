"""Instance data: hand-written reference cases, OR-Library parsing, HDF5 datasets."""

from .reference_cases import REFERENCE_CASES, ReferenceCase, get_case
from .processors import RealInstance, iter_real_instances, normalize_cost_matrix, parse_or_library_assign

__all__ = [
    "REFERENCE_CASES",
    "ReferenceCase",
    "get_case",
    "RealInstance",
    "iter_real_instances",
    "normalize_cost_matrix",
    "parse_or_library_assign",
]


def generate_dataset(*args, **kwargs):  # type: ignore[override]
    """Lazily import dataset generator to avoid mandatory h5py on import."""
    from .generate_dataset import generate_dataset as _generate

    return _generate(*args, **kwargs)
