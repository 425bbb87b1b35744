"""CLI for generating HDF5 datasets of assignment instances with reference solutions."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

if __package__ is None or __package__ == "":  # Allow running as script
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from munkres import GENERATOR_FAMILIES, AssignmentFailedError, SciPySolver, generate_instance


try:  # pragma: no cover - optional dependency for import time
    import h5py
except (ImportError, ValueError) as exc:  # pragma: no cover
    raise ImportError("Install a NumPy-compatible build of h5py to use the dataset generator") from exc


@dataclass
class AssignmentInstance:
    cost: np.ndarray
    forbidden: np.ndarray
    family: str
    rows: Optional[np.ndarray] = None
    cols: Optional[np.ndarray] = None
    total_cost: float = float("nan")
    feasible: bool = True
    tag: str = ""

    @property
    def shape(self):
        return self.cost.shape


@dataclass
class DatasetStats:
    path: str
    count: int
    families: Dict[str, int] = field(default_factory=dict)
    infeasible: int = 0


class H5Writer:
    """Append-only writer that stores ragged matrices in HDF5."""

    def __init__(self, path: Path):
        self.path = path
        path.parent.mkdir(parents=True, exist_ok=True)
        self.file = h5py.File(path, "w")
        vfloat = h5py.vlen_dtype(np.float64)
        vint = h5py.vlen_dtype(np.int32)
        vbool = h5py.vlen_dtype(np.uint8)
        str_dtype = h5py.string_dtype("utf-8")

        def create(name, dtype):
            return self.file.create_dataset(name, shape=(0,), maxshape=(None,), dtype=dtype)

        self.datasets = {
            "C": create("C", vfloat),
            "forbidden": create("forbidden", vbool),
            "n_rows": create("n_rows", np.int32),
            "n_cols": create("n_cols", np.int32),
            "rows": create("rows", vint),
            "cols": create("cols", vint),
            "cost": create("cost", np.float64),
            "feasible": create("feasible", np.bool_),
            "family": create("family", str_dtype),
            "tag": create("tag", str_dtype),
        }
        self.count = 0

    def append(self, instance: AssignmentInstance) -> None:
        idx = self.count
        self.count += 1
        for dset in self.datasets.values():
            dset.resize((self.count,))

        n_rows, n_cols = instance.shape
        rows = instance.rows if instance.rows is not None else np.zeros(0, dtype=np.int32)
        cols = instance.cols if instance.cols is not None else np.zeros(0, dtype=np.int32)

        self.datasets["C"][idx] = np.asarray(instance.cost, dtype=np.float64).ravel()
        self.datasets["forbidden"][idx] = np.asarray(instance.forbidden, dtype=np.uint8).ravel()
        self.datasets["n_rows"][idx] = n_rows
        self.datasets["n_cols"][idx] = n_cols
        self.datasets["rows"][idx] = np.asarray(rows, dtype=np.int32)
        self.datasets["cols"][idx] = np.asarray(cols, dtype=np.int32)
        self.datasets["cost"][idx] = instance.total_cost
        self.datasets["feasible"][idx] = instance.feasible
        self.datasets["family"][idx] = instance.family
        self.datasets["tag"][idx] = instance.tag

    def close(self) -> DatasetStats:
        self.file.attrs["records"] = self.count
        self.file.flush()
        self.file.close()
        return DatasetStats(path=str(self.path), count=self.count)


def iter_instances(path: str | Path) -> Iterator[AssignmentInstance]:
    """Read back instances written by :class:`H5Writer`."""
    with h5py.File(path, "r") as f:
        for idx in range(len(f["C"])):
            n_rows = int(f["n_rows"][idx])
            n_cols = int(f["n_cols"][idx])
            family = f["family"][idx]
            tag = f["tag"][idx]
            yield AssignmentInstance(
                cost=np.array(f["C"][idx], dtype=np.float64).reshape(n_rows, n_cols),
                forbidden=np.array(f["forbidden"][idx], dtype=bool).reshape(n_rows, n_cols),
                family=family.decode() if isinstance(family, bytes) else str(family),
                rows=np.array(f["rows"][idx], dtype=np.int64),
                cols=np.array(f["cols"][idx], dtype=np.int64),
                total_cost=float(f["cost"][idx]),
                feasible=bool(f["feasible"][idx]),
                tag=tag.decode() if isinstance(tag, bytes) else str(tag),
            )


def build_instance(family: str, n_rows: int, n_cols: int, rng: np.random.Generator,
                   forbidden_ratio: float = 0.0, tag: str = "") -> AssignmentInstance:
    """Generate one instance and attach the SciPy reference solution."""
    cost, forbidden = generate_instance(family, n_rows, n_cols, rng=rng, forbidden_ratio=forbidden_ratio)
    instance = AssignmentInstance(cost=cost, forbidden=forbidden, family=family, tag=tag)
    try:
        rows, cols, total = SciPySolver().solve(cost, forbidden)
    except AssignmentFailedError:
        instance.feasible = False
        return instance
    instance.rows = rows.astype(np.int32)
    instance.cols = cols.astype(np.int32)
    instance.total_cost = total
    return instance


def generate_dataset(
    *,
    output: Path,
    sizes: Sequence[int],
    families: Sequence[str],
    instances_per_family: int,
    rectangular_ratio: float = 1.0,
    forbidden_ratio: float = 0.0,
    seed: int = 0,
) -> DatasetStats:
    rng = np.random.default_rng(seed)
    writer = H5Writer(output)
    stats: Dict[str, int] = {}
    infeasible = 0

    for n in sizes:
        n_cols = max(1, int(round(n * rectangular_ratio)))
        for family in families:
            if family not in GENERATOR_FAMILIES:
                raise KeyError(f"Unknown family '{family}'. Available: {sorted(GENERATOR_FAMILIES)}")
            for local_idx in range(instances_per_family):
                instance = build_instance(
                    family, n, n_cols, rng,
                    forbidden_ratio=forbidden_ratio,
                    tag=f"{family}_{n}x{n_cols}_{local_idx}",
                )
                writer.append(instance)
                stats[family] = stats.get(family, 0) + 1
                infeasible += int(not instance.feasible)

    result = writer.close()
    result.families = stats
    result.infeasible = infeasible
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=Path, default=Path("datasets/instances.h5"))
    parser.add_argument("--sizes", type=int, nargs="+", default=[8, 16, 32], help="Row counts to generate")
    parser.add_argument(
        "--families",
        type=str,
        nargs="+",
        default=list(GENERATOR_FAMILIES.keys()),
        help="Generator families to sample",
    )
    parser.add_argument("--instances-per-family", type=int, default=8)
    parser.add_argument("--rectangular-ratio", type=float, default=1.0, help="cols = round(rows * ratio)")
    parser.add_argument("--forbidden-ratio", type=float, default=0.0, help="Fraction of forbidden cells")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--summary", action="store_true", help="Print the summary as JSON")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    summary = generate_dataset(
        output=args.output,
        sizes=args.sizes,
        families=args.families,
        instances_per_family=args.instances_per_family,
        rectangular_ratio=args.rectangular_ratio,
        forbidden_ratio=args.forbidden_ratio,
        seed=args.seed,
    )

    if args.summary:
        print(json.dumps(asdict(summary), indent=2))
    else:
        fam_desc = ", ".join(f"{k}:{v}" for k, v in sorted(summary.families.items()))
        print(f"{summary.count} instances -> {summary.path} ({fam_desc}; infeasible={summary.infeasible})")


if __name__ == "__main__":
    main()
