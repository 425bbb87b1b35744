"""
Experiment Logging Module

Structured records of solver benchmark runs: one CSV row per run, a JSON file
per experiment, a timestamped detail log and a text summary.
"""

import os
import json
import csv
import datetime
import logging
from typing import Dict, Any, List, Optional
from pathlib import Path
import platform

import numpy as np

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "timestamp", "experiment_id", "instance", "rows", "cols",
    "family", "forbidden_ratio", "solver_name", "time_ms",
    "cost", "status", "notes"
]


class BenchmarkLogger:
    """
    Logging system for assignment solver experiments.

    Layout under ``log_dir``::

        experiments/<id>.json   full metadata and results
        performance/<id>.csv    one row per solver run
        detailed/<id>.log       timestamped messages
        summaries/<id>_summary.txt
    """

    def __init__(self, log_dir: str = "logs", experiment_name: Optional[str] = None):
        """
        Initialize benchmark logger.

        Args:
            log_dir: Directory for log files
            experiment_name: Name for this experiment session
        """
        self.log_dir = Path(log_dir)
        for sub in ("experiments", "performance", "detailed", "summaries"):
            (self.log_dir / sub).mkdir(parents=True, exist_ok=True)

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        prefix = experiment_name or "exp"
        self.experiment_id = f"{prefix}_{timestamp}"

        self.csv_file = self.log_dir / "performance" / f"{self.experiment_id}.csv"
        self.json_file = self.log_dir / "experiments" / f"{self.experiment_id}.json"
        self.detail_file = self.log_dir / "detailed" / f"{self.experiment_id}.log"

        self.metadata: Dict[str, Any] = {
            "experiment_id": self.experiment_id,
            "start_time": datetime.datetime.now().isoformat(),
            "environment": self._get_environment_info(),
            "results": []
        }

        with open(self.csv_file, 'w', newline='') as f:
            csv.writer(f).writerow(CSV_HEADERS)

        self._log_detail(f"Experiment {self.experiment_id} started")
        self._log_detail(f"Environment: {self.metadata['environment']}")

    def _get_environment_info(self) -> Dict[str, str]:
        """Collect environment information for reproducibility."""
        import scipy

        env_info = {
            "python_version": platform.python_version(),
            "platform": platform.platform(),
            "processor": platform.processor(),
            "numpy_version": np.__version__,
            "scipy_version": scipy.__version__,
        }
        for var in ["OMP_NUM_THREADS", "MKL_NUM_THREADS", "OPENBLAS_NUM_THREADS", "PYTHONHASHSEED"]:
            env_info[var] = os.environ.get(var, "not_set")
        return env_info

    def _log_detail(self, message: str):
        """Write detailed log message."""
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(self.detail_file, 'a') as f:
            f.write(f"[{timestamp}] {message}\n")
        logger.debug(message)

    def log_result(self,
                   instance: str,
                   rows: int,
                   cols: int,
                   family: str,
                   solver_name: str,
                   time_seconds: float,
                   cost: Optional[float],
                   forbidden_ratio: float = 0.0,
                   status: str = "success",
                   notes: str = "",
                   extra_data: Optional[Dict[str, Any]] = None):
        """
        Log one solver run.

        Args:
            instance: Name of the problem instance
            rows, cols: Problem shape
            family: Generator family (uniform, metric, ...)
            solver_name: Name of the solver used
            time_seconds: Median execution time in seconds
            cost: Optimal cost found (None when the run failed)
            forbidden_ratio: Fraction of forbidden cells requested
            status: success/failed
            notes: Additional notes
            extra_data: Additional structured data
        """
        timestamp = datetime.datetime.now().isoformat()

        with open(self.csv_file, 'a', newline='') as f:
            csv.writer(f).writerow([
                timestamp, self.experiment_id, instance, rows, cols,
                family, forbidden_ratio, solver_name, time_seconds * 1000,
                "" if cost is None else cost, status, notes
            ])

        cost_text = "n/a" if cost is None else f"{cost:.6f}"
        self._log_detail(
            f"{solver_name} on {instance} ({rows}x{cols}): "
            f"{time_seconds*1000:.3f}ms, cost={cost_text}, status={status}"
        )

        result_data = {
            "timestamp": timestamp,
            "instance": instance,
            "rows": rows,
            "cols": cols,
            "family": family,
            "solver_name": solver_name,
            "time_seconds": time_seconds,
            "time_ms": time_seconds * 1000,
            "cost": cost,
            "forbidden_ratio": forbidden_ratio,
            "status": status,
            "notes": notes
        }
        if extra_data:
            result_data["extra_data"] = extra_data
        self.metadata["results"].append(result_data)

    def save_experiment(self) -> Path:
        """Save complete experiment data to JSON."""
        self.metadata["end_time"] = datetime.datetime.now().isoformat()
        with open(self.json_file, 'w') as f:
            json.dump(self.metadata, f, indent=2, default=str)
        self._log_detail(f"Experiment {self.experiment_id} completed")
        self._log_detail(f"Results saved to {self.json_file}")
        return self.json_file

    def generate_summary(self, output_file: Optional[str] = None) -> str:
        """
        Generate a human-readable summary of the experiment.

        Args:
            output_file: Optional file name under ``summaries/``

        Returns:
            Summary text
        """
        if not self.metadata["results"]:
            return "No results to summarize."

        lines = [
            f"Experiment Summary: {self.experiment_id}",
            "=" * 60,
            f"Start Time: {self.metadata['start_time']}",
            f"Total Results: {len(self.metadata['results'])}",
            "\nSolver Performance Summary:",
            "-" * 40,
        ]

        solver_stats: Dict[str, Dict[str, Any]] = {}
        for result in self.metadata["results"]:
            stats = solver_stats.setdefault(result["solver_name"], {"times": [], "count": 0, "failed": 0})
            stats["count"] += 1
            if result["status"] == "success":
                stats["times"].append(result["time_ms"])
            else:
                stats["failed"] += 1

        for solver, stats in solver_stats.items():
            if stats["times"]:
                lines.append(
                    f"{solver:12}: {stats['count']:3} runs, "
                    f"avg={np.mean(stats['times']):8.3f}ms, med={np.median(stats['times']):8.3f}ms, "
                    f"failed={stats['failed']}"
                )
            else:
                lines.append(f"{solver:12}: {stats['count']:3} runs, all failed")

        families: Dict[str, int] = {}
        for result in self.metadata["results"]:
            families[result["family"]] = families.get(result["family"], 0) + 1
        lines.append("\nFamilies Tested:")
        lines.append("-" * 25)
        for family, count in families.items():
            lines.append(f"{family:15}: {count:3} runs")

        summary_text = "\n".join(lines)
        summary_file = self.log_dir / "summaries" / (output_file or f"{self.experiment_id}_summary.txt")
        with open(summary_file, 'w') as f:
            f.write(summary_text)
        self._log_detail(f"Summary saved to {summary_file}")
        return summary_text


def get_latest_experiment(log_dir: str = "logs") -> Optional[str]:
    """Get the most recent experiment ID from logs."""
    experiments = list_experiments(log_dir)
    return experiments[0] if experiments else None


def load_experiment(experiment_id: str, log_dir: str = "logs") -> Optional[Dict[str, Any]]:
    """Load experiment data from JSON file."""
    json_file = Path(log_dir) / "experiments" / f"{experiment_id}.json"
    if not json_file.exists():
        return None
    with open(json_file, 'r') as f:
        return json.load(f)


def list_experiments(log_dir: str = "logs") -> List[str]:
    """List experiment IDs, newest first."""
    log_path = Path(log_dir) / "experiments"
    if not log_path.exists():
        return []
    json_files = list(log_path.glob("*.json"))
    return [f.stem for f in sorted(json_files, key=lambda f: f.stat().st_mtime, reverse=True)]


__all__ = [
    "BenchmarkLogger",
    "get_latest_experiment",
    "load_experiment",
    "list_experiments",
]
