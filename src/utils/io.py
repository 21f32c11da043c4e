"""I/O helpers for puzzle files and solver results."""

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Union

PathLike = Union[str, Path]

RESULT_FIELDS = ["id", "solution", "status", "steps", "elapsed"]


def load_json(path: PathLike) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_results_csv(results: Iterable[Dict[str, Any]], output_path: PathLike) -> None:
    """Write one row per solved (or failed) puzzle."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for r in results:
            writer.writerow(r)
