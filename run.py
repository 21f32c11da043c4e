"""CLI entrypoint: load puzzle(s), run solver, and report metrics."""

import argparse
import os
from pathlib import Path
from typing import Any, Dict, List

from tqdm import tqdm

from src.sudoku import solver_core
from src.sudoku.loader import load_puzzles
from src.sudoku.model import VARIANTS
from src.sudoku.parser import format_grid, parse_grid
from src.utils.io import write_results_csv
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

PUZZLE_SUFFIXES = [".csv", ".parquet", ".json", ".jsonl", ".txt"]


def parse_args(argv=None):
    default_input = os.environ.get("SUDOKU_DATA_PATH")
    parser = argparse.ArgumentParser(description="Solve Sudoku puzzles with the backtracking solver")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?" if default_input else None,
        default=Path(default_input) if default_input else None,
        help="Path to a puzzle file or directory of puzzle files (default: $SUDOKU_DATA_PATH)",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default=os.environ.get("SUDOKU_VARIANT", "standard"),
        help="Grid variant for records that do not name one (default: $SUDOKU_VARIANT or standard)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Optional per-puzzle search deadline in seconds.",
    )
    parser.add_argument(
        "--trace-dir",
        type=Path,
        default=None,
        help="Optional directory; one solver trace CSV is written per puzzle.",
    )
    parser.add_argument(
        "--include-status",
        action="store_true",
        help="Print the failure reason for every unsolved puzzle.",
    )
    return parser.parse_args(argv)


def collect_puzzles(input_path: Path) -> List[Dict[str, Any]]:
    if input_path.is_file():
        return load_puzzles(str(input_path))
    if input_path.is_dir():
        puzzles = []
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {input_path} is neither file nor directory")


def solve_record(puzzle: Dict[str, Any], variant: str, timeout=None, tracer=None) -> Dict[str, Any]:
    grid = parse_grid(puzzle["puzzle"], puzzle.get("variant") or variant)
    result = solver_core.solve(grid, tracer=tracer, timeout=timeout)
    row = {
        "id": puzzle["id"],
        "solution": format_grid(grid) if result else "",
        "status": result.status.value,
        # Use assignments as a proxy for search effort.
        "steps": result.steps,
        "elapsed": round(result.elapsed, 6),
    }
    if result and puzzle.get("solution"):
        expected = "".join(ch for ch in puzzle["solution"] if ch.isdigit())
        if row["solution"] != expected:
            row["status"] = "mismatch"
    return row


def main(argv=None):
    args = parse_args(argv)
    puzzles = collect_puzzles(args.input)
    results = []

    for puzzle in tqdm(puzzles, desc="Solving", unit="puzzle"):
        reset_tracer()
        enable_tracing(args.trace_dir is not None)
        tracer = get_tracer()
        puzzle_id = puzzle.get("id", "unknown")

        try:
            row = solve_record(puzzle, args.variant, timeout=args.timeout, tracer=tracer)
        except Exception as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            row = {"id": puzzle_id, "solution": "", "status": "error", "steps": -1, "elapsed": 0.0}

        if args.include_status and row["status"] != "solved":
            print(f"{puzzle_id}: {row['status']}")
        if args.trace_dir:
            tracer.to_csv(args.trace_dir / f"{puzzle_id}.csv")
        results.append(row)

    if args.output:
        write_results_csv(results, args.output)
    else:
        print(results)
    return results


if __name__ == "__main__":
    main()
