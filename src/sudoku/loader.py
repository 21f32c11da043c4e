import json
import os
from typing import Any, Dict, List, Optional

import pandas as pd

from src.utils.io import load_json

PUZZLE_KEYS = ("puzzle", "quizzes", "quiz", "grid", "puzzle_text")
SOLUTION_KEYS = ("solution", "solutions")

# Dataset conventions for an empty cell; the grid text format uses a space.
_EMPTY_MARKERS = str.maketrans({"0": " ", ".": " "})


def normalize_puzzle_text(text: str) -> str:
    return text.translate(_EMPTY_MARKERS)


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .csv, .parquet, .json, .jsonl and .txt.
    Returns a list of records with at least "id" and "puzzle" keys.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = os.path.splitext(os.path.basename(file_path))[0]

    def _first_present(record: Dict[str, Any], keys) -> Optional[str]:
        for key in keys:
            value = record.get(key)
            if value is None or (isinstance(value, float) and pd.isna(value)):
                continue
            return str(value)
        return None

    def _normalize_record(record: Dict[str, Any], idx: int) -> Optional[Dict[str, Any]]:
        puzzle_text = _first_present(record, PUZZLE_KEYS)
        if puzzle_text is None:
            return None

        # 0 is a real id; only absent or blank ids fall back to the row position.
        record_id = _first_present(record, ("id",))
        normalized: Dict[str, Any] = {
            "id": record_id if record_id else f"{stem}_{idx}",
            "puzzle": normalize_puzzle_text(puzzle_text),
        }
        solution = _first_present(record, SOLUTION_KEYS)
        if solution:
            normalized["solution"] = solution
        if record.get("variant"):
            normalized["variant"] = str(record["variant"])
        return normalized

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        data = []
        for idx, record in enumerate(records):
            if not isinstance(record, dict):
                continue
            normalized = _normalize_record(record, idx)
            if normalized is not None:
                data.append(normalized)
        return data

    def _read_jsonl() -> List[Dict[str, Any]]:
        records = []
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    records.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
        return _normalize_all(records)

    # Case 1: tabular files; keep every column as text so leading zeros survive.
    if file_path.endswith(".csv"):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize_all(df.to_dict(orient="records"))

    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 2: JSON file (array or object)
    if file_path.endswith(".json"):
        try:
            payload = load_json(file_path)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL.
            return _read_jsonl()
        if isinstance(payload, list):
            return _normalize_all(payload)
        if isinstance(payload, dict):
            return _normalize_all([payload])
        return []

    # Case 3: JSONL file
    if file_path.endswith(".jsonl"):
        return _read_jsonl()

    # Case 4: plain text, one puzzle per line
    if file_path.endswith(".txt"):
        with open(file_path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f if line.strip()]
        return _normalize_all([{"puzzle": line} for line in lines])

    raise ValueError(f"Unsupported puzzle file type: {file_path}")
