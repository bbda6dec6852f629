"""
Input/output helper utilities for preview runs.

The preview entry point uses these helpers to create run folders and persist
sampled curves, rendered charts, and the settings that produced them.
"""

from __future__ import annotations

import json
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from config.toolkit_config import CONFIG

OUTPUT_DIR = Path(CONFIG.OUTPUT_DIR)


def ensure_output_root(root: Path = OUTPUT_DIR) -> Path:
    """Create the output root if it does not exist."""
    root.mkdir(parents=True, exist_ok=True)
    return root


def create_run_directory(timestamp: str | None = None, root: Path = OUTPUT_DIR) -> Path:
    """
    Create a new timestamped preview directory and return its path.

    The format is `preview_YYYY-MM-DD_HH-MM-SS`. If a directory with the same
    name already exists, a numeric suffix is appended to avoid overwriting
    previous runs.
    """
    ensure_output_root(root)
    ts = timestamp or datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    base_name = f"preview_{ts}"
    run_path = root / base_name
    counter = 1
    while run_path.exists():
        run_path = root / f"{base_name}_{counter}"
        counter += 1
    run_path.mkdir(parents=True, exist_ok=False)
    return run_path


def list_run_directories(root: Path = OUTPUT_DIR) -> List[Path]:
    """Return available preview folders sorted by newest first."""
    if not root.exists():
        return []
    return sorted([p for p in root.iterdir() if p.is_dir()], reverse=True)


def save_dataframe(path: Path, dataframe: pd.DataFrame) -> None:
    """Persist a DataFrame to CSV using UTF-8 encoding."""
    path.parent.mkdir(parents=True, exist_ok=True)
    dataframe.to_csv(path, index=False)


def save_json(path: Path, payload: Dict[str, Any]) -> None:
    """Persist a dictionary to JSON with readable formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


def save_text(path: Path, lines: List[str]) -> None:
    """Write *lines* to a UTF-8 text file, one per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@lru_cache(maxsize=64)
def load_json(path: Path) -> Dict[str, Any]:
    """Load a JSON file, returning an empty dict if the file is missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=32)
def load_csv(path: Path) -> pd.DataFrame:
    """Load a CSV file, returning an empty DataFrame if the file is missing."""
    if not path.exists():
        return pd.DataFrame()
    return pd.read_csv(path)


def clear_load_caches() -> None:
    """Reset memoised loaders (useful after creating a new run)."""
    load_json.cache_clear()
    load_csv.cache_clear()
