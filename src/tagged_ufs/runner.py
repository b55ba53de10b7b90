"""Convenience helpers for running the benchmark end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .bench import BenchmarkConfig, run_benchmark

SUPPORTED_SUFFIXES = {".csv", ".json"}


def benchmark_to_file(
    output_path: str | Path,
    config: Optional[BenchmarkConfig] = None,
) -> pd.DataFrame | None:
    """Run the benchmark and write the timings to `output_path`."""

    output_path = Path(output_path)
    if output_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        print(f"ERROR: Unsupported output format for '{output_path}'. Please provide a .csv or .json path.")
        return None

    results = run_benchmark(config or BenchmarkConfig())
    _save_dataframe(results, output_path)
    return results


def _save_dataframe(dataframe: pd.DataFrame, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix == ".json":
        dataframe.to_json(path, orient="records", indent=2)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
