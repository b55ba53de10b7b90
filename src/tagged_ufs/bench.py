"""Timing harness for the insert-then-unite workload."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Sequence, Union

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .iterable import IterableDisjointSets
from .structures import DisjointSet, UnionStrategy
from .tagged import TaggedDisjointSets

logger = logging.getLogger(__name__)

MODES = ("raw", "tagged", "iterable")
DEFAULT_SCALES = (1_000, 10_000, 100_000, 200_000, 400_000)

Structure = Union[DisjointSet, TaggedDisjointSets, IterableDisjointSets]


@dataclass
class BenchmarkConfig:
    """Configuration parameters for :func:`run_benchmark`."""

    scales: Sequence[int] = DEFAULT_SCALES
    repeats: int = 3
    mode: str = "tagged"
    union_by: str = UnionStrategy.SIZE.value
    use_tqdm: bool | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        self.scales = tuple(int(n) for n in self.scales)
        if not self.scales:
            raise ValueError("scales must not be empty")
        if any(n < 1 for n in self.scales):
            raise ValueError("every scale must be at least 1")
        if self.repeats < 1:
            raise ValueError("repeats must be at least 1")
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of: {', '.join(MODES)}")
        self.union_by = UnionStrategy(self.union_by).value

    @property
    def progress(self) -> bool:
        if self.use_tqdm is not None:
            return self.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE


def make_structure(mode: str, union_by: str = UnionStrategy.SIZE.value) -> Structure:
    if mode == "raw":
        return DisjointSet(union_by=union_by)
    if mode == "tagged":
        return TaggedDisjointSets(union_by=union_by)
    if mode == "iterable":
        return IterableDisjointSets(union_by=union_by)
    raise ValueError(f"Unknown benchmark mode: '{mode}'")


def add_union(n: int, mode: str = "tagged", union_by: str = UnionStrategy.SIZE.value) -> Structure:
    """Insert ``0..n-1`` and unite every element with ``0``."""

    sets = make_structure(mode, union_by)
    for i in range(n):
        sets.make_set(i)
    for i in range(1, n):
        sets.unite(0, i)
    return sets


def run_benchmark(config: BenchmarkConfig | None = None) -> pd.DataFrame:
    """Time :func:`add_union` for every configured scale."""

    config = config or BenchmarkConfig()
    rows: List[Dict[str, object]] = []

    scales: Sequence[int] = config.scales
    if config.progress:
        scales = tqdm(config.scales, desc="   add_union", unit="scale")

    for n in scales:
        samples = np.empty(config.repeats, dtype=float)
        for attempt in range(config.repeats):
            t0 = time.perf_counter()
            add_union(n, config.mode, config.union_by)
            samples[attempt] = time.perf_counter() - t0
        logger.debug("add_union n=%d mode=%s samples=%s", n, config.mode, samples.tolist())
        if config.verbose:
            print(f"   n={n}: best {samples.min():.4f}s, mean {samples.mean():.4f}s")
        rows.append(
            {
                "n": n,
                "mode": config.mode,
                "union_by": config.union_by,
                "repeats": config.repeats,
                "best_seconds": float(samples.min()),
                "mean_seconds": float(samples.mean()),
                "std_seconds": float(samples.std()),
            }
        )

    return pd.DataFrame(rows)


__all__ = [
    "BenchmarkConfig",
    "DEFAULT_SCALES",
    "MODES",
    "add_union",
    "make_structure",
    "run_benchmark",
]
