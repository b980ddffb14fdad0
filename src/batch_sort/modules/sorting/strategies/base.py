# src/batch_sort/modules/sorting/strategies/base.py
from __future__ import annotations

import os
from abc import ABC, abstractmethod

from batch_sort.core.progress import ProgressReporter

__all__ = [
    "SortStrategyBase",
    "get_worker_count",
    "sort_array",
]


class SortStrategyBase(ABC):
    """Strategy interface for batch sort implementations."""

    @abstractmethod
    def run(
        self, arrays: list[list[int]], reporter: ProgressReporter | None = None
    ) -> list[list[int]]:
        raise NotImplementedError


def sort_array(values: list[int]) -> list[int]:
    """Sort `values` ascending in place and hand back the same list."""
    values.sort()
    return values


def get_worker_count(
    units: int,
    *,
    override: int | None = None,
    cap: int = 64,
) -> int:
    """
    Decide a pool size for `units` sort jobs. `override` (BATCH_SORT_SORT_WORKERS)
    wins over the CPU-based default; never more threads than jobs.
    """
    if override:
        n = max(1, override)
    else:
        cpu = os.cpu_count() or 4
        n = min(cap, cpu)
    return max(1, min(n, units))
