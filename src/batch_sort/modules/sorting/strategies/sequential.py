# src/batch_sort/modules/sorting/strategies/sequential.py
from __future__ import annotations

from batch_sort.core.progress import ProgressReporter

from .base import SortStrategyBase, sort_array


class SequentialStrategy(SortStrategyBase):
    """Sort every array on the calling thread, in index order."""

    def run(
        self, arrays: list[list[int]], reporter: ProgressReporter | None = None
    ) -> list[list[int]]:
        total = len(arrays)
        sorted_arrays: list[list[int] | None] = [None] * total
        if reporter:
            reporter.start("sort", total=total, text="sequential")

        for i, values in enumerate(arrays):
            sorted_arrays[i] = sort_array(values)
            if reporter:
                reporter.update("sort", 1)

        if reporter:
            reporter.end("sort")
        return sorted_arrays
