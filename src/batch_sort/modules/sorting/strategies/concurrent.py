# src/batch_sort/modules/sorting/strategies/concurrent.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed

from batch_sort.core.progress import ProgressReporter

from .base import SortStrategyBase, get_worker_count, sort_array


class ConcurrentStrategy(SortStrategyBase):
    """
    Fan out one job per array onto a request-scoped thread pool, then wait for
    every job before returning.

    The output list is sized up front and each job only writes its own index,
    so the slots need no lock; the futures are the completion barrier.
    """

    def __init__(self, workers: int | None = None) -> None:
        self.workers = workers

    def run(
        self, arrays: list[list[int]], reporter: ProgressReporter | None = None
    ) -> list[list[int]]:
        total = len(arrays)
        sorted_arrays: list[list[int] | None] = [None] * total

        # Nothing to dispatch: no pool, no wait
        if total == 0:
            if reporter:
                reporter.start("sort", total=0, text="concurrent")
                reporter.end("sort")
            return sorted_arrays

        workers = get_worker_count(total, override=self.workers)
        if reporter:
            reporter.start("sort", total=total, text=f"concurrent (workers={workers})")

        def _sort_into(index: int, values: list[int]) -> int:
            sorted_arrays[index] = sort_array(values)
            return index

        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="batch-sort"
        ) as ex:
            futs = [ex.submit(_sort_into, i, values) for i, values in enumerate(arrays)]
            for fut in as_completed(futs):
                fut.result()
                if reporter:
                    reporter.update("sort", 1)

        if reporter:
            reporter.end("sort")
        return sorted_arrays
