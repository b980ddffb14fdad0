# src/batch_sort/modules/sorting/service.py
from __future__ import annotations

import time

from batch_sort.core.logging import get_logger
from batch_sort.core.progress import ProgressReporter

from .schemas import SortMode, SortRequest, SortResponse
from .strategies.base import SortStrategyBase
from .strategies.concurrent import ConcurrentStrategy
from .strategies.sequential import SequentialStrategy

log = get_logger(__name__)


class SortService:
    """Runs a decoded batch through the selected strategy and times it."""

    def __init__(self, workers: int | None = None) -> None:
        self.workers = workers

    # ---- strategy resolution -------------------------------------------------
    def _select(self, mode: SortMode) -> SortStrategyBase:
        if mode == SortMode.concurrent:
            return ConcurrentStrategy(workers=self.workers)
        return SequentialStrategy()

    # ---- public API ----------------------------------------------------------
    def run(
        self,
        req: SortRequest,
        mode: SortMode = SortMode.single,
        reporter: ProgressReporter | None = None,
    ) -> SortResponse:
        """
        Sort every array of `req.to_sort` ascending.

        The arrays are sorted in place: `req` belongs to a single request and
        the response carries the very same (now sorted) lists. `time_ns`
        covers only the sorting, measured on the monotonic clock.
        """
        strat = self._select(mode)

        start = time.perf_counter_ns()
        sorted_arrays = strat.run(req.to_sort, reporter=reporter)
        elapsed = time.perf_counter_ns() - start

        log.debug(
            "sorted %d array(s) mode=%s in %d ns", len(sorted_arrays), mode.value, elapsed
        )
        return SortResponse(sorted_arrays=sorted_arrays, time_ns=elapsed)

    def sort_single(
        self, req: SortRequest, reporter: ProgressReporter | None = None
    ) -> SortResponse:
        return self.run(req, SortMode.single, reporter=reporter)

    def sort_concurrent(
        self, req: SortRequest, reporter: ProgressReporter | None = None
    ) -> SortResponse:
        return self.run(req, SortMode.concurrent, reporter=reporter)
