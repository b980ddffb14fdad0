# src/batch_sort/commands/bench.py
"""
'bench' command: build a random batch and time both strategies on it.

Each run sorts a fresh copy of the batch (sorting is in place), and the
command fails if the two strategies ever disagree on the result.
"""

from __future__ import annotations

import copy
import random
import statistics

import typer
from rich.console import Console
from rich.table import Table

from batch_sort.core.rich_progress import make_phase_progress
from batch_sort.modules.sorting.schemas import SortMode, SortRequest
from batch_sort.modules.sorting.service import SortService


def make_batch(arrays: int, size: int, seed: int | None = None) -> list[list[int]]:
    """Random batch of `arrays` lists holding `size` ints each."""
    rng = random.Random(seed)
    return [[rng.randint(-1_000_000, 1_000_000) for _ in range(size)] for _ in range(arrays)]


def register(app: typer.Typer) -> None:
    """Attach the 'bench' command to the given Typer app."""

    @app.command("bench", help="Compare single vs concurrent sorting on a random batch.")
    def bench_cmd(
        arrays: int = typer.Option(100, "--arrays", "-n", min=0, help="Arrays per batch."),
        size: int = typer.Option(1000, "--size", "-s", min=0, help="Ints per array."),
        repeat: int = typer.Option(5, "--repeat", "-r", min=1, help="Runs per strategy."),
        seed: int | None = typer.Option(None, "--seed", help="RNG seed."),
        workers: int | None = typer.Option(
            None, "--workers", "-w", min=1, help="Thread pool size (concurrent mode)."
        ),
    ) -> None:
        batch = make_batch(arrays, size, seed)
        svc = SortService(workers=workers)
        console = Console()

        timings: dict[SortMode, list[int]] = {m: [] for m in SortMode}
        results: dict[SortMode, list[list[int]]] = {}

        progress, reporter = make_phase_progress(console)
        with progress:
            for mode in SortMode:
                for _ in range(repeat):
                    req = SortRequest(to_sort=copy.deepcopy(batch))
                    resp = svc.run(req, mode, reporter=reporter)
                    timings[mode].append(resp.time_ns)
                    results[mode] = resp.sorted_arrays

        if results[SortMode.single] != results[SortMode.concurrent]:
            console.print("[red]single and concurrent results differ[/red]")
            raise typer.Exit(code=1)

        table = Table(title=f"{arrays} array(s) x {size} int(s), {repeat} run(s)")
        table.add_column("Mode")
        table.add_column("Min ns", justify="right")
        table.add_column("Mean ns", justify="right")
        table.add_column("Max ns", justify="right")
        for mode, ns in timings.items():
            table.add_row(
                mode.value, str(min(ns)), f"{statistics.fmean(ns):.0f}", str(max(ns))
            )
        console.print(table)
