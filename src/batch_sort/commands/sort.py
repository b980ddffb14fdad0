# src/batch_sort/commands/sort.py
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from batch_sort.commands.common import load_batch
from batch_sort.core.rich_progress import make_phase_progress
from batch_sort.modules.sorting.schemas import SortMode, SortResponse
from batch_sort.modules.sorting.service import SortService


def _render_table(console: Console, resp: SortResponse, mode: SortMode) -> None:
    table = Table(title=f"Sorted arrays ({mode.value}, {resp.time_ns} ns)")
    table.add_column("#", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Values", overflow="fold")

    for i, values in enumerate(resp.sorted_arrays):
        table.add_row(str(i), str(len(values)), ", ".join(map(str, values)) or "—")
    console.print(table)


def register(app: typer.Typer) -> None:
    """Attach the local 'sort' command to the given Typer app."""

    @app.command("sort", help="Sort a JSON batch file without starting the server.")
    def sort_cmd(
        batch_file: Path = typer.Argument(
            ..., help='JSON file shaped like {"to_sort": [[3, 1, 2], ...]}.'
        ),
        mode: SortMode = typer.Option(
            SortMode.single, "--mode", "-m", help="Execution strategy."
        ),
        workers: int | None = typer.Option(
            None, "--workers", "-w", min=1, help="Thread pool size (concurrent mode)."
        ),
        table: bool = typer.Option(
            False, "--table", help="Print a table instead of JSON."
        ),
    ) -> None:
        req = load_batch(batch_file)
        svc = SortService(workers=workers)

        console = Console()
        progress, reporter = make_phase_progress(console)
        with progress:
            resp = svc.run(req, mode, reporter=reporter)

        if table:
            _render_table(console, resp, mode)
        else:
            typer.echo(resp.model_dump_json())
