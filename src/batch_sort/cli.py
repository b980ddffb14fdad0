# src/batch_sort/cli.py
from __future__ import annotations

import typer
import uvicorn

from batch_sort.commands.bench import register as register_bench
from batch_sort.commands.sort import register as register_sort
from batch_sort.core.config import get_settings
from batch_sort.version import get_version

app = typer.Typer(help="Batch Sort service and local tools")

register_sort(app)
register_bench(app)


@app.command("serve", help="Run the HTTP service (POST /process-single, /process-concurrent).")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address."),
    port: int | None = typer.Option(None, "--port", "-p", min=1, max=65535, help="Port."),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level."),
) -> None:
    settings = get_settings()
    host = host or settings.HOST
    port = port or settings.PORT
    log_level = (log_level or settings.LOG_LEVEL).lower()

    typer.echo(f"Server listening on port {port}...")
    uvicorn.run("batch_sort.api.main:app", host=host, port=port, log_level=log_level)


@app.command("version", help="Print the installed version.")
def version() -> None:
    typer.echo(get_version())


if __name__ == "__main__":
    app()
