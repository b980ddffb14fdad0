# src/batch_sort/commands/common.py
from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from batch_sort.core.errors import describe_validation_errors
from batch_sort.modules.sorting.schemas import SortRequest


def load_batch(path: Path) -> SortRequest:
    """
    Read a `{"to_sort": [[...], ...]}` JSON file into a SortRequest.
    Same shape rules as the HTTP endpoints; failures surface as BadParameter.
    """
    if not path.exists() or not path.is_file():
        raise typer.BadParameter(f"batch file does not exist or is not a file: {path}")
    try:
        return SortRequest.model_validate_json(path.read_bytes())
    except ValidationError as err:
        raise typer.BadParameter(
            f"{path}: {describe_validation_errors(err.errors())}"
        ) from err
