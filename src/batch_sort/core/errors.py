from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse


class BatchSortError(Exception):
    """Base application exception."""

    pass


class MalformedRequest(BatchSortError):
    """Request body is not JSON or does not have the `to_sort` shape."""

    pass


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Flatten pydantic/FastAPI validation errors into one diagnostic line,
    e.g. ``to_sort.0.1: Input should be a valid integer``.
    """
    parts: list[str] = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        msg = err.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request body"


def to_response(exc: Exception) -> PlainTextResponse:
    """
    Convert our exceptions to a plain-text 'Error: ...' response.
    """
    if isinstance(exc, MalformedRequest):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, BatchSortError):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        # Fallback
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return PlainTextResponse(f"Error: {exc}", status_code=code)


def install_error_handlers(app: FastAPI) -> None:
    """Route app errors (e.g. MalformedRequest from body decoding) through `to_response`."""

    @app.exception_handler(BatchSortError)
    async def _app_error(_: Request, exc: BatchSortError):
        return to_response(exc)
