# src/batch_sort/modules/sorting/router.py
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from batch_sort.api.deps import SettingsDep
from batch_sort.core.errors import MalformedRequest, describe_validation_errors

from .schemas import SortRequest, SortResponse
from .service import SortService

router = APIRouter(tags=["sorting"])

_ERROR_RESPONSES = {
    400: {
        "description": "Body is not JSON or does not match `{\"to_sort\": [[int]]}`.",
        "content": {"text/plain": {"example": "Error: to_sort: Input should be a valid list"}},
    }
}

# Body is decoded by hand (any Content-Type), so document it explicitly
_OPENAPI_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": SortRequest.model_json_schema()}},
    }
}


async def decode_sort_request(request: Request) -> SortRequest:
    """
    Parse the raw body as JSON regardless of Content-Type.
    Any decode/shape failure becomes MalformedRequest (400).
    """
    body = await request.body()
    try:
        return SortRequest.model_validate_json(body)
    except ValidationError as err:
        raise MalformedRequest(describe_validation_errors(err.errors())) from err


SortRequestDep = Annotated[SortRequest, Depends(decode_sort_request)]


@router.post(
    path="/process-single",
    response_model=SortResponse,
    responses=_ERROR_RESPONSES,
    openapi_extra=_OPENAPI_BODY,
    summary="Sort every array of the batch, one after another",
    description=(
        "Sorts each array of `to_sort` ascending, in index order, on the request's "
        "own thread. `time_ns` is the time spent sorting only."
    ),
)
def process_single(req: SortRequestDep, settings: SettingsDep) -> SortResponse:
    return SortService(workers=settings.SORT_WORKERS).sort_single(req)


@router.post(
    path="/process-concurrent",
    response_model=SortResponse,
    responses=_ERROR_RESPONSES,
    openapi_extra=_OPENAPI_BODY,
    summary="Sort every array of the batch concurrently",
    description=(
        "Dispatches one job per array of `to_sort` to a thread pool and waits for "
        "all of them before responding. Same contract as `/process-single`."
    ),
)
def process_concurrent(req: SortRequestDep, settings: SettingsDep) -> SortResponse:
    return SortService(workers=settings.SORT_WORKERS).sort_concurrent(req)
