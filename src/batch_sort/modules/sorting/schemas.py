# src/batch_sort/modules/sorting/schemas.py
from enum import Enum

from pydantic import BaseModel, Field, StrictInt, field_validator


class SortMode(str, Enum):
    single = "single"
    concurrent = "concurrent"


class SortRequest(BaseModel):
    to_sort: list[list[StrictInt]] = Field(
        default_factory=list,
        description=(
            "Batch of integer arrays; each one is sorted independently. "
            "Missing or null means an empty batch."
        ),
        examples=[[[3, 1, 2], [5, -1, 0]]],
    )

    @field_validator("to_sort", mode="before")
    @classmethod
    def _null_is_empty(cls, v):
        return [] if v is None else v


class SortResponse(BaseModel):
    sorted_arrays: list[list[int]] = Field(
        ...,
        description="`to_sort` sorted ascending, index for index.",
        examples=[[[1, 2, 3], [-1, 0, 5]]],
    )
    time_ns: int = Field(
        ...,
        ge=0,
        description="Nanoseconds spent sorting (decode/encode excluded).",
        examples=[18250],
    )
