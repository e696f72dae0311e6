from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .scoring.bowling import MAX_ROLLS


class BowlingScoreRequest(BaseModel):
    rolls: List[int] = Field(..., max_length=MAX_ROLLS)

    model_config = ConfigDict(extra="forbid")

    @field_validator("rolls", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        # Reject booleans explicitly (bool is a subclass of int in Python)
        if isinstance(value, list):
            for i, item in enumerate(value, start=1):
                if isinstance(item, bool):
                    raise ValueError(f"roll #{i} must be an integer (not a boolean)")
        return value


class BowlingScoreOut(BaseModel):
    frames: List[List[int]]
    total: int
    complete: bool
