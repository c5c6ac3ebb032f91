from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer, field_validator

# =============================================================================
# Request / Response Models
# =============================================================================


def _serialize_gap(value: float) -> float | int:
    # 1.0 goes back out as 1, matching what callers usually send
    return int(value) if float(value).is_integer() else value


class StitchRequest(BaseModel):
    """Texts to narrate plus the optional knobs for the stitched output."""

    model_config = ConfigDict(populate_by_name=True)

    texts: list[StrictStr] = Field(
        ..., min_length=1, description="Ordered texts, one speech clip per entry"
    )
    gap_seconds: float = Field(
        1, alias="gapSeconds", description="Silence inserted between consecutive clips"
    )
    voice_id: str | None = Field(None, alias="voiceId", description="Provider voice ID")
    output_key: str | None = Field(None, alias="outputKey", description="Storage key for output")

    @field_validator("gap_seconds", mode="before")
    @classmethod
    def validate_gap_seconds(cls, v: Any) -> Any:
        if v is None:
            return 1
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("must be a number")
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        if v < 0:
            raise ValueError("must be greater than or equal to 0")
        return v

    @field_validator("voice_id", "output_key", mode="before")
    @classmethod
    def blank_means_default(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @field_serializer("gap_seconds")
    def serialize_gap_seconds(self, value: float) -> float | int:
        return _serialize_gap(value)


class StitchResult(BaseModel):
    """Where the stitched audio landed and how it was assembled."""

    model_config = ConfigDict(populate_by_name=True)

    bucket: str = Field(..., description="Storage bucket holding the output")
    key: str = Field(..., description="Storage key of the output")
    clip_count: int = Field(..., alias="clipCount", description="Number of speech clips")
    gap_seconds: float = Field(..., alias="gapSeconds", description="Gap used between clips")

    @field_serializer("gap_seconds")
    def serialize_gap_seconds(self, value: float) -> float | int:
        return _serialize_gap(value)


class ErrorBody(BaseModel):
    """Body returned for rejected requests."""

    error: str
