"""Request and response models for debate endpoints."""

from pydantic import BaseModel, Field, field_validator

from debate_hall.models import DebateStats
from debate_hall.types import Side


class DebateCreateRequest(BaseModel):
    """Request model for creating a new debate."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title must not be blank")
        return v.strip()


class ArgumentCreateRequest(BaseModel):
    """Request model for adding an argument; side must be 'for' or 'against'."""

    side: Side
    text: str = Field(..., min_length=1)
    author_name: str | None = Field(
        default=None, description="Defaults to the authenticated username"
    )


class DebateResponse(BaseModel):
    """Response model for debate information."""

    id: int
    title: str
    description: str
    created_by: int | None
    created_at: str


class ArgumentResponse(BaseModel):
    """Response model for a single argument."""

    id: int
    debate_id: int
    side: str
    text: str
    author_name: str
    user_id: int | None
    created_at: str


class DebateStatsResponse(BaseModel):
    """Computed debate statistics."""

    for_count: int
    against_count: int
    for_points: int
    against_points: int
    participant_count: int
    winner: str

    @classmethod
    def from_stats(cls, stats: DebateStats) -> "DebateStatsResponse":
        return cls(**stats.to_dict())


class DebateSummaryResponse(DebateResponse):
    """Debate entry in the list endpoint."""

    stats: DebateStatsResponse


class DebateDetailResponse(BaseModel):
    """Single debate with its arguments and statistics."""

    debate: DebateResponse
    arguments: list[ArgumentResponse]
    stats: DebateStatsResponse
