"""Score history schemas."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, List, Optional

from pydantic import NonNegativeInt, PositiveInt, field_validator

from ghin.models.common import RequestModel, ResponseModel


class ScoresRequest(RequestModel):
    """Optional filters for golfers.get_scores.

    Date filters accept dates or datetimes; datetimes are truncated to their
    calendar date (in UTC when timezone-aware).
    """

    from_date_played: Optional[date] = None
    to_date_played: Optional[date] = None
    statuses: Optional[List[str]] = None
    score_types: Optional[List[str]] = None
    limit: Optional[PositiveInt] = None
    offset: Optional[NonNegativeInt] = None

    @field_validator("from_date_played", "to_date_played", mode="before")
    @classmethod
    def _truncate_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        return value


class Score(ResponseModel):
    id: int
    golfer_id: Optional[int] = None
    played_at: Optional[date] = None
    posted_at: Optional[datetime] = None
    course_id: Optional[str] = None
    course_name: Optional[str] = None
    facility_name: Optional[str] = None
    tee_name: Optional[str] = None
    course_rating: Optional[float] = None
    slope_rating: Optional[int] = None
    number_of_holes: Optional[int] = None
    adjusted_gross_score: Optional[int] = None
    differential: Optional[float] = None
    score_type: Optional[str] = None
    status: Optional[str] = None
    used: Optional[bool] = None


class ScoresResponse(ResponseModel):
    scores: List[Score]
    total_count: Optional[int] = None
