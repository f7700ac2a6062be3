"""Golfer lookup and handicap schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from ghin.models.common import GhinNumber, RequestModel, ResponseModel


class GolferSearchRequest(RequestModel):
    """Filters accepted by golfers.search."""

    ghin: Optional[GhinNumber] = None
    status: Optional[Literal["Active", "Inactive"]] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    club_id: Optional[int] = None
    association_id: Optional[int] = None


class Golfer(ResponseModel):
    """A golfer as listed by the search endpoint."""

    ghin: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    player_name: Optional[str] = None
    gender: Optional[str] = None
    status: Optional[str] = None
    club_id: Optional[int] = None
    club_name: Optional[str] = None
    association_id: Optional[int] = None
    association_name: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    handicap_index: Optional[str] = None
    low_hi_display: Optional[str] = None
    rev_date: Optional[str] = None


class GolferSearchResponse(ResponseModel):
    golfers: List[Golfer]


class GolferHandicap(ResponseModel):
    """Current handicap record of a single golfer."""

    ghin: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    status: Optional[str] = None
    club_name: Optional[str] = None
    association_name: Optional[str] = None
    handicap_index: Optional[str] = Field(None, description="e.g. '12.3', '+1.2' or 'NH'")
    low_hi: Optional[str] = None
    rev_date: Optional[str] = None


class HandicapResponse(ResponseModel):
    golfer: GolferHandicap
