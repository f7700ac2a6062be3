"""Course handicap calculation schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ghin.models.common import GhinNumber, RequestModel, ResponseModel


class GolferCourseHandicapRequest(RequestModel):
    """One golfer entry of a course handicap batch."""

    ghin: GhinNumber
    course_id: int
    tee_set_id: Optional[int] = None
    handicap_index: Optional[float] = None


class CourseHandicapGolfer(BaseModel):
    """Wire form of a batch entry: ``ghin`` travels as ``golfer_id``."""

    model_config = ConfigDict(extra="forbid")

    golfer_id: int
    course_id: int
    tee_set_id: Optional[int] = None
    handicap_index: Optional[float] = None


class CourseHandicapsRequest(BaseModel):
    """Request body posted to the course handicaps endpoint."""

    golfers: List[CourseHandicapGolfer]
    source: str


class TeeSetRating(ResponseModel):
    tee_set_side: str
    course_handicap: Optional[int] = None
    course_rating: Optional[float] = None
    slope_rating: Optional[int] = None
    par: Optional[int] = None


class TeeSet(ResponseModel):
    tee_set_id: int
    name: str
    gender: Optional[str] = None
    ratings: List[TeeSetRating]


class PlayerCourseHandicap(ResponseModel):
    golfer_id: int
    handicap_index: Optional[str] = None
    tee_sets: List[TeeSet]


class CoursePlayerHandicapsResponse(ResponseModel):
    golfers: List[PlayerCourseHandicap]
