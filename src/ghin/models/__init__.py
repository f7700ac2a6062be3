"""Request, response and configuration schemas."""

from .common import GhinNumber, ghin_number_adapter
from .config import ClientConfig
from .course_handicap import (
    CourseHandicapGolfer,
    CourseHandicapsRequest,
    CoursePlayerHandicapsResponse,
    GolferCourseHandicapRequest,
    PlayerCourseHandicap,
    TeeSet,
    TeeSetRating,
)
from .golfer import (
    Golfer,
    GolferHandicap,
    GolferSearchRequest,
    GolferSearchResponse,
    HandicapResponse,
)
from .scores import Score, ScoresRequest, ScoresResponse

__all__ = [
    'ClientConfig',
    'CourseHandicapGolfer',
    'CourseHandicapsRequest',
    'CoursePlayerHandicapsResponse',
    'GhinNumber',
    'Golfer',
    'GolferCourseHandicapRequest',
    'GolferHandicap',
    'GolferSearchRequest',
    'GolferSearchResponse',
    'HandicapResponse',
    'PlayerCourseHandicap',
    'Score',
    'ScoresRequest',
    'ScoresResponse',
    'TeeSet',
    'TeeSetRating',
    'ghin_number_adapter',
]
