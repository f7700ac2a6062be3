"""
Typed client for the GHIN handicap service.
"""

__version__ = '0.1.0'

from .cache import CacheClient, InMemoryCacheClient
from .client import GhinClient, GolferOperations, HandicapOperations
from .exceptions import (
    APIError,
    APIResponseError,
    APITimeoutError,
    APIValidationError,
    AuthError,
    ConfigError,
    GhinError,
    ValidationError,
)
from .models import (
    ClientConfig,
    CoursePlayerHandicapsResponse,
    Golfer,
    GolferCourseHandicapRequest,
    GolferHandicap,
    GolferSearchRequest,
    ScoresRequest,
    ScoresResponse,
)

__all__ = [
    'APIError',
    'APIResponseError',
    'APITimeoutError',
    'APIValidationError',
    'AuthError',
    'CacheClient',
    'ClientConfig',
    'ConfigError',
    'CoursePlayerHandicapsResponse',
    'GhinClient',
    'GhinError',
    'Golfer',
    'GolferCourseHandicapRequest',
    'GolferHandicap',
    'GolferOperations',
    'GolferSearchRequest',
    'HandicapOperations',
    'InMemoryCacheClient',
    'ScoresRequest',
    'ScoresResponse',
    'ValidationError',
]
