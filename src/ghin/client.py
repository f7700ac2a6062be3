"""
GHIN client facade.

``GhinClient`` groups the available calls into two namespaces::

    client = GhinClient({"username": "...", "password": "..."})
    client.handicaps.get_one(1234567)
    client.golfers.search({"ghin": 1234567})

Arguments are validated before any request is made; responses are validated
by the request client against their schemas.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import pydantic
from pydantic import TypeAdapter

from ghin.api.api_utils import QueryParams, encode_query, encode_value, set_param
from ghin.api.request_client import CLIENT_SOURCE, RequestClient
from ghin.cache.memory import InMemoryCacheClient
from ghin.exceptions import ConfigError, ValidationError, validation_details
from ghin.models import (
    ClientConfig,
    CourseHandicapGolfer,
    CourseHandicapsRequest,
    CoursePlayerHandicapsResponse,
    Golfer,
    GolferCourseHandicapRequest,
    GolferHandicap,
    GolferSearchRequest,
    GolferSearchResponse,
    HandicapResponse,
    ScoresRequest,
    ScoresResponse,
    ghin_number_adapter,
)

GOLFER_ID = "golfer_id"
SOURCE = "source"

SEARCH_DEFAULTS = {
    "from_ghin": True,
    "per_page": 25,
    "sorting_criteria": "full_name",
    "order": "asc",
    "page": 1,
}

_course_handicap_requests = TypeAdapter(list[GolferCourseHandicapRequest])


def _validate(adapter: TypeAdapter | type[pydantic.BaseModel], value: Any, name: str) -> Any:
    """Validate a call argument, raising ValidationError before any request is made."""
    try:
        if isinstance(adapter, TypeAdapter):
            return adapter.validate_python(value)
        return adapter.model_validate(value)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid {name}", details=validation_details(e)) from e


class HandicapOperations:
    """Handicap lookups."""

    def __init__(self, http_client: RequestClient):
        self._http = http_client

    def get_one(self, ghin_number: int) -> GolferHandicap:
        """Return the current handicap record of a golfer."""
        ghin = _validate(ghin_number_adapter, ghin_number, "ghin number")
        params: QueryParams = [(GOLFER_ID, encode_value(ghin))]

        response = self._http.fetch("golfer", HandicapResponse, params=params)
        return response.golfer

    def get_course_player_handicaps(
        self,
        requests: Sequence[GolferCourseHandicapRequest | Mapping[str, Any]],
    ) -> CoursePlayerHandicapsResponse:
        """Compute course handicaps for a batch of golfers.

        The whole batch is rejected if any entry is invalid. The endpoint is
        a query but takes its input as a POST body.
        """
        entries = _validate(_course_handicap_requests, requests, "course handicap requests")
        golfers = [
            CourseHandicapGolfer(golfer_id=entry.ghin, **entry.model_dump(exclude={"ghin"}))
            for entry in entries
        ]
        body = CourseHandicapsRequest(golfers=golfers, source=CLIENT_SOURCE)

        return self._http.fetch(
            "course_handicaps",
            CoursePlayerHandicapsResponse,
            json_body=body.model_dump(exclude_none=True),
            method="POST",
        )


class GolferOperations:
    """Golfer search and score history."""

    def __init__(self, http_client: RequestClient):
        self._http = http_client

    def search(
        self, request: GolferSearchRequest | Mapping[str, Any] | None = None
    ) -> list[Golfer]:
        """Search golfers.

        Results are paged 25 at a time, sorted by full name. Only the ``ghin``
        filter is sent to the service.
        """
        validated = _validate(
            GolferSearchRequest, request if request is not None else {}, "golfer search request"
        )

        params: QueryParams = []
        for key, value in SEARCH_DEFAULTS.items():
            set_param(params, key, value)
        if validated.ghin:
            set_param(params, GOLFER_ID, validated.ghin)

        response = self._http.fetch("golfers_search", GolferSearchResponse, params=params)
        return response.golfers

    def get_one(self, ghin_number: int) -> Golfer | None:
        """Return the active golfer with this ghin number, or None."""
        ghin = _validate(ghin_number_adapter, ghin_number, "ghin number")
        golfers = self.search(GolferSearchRequest(ghin=ghin, status="Active"))
        return golfers[0] if golfers else None

    def get_scores(
        self,
        ghin_number: int,
        request: ScoresRequest | Mapping[str, Any] | None = None,
    ) -> ScoresResponse:
        """Return the score history of a golfer, filtered by ``request``."""
        validated = _validate(ScoresRequest, request if request is not None else {}, "scores request")
        ghin = _validate(ghin_number_adapter, ghin_number, "ghin number")

        params: QueryParams = [
            (GOLFER_ID, encode_value(ghin)),
            (SOURCE, CLIENT_SOURCE),
        ]
        encode_query(validated.model_dump(), params)

        return self._http.fetch("scores", ScoresResponse, params=params)


class GhinClient:
    """Entry point to the GHIN API.

    Args:
        config: ClientConfig or a mapping of its fields. When no cache is
            configured an InMemoryCacheClient is used.

    Raises:
        ConfigError: If the configuration is invalid
    """

    def __init__(self, config: ClientConfig | Mapping[str, Any]):
        try:
            self.config = ClientConfig.model_validate(config)
        except pydantic.ValidationError as e:
            raise ConfigError(
                f"Invalid GhinClient config: {e.error_count()} errors",
                details=validation_details(e),
            ) from e

        cache = self.config.cache if self.config.cache is not None else InMemoryCacheClient()
        self._http = RequestClient(self.config, cache=cache)

        self.handicaps = HandicapOperations(self._http)
        self.golfers = GolferOperations(self._http)
