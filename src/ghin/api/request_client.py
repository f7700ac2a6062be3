"""
Authenticated, schema-checked access to GHIN API entities.
"""

from typing import Any, TypeVar

import pydantic

from ghin.api.base_api import BaseAPI
from ghin.cache.base import CacheClient
from ghin.cache.memory import InMemoryCacheClient
from ghin.exceptions import APIResponseError
from ghin.exceptions import APIValidationError
from ghin.exceptions import AuthError
from ghin.exceptions import validation_details
from ghin.models.config import ClientConfig
from ghin.utils.logging_utils import log_execution

CLIENT_SOURCE = "GHINcom"

ENTITY_ENDPOINTS = {
    "golfer": "golfers/handicap.json",
    "golfers_search": "golfers/search.json",
    "scores": "scores.json",
    "course_handicaps": "course_handicaps.json",
}

LOGIN_ENDPOINT = "golfer_login.json"

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class RequestClient(BaseAPI):
    """Fetches GHIN entities and validates them against response schemas.

    The access token is obtained by logging in with the configured
    credentials and kept in the cache for ``config.token_ttl`` seconds.
    """

    def __init__(self, config: ClientConfig, cache: CacheClient | None = None):
        super().__init__(
            config.base_url,
            timeout=(config.connect_timeout, config.read_timeout),
        )
        self.config = config
        self.cache = cache if cache is not None else InMemoryCacheClient()
        self.set_log_context(username=config.username)

    @property
    def token_cache_key(self) -> str:
        return f"ghin:token:{self.config.username}"

    @log_execution(level='DEBUG')
    def _login(self) -> str:
        """Exchange the configured credentials for an access token."""
        body = {
            "user": {
                "email_or_ghin": self.config.username,
                "password": self.config.password,
                "remember_me": True,
            },
            "token": "nonblank",
        }
        try:
            payload = self._make_request("POST", LOGIN_ENDPOINT, data=body)
        except APIResponseError as e:
            raise AuthError(f"Login failed: {e.message}", response=e.response) from e

        token = None
        if isinstance(payload, dict):
            token = (payload.get("golfer_user") or {}).get("golfer_user_token")
        if not token:
            raise AuthError("Login response did not contain an access token")
        return token

    def get_access_token(self) -> str:
        """Return the cached access token, logging in when there is none."""
        token = self.cache.get(self.token_cache_key)
        if token:
            return token

        token = self._login()
        self.cache.set(self.token_cache_key, token, ttl=self.config.token_ttl)
        return token

    def fetch(
        self,
        entity: str,
        schema: type[ModelT],
        params: list[tuple[str, str]] | None = None,
        json_body: dict[str, Any] | None = None,
        method: str = "GET",
    ) -> ModelT:
        """Request an entity and parse the response with ``schema``.

        Args:
            entity: Logical entity name, one of ENTITY_ENDPOINTS
            schema: Pydantic model the response must satisfy
            params: Query parameters as ordered pairs
            json_body: Request body, sent as JSON
            method: HTTP method

        Returns:
            The validated response model

        Raises:
            ValueError: If the entity is unknown
            AuthError: If login fails or the token is rejected
            APIValidationError: If the response does not match ``schema``
            APIError: For any other transport failure
        """
        try:
            endpoint = ENTITY_ENDPOINTS[entity]
        except KeyError:
            raise ValueError(f"Unknown entity: {entity}") from None

        headers = {"Authorization": f"Bearer {self.get_access_token()}"}

        try:
            payload = self._make_request(
                method, endpoint, params=params, data=json_body, headers=headers
            )
        except APIResponseError as e:
            if e.response is not None and e.response.status_code == 401:
                self.cache.delete(self.token_cache_key)
                raise AuthError(f"Access token rejected for {entity}", response=e.response) from e
            raise

        try:
            return schema.model_validate(payload)
        except pydantic.ValidationError as e:
            self.error(f"RequestClient: invalid {entity} response: {e.error_count()} errors")
            raise APIValidationError(
                f"Invalid {entity} response", details=validation_details(e)
            ) from e
