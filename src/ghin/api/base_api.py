"""
Base API client for the GHIN web service.
"""

import json
import time
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ghin.exceptions import APIError
from ghin.exceptions import APIResponseError
from ghin.exceptions import APITimeoutError
from ghin.exceptions import APIValidationError
from ghin.utils.logging_utils import LoggerMixin


class BaseAPI(LoggerMixin):
    """Base class for API clients."""

    # Default timeouts (connection timeout, read timeout)
    DEFAULT_TIMEOUT = (7, 20)

    # Default retry settings
    DEFAULT_RETRY_TOTAL = 3
    DEFAULT_RETRY_BACKOFF_FACTOR = 0.5
    DEFAULT_RETRY_STATUS_FORCELIST = [408, 429, 500, 502, 503, 504]

    def __init__(
        self,
        base_url: str,
        timeout: tuple[float, float] | None = None,
        headers: dict[str, str] | None = None
    ):
        """Initialize API client.

        Args:
            base_url: Base URL for API
            timeout: Optional (connection timeout, read timeout) override
            headers: Optional headers sent with every request
        """
        super().__init__()

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.session = self._create_session()
        self.session.headers.update({"Accept": "application/json"})
        if headers:
            self.session.headers.update(headers)

        self.debug(f"BaseAPI: base_url: {self.base_url}")

    def _create_session(self) -> requests.Session:
        """
        Create a requests session with retry strategy.

        Returns:
            Session with configured retry strategy
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=self.DEFAULT_RETRY_TOTAL,
            backoff_factor=self.DEFAULT_RETRY_BACKOFF_FACTOR,
            status_forcelist=self.DEFAULT_RETRY_STATUS_FORCELIST,
            allowed_methods=["GET", "POST"]
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _validate_response(self, response: requests.Response) -> None:
        """
        Validate response status.

        Args:
            response: Response to validate

        Raises:
            APIResponseError: If response status code indicates an error
        """
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            error_msg = f"HTTP {response.status_code}"
            try:
                error_data = response.json()
                if isinstance(error_data, dict):
                    detail = error_data.get('message', error_data.get('error'))
                    if detail:
                        error_msg = f"{error_msg}: {detail}"
            except (ValueError, AttributeError):
                if response.text:
                    error_msg = f"{error_msg}: {response.text[:100]}"

            raise APIResponseError(f"Request failed: {error_msg}", response=response) from e

    def _parse_response(self, response: requests.Response) -> Any:
        """Parse response content.

        Args:
            response: Response object to parse

        Returns:
            Parsed response data or None if empty

        Raises:
            APIValidationError: If response cannot be parsed
        """
        try:
            return response.json()
        except ValueError:
            content = (response.text or "").strip()

            if not content or content == "null":
                return None

            try:
                return json.loads(content)
            except json.JSONDecodeError:
                pass

            raise APIValidationError(f"Failed to parse response: {content[:100]}...")

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: list[tuple[str, str]] | dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: tuple[float, float] | None = None
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint, relative to the base URL
            params: Query parameters
            data: Request body, sent as JSON
            headers: Extra headers for this request only
            timeout: Request timeout (connection timeout, read timeout)

        Returns:
            Parsed response data

        Raises:
            APITimeoutError: If request times out
            APIResponseError: If request fails
            APIValidationError: If the body cannot be parsed
            APIError: For other errors
        """
        start_time = time.time()
        url = self._build_url(endpoint)

        if timeout is None:
            timeout = self.timeout

        self.debug(f"BaseAPI: {method} {url}", params=params)

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=data,
                headers=headers,
                timeout=timeout
            )

            self._validate_response(response)
            result = self._parse_response(response)

            self.debug(f"BaseAPI: {method} {url} completed in {time.time() - start_time:.2f} seconds")
            return result

        except requests.exceptions.Timeout as e:
            elapsed = time.time() - start_time
            self.error(f"BaseAPI: Request timed out after {elapsed:.2f} seconds with timeout settings {timeout}: {e}")
            raise APITimeoutError(f"Request timed out after {elapsed:.2f} seconds: {e!s}") from e

        except requests.exceptions.RequestException as e:
            elapsed = time.time() - start_time
            self.error(f"BaseAPI: Request failed after {elapsed:.2f} seconds: {e}")
            raise APIResponseError(f"Request failed after {elapsed:.2f} seconds: {e!s}") from e

        except APIError as e:
            elapsed = time.time() - start_time
            self.error(f"BaseAPI: API error after {elapsed:.2f} seconds: {e}")
            raise

        except Exception as e:
            elapsed = time.time() - start_time
            self.error(f"BaseAPI: Unexpected error after {elapsed:.2f} seconds: {e}")
            raise APIError(f"Unexpected error after {elapsed:.2f} seconds: {e!s}") from e
