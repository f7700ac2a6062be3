"""Tests for the base API implementation."""

import json
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from ghin.exceptions import APIError, APIResponseError, APITimeoutError, APIValidationError


@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session

@pytest.fixture
def base_api(mock_session):
    """Create a BaseAPI instance for testing."""
    from ghin.api.base_api import BaseAPI
    with patch('requests.Session', return_value=mock_session):
        return BaseAPI(base_url="https://api.test.com/api/v1/")

def test_base_api_initialization():
    """Test BaseAPI initialization."""
    from ghin.api.base_api import BaseAPI
    api = BaseAPI(
        base_url="https://api.test.com/api/v1/",
        timeout=(3, 5),
        headers={"X-Custom-Header": "test-value"}
    )
    assert api.base_url == "https://api.test.com/api/v1"
    assert api.timeout == (3, 5)
    assert api.session.headers["Accept"] == "application/json"
    assert api.session.headers["X-Custom-Header"] == "test-value"

def test_create_session_retry_config(base_api):
    """Test session creation with retry configuration."""
    session = base_api._create_session()
    assert session.adapters["https://"].max_retries.total == 3
    assert session.adapters["http://"].max_retries.total == 3

@pytest.mark.parametrize("endpoint", ["scores.json", "/scores.json"])
def test_build_url_keeps_base_path(base_api, endpoint):
    """Test that endpoints are appended to the versioned base path."""
    assert base_api._build_url(endpoint) == "https://api.test.com/api/v1/scores.json"

@pytest.mark.parametrize("status_code,response_text,expected_error", [
    (400, '{"error": "Bad Request"}', "Request failed: HTTP 400: Bad Request (Code: invalid_response)"),
    (401, '{"message": "Unauthorized"}', "Request failed: HTTP 401: Unauthorized (Code: invalid_response)"),
    (500, "Internal Server Error", "Request failed: HTTP 500: Internal Server Error (Code: invalid_response)")
])
def test_validate_response_errors(base_api, status_code, response_text, expected_error):
    """Test response validation with different error scenarios."""
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.text = response_text
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError()
    try:
        mock_response.json.return_value = json.loads(response_text)
    except ValueError:
        mock_response.json.side_effect = ValueError("Invalid JSON")

    with pytest.raises(APIResponseError) as exc_info:
        base_api._validate_response(mock_response)
    assert str(exc_info.value) == expected_error
    assert exc_info.value.response is mock_response

@pytest.mark.parametrize("response_text,expected_result", [
    ('{"key": "value"}', {"key": "value"}),
    ('[{"id": 1}, {"id": 2}]', [{"id": 1}, {"id": 2}]),
    ("", None),
    ("null", None)
])
def test_parse_response_formats(base_api, response_text, expected_result):
    """Test parsing different response formats."""
    mock_response = Mock()
    mock_response.text = response_text

    if response_text and response_text != "null":
        mock_response.json.return_value = json.loads(response_text)
    else:
        mock_response.json.side_effect = ValueError("No JSON")

    result = base_api._parse_response(mock_response)
    assert result == expected_result

def test_parse_response_invalid_format(base_api):
    """Test parsing invalid JSON format."""
    mock_response = Mock()
    mock_response.text = "invalid json"
    mock_response.json.side_effect = ValueError("Invalid JSON")

    with pytest.raises(APIValidationError) as exc_info:
        base_api._parse_response(mock_response)
    assert "Failed to parse response" in str(exc_info.value)

@pytest.mark.parametrize("exception_class,expected_error", [
    (Timeout, APITimeoutError),
    (ConnectionError, APIResponseError),
    (RequestException, APIResponseError),
    (Exception, APIError)
])
def test_make_request_error_handling(base_api, exception_class, expected_error):
    """Test error handling in make_request method."""
    base_api.session.request.side_effect = exception_class("Test error")
    with pytest.raises(expected_error):
        base_api._make_request("GET", "/test")

def test_make_request_success(base_api):
    """Test successful request."""
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = {"success": True}
    base_api.session.request.return_value = mock_response
    result = base_api._make_request("GET", "/test")
    assert result == {"success": True}

def test_make_request_default_timeout(base_api):
    """Test request uses the configured timeout."""
    mock_response = Mock()
    mock_response.json.return_value = {"success": True}
    base_api.session.request.return_value = mock_response
    base_api._make_request("GET", "/test")

    kwargs = base_api.session.request.call_args[1]
    assert kwargs.get("timeout") == (7, 20)

def test_make_request_with_params_data_and_headers(base_api):
    """Test request with query parameters, body and headers."""
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = {"success": True}
    base_api.session.request.return_value = mock_response

    test_params = [("statuses", "Validated"), ("statuses", "UnderReview")]
    test_data = {"data": "test"}

    result = base_api._make_request(
        "POST",
        "/test",
        params=test_params,
        data=test_data,
        headers={"Authorization": "Bearer test-token"}
    )

    assert result == {"success": True}

    base_api.session.request.assert_called_once()
    kwargs = base_api.session.request.call_args[1]
    assert kwargs.get("method") == "POST"
    assert kwargs.get("url") == "https://api.test.com/api/v1/test"
    assert kwargs.get("params") == test_params
    assert kwargs.get("json") == test_data
    assert kwargs.get("headers") == {"Authorization": "Bearer test-token"}
