"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from ghin.config.env import EnvConfig

TOKEN = "test-token"

LOGIN_PAYLOAD = {"golfer_user": {"golfer_user_token": TOKEN}}

HANDICAP_PAYLOAD = {
    "golfer": {
        "ghin": 1234567,
        "first_name": "Jane",
        "last_name": "Doe",
        "club_name": "Pine Valley GC",
        "handicap_index": "12.3",
        "low_hi": "10.1",
        "rev_date": "2024-05-01",
        "not_modelled": "ignored",
    }
}

SEARCH_PAYLOAD = {
    "golfers": [
        {
            "ghin": 1234567,
            "first_name": "Jane",
            "last_name": "Doe",
            "status": "Active",
            "club_name": "Pine Valley GC",
            "handicap_index": "12.3",
        },
        {
            "ghin": 7654321,
            "first_name": "John",
            "last_name": "Doe",
            "status": "Active",
            "club_name": "Augusta National",
            "handicap_index": "+1.2",
        },
    ]
}

SCORES_PAYLOAD = {
    "scores": [
        {
            "id": 1,
            "golfer_id": 1234567,
            "played_at": "2024-05-01",
            "course_name": "Pine Valley",
            "tee_name": "Blue",
            "adjusted_gross_score": 85,
            "differential": 12.4,
            "status": "Validated",
        }
    ],
    "total_count": 1,
}

COURSE_HANDICAPS_PAYLOAD = {
    "golfers": [
        {
            "golfer_id": 1234567,
            "handicap_index": "12.3",
            "tee_sets": [
                {
                    "tee_set_id": 10,
                    "name": "Blue",
                    "gender": "M",
                    "ratings": [
                        {
                            "tee_set_side": "All18",
                            "course_handicap": 14,
                            "course_rating": 72.1,
                            "slope_rating": 131,
                            "par": 72,
                        }
                    ],
                }
            ],
        }
    ]
}


def make_response(payload, status_code=200):
    """Create a mock requests response."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = json.dumps(payload)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    return response


def requests_to(session, endpoint):
    """Return the keyword arguments of every session request to ``endpoint``."""
    return [
        call.kwargs for call in session.request.call_args_list
        if call.kwargs["url"].endswith(endpoint)
    ]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GHIN_* variables from the developer's shell out of the tests."""
    for env_var in (*EnvConfig.ENV_MAPPING, EnvConfig.CONFIG_FILE_VAR):
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def client_config():
    """Test configuration data."""
    return {
        "username": "jane@example.com",
        "password": "secret",
        "base_url": "https://api.test.com/api/v1/",
    }


@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def routes(mock_session):
    """Responses served by the mock session, keyed by endpoint suffix."""
    routes = {"golfer_login.json": make_response(LOGIN_PAYLOAD)}

    def request(method, url, **kwargs):
        for endpoint, response in routes.items():
            if url.endswith(endpoint):
                return response
        raise AssertionError(f"Unexpected request: {method} {url}")

    mock_session.request.side_effect = request
    return routes


@pytest.fixture
def patched_session(mock_session, routes):
    """Make requests.Session() return the mock session."""
    with patch("requests.Session", return_value=mock_session):
        yield mock_session


@pytest.fixture
def ghin_client(client_config, patched_session):
    """Create a GhinClient talking to the mock session."""
    from ghin.client import GhinClient
    return GhinClient(client_config)
