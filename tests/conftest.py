"""
Shared pytest fixtures for XERT MCP testing.
"""
import json

import pytest
import requests
from unittest.mock import Mock, patch

from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.credentials import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, CredentialStore


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def make_response(status_code=200, json_data=None, text=None, url="https://www.xertonline.com/oauth/test"):
    """Build a real requests.Response so raise_for_status/json/text behave normally."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if json_data is not None:
        response._content = json.dumps(json_data).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    return response


def token_response(access_token="new_access", refresh_token="new_refresh"):
    return make_response(200, {
        "access_token": access_token,
        "refresh_token": refresh_token,
        "expires_in": 604800,
        "token_type": "bearer",
        "scope": "xert_public",
    }, url="https://www.xertonline.com/oauth/token")


@pytest.fixture(autouse=True)
def clean_token_env(monkeypatch):
    """Keep XERT_* variables out of the tests; CredentialStore.save writes os.environ."""
    for key in (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, "XERT_ENV_FILE", "XERT_PASSWORD"):
        # setenv first so teardown removes values written during the test
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def env_file(tmp_path):
    """Settings file holding an existing token pair."""
    path = tmp_path / ".env"
    path.write_text(
        "PORT=3000\n"
        "XERT_ACCESS_TOKEN=old_access\n"
        "XERT_REFRESH_TOKEN=old_refresh\n"
    )
    return path


@pytest.fixture
def credential_store(env_file):
    store = CredentialStore(env_file)
    store.load()
    return store


@pytest.fixture
def xert_client(credential_store):
    return XertClient(credential_store)


@pytest.fixture
def mock_transport(xert_client):
    """Patch the client's session.request; set side_effect/return_value per test."""
    with patch.object(xert_client.session, "request") as mock_request:
        yield mock_request


@pytest.fixture
def mock_sdk_client():
    """A stand-in XertClient for tool and REST tests (SDK functions are patched)."""
    client = Mock(spec=XertClient)
    client.is_logged_in = True
    return client


@pytest.fixture(autouse=True)
def mock_get_client(mock_sdk_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like a missing token file.
    """
    get_client_fn = Mock(return_value=mock_sdk_client)

    modules_to_patch = [
        "xert_mcp.training",
        "xert_mcp.workouts",
        "xert_mcp.activities",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()


@pytest.fixture
def training_info_payload():
    return {
        "success": True,
        "weight": 72.5,
        "status": "Tired",
        "signature": {"ftp": 265.4, "ltp": 210.2, "hie": 18.43, "pp": 980.0},
        "tl": {"low": 55.1, "high": 12.3, "peak": 1.2, "total": 68.6},
        "targetXSS": {"low": 60.0, "high": 15.0, "peak": 2.0, "total": 77.0},
        "source": "Training Load",
        "wotd": {
            "type": "Forecast",
            "name": "SMART - Sweet Spot",
            "workoutId": "ISm75NAmocJ7eUHr",
            "description": "Steady sub-threshold work",
            "difficulty": 42.314,
            "url": "https://www.xertonline.com/oauth/workout-download/ISm75NAmocJ7eUHr.zwo",
        },
    }


@pytest.fixture
def workout_detail_payload():
    return {
        "success": True,
        "name": "Sweet Spot 3x10",
        "description": "Three blocks at sweet spot",
        "workout": [
            {"name": "Warmup", "index": 0, "power": 150.2, "duration": 600, "interval_count": 1},
            {
                "name": "Sweet Spot",
                "index": 1,
                "power": 240.8,
                "duration": 600,
                "power_rest": 140.0,
                "duration_rest": 300,
                "interval_count": 3,
            },
        ],
    }


@pytest.fixture
def activity_detail_payload():
    return {
        "success": True,
        "name": "Morning Ride",
        "description": "Group ride",
        "summary": {
            "session": {
                "max_power": 812,
                "avg_power": 201.6,
                "max_cadence": 118,
                "total_elevation_gain": 640,
                "total_calories": 1450,
            },
            "xss": 142.55,
            "xlss": 110.2,
            "xhss": 28.1,
            "xpss": 4.25,
            "xep": 233.7,
            "focus": "Pure Endurance",
            "mep": 540.2,
            "specificity": "Endurance",
            "difficulty": 1.8,
            "difficulty_rating": "Moderate",
            "distance": 61.234,
            "duration": 7265,
            "sig": {"ftp": 266.1, "ltp": 211.0, "hie": 18.5, "pp": 982.0, "atc": 12.0},
            "medal": 2,
            "breakthrough": 1,
            "activity_type": "Cycling",
            "start_date": {
                "date": "2024-01-15 07:30:00.000000",
                "timezone_type": 3,
                "timezone": "Europe/Berlin",
            },
            "total_grams_carbs": 310.4,
            "total_grams_fat": 40.2,
            "training_status": 0.87,
            "freshness": "Fresh",
        },
    }
