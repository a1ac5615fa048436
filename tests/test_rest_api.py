"""
Tests for the XERT REST API proxy.
"""
import pytest
import requests
from unittest.mock import Mock, patch
from starlette.testclient import TestClient

from xert_mcp.rest_api import create_rest_app
from xert_mcp.sdk.types import (
    ActivityDetail,
    ActivitySummary,
    TrainingInfo,
    Workout,
    WorkoutDetail,
)


@pytest.fixture
def rest_client(mock_sdk_client):
    getter = Mock(return_value=mock_sdk_client)
    return TestClient(create_rest_app(client_getter=getter))


def test_health(rest_client):
    response = rest_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "xert-api"}


@patch("xert_mcp.rest_api.sdk_training")
def test_training_info(mock_sdk, rest_client, training_info_payload, mock_sdk_client):
    mock_sdk.get_training_info.return_value = TrainingInfo.from_dict(training_info_payload)

    response = rest_client.get("/api/training-info", params={"format": "erg"})

    assert response.status_code == 200
    body = response.json()
    assert body["signature"]["ftp"] == 265.4
    assert body["targetXSS"]["total"] == 77.0
    assert body["wotd"]["workoutId"] == "ISm75NAmocJ7eUHr"
    mock_sdk.get_training_info.assert_called_once_with(mock_sdk_client, "erg")


@patch("xert_mcp.rest_api.sdk_workouts")
def test_list_workouts(mock_sdk, rest_client):
    mock_sdk.list_workouts.return_value = [Workout(path="w1", name="Sweet Spot")]

    response = rest_client.get("/api/workouts")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "workouts": [{"path": "w1", "name": "Sweet Spot", "description": "", "last_modified": 0}],
    }


@patch("xert_mcp.rest_api.sdk_workouts")
def test_default_route_is_not_a_workout_id(mock_sdk, rest_client):
    mock_sdk.list_default_workouts.return_value = []

    response = rest_client.get("/api/workouts/default")

    assert response.status_code == 200
    mock_sdk.list_default_workouts.assert_called_once()
    mock_sdk.get_workout.assert_not_called()


@patch("xert_mcp.rest_api.sdk_workouts")
def test_get_workout(mock_sdk, rest_client, workout_detail_payload, mock_sdk_client):
    mock_sdk.get_workout.return_value = WorkoutDetail.from_dict(workout_detail_payload)

    response = rest_client.get("/api/workouts/ISm75NAmocJ7eUHr")

    assert response.status_code == 200
    assert len(response.json()["workout"]) == 2
    mock_sdk.get_workout.assert_called_once_with(mock_sdk_client, "ISm75NAmocJ7eUHr")


@patch("xert_mcp.rest_api.sdk_workouts")
def test_download_workout_erg(mock_sdk, rest_client, mock_sdk_client):
    mock_sdk.download_workout.return_value = "MIN:01:00 150\n"

    response = rest_client.get("/api/workouts/ABC123/download", params={"format": "erg"})

    assert response.status_code == 200
    assert response.text == "MIN:01:00 150\n"
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["content-disposition"] == 'attachment; filename="workout.erg"'
    mock_sdk.download_workout.assert_called_once_with(mock_sdk_client, "ABC123", "erg")


@patch("xert_mcp.rest_api.sdk_workouts")
def test_download_workout_defaults_to_zwo(mock_sdk, rest_client):
    mock_sdk.download_workout.return_value = "<workout_file/>"

    response = rest_client.get("/api/workouts/ABC123/download")

    assert response.headers["content-type"].startswith("application/xml")
    assert response.headers["content-disposition"] == 'attachment; filename="workout.zwo"'


@patch("xert_mcp.rest_api.sdk_workouts")
def test_download_workout_bad_format(mock_sdk, rest_client):
    response = rest_client.get("/api/workouts/ABC123/download", params={"format": "fit"})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to download workout"
    mock_sdk.download_workout.assert_not_called()


@patch("xert_mcp.rest_api.sdk_activities")
def test_list_activities(mock_sdk, rest_client, mock_sdk_client):
    mock_sdk.list_activities.return_value = [
        ActivitySummary(path="a1", name="Morning Ride", activity_type="Cycling"),
    ]

    response = rest_client.get(
        "/api/activities", params={"from": 1700000000, "to": 1700600000, "updated_from": 1700500000}
    )

    assert response.status_code == 200
    assert response.json()["activities"][0]["name"] == "Morning Ride"
    mock_sdk.list_activities.assert_called_once_with(mock_sdk_client, 1700000000, 1700600000, 1700500000)


@patch("xert_mcp.rest_api.sdk_activities")
def test_list_activities_defaults_to_last_week(mock_sdk, rest_client):
    mock_sdk.list_activities.return_value = []

    response = rest_client.get("/api/activities")

    assert response.status_code == 200
    _, from_ts, to_ts, updated_from = mock_sdk.list_activities.call_args.args
    assert to_ts - from_ts == 7 * 86400
    assert updated_from is None


@patch("xert_mcp.rest_api.sdk_activities")
def test_get_activity_with_session_data(mock_sdk, rest_client, activity_detail_payload, mock_sdk_client):
    activity_detail_payload["session_data"] = [{"unix_time": 1, "power": 200, "mpa": 900}]
    mock_sdk.get_activity.return_value = ActivityDetail.from_dict(activity_detail_payload)

    response = rest_client.get("/api/activities/a1", params={"session_data": "true"})

    assert response.status_code == 200
    body = response.json()
    assert body["summary"]["xss"] == 142.55
    assert body["session_data"][0]["mpa"] == 900
    mock_sdk.get_activity.assert_called_once_with(mock_sdk_client, "a1", True)


@patch("xert_mcp.rest_api.sdk_activities")
def test_get_activity_keeps_summary_fields(mock_sdk, rest_client, activity_detail_payload):
    activity_detail_payload["summary"].update({
        "tws": 312.5,
        "sp": 1.4,
        "sfd": 0.92,
        "progression": {
            "date": "2024-01-15",
            "tl": {"ftp": 66.2, "hie": 4.1, "pp": 1.3},
            "rl": {"ftp": 60.0, "hie": 3.8, "pp": 1.1},
            "form": 6.2,
        },
        "activity_map": "https://www.xertonline.com/map/abc",
    })
    mock_sdk.get_activity.return_value = ActivityDetail.from_dict(activity_detail_payload)

    response = rest_client.get("/api/activities/abc")

    summary = response.json()["summary"]
    assert summary["tws"] == 312.5
    assert summary["sfd"] == 0.92
    assert summary["progression"] == activity_detail_payload["summary"]["progression"]
    assert summary["activity_map"] == "https://www.xertonline.com/map/abc"
    assert "session_data" not in response.json()


@patch("xert_mcp.rest_api.sdk_workouts")
def test_get_workout_uses_xert_keys(mock_sdk, rest_client, workout_detail_payload):
    mock_sdk.get_workout.return_value = WorkoutDetail.from_dict(workout_detail_payload)

    body = rest_client.get("/api/workouts/w1").json()

    assert "intervals" not in body
    assert body["workout"][1]["power_rest"] == 140.0


@patch("xert_mcp.rest_api.sdk_activities")
def test_sdk_error_becomes_500(mock_sdk, rest_client):
    mock_sdk.get_activity.side_effect = requests.HTTPError("404 Client Error: Not Found")

    response = rest_client.get("/api/activities/missing")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch activity",
        "message": "404 Client Error: Not Found",
    }


def test_upload_not_implemented(rest_client):
    response = rest_client.post("/api/upload")

    assert response.status_code == 501
    assert response.json()["error"] == "File upload not yet implemented via REST API"


def test_cors_headers(rest_client):
    response = rest_client.get("/health", headers={"Origin": "https://chat.openai.com"})

    assert response.headers["access-control-allow-origin"] == "*"
