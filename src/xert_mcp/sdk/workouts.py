"""
XERT workout SDK functions.
"""

from typing import List

from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.types import Workout, WorkoutDetail, WorkoutFormat


def list_workouts(client: XertClient) -> List[Workout]:
    """
    List the athlete's saved workouts, in server order.

    GET oauth/workouts
    """
    data = client.get_json("oauth/workouts")
    return [Workout.from_dict(w) for w in data.get("workouts") or []]


def list_default_workouts(client: XertClient) -> List[Workout]:
    """
    List XERT's default workout library. No bearer token is sent.

    GET oauth/workout
    """
    data = client.get_json("oauth/workout", require_auth=False)
    return [Workout.from_dict(w) for w in data.get("workouts") or []]


def get_workout(client: XertClient, workout_id: str) -> WorkoutDetail:
    """
    Get a workout with intervals resolved against the current signature.

    GET oauth/workout/{workout_id}

    Raises:
        ValueError: If workout_id is empty
    """
    if not workout_id:
        raise ValueError("workout_id is required")

    return WorkoutDetail.from_dict(client.get_json(f"oauth/workout/{workout_id}"))


def download_workout(client: XertClient, workout_id: str, format: str = "zwo") -> str:
    """
    Download a workout file as raw text.

    GET oauth/workout-download/{workout_id}.{format}

    Args:
        workout_id: Workout id/path
        format: "zwo" (Zwift XML, default) or "erg"

    Returns:
        File content exactly as served
    """
    if not workout_id:
        raise ValueError("workout_id is required")
    fmt = WorkoutFormat.parse(format)

    response = client.make_request("GET", f"oauth/workout-download/{workout_id}.{fmt.value}")
    return response.text
