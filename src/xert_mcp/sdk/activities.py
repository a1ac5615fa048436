"""
XERT activities SDK functions.
"""

from pathlib import Path
from typing import List, Optional

from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.types import ActivityDetail, ActivitySummary, UploadResult


def list_activities(
    client: XertClient,
    from_ts: int,
    to_ts: int,
    updated_from: Optional[int] = None,
) -> List[ActivitySummary]:
    """
    List activities in a time range, in server order.

    GET oauth/activity

    Args:
        from_ts: Range start, unix seconds
        to_ts: Range end, unix seconds
        updated_from: Only activities updated since, unix seconds

    Returns:
        List of ActivitySummary
    """
    params = {"from": int(from_ts), "to": int(to_ts)}
    if updated_from:
        params["updated_from"] = int(updated_from)

    data = client.get_json("oauth/activity", params=params)
    return [ActivitySummary.from_dict(a) for a in data.get("activities") or []]


def get_activity(
    client: XertClient,
    activity_id: str,
    include_session_data: bool = False,
) -> ActivityDetail:
    """
    Get an activity's XSS, power and signature metrics.

    GET oauth/activity/{activity_id}

    Args:
        activity_id: Activity id/path
        include_session_data: Also fetch per-second samples (large)

    Raises:
        ValueError: If activity_id is empty
    """
    if not activity_id:
        raise ValueError("activity_id is required")

    params = {"include_session_data": 1} if include_session_data else {}
    return ActivityDetail.from_dict(client.get_json(f"oauth/activity/{activity_id}", params=params))


def upload_fit_file(client: XertClient, file_path: str, name: Optional[str] = None) -> UploadResult:
    """
    Upload a FIT file for analysis.

    POST oauth/upload (multipart: file, name)

    Args:
        file_path: Path to a .fit file
        name: Activity name (XERT defaults to the file name)

    Raises:
        ValueError: If file_path is empty or not a .fit file
        FileNotFoundError: If the file does not exist
    """
    if not file_path:
        raise ValueError("file_path is required")

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")
    if path.suffix.lower() != ".fit":
        raise ValueError("Only .FIT files are supported")

    # Read up front so the body can be replayed after a token refresh
    files = {"file": (path.name, path.read_bytes(), "application/octet-stream")}
    data = {"name": name} if name else None

    response = client.make_request("POST", "oauth/upload", data=data, files=files)
    return UploadResult.from_dict(response.json())
