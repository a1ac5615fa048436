"""
XERT training info SDK functions.
"""

from typing import Optional

from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.types import TrainingInfo, WorkoutFormat


def get_training_info(client: XertClient, format: Optional[str] = None) -> TrainingInfo:
    """
    Get fitness signature, training status, load, target XSS and WOTD.

    GET oauth/training_info

    Args:
        format: "zwo" or "erg"; only changes the WOTD download URL

    Returns:
        TrainingInfo
    """
    params = {}
    if format:
        params["format"] = WorkoutFormat.parse(format).value

    return TrainingInfo.from_dict(client.get_json("oauth/training_info", params=params))
