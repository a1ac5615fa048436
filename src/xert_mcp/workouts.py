"""
Workout tools for XERT MCP server.

List, inspect and export workouts.
"""

import logging
from typing import Literal

from fastmcp.exceptions import ToolError

from xert_mcp.client_factory import get_client
from xert_mcp.formatters import format_workout_detail, format_workout_list
from xert_mcp.sdk import workouts as sdk_workouts

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register workout tools with the MCP app."""

    @app.tool()
    async def xert_list_workouts() -> str:
        """
        List all your saved XERT workouts.

        Returns workout names, IDs, and last modified dates. Use the workout ID
        with xert_get_workout to get details or xert_download_workout to export.
        """
        try:
            workouts = sdk_workouts.list_workouts(get_client())
        except Exception as e:
            logger.error(f"Error listing workouts: {e}")
            raise ToolError(f"Error listing workouts: {e}") from e

        return format_workout_list(workouts)

    @app.tool()
    async def xert_list_default_workouts() -> str:
        """
        List XERT's default workout library (available to every account).
        """
        try:
            workouts = sdk_workouts.list_default_workouts(get_client())
        except Exception as e:
            logger.error(f"Error listing default workouts: {e}")
            raise ToolError(f"Error listing default workouts: {e}") from e

        return format_workout_list(workouts)

    @app.tool()
    async def xert_get_workout(workout_id: str) -> str:
        """
        Get detailed information about a specific XERT workout.

        Includes all intervals, power targets, and durations. The workout is
        resolved using your current fitness signature.

        Args:
            workout_id: The workout ID/path from xert_list_workouts (e.g. "ISm75NAmocJ7eUHr")
        """
        if not workout_id:
            raise ToolError("Error: workout_id is required")

        try:
            workout = sdk_workouts.get_workout(get_client(), workout_id)
        except Exception as e:
            logger.error(f"Error fetching workout {workout_id}: {e}")
            raise ToolError(f"Error fetching workout: {e}") from e

        if not workout.success:
            raise ToolError("Failed to retrieve workout from XERT.")

        return format_workout_detail(workout)

    @app.tool()
    async def xert_download_workout(
        workout_id: str,
        format: Literal["zwo", "erg"] = "zwo",
    ) -> str:
        """
        Download a XERT workout file in ZWO (Zwift) or ERG format.

        Returns the raw workout file content that can be saved or imported
        into your trainer software.

        Args:
            workout_id: The workout ID/path from xert_list_workouts
            format: "zwo" for Zwift, "erg" for other trainers (default: zwo)
        """
        if not workout_id:
            raise ToolError("Error: workout_id is required")

        try:
            content = sdk_workouts.download_workout(get_client(), workout_id, format)
        except Exception as e:
            logger.error(f"Error downloading workout {workout_id}: {e}")
            raise ToolError(f"Error downloading workout: {e}") from e

        return f"Workout file ({format.upper()}):\n\n{content}"

    return app
