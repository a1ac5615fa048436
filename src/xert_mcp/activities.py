"""
Activity tools for XERT MCP server.

Provides tools for listing, inspecting and uploading XERT activities.
"""

import logging
from typing import Optional

from fastmcp.exceptions import ToolError

from xert_mcp.client_factory import get_client
from xert_mcp.formatters import (
    format_activity_detail,
    format_activity_list,
    format_session_summary,
    format_upload_result,
)
from xert_mcp.sdk import activities as sdk_activities
from xert_mcp.utils import days_ago_range, parse_timestamp

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def xert_list_activities(
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        days_ago: Optional[int] = None,
    ) -> str:
        """
        List your XERT activities within a time range.

        Returns activity names, types, dates, and IDs. Use the activity ID
        with xert_get_activity to get detailed metrics.

        Args:
            from_date: Start date in ISO format (e.g. "2024-01-01") or unix timestamp
            to_date: End date in ISO format (e.g. "2024-12-31") or unix timestamp
            days_ago: Alternative: activities from the last N days (overrides from/to)
        """
        if days_ago:
            from_ts, to_ts = days_ago_range(days_ago)
        elif from_date and to_date:
            try:
                from_ts = parse_timestamp(from_date)
                to_ts = parse_timestamp(to_date)
            except ValueError as e:
                raise ToolError(f"Error: {e}") from e
        else:
            raise ToolError('Error: Either provide "from_date" and "to_date", or use "days_ago"')

        try:
            activities = sdk_activities.list_activities(get_client(), from_ts, to_ts)
        except Exception as e:
            logger.error(f"Error listing activities: {e}")
            raise ToolError(f"Error listing activities: {e}") from e

        return format_activity_list(activities)

    @app.tool()
    async def xert_get_activity(activity_id: str, include_session_data: bool = False) -> str:
        """
        Get detailed information about a specific XERT activity.

        Includes XSS metrics, power data, fitness signature changes,
        breakthroughs, and focus type. Optionally summarizes the per-second
        MPA (Maximum Power Available) session data.

        Args:
            activity_id: The activity ID/path from xert_list_activities
            include_session_data: Include per-second MPA/power session data (can be large)
        """
        if not activity_id:
            raise ToolError("Error: activity_id is required")

        try:
            activity = sdk_activities.get_activity(get_client(), activity_id, include_session_data)
        except Exception as e:
            logger.error(f"Error fetching activity {activity_id}: {e}")
            raise ToolError(f"Error fetching activity: {e}") from e

        if not activity.success:
            raise ToolError("Failed to retrieve activity from XERT.")

        output = format_activity_detail(activity)
        if include_session_data and activity.session_data:
            output += "\n\n" + format_session_summary(activity.session_data)

        return output

    @app.tool()
    async def xert_upload_fit(file_path: str, name: Optional[str] = None) -> str:
        """
        Upload a FIT file to XERT for analysis.

        The activity will be processed and added to your XERT account. XERT
        calculates XSS, detects breakthroughs, and updates your fitness
        signature if applicable.

        Args:
            file_path: Absolute path to the .FIT file to upload
            name: Optional name for the activity (defaults to filename)
        """
        try:
            result = sdk_activities.upload_fit_file(get_client(), file_path, name)
        except (ValueError, FileNotFoundError) as e:
            raise ToolError(f"Error: {e}") from e
        except Exception as e:
            logger.error(f"Error uploading FIT file {file_path}: {e}")
            raise ToolError(f"Error uploading FIT file: {e}") from e

        if not result.success:
            raise ToolError("Failed to upload FIT file to XERT.")

        return format_upload_result(result)

    return app
