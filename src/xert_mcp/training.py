"""
Training info tools for XERT MCP server.

Fitness signature, training status, load and workout of the day.
"""

import logging
from typing import Literal, Optional

from fastmcp.exceptions import ToolError

from xert_mcp.client_factory import get_client
from xert_mcp.formatters import format_training_info
from xert_mcp.sdk import training as sdk_training

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register training info tools with the MCP app."""

    @app.tool()
    async def xert_get_training_info(format: Optional[Literal["zwo", "erg"]] = None) -> str:
        """
        Get your current XERT fitness signature (FTP, LTP, HIE, PP), training status,
        training load (XSS), target XSS, and workout of the day (WOTD).

        This is the most important tool for understanding your current fitness
        and training recommendations.

        Args:
            format: Workout file format for the WOTD download URL (optional).
                Use "zwo" for Zwift or "erg" for other trainers.

        Returns:
            Formatted training info
        """
        try:
            info = sdk_training.get_training_info(get_client(), format)
        except Exception as e:
            logger.error(f"Error fetching training info: {e}")
            raise ToolError(f"Error fetching training info: {e}") from e

        if not info.success:
            raise ToolError("Failed to retrieve training info from XERT.")

        return format_training_info(info)

    return app
