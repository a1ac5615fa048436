"""
Shared utility functions for XERT MCP server.

Timestamp conversions used by the tool and REST layers.
"""

import time
from datetime import datetime, timezone
from typing import Optional, Tuple

SECONDS_PER_DAY = 24 * 60 * 60


def parse_timestamp(value) -> int:
    """Convert an ISO date/datetime string or unix seconds to unix seconds.

    Naive dates and datetimes are taken as UTC.

    Args:
        value: "2024-01-01", "2024-01-01T08:00:00", "1700000000" or an int

    Returns:
        Unix timestamp in seconds

    Raises:
        ValueError: If the value is neither a number nor an ISO date
    """
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            raise ValueError(f"Invalid date '{value}'. Use YYYY-MM-DD or a unix timestamp")

    text = str(value).strip()
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        pass

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"Invalid date '{value}'. Use YYYY-MM-DD or a unix timestamp")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


def days_ago_range(days: float, now: Optional[float] = None) -> Tuple[int, int]:
    """Return (from, to) unix seconds covering the last `days` days."""
    now = time.time() if now is None else now
    return int(now - days * SECONDS_PER_DAY), int(now)
