"""
Client factory for XERT MCP server.

Owns the single XertClient of the process. The client is built on first
use: its CredentialStore is created and load() is called explicitly.
Nothing is read at import time.

Settings file location:
- XERT_ENV_FILE environment variable, or
- .env in the current working directory
"""

import logging
import os
from pathlib import Path
from typing import Optional

from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.credentials import CredentialStore

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"

_client: Optional[XertClient] = None


def get_env_path() -> Path:
    """Path of the KEY=value settings file holding the XERT tokens."""
    return Path(os.environ.get("XERT_ENV_FILE", DEFAULT_ENV_FILE)).expanduser().resolve()


def create_client(env_path: Optional[Path] = None) -> XertClient:
    """
    Build a XertClient with freshly loaded credentials.

    Args:
        env_path: Settings file (defaults to get_env_path())

    Returns:
        XertClient owning its CredentialStore
    """
    store = CredentialStore(env_path or get_env_path())
    pair = store.load()
    if not pair.access_token:
        logger.warning(
            "No XERT access token found in environment or %s. Run xert-setup-auth.",
            store.env_path,
        )
    return XertClient(store)


def get_client() -> XertClient:
    """
    Get the process-wide XERT client, creating it on first call.

    Usage in tools:
        @app.tool()
        async def xert_list_workouts() -> str:
            client = get_client()
            return format_workout_list(sdk_workouts.list_workouts(client))
    """
    global _client
    if _client is None:
        _client = create_client()
    return _client


def reset_client() -> None:
    """Drop the process-wide client so the next get_client() reloads tokens."""
    global _client
    _client = None
