"""
XERT credential store.

Keeps the current access/refresh token pair in memory and mirrors it to a
flat KEY=value settings file (.env). The process environment takes
precedence over the file when loading.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "XERT_ACCESS_TOKEN"
REFRESH_TOKEN_KEY = "XERT_REFRESH_TOKEN"


@dataclass
class TokenPair:
    """Access/refresh token pair. Either field may be None before bootstrap."""
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None


def _line_key(line: str) -> Optional[str]:
    """Key of a KEY=value line, accepting an `export ` prefix."""
    if "=" not in line:
        return None
    key = line.split("=", 1)[0].strip()
    if key.startswith("export "):
        key = key[len("export "):].strip()
    return key


def upsert_env_content(content: str, updates: Dict[str, str]) -> str:
    """
    Set KEY=value lines in .env file content.

    An existing line for a key is replaced in place and any later duplicate
    of it is dropped. Keys not present are appended. Blank-line runs are
    collapsed to one blank line and the result ends with exactly one newline.

    Args:
        content: Current file content (may be empty)
        updates: Keys and values to write

    Returns:
        The new file content
    """
    lines: List[str] = []
    written = set()

    for line in content.splitlines():
        key = _line_key(line)
        if key in updates:
            if key in written:
                continue
            lines.append(f"{key}={updates[key]}")
            written.add(key)
        else:
            lines.append(line)

    missing = [key for key in updates if key not in written]
    if missing:
        lines.append("")
        lines.extend(f"{key}={updates[key]}" for key in missing)

    normalized: List[str] = []
    for line in lines:
        if not line.strip() and (not normalized or not normalized[-1].strip()):
            continue
        normalized.append(line)
    while normalized and not normalized[-1].strip():
        normalized.pop()

    return "\n".join(normalized) + "\n"


class CredentialStore:
    """
    Single source of truth for the current XERT token pair.

    load() must be called explicitly by the owner; nothing is read on
    construction.
    """

    def __init__(self, env_path: Union[str, Path]):
        self._env_path = Path(env_path)
        self._pair = TokenPair()

    @property
    def env_path(self) -> Path:
        return self._env_path

    @property
    def access_token(self) -> Optional[str]:
        return self._pair.access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._pair.refresh_token

    @property
    def pair(self) -> TokenPair:
        return TokenPair(self._pair.access_token, self._pair.refresh_token)

    def load(self) -> TokenPair:
        """
        Read the token pair from the environment, then the settings file.

        Missing values are None. Never raises for a missing file or key.
        """
        file_values = {}
        if self._env_path.exists():
            file_values = dotenv_values(self._env_path)

        self._pair = TokenPair(
            access_token=os.environ.get(ACCESS_TOKEN_KEY) or file_values.get(ACCESS_TOKEN_KEY) or None,
            refresh_token=os.environ.get(REFRESH_TOKEN_KEY) or file_values.get(REFRESH_TOKEN_KEY) or None,
        )
        logger.debug(
            "Loaded XERT tokens from %s (access=%s, refresh=%s)",
            self._env_path,
            self._pair.access_token is not None,
            self._pair.refresh_token is not None,
        )
        return self.pair

    def save(self, pair: TokenPair) -> None:
        """
        Persist a token pair to the settings file, memory and os.environ.

        The whole file is rewritten; there is no temp-file swap or fsync.
        """
        content = ""
        if self._env_path.exists():
            content = self._env_path.read_text(encoding="utf-8")

        content = upsert_env_content(content, {
            ACCESS_TOKEN_KEY: pair.access_token,
            REFRESH_TOKEN_KEY: pair.refresh_token,
        })
        self._env_path.parent.mkdir(parents=True, exist_ok=True)
        self._env_path.write_text(content, encoding="utf-8")

        self._pair = TokenPair(pair.access_token, pair.refresh_token)
        os.environ[ACCESS_TOKEN_KEY] = pair.access_token
        os.environ[REFRESH_TOKEN_KEY] = pair.refresh_token
        logger.info("Saved XERT tokens to %s", self._env_path)
