"""
XERT OAuth token endpoint.

Both grants post form data to the same endpoint with the fixed public
client credentials and return the same response shape.
"""

from dataclasses import dataclass
from typing import Any, Dict

import requests

XERT_BASE_URL = "https://www.xertonline.com"
TOKEN_URL = f"{XERT_BASE_URL}/oauth/token"

# Public (non-secret) client identity required by the XERT token endpoint
PUBLIC_CLIENT = ("xert_public", "xert_public")


@dataclass
class TokenResponse:
    """XERT token endpoint response."""
    access_token: str
    refresh_token: str
    expires_in: int = 0
    token_type: str = "bearer"
    scope: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TokenResponse":
        return cls(
            access_token=d["access_token"],
            refresh_token=d["refresh_token"],
            expires_in=d.get("expires_in", 0),
            token_type=d.get("token_type", "bearer"),
            scope=d.get("scope") or "",
        )


def request_token(session: requests.Session, data: Dict[str, str]) -> TokenResponse:
    """
    POST oauth/token

    Raises:
        requests.HTTPError: On a non-2xx response (401 for rejected credentials)
    """
    response = session.request(
        "POST",
        TOKEN_URL,
        data=data,
        auth=PUBLIC_CLIENT,
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    response.raise_for_status()
    return TokenResponse.from_dict(response.json())


def password_grant(session: requests.Session, username: str, password: str) -> TokenResponse:
    """
    Exchange XERT account credentials for a token pair.

    Args:
        session: requests session to send with
        username: XERT account email/username
        password: XERT account password

    Returns:
        TokenResponse with access and refresh tokens

    Raises:
        ValueError: If username or password is empty
    """
    if not username or not password:
        raise ValueError("Missing credentials")

    return request_token(session, {
        "grant_type": "password",
        "username": username,
        "password": password,
    })


def refresh_grant(session: requests.Session, refresh_token: str) -> TokenResponse:
    """Exchange a refresh token for a new token pair."""
    if not refresh_token:
        raise ValueError("Missing refresh token")

    return request_token(session, {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
    })
