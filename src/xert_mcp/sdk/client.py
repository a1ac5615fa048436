"""
XERT HTTP Client.

Handles HTTP transport, bearer authentication and the refresh-on-401 cycle.
All endpoint-specific logic lives in the sibling modules (training, workouts,
activities).
"""

import logging
from typing import Any, Dict, Optional

import requests

from xert_mcp.sdk import auth as sdk_auth
from xert_mcp.sdk.credentials import CredentialStore, TokenPair
from xert_mcp.sdk.errors import ReauthenticationRequired, RefreshTokenExpiredError

logger = logging.getLogger(__name__)

XERT_BASE_URL = sdk_auth.XERT_BASE_URL

SETUP_HINT = "Please run: xert-setup-auth"


class XertClient:
    """
    XERT OAuth API transport.

    Owns a CredentialStore. Every authenticated request carries the current
    access token; a 401 triggers exactly one refresh-and-retry per call.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        base_url: str = XERT_BASE_URL,
        session: Optional[requests.Session] = None,
    ):
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

    @property
    def credentials(self) -> CredentialStore:
        return self._credentials

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def is_logged_in(self) -> bool:
        return self._credentials.access_token is not None

    def refresh(self) -> TokenPair:
        """
        Exchange the refresh token for a new pair and persist it.

        Raises:
            ReauthenticationRequired: If no refresh token is stored
            RefreshTokenExpiredError: If the token endpoint answers 401
            requests.RequestException: Any other refresh failure, unchanged
        """
        refresh_token = self._credentials.refresh_token
        if not refresh_token:
            raise ReauthenticationRequired(f"No refresh token available. {SETUP_HINT}")

        logger.info("Refreshing XERT access token")
        try:
            token = sdk_auth.refresh_grant(self._session, refresh_token)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 401:
                logger.warning("XERT refresh token rejected")
                raise RefreshTokenExpiredError(f"Refresh token expired. {SETUP_HINT}") from e
            raise

        pair = TokenPair(token.access_token, token.refresh_token)
        self._credentials.save(pair)
        logger.info("XERT token refreshed successfully")
        return pair

    def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
        files: Optional[Dict] = None,
        require_auth: bool = True,
    ) -> requests.Response:
        headers = {}
        if files is None:
            headers["Content-Type"] = "application/json"
        access_token = self._credentials.access_token
        if require_auth and access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        return self._session.request(
            method, url, headers=headers, params=params, data=data, files=files,
        )

    def make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
        files: Optional[Dict] = None,
        require_auth: bool = True,
    ) -> requests.Response:
        """
        Make an API request, refreshing the access token once on 401.

        Args:
            method: HTTP method (GET/POST)
            endpoint: API endpoint path (e.g. "oauth/workouts")
            params: Query parameters
            data: Form fields
            files: Multipart files; must be replayable (bytes, not streams)
            require_auth: Attach the bearer token and recover from 401

        Returns:
            The successful requests.Response

        Raises:
            requests.HTTPError: On a non-2xx final response, including a
                second 401 after the refresh
            RefreshTokenExpiredError: If the refresh exchange answers 401
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        retried = False

        while True:
            response = self._send(method, url, params, data, files, require_auth)
            if response.status_code != 401 or retried or not require_auth:
                break
            logger.info("XERT rejected access token for %s %s", method, endpoint)
            self.refresh()
            retried = True

        response.raise_for_status()
        return response

    def get_json(self, endpoint: str, params: Optional[Dict] = None, require_auth: bool = True) -> Dict[str, Any]:
        """GET an endpoint and decode its JSON body."""
        return self.make_request("GET", endpoint, params=params, require_auth=require_auth).json()
