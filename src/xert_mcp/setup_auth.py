"""
XERT authentication setup.

Exchanges your XERT account credentials for an OAuth token pair and
stores it in the settings file used by the MCP server and REST proxy.

The password is never taken from the command line: it is read from
XERT_PASSWORD when set, otherwise prompted for without echo.

Usage:
    xert-setup-auth                                # prompts for email/password
    xert-setup-auth --username me@example.com      # prompts for password only
    xert-setup-auth --env-file ~/.config/xert/.env
"""

import argparse
import getpass
import os
import sys
from pathlib import Path

import requests

from xert_mcp.client_factory import get_env_path
from xert_mcp.sdk import auth as sdk_auth
from xert_mcp.sdk.credentials import CredentialStore, TokenPair

SECONDS_PER_DAY = 86400
PASSWORD_ENV = "XERT_PASSWORD"


def authenticate(username: str, password: str, env_path: Path) -> sdk_auth.TokenResponse:
    """
    Run the password grant and persist the resulting token pair.

    Returns:
        TokenResponse from XERT

    Raises:
        ValueError: If credentials are missing
        requests.HTTPError: If XERT rejects the request
    """
    with requests.Session() as session:
        token = sdk_auth.password_grant(session, username, password)

    CredentialStore(env_path).save(TokenPair(token.access_token, token.refresh_token))
    return token


def _describe_http_error(error: requests.HTTPError) -> str:
    status = error.response.status_code if error.response is not None else None
    if status == 401:
        return "Authentication failed: Invalid email or password"
    if status == 400:
        return "Authentication failed: Bad request - check your credentials"
    return f"Authentication failed: {status} - {error}"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="XERT MCP Server - authenticate with XERT and store OAuth tokens"
    )
    parser.add_argument(
        "--username",
        help="XERT account email (prompted if omitted)"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Settings file to write tokens to (default: $XERT_ENV_FILE or ./.env)"
    )
    args = parser.parse_args(argv)

    env_path = args.env_file or get_env_path()

    print("XERT MCP Server - Authentication Setup")
    print("You need your XERT account credentials (email and password).")
    print()

    username = (args.username or input("Enter your XERT email: ")).strip()
    if not username:
        print("Email is required", file=sys.stderr)
        return 1

    password = os.environ.get(PASSWORD_ENV) or getpass.getpass("Enter your XERT password: ")
    if not password:
        print("Password is required", file=sys.stderr)
        return 1

    print("Authenticating with XERT...")
    try:
        token = authenticate(username, password, env_path)
    except requests.HTTPError as e:
        print(_describe_http_error(e), file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Authentication successful!")
    print()
    print(f"   Token Type: {token.token_type}")
    print(f"   Expires In: {token.expires_in // SECONDS_PER_DAY} days")
    print(f"   Scope: {token.scope}")
    print()
    print(f"Tokens saved to: {env_path}")
    print("You can now start the server: xert-mcp")
    return 0


if __name__ == "__main__":
    sys.exit(main())
