"""
XERT SDK exceptions.

Transport failures are not wrapped: requests.RequestException and
requests.HTTPError reach the caller unchanged.
"""


class XertError(Exception):
    """Base XERT SDK error."""
    pass


class ReauthenticationRequired(XertError):
    """No usable refresh token. Run xert-setup-auth to bootstrap new tokens."""
    pass


class RefreshTokenExpiredError(ReauthenticationRequired):
    """The token endpoint rejected the refresh token (HTTP 401)."""
    pass
