"""
XERT Online Low-Level SDK.

Thin typed wrapper over the XERT OAuth HTTP API.
Each function maps 1:1 to a XERT endpoint.
"""

from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.credentials import CredentialStore, TokenPair
from xert_mcp.sdk.errors import (
    XertError,
    ReauthenticationRequired,
    RefreshTokenExpiredError,
)
from xert_mcp.sdk.types import (
    WorkoutFormat,
    FitnessSignature,
    TrainingLoad,
    TrainingInfo,
    Workout,
    WorkoutDetail,
    ActivitySummary,
    ActivityDetail,
    UploadResult,
)

__all__ = [
    "XertClient",
    "CredentialStore",
    "TokenPair",
    "XertError",
    "ReauthenticationRequired",
    "RefreshTokenExpiredError",
    "WorkoutFormat",
    "FitnessSignature",
    "TrainingLoad",
    "TrainingInfo",
    "Workout",
    "WorkoutDetail",
    "ActivitySummary",
    "ActivityDetail",
    "UploadResult",
]
