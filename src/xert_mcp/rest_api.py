"""
XERT REST API proxy.

Plain HTTP routes over the XERT SDK for callers that cannot speak MCP
(e.g. ChatGPT custom GPT actions). JSON bodies are the SDK
records serialized back to XERT's key names with to_dict().

Run:
    xert-rest-api                 # 0.0.0.0:3000
    PORT=8000 xert-rest-api
"""

import logging
import os
from typing import Callable

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from xert_mcp.client_factory import get_client
from xert_mcp.sdk import activities as sdk_activities
from xert_mcp.sdk import training as sdk_training
from xert_mcp.sdk import workouts as sdk_workouts
from xert_mcp.sdk.client import XertClient
from xert_mcp.sdk.types import WorkoutFormat
from xert_mcp.utils import days_ago_range

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_DAYS = 7


def _error(summary: str, exc: Exception, status_code: int = 500) -> JSONResponse:
    logger.error(f"{summary}: {exc}")
    return JSONResponse({"error": summary, "message": str(exc)}, status_code=status_code)


def _int_param(request: Request, name: str):
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def create_rest_app(client_getter: Callable[[], XertClient] = get_client) -> Starlette:
    """
    Build the Starlette app.

    Args:
        client_getter: Returns the XertClient to use (the process-wide one by default)
    """

    async def health(request: Request):
        return JSONResponse({"status": "ok", "service": "xert-api"})

    async def training_info(request: Request):
        try:
            fmt = request.query_params.get("format")
            info = await run_in_threadpool(sdk_training.get_training_info, client_getter(), fmt)
            return JSONResponse(info.to_dict())
        except Exception as e:
            return _error("Failed to fetch training info", e)

    async def list_workouts(request: Request):
        try:
            workouts = await run_in_threadpool(sdk_workouts.list_workouts, client_getter())
            return JSONResponse({"success": True, "workouts": [w.to_dict() for w in workouts]})
        except Exception as e:
            return _error("Failed to fetch workouts", e)

    async def list_default_workouts(request: Request):
        try:
            workouts = await run_in_threadpool(sdk_workouts.list_default_workouts, client_getter())
            return JSONResponse({"success": True, "workouts": [w.to_dict() for w in workouts]})
        except Exception as e:
            return _error("Failed to fetch default workouts", e)

    async def get_workout(request: Request):
        try:
            workout_id = request.path_params["workout_id"]
            workout = await run_in_threadpool(sdk_workouts.get_workout, client_getter(), workout_id)
            return JSONResponse(workout.to_dict())
        except Exception as e:
            return _error("Failed to fetch workout", e)

    async def download_workout(request: Request):
        try:
            workout_id = request.path_params["workout_id"]
            fmt = WorkoutFormat.parse(request.query_params.get("format") or "zwo")
            content = await run_in_threadpool(
                sdk_workouts.download_workout, client_getter(), workout_id, fmt.value
            )
            return Response(
                content,
                media_type=fmt.content_type,
                headers={"Content-Disposition": f'attachment; filename="workout.{fmt.value}"'},
            )
        except Exception as e:
            return _error("Failed to download workout", e)

    async def list_activities(request: Request):
        try:
            default_from, default_to = days_ago_range(DEFAULT_ACTIVITY_DAYS)
            from_ts = _int_param(request, "from") or default_from
            to_ts = _int_param(request, "to") or default_to
            updated_from = _int_param(request, "updated_from")

            activities = await run_in_threadpool(
                sdk_activities.list_activities, client_getter(), from_ts, to_ts, updated_from
            )
            return JSONResponse({"success": True, "activities": [a.to_dict() for a in activities]})
        except Exception as e:
            return _error("Failed to fetch activities", e)

    async def get_activity(request: Request):
        try:
            activity_id = request.path_params["activity_id"]
            include_session_data = request.query_params.get("session_data") == "true"
            activity = await run_in_threadpool(
                sdk_activities.get_activity, client_getter(), activity_id, include_session_data
            )
            return JSONResponse(activity.to_dict())
        except Exception as e:
            return _error("Failed to fetch activity", e)

    async def upload(request: Request):
        return JSONResponse(
            {
                "error": "File upload not yet implemented via REST API",
                "message": "Please use the MCP server or XERT website for file uploads",
            },
            status_code=501,
        )

    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/api/training-info", training_info, methods=["GET"]),
        Route("/api/workouts", list_workouts, methods=["GET"]),
        Route("/api/workouts/default", list_default_workouts, methods=["GET"]),
        Route("/api/workouts/{workout_id}", get_workout, methods=["GET"]),
        Route("/api/workouts/{workout_id}/download", download_workout, methods=["GET"]),
        Route("/api/activities", list_activities, methods=["GET"]),
        Route("/api/activities/{activity_id}", get_activity, methods=["GET"]),
        Route("/api/upload", upload, methods=["POST"]),
    ]

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        ),
    ]

    return Starlette(routes=routes, middleware=middleware)


def main():
    """Run the REST proxy with uvicorn.

    Environment variables:
    - HOST: Host to bind to (default: '0.0.0.0')
    - PORT: Port (default: 3000)
    """
    import uvicorn

    from xert_mcp import configure_logging

    configure_logging()
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "3000"))

    logger.info(f"XERT API server running on http://{host}:{port}")
    logger.info(f"Health check: http://{host}:{port}/health")
    uvicorn.run(create_rest_app(), host=host, port=port)


if __name__ == "__main__":
    main()
