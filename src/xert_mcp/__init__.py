"""
MCP Server for XERT Online Training Data

Provides tools to read the XERT fitness signature, training load, workouts
and activities, and to upload FIT files, via the Model Context Protocol (MCP).

Authentication uses XERT's OAuth password/refresh-token flow. Run
xert-setup-auth once to store a token pair in .env; the client refreshes
it automatically when XERT rejects the access token.

Supports two transport modes:
- stdio: For local usage from an MCP client (default)
- http: Streamable HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from xert_mcp import training
from xert_mcp import workouts
from xert_mcp import activities

SERVER_NAME = "xert-mcp-server"
__version__ = "1.0.0"


def configure_logging() -> None:
    """Log to stderr so stdio transport framing stays clean."""
    logging.basicConfig(
        level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP(f"{SERVER_NAME} v{__version__}")

    # Register training info tools
    app = training.register_tools(app)

    # Register workout tools
    app = workouts.register_tools(app)

    # Register activity tools
    app = activities.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    configure_logging()
    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
