"""
Entry point for running xert_mcp as a module.

Usage:
    python -m xert_mcp                    # Run MCP server with stdio transport
    python -m xert_mcp --http             # Run MCP server with HTTP transport
    python -m xert_mcp --http --port 9000 # Run HTTP on custom port
    python -m xert_mcp --rest             # Run the REST API proxy (port 3000)
"""

import argparse
import os
import sys

from xert_mcp import SERVER_NAME, configure_logging, create_app


def main():
    parser = argparse.ArgumentParser(
        description="XERT MCP Server - XERT Online training data for LLM assistants"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    mode.add_argument(
        "--rest",
        action="store_true",
        help="Run the REST API proxy instead of the MCP server"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for HTTP transport (default: 8081, REST: 3000)"
    )

    args = parser.parse_args()

    if args.rest:
        from xert_mcp import rest_api

        os.environ["HOST"] = args.host
        os.environ["PORT"] = str(args.port or 3000)
        rest_api.main()
        return

    # Set environment variables for the app
    if args.http:
        os.environ["MCP_TRANSPORT"] = "http"
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port or 8081)
    else:
        os.environ["MCP_TRANSPORT"] = "stdio"

    configure_logging()
    app = create_app()

    if args.http:
        # stdout is free in http mode; stdio mode must keep it for JSON-RPC
        print(f"Starting {SERVER_NAME} on http://{args.host}:{args.port or 8081}/mcp")
        app.run(transport="http", host=args.host, port=args.port or 8081)
    else:
        print(f"Starting {SERVER_NAME} on stdio", file=sys.stderr)
        app.run()


if __name__ == "__main__":
    main()
