import argparse
import logging
from datetime import UTC, datetime

from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import JSONResponse

from wheels_router_mcp import __version__
from wheels_router_mcp.app import mcp

# Register tools
from wheels_router_mcp.tools import location_tools, trip_tools  # noqa: F401

SERVER_NAME = "wheels-router-mcp"
TRANSPORTS = ("stdio", "sse", "streamable-http")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


@mcp.tool()
def health() -> HealthResponse:
    """Check if the Wheels Router MCP server is running and healthy.

    Returns the server status, version, and current timestamp.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


@mcp.custom_route("/health", methods=["GET"])
async def health_endpoint(request: Request) -> JSONResponse:
    """HTTP health check for the sse and streamable-http transports."""
    return JSONResponse(
        {
            "name": SERVER_NAME,
            "version": __version__,
            "status": "ok",
            "endpoints": {
                "mcp": mcp.settings.streamable_http_path,
                "sse": mcp.settings.sse_path,
            },
        }
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="Wheels Router MCP Server",
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address for HTTP transports",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for HTTP transports",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Logs go to stderr so stdio transport output stays clean
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.host:
        mcp.settings.host = args.host
    if args.port:
        mcp.settings.port = args.port

    logging.getLogger(__name__).info(f"Wheels Router MCP server running on {args.transport}")
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
