"""MCP application instance.

This module exists to avoid circular import issues when running with `python -m`.
All tool modules should import `mcp` from here, not from server.py.
"""

from mcp.server.fastmcp import FastMCP

# Initialize the MCP server
mcp = FastMCP(
    "Wheels Router",
    instructions=(
        "Public transit trip planning. Uses Wheels Router for Hong Kong and "
        "Transitous for other regions; search_location finds coordinates for places."
    ),
)
