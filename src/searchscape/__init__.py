"""
SearchScape MCP Server.

An MCP server that fetches Unsplash images for a prompt and transforms the
most recently fetched image with Hugging Face models.

Usage:
    # Start server (stdio by default)
    searchscape serve

    # Fetch and transform from the command line
    searchscape transform artistic --prompt "mountain lake"

    # Check configuration
    searchscape info
"""

__version__ = "1.0.0"

from .server import create_app, create_sse_app, mcp

__all__ = [
    "mcp",
    "create_app",
    "create_sse_app",
]
