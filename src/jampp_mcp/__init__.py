"""Jampp MCP Server package.

This package contains the FastMCP server and tools for querying the Jampp
advertising-reporting GraphQL API.
"""

# Intentionally do not re-export symbols from submodules to avoid triggering
# environment validation and logging setup at package import time. Individual
# modules (e.g., ``server``) should be imported directly by consumers as needed.

__all__: list[str] = []
