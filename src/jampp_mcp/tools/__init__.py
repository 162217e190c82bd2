"""Tools package for MCP server.

Contains MCP tool registration modules:
- ``campaigns``: Campaign spend, daily spend, and performance tools
- ``reports``: Asynchronous report tools
- ``metadata``: Available metrics and dimensions tool
- ``common``: Shared runner and parameter types for tool registration
"""
