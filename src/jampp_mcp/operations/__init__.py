"""Operational helpers for MCP tools.

Contains the query templates and response reshaping for the Jampp reporting API:
- ``common``: Pivot query building and GraphQL response unwrapping
- ``campaigns``: Campaign spend, daily spend, and performance queries
- ``reports``: Asynchronous report creation, status, and results
- ``metadata``: Available metrics and dimensions
"""
