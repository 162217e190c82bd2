"""Client package for the Jampp MCP server.

Provides authenticated access to the Jampp reporting API:
- ``http``: Async context manager factory for configured httpx clients
- ``token_manager``: Bearer token cache with expiry margin and lazy refresh
- ``graphql_client``: Single-attempt authenticated GraphQL executor
- ``errors``: Exception taxonomy for token, transport, and GraphQL failures
"""
