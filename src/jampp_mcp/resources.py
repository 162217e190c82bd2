"""MCP resources for Jampp reporting metadata.

Exposes the metrics and dimensions supported by the reporting API as a
read-only resource.
"""

# pyright: reportUnusedFunction=false

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

from fastmcp import FastMCP

METADATA_RESOURCE_URI = "jampp://metadata"


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register resources on the provided app instance.

    Args:
        app: The FastMCP application instance to add resources to.
        deps: Dependencies namespace with ``get_client`` and
              ``fetch_available_metrics_and_dimensions``.

    """

    @app.resource(
        uri=METADATA_RESOURCE_URI,
        name="Jampp Reporting Metadata",
        description="Return the metrics and dimensions available in Jampp reports as JSON.",
        mime_type="application/json",
        tags={"metadata", "reporting"},
    )
    async def get_metadata() -> dict[str, Any]:
        retrieved_at = datetime.now(UTC).isoformat()
        try:
            data = await deps.fetch_available_metrics_and_dimensions(deps.get_client())
        except RuntimeError as exc:
            return {
                "retrieved_at": retrieved_at,
                "status": "error",
                "error": str(exc),
                "error_type": exc.__class__.__name__,
            }
        return {"retrieved_at": retrieved_at, "status": "ok", **data}


__all__ = ["METADATA_RESOURCE_URI", "register"]
