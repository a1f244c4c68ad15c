"""
MCP resources: Figma data plus health and metrics endpoints.
"""
import asyncio
import json

from fastmcp.exceptions import ResourceError

from .figma_client import get_client
from .mcp_instance import mcp, SERVER_NAME, SERVER_VERSION
from .metrics import get_metrics
from .validators import extract_file_key


def _dump(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


@mcp.resource("figma://files", name="user-files", mime_type="application/json")
async def user_files() -> str:
    """Figma files the user has access to."""
    try:
        return _dump(await get_client().get_user_files())
    except Exception as e:
        raise ResourceError(f"Error fetching Figma files: {e}") from e


@mcp.resource("figma://projects", name="projects", mime_type="application/json")
async def projects() -> str:
    """Figma projects of the user."""
    try:
        return _dump(await get_client().get_projects())
    except Exception as e:
        raise ResourceError(f"Error fetching Figma projects: {e}") from e


@mcp.resource("figma://{file_key}/data", name="file-data", mime_type="application/json")
async def file_data(file_key: str) -> str:
    """Full JSON of a Figma file."""
    try:
        return _dump(await get_client().get_file(extract_file_key(file_key)))
    except Exception as e:
        raise ResourceError(f"Error fetching Figma file data: {e}") from e


@mcp.resource("figma://{file_key}/design-system", name="design-system", mime_type="application/json")
async def design_system(file_key: str) -> str:
    """Components and styles of a Figma file."""
    try:
        file_key = extract_file_key(file_key)
        client = get_client()
        components_data, styles_data = await asyncio.gather(
            client.get_components(file_key),
            client.get_styles(file_key),
        )
        return _dump({
            "components": components_data["meta"]["components"],
            "styles": styles_data["meta"]["styles"],
        })
    except Exception as e:
        raise ResourceError(f"Error fetching design system data: {e}") from e


@mcp.resource("health://check", name="health", mime_type="application/json")
async def health_check() -> str:
    """Health check endpoint"""
    return json.dumps({
        "status": "healthy",
        "service": SERVER_NAME,
        "version": SERVER_VERSION
    })


@mcp.resource("metrics://prometheus", name="metrics", mime_type="text/plain")
async def metrics_endpoint() -> str:
    """Returns Prometheus metrics."""
    return get_metrics().decode('utf-8')
