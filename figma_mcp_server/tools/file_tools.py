"""
Tools that relay Figma file data.

Tool arguments keep the camelCase names MCP clients already send
(``fileKey``, ``nodeIds``).
"""
from typing import List

from ..figma_client import get_client
from ..mcp_instance import mcp
from ..validators import extract_file_key
from .base import tool_call, to_json


@mcp.tool(name="get-file-info")
async def get_file_info(fileKey: str) -> str:
    """
    Get basic information about a Figma file.

    Args:
        fileKey (str): The Figma file key (found in the file URL) or the file URL
            itself. A bare key must be 8-64 letters, digits, '-' or '_'; other
            values are rejected before Figma is called.

    Returns:
        str: JSON with name, lastModified, version, document root, schemaVersion
            and thumbnailUrl.
    """
    async with tool_call("get-file-info", "Error fetching Figma file information"):
        file_data = await get_client().get_file(extract_file_key(fileKey))
        document = file_data.get("document") or {}
        return to_json({
            "name": file_data.get("name"),
            "lastModified": file_data.get("lastModified"),
            "version": file_data.get("version"),
            "document": {
                "id": document.get("id"),
                "name": document.get("name"),
                "type": document.get("type"),
            },
            "schemaVersion": file_data.get("schemaVersion"),
            "thumbnailUrl": file_data.get("thumbnailUrl"),
        })


@mcp.tool(name="get-nodes")
async def get_nodes(fileKey: str, nodeIds: List[str]) -> str:
    """
    Get specific nodes from a Figma file.

    Args:
        fileKey (str): The Figma file key or file URL. A bare key must be
            8-64 letters, digits, '-' or '_'.
        nodeIds (List[str]): Node IDs to fetch, e.g. ["1:2", "10:4"].
    """
    async with tool_call("get-nodes", "Error fetching Figma nodes"):
        if not nodeIds:
            raise ValueError("nodeIds must not be empty")
        nodes_data = await get_client().get_file_nodes(extract_file_key(fileKey), nodeIds)
        return to_json(nodes_data)


@mcp.tool(name="get-components")
async def get_components(fileKey: str) -> str:
    """
    Get component information from a Figma file.

    fileKey is the Figma file key or file URL. A bare key must be
    8-64 letters, digits, '-' or '_'.
    """
    async with tool_call("get-components", "Error fetching Figma components"):
        return to_json(await get_client().get_components(extract_file_key(fileKey)))


@mcp.tool(name="get-styles")
async def get_styles(fileKey: str) -> str:
    """
    Get style information from a Figma file.

    fileKey is the Figma file key or file URL. A bare key must be
    8-64 letters, digits, '-' or '_'.
    """
    async with tool_call("get-styles", "Error fetching Figma styles"):
        return to_json(await get_client().get_styles(extract_file_key(fileKey)))


@mcp.tool(name="get-comments")
async def get_comments(fileKey: str) -> str:
    """
    Get comments from a Figma file.

    fileKey is the Figma file key or file URL. A bare key must be
    8-64 letters, digits, '-' or '_'.
    """
    async with tool_call("get-comments", "Error fetching Figma comments"):
        return to_json(await get_client().get_comments(extract_file_key(fileKey)))
