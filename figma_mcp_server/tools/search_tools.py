"""
Tools that query the document tree of a Figma file.
"""
import logging
from typing import Any, Dict

from ..document_tree import Node, extract_text, search_nodes
from ..figma_client import FigmaAPIError, get_client
from ..mcp_instance import mcp
from ..validators import extract_file_key
from .base import tool_call, to_json

logger = logging.getLogger(__name__)


async def _load_document(file_key: str) -> Node:
    """Fetches a file and returns its document root as a node tree."""
    file_data: Dict[str, Any] = await get_client().get_file(extract_file_key(file_key))
    document = file_data.get("document")
    if not isinstance(document, dict):
        raise FigmaAPIError("Malformed response from Figma API: missing document")
    return Node.from_dict(document)


@mcp.tool(name="search-file")
async def search_file(fileKey: str, query: str) -> str:
    """
    Search for elements in a Figma file by name.

    Matching is a case-insensitive substring check on node names; an empty
    query returns every named node.

    Args:
        fileKey (str): The Figma file key (found in the file URL) or the file
            URL itself. A bare key must be 8-64 letters, digits, '-' or '_';
            other values are rejected before Figma is called.
        query (str): Search query.

    Returns:
        str: JSON array of matches with id, name, type and path, in
            document order.
    """
    async with tool_call("search-file", "Error searching Figma file"):
        document = await _load_document(fileKey)
        matches = search_nodes(document, query)
        logger.info(f"search-file {fileKey!r} query={query!r}: {len(matches)} matches")
        return to_json([match.to_dict() for match in matches])


@mcp.tool(name="extract-text")
async def extract_text_tool(fileKey: str) -> str:
    """
    Extract all text elements from a Figma file.

    Args:
        fileKey (str): The Figma file key or file URL. A bare key must be
            8-64 letters, digits, '-' or '_'.

    Returns:
        str: JSON array of text nodes with id, name, characters and style,
            in document order.
    """
    async with tool_call("extract-text", "Error extracting text from Figma file"):
        document = await _load_document(fileKey)
        records = extract_text(document)
        logger.info(f"extract-text {fileKey!r}: {len(records)} text nodes")
        return to_json([record.to_dict() for record in records])
