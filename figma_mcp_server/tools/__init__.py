"""MCP tools of the Figma server."""

from .file_tools import get_file_info, get_nodes, get_components, get_styles, get_comments
from .search_tools import search_file, extract_text_tool

__all__ = [
    "get_file_info",
    "get_nodes",
    "get_components",
    "get_styles",
    "get_comments",
    "search_file",
    "extract_text_tool",
]
