"""Figma MCP server: Figma REST API exposed as MCP tools, resources and prompts."""

from .document_tree import Node, Match, TextRecord, search_nodes, extract_text

__all__ = ["Node", "Match", "TextRecord", "search_nodes", "extract_text"]
