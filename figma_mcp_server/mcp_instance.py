"""
Single FastMCP instance shared by the whole server.
"""
from fastmcp import FastMCP

SERVER_NAME = "figma-mcp-server"
SERVER_VERSION = "1.0.0"

mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
