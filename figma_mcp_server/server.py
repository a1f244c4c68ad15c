"""
Main file MCP Server Figma.
"""
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from .config import Config, ConfigError, load_config
from .figma_client import FigmaClient, set_client
from .mcp_instance import mcp, SERVER_VERSION
from .transport import build_sse_app

# Registration of tools, resources and prompts
from . import tools, resources, prompts  # noqa: F401

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Sends logs to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run(config: Config) -> None:
    """Start MCP server with the configured transport."""
    set_client(FigmaClient(config.figma))

    logger.info(f"Starting Figma MCP Server v{SERVER_VERSION}")
    logger.info(f"Using transport type: {config.server.transport}")

    if config.server.transport == "stdio":
        mcp.run(transport="stdio")
        return

    app = build_sse_app(mcp, config.server.api_key)
    logger.info(f"Host: {config.server.host}, Port: {config.server.port}")
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower()
    )


def main() -> int:
    load_dotenv()
    try:
        config = load_config()
    except ConfigError as e:
        configure_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config.server.log_level)
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
