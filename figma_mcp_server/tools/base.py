"""
Shared helpers for MCP tools.
"""
import json
import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastmcp.exceptions import ToolError
from prometheus_client import Counter, Histogram

from ..metrics import app_registry

logger = logging.getLogger(__name__)

TOOL_CALLS_TOTAL = Counter(
    "tool_calls_total",
    "Total number of tool calls",
    ["tool_name", "status"],
    registry=app_registry,
)

TOOL_CALL_DURATION = Histogram(
    "tool_call_duration_seconds",
    "Duration of tool calls",
    ["tool_name"],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
    registry=app_registry,
)


def to_json(data: Any) -> str:
    """Pretty-printed JSON text returned to the MCP client."""
    return json.dumps(data, ensure_ascii=False, indent=2)


@asynccontextmanager
async def tool_call(tool_name: str, error_prefix: str) -> AsyncIterator[None]:
    """
    Records metrics for a tool call and turns failures into an MCP error result.

    Any exception raised inside the block is re-raised as ``ToolError`` with the
    message ``"<error_prefix>: <detail>"``; FastMCP reports it to the client with
    ``isError`` set.
    """
    start_time = time.time()
    try:
        yield
    except Exception as e:
        TOOL_CALLS_TOTAL.labels(tool_name=tool_name, status="error").inc()
        logger.warning(f"{tool_name} failed: {e}")
        raise ToolError(f"{error_prefix}: {e}") from e
    else:
        TOOL_CALLS_TOTAL.labels(tool_name=tool_name, status="success").inc()
    finally:
        TOOL_CALL_DURATION.labels(tool_name=tool_name).observe(time.time() - start_time)
