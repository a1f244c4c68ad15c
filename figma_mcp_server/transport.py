"""
Network transport: MCP over Server-Sent Events with API key authentication.

Every SSE client gets its own id and its own ``SseServerTransport``. Messages
are posted to ``/messages/{client_id}/`` and routed to that client's
transport through the ``ConnectionRegistry``.
"""
import hmac
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastmcp import FastMCP
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Mount, Route
from starlette.types import ASGIApp, Receive, Scope, Send

from .mcp_instance import SERVER_VERSION

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
MESSAGES_PATH = "/messages"
API_KEY_HEADER = "x-api-key"


@dataclass
class Connection:
    client_id: str
    transport: SseServerTransport
    connected_at: float = field(default_factory=time.time)


class ConnectionRegistry:
    """Active SSE connections keyed by client id."""

    def __init__(self):
        self._connections: Dict[str, Connection] = {}

    def register(self, client_id: str, transport: SseServerTransport) -> Connection:
        if client_id in self._connections:
            raise ValueError(f"Client already registered: {client_id}")
        connection = Connection(client_id=client_id, transport=transport)
        self._connections[client_id] = connection
        return connection

    def unregister(self, client_id: str) -> None:
        self._connections.pop(client_id, None)

    def get(self, client_id: str) -> Optional[Connection]:
        return self._connections.get(client_id)

    def client_ids(self) -> List[str]:
        return list(self._connections)

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, client_id: str) -> bool:
        return client_id in self._connections


class ApiKeyMiddleware:
    """Rejects requests to protected paths without a matching X-API-Key header."""

    def __init__(self, app: ASGIApp, api_key: str, protected_paths=(SSE_PATH, MESSAGES_PATH)):
        self.app = app
        self.api_key = api_key
        self.protected_paths = tuple(protected_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].startswith(self.protected_paths):
            headers = dict(scope.get("headers") or [])
            provided = headers.get(API_KEY_HEADER.encode(), b"").decode("latin-1")
            if not provided or not hmac.compare_digest(provided, self.api_key):
                response = JSONResponse({"error": "Unauthorized"}, status_code=401)
                await response(scope, receive, send)
                return
        await self.app(scope, receive, send)


class SseEndpoint:
    """Opens an event stream for a new client and serves MCP over it."""

    def __init__(self, server: FastMCP, registry: ConnectionRegistry, logger: logging.Logger):
        self.server = server
        self.registry = registry
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        client_id = uuid.uuid4().hex
        transport = SseServerTransport(f"{MESSAGES_PATH}/{client_id}/")
        self.registry.register(client_id, transport)
        self.logger.info(f"SSE connection established for client {client_id}")

        low_level_server = self.server._mcp_server
        try:
            async with transport.connect_sse(scope, receive, send) as (read_stream, write_stream):
                await low_level_server.run(
                    read_stream,
                    write_stream,
                    low_level_server.create_initialization_options(),
                )
        finally:
            self.registry.unregister(client_id)
            self.logger.info(f"Client {client_id} disconnected")


class MessageRouter:
    """Delivers a posted message to the transport of the client it belongs to."""

    def __init__(self, registry: ConnectionRegistry, logger: logging.Logger):
        self.registry = registry
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["method"] != "POST":
            response = JSONResponse({"error": "Method not allowed"}, status_code=405)
            await response(scope, receive, send)
            return

        client_id = scope.get("path_params", {}).get("client_id", "")
        connection = self.registry.get(client_id)
        if connection is None:
            self.logger.warning(f"Message for unknown client {client_id}")
            response = JSONResponse({"error": "Unknown client"}, status_code=404)
            await response(scope, receive, send)
            return

        await connection.transport.handle_post_message(scope, receive, send)


def build_sse_app(
    server: FastMCP,
    api_key: str,
    registry: Optional[ConnectionRegistry] = None,
    logger: Optional[logging.Logger] = None,
) -> Starlette:
    """
    Builds the Starlette application for the SSE transport.

    Args:
        server (FastMCP): Server whose tools, resources and prompts are exposed.
        api_key (str): Value expected in the X-API-Key header.
        registry (ConnectionRegistry, optional): Registry of active clients.
        logger (logging.Logger, optional): Logger for connection events.

    Returns:
        Starlette: ASGI application ready for uvicorn.
    """
    registry = registry if registry is not None else ConnectionRegistry()
    logger = logger or logging.getLogger(__name__)

    async def home(request: Request) -> PlainTextResponse:
        return PlainTextResponse("Figma MCP Server - Status: Running")

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({
            "status": "ok",
            "version": SERVER_VERSION,
            "connections": len(registry),
        })

    app = Starlette(routes=[
        Route("/", endpoint=home, methods=["GET"]),
        Route("/health", endpoint=health, methods=["GET"]),
        Route(SSE_PATH, endpoint=SseEndpoint(server, registry, logger), methods=["GET"]),
        Mount(MESSAGES_PATH + "/{client_id}", app=MessageRouter(registry, logger)),
    ])
    app.add_middleware(ApiKeyMiddleware, api_key=api_key)
    # Outermost: preflight requests are answered before the API key check
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.state.registry = registry
    return app
