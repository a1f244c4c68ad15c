"""
Asynchronous client for the Figma REST API.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from prometheus_client import Counter

from .config import FigmaConfig
from .metrics import app_registry

logger = logging.getLogger(__name__)

FIGMA_API_CALLS = Counter(
    "figma_api_calls_total",
    "Total number of Figma API calls",
    ["endpoint", "status"],
    registry=app_registry,
)


class FigmaAPIError(Exception):
    """Figma API error."""
    pass


class FigmaClient:
    """Client for the Figma API."""

    def __init__(
        self,
        config: FigmaConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.base_url = config.base_url
        self.headers = {
            "X-Figma-Token": config.access_token,
            "Content-Type": "application/json"
        }
        self.timeout = float(config.timeout)
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)

    async def _request(self, endpoint: str, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Performs a GET request and returns the decoded JSON body."""
        url = f"{self.base_url}{path}"
        self._logger.debug("GET %s params=%s", url, params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=self.headers, params=params)
        except httpx.TimeoutException as e:
            FIGMA_API_CALLS.labels(endpoint=endpoint, status="timeout").inc()
            self._logger.error(f"Timeout calling {endpoint}: {e}")
            raise FigmaAPIError("Request timeout to Figma API") from e
        except httpx.HTTPError as e:
            FIGMA_API_CALLS.labels(endpoint=endpoint, status="error").inc()
            self._logger.error(f"HTTP client error calling {endpoint}: {e}")
            raise FigmaAPIError(f"HTTP client error: {e}") from e

        FIGMA_API_CALLS.labels(endpoint=endpoint, status=str(response.status_code)).inc()

        if not response.is_success:
            self._logger.error(f"Figma API returned {response.status_code} for {endpoint}")
            raise FigmaAPIError(f"Figma API error: {response.status_code} {response.reason_phrase}")

        try:
            return response.json()
        except ValueError as e:
            self._logger.error(f"Malformed JSON from {endpoint}: {e}")
            raise FigmaAPIError("Malformed response from Figma API") from e

    async def get_file(self, file_key: str) -> Dict[str, Any]:
        """Returns the full document of a file."""
        return await self._request("get_file", f"/files/{file_key}")

    async def get_file_nodes(self, file_key: str, node_ids: List[str]) -> Dict[str, Any]:
        """Returns specific nodes of a file."""
        return await self._request(
            "get_file_nodes",
            f"/files/{file_key}/nodes",
            params={"ids": ",".join(node_ids)},
        )

    async def get_components(self, file_key: str) -> Dict[str, Any]:
        return await self._request("get_components", f"/files/{file_key}/components")

    async def get_styles(self, file_key: str) -> Dict[str, Any]:
        return await self._request("get_styles", f"/files/{file_key}/styles")

    async def get_comments(self, file_key: str) -> Dict[str, Any]:
        return await self._request("get_comments", f"/files/{file_key}/comments")

    async def get_user_files(self) -> Dict[str, Any]:
        """Returns the files the token owner has access to."""
        return await self._request("get_user_files", "/me/files")

    async def get_projects(self) -> Dict[str, Any]:
        return await self._request("get_projects", "/me/projects")


# Global client, created on first use from the environment
_figma_client: Optional[FigmaClient] = None


def get_client() -> FigmaClient:
    """Returns the shared client, building it from the environment if needed."""
    global _figma_client
    if _figma_client is None:
        _figma_client = FigmaClient(FigmaConfig.from_env())
    return _figma_client


def set_client(client: Optional[FigmaClient]) -> None:
    """Installs the shared client. ``None`` resets it."""
    global _figma_client
    _figma_client = client
