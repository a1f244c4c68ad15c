from typing import Any, Dict

import httpx
import pytest

from figma_mcp_server.config import FigmaConfig
from figma_mcp_server.figma_client import FigmaClient, set_client

BASE_URL = "https://api.figma.test/v1"
FILE_KEY = "FileKey1234567890abcd"


@pytest.fixture
def figma_config():
    """Figma configuration pointing at a fake host"""
    return FigmaConfig(access_token="test-token", base_url=BASE_URL, timeout=5)


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """Small Figma document: page -> header frame -> text, plus a card"""
    return {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Landing Page",
                "type": "CANVAS",
                "children": [
                    {
                        "id": "1:1",
                        "name": "Header",
                        "type": "FRAME",
                        "children": [
                            {
                                "id": "1:2",
                                "name": "Headline",
                                "type": "TEXT",
                                "characters": "Welcome back",
                                "style": {"fontFamily": "Inter", "fontSize": 32},
                            },
                            {"id": "1:3", "name": "Logo", "type": "VECTOR"},
                        ],
                    },
                    {
                        "id": "2:1",
                        "name": "Card",
                        "type": "FRAME",
                        "children": [
                            {
                                "id": "2:2",
                                "name": "Card header",
                                "type": "TEXT",
                                "characters": "Pricing",
                                "style": {"fontFamily": "Inter", "fontSize": 18},
                            },
                            {"id": "2:3", "type": "RECTANGLE", "children": []},
                        ],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def file_response(sample_document) -> Dict[str, Any]:
    """Response body of GET /files/{key}"""
    return {
        "name": "Marketing site",
        "lastModified": "2024-05-01T10:00:00Z",
        "version": "123456",
        "schemaVersion": 0,
        "thumbnailUrl": "https://example.com/thumb.png",
        "document": sample_document,
        "components": {},
        "styles": {},
    }


class FakeFigma:
    """Routes requests of httpx.MockTransport to canned responses and records them"""

    def __init__(self):
        self.routes: Dict[str, httpx.Response] = {}
        self.requests = []

    def add(self, path: str, json: Any = None, status_code: int = 200, content: bytes = None):
        if content is not None:
            self.routes[path] = httpx.Response(status_code, content=content)
        else:
            self.routes[path] = httpx.Response(status_code, json=json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len("/v1"):]
        if path in self.routes:
            return self.routes[path]
        return httpx.Response(404, json={"status": 404, "err": "Not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_figma(figma_config):
    """Installs a Figma client backed by FakeFigma as the shared client"""
    fake = FakeFigma()
    set_client(FigmaClient(figma_config, transport=fake.transport))
    yield fake
    set_client(None)
