import json

import pytest
from fastmcp import Client
from prometheus_client.parser import text_string_to_metric_families

from figma_mcp_server.metrics import app_registry
from figma_mcp_server.server import mcp

from .conftest import FILE_KEY


async def _read(uri):
    async with Client(mcp) as client:
        contents = await client.read_resource(uri)
    return contents[0].text


class TestFigmaResources:
    """Tests for figma:// resources"""

    @pytest.mark.asyncio
    async def test_user_files(self, fake_figma):
        fake_figma.add("/me/files", json={"files": [{"key": FILE_KEY, "name": "Marketing site"}]})

        data = json.loads(await _read("figma://files"))

        assert data == {"files": [{"key": FILE_KEY, "name": "Marketing site"}]}

    @pytest.mark.asyncio
    async def test_projects(self, fake_figma):
        fake_figma.add("/me/projects", json={"projects": [{"id": "42", "name": "Web"}]})

        data = json.loads(await _read("figma://projects"))

        assert data["projects"][0]["name"] == "Web"

    @pytest.mark.asyncio
    async def test_file_data(self, fake_figma, file_response):
        fake_figma.add(f"/files/{FILE_KEY}", json=file_response)

        data = json.loads(await _read(f"figma://{FILE_KEY}/data"))

        assert data == file_response

    @pytest.mark.asyncio
    async def test_design_system(self, fake_figma):
        fake_figma.add(f"/files/{FILE_KEY}/components", json={"meta": {"components": [{"key": "c1"}]}})
        fake_figma.add(f"/files/{FILE_KEY}/styles", json={"meta": {"styles": [{"key": "s1"}]}})

        data = json.loads(await _read(f"figma://{FILE_KEY}/design-system"))

        assert data == {"components": [{"key": "c1"}], "styles": [{"key": "s1"}]}
        assert len(fake_figma.requests) == 2

    @pytest.mark.asyncio
    async def test_file_data_error(self, fake_figma):
        with pytest.raises(Exception, match="Error fetching Figma file data"):
            await _read(f"figma://{FILE_KEY}/data")


class TestServiceResources:
    """Tests for health and metrics resources"""

    @pytest.mark.asyncio
    async def test_health(self):
        data = json.loads(await _read("health://check"))

        assert data == {"status": "healthy", "service": "figma-mcp-server", "version": "1.0.0"}

    @pytest.mark.asyncio
    async def test_metrics_include_tool_calls(self, fake_figma):
        async with Client(mcp) as client:
            await client.call_tool_mcp("get-comments", {"fileKey": FILE_KEY})

        text = await _read("metrics://prometheus")

        errors = app_registry.get_sample_value(
            "tool_calls_total", {"tool_name": "get-comments", "status": "error"}
        )
        api_calls = app_registry.get_sample_value(
            "figma_api_calls_total", {"endpoint": "get_comments", "status": "404"}
        )
        assert errors >= 1
        assert api_calls >= 1
        exposed = {
            sample.name
            for family in text_string_to_metric_families(text)
            for sample in family.samples
        }
        assert {"tool_calls_total", "tool_call_duration_seconds_count", "figma_api_calls_total"} <= exposed


class TestPrompts:
    """Tests for prompt templates"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,fragment", [
        ("analyze-design-system", "analyze the design system"),
        ("extract-ui-copy", "Use the extract-text tool"),
        ("generate-dev-handoff", "development handoff documentation"),
    ])
    async def test_prompt_mentions_file_key(self, name, fragment):
        async with Client(mcp) as client:
            result = await client.get_prompt(name, {"fileKey": FILE_KEY})

        text = result.messages[0].content.text
        assert result.messages[0].role == "user"
        assert FILE_KEY in text
        assert fragment in text
