"""Tests for the MCP server wiring."""
import pytest
from mcp import types

from google_ads_mcp.catalog import TOOL_NAMES, TOOLS, required_params, tool_properties
from google_ads_mcp.results import ErrorKind, ToolResult
from google_ads_mcp.server import SERVER_NAME, build_server, to_call_tool_result


class TestCatalog:
    def test_tool_order(self):
        assert TOOL_NAMES == [
            "list_campaigns",
            "get_campaign_details",
            "get_performance_summary",
            "get_top_performers",
            "pause_campaign",
            "enable_campaign",
            "update_campaign_budget",
            "create_responsive_display_ad",
            "create_conversion_action",
            "get_conversion_actions",
            "export_report",
        ]

    def test_schemas_are_objects(self):
        for tool in TOOLS:
            assert tool.description
            assert tool.inputSchema["type"] == "object"

    def test_required_params(self):
        assert required_params("update_campaign_budget") == ["campaign_id", "budget_amount"]
        assert required_params("list_campaigns") == []

    def test_tool_properties(self):
        assert sorted(tool_properties("get_top_performers")) == ["days", "limit", "metric"]
        assert tool_properties("get_conversion_actions") == {}

    def test_export_formats(self):
        tool = next(t for t in TOOLS if t.name == "export_report")
        assert tool.inputSchema["properties"]["format"]["enum"] == ["csv", "json"]


class TestCallToolResult:
    def test_success(self):
        result = to_call_tool_result(ToolResult.success("# Report"))

        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "# Report"

    def test_failure(self):
        result = to_call_tool_result(ToolResult.failure(ErrorKind.REMOTE_CALL, "Google Ads API Error: boom"))

        assert result.isError is True
        assert result.content[0].text == "❌ Error: Google Ads API Error: boom"

    def test_not_found_is_not_an_error(self):
        result = to_call_tool_result(ToolResult.missing("Campaign 1 not found."))
        assert result.isError is False


class TestServer:
    def test_server_name(self, dispatcher):
        server = build_server(dispatcher)
        assert server.name == SERVER_NAME

    @pytest.mark.asyncio
    async def test_list_tools_handler(self, dispatcher):
        server = build_server(dispatcher)
        handler = server.request_handlers[types.ListToolsRequest]

        response = await handler(types.ListToolsRequest(method="tools/list"))

        names = [tool.name for tool in response.root.tools]
        assert names == TOOL_NAMES
