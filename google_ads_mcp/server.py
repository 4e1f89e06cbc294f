#!/usr/bin/env python3
"""
Google Ads MCP Server
=====================
MCP server for managing Google Ads campaigns over stdio.

Provides tools for:
- Campaign listing, details and top performers
- Account performance summary
- Campaign management (pause, enable, budget updates)
- Responsive display ads and conversion actions
- Export to CSV/JSON

Environment Variables Required:
- GOOGLE_ADS_CONFIG: JSON string with all credentials
  (or GOOGLE_ADS_YAML_PATH: path to a google-ads.yaml file)
- GOOGLE_ADS_CUSTOMER_ID: Customer ID to query
"""

import asyncio
import logging
import os
import sys

import structlog
from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import __version__
from .account import load_account
from .catalog import TOOLS
from .config import load_settings
from .dispatcher import ToolDispatcher
from .errors import InitializationError
from .results import ToolResult

SERVER_NAME = "google-ads-mcp"
SERVER_VERSION = __version__

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """JSON logs on stderr; stdout belongs to the MCP transport."""
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Flatten a ToolResult into the single-text-block MCP response."""
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def build_server(dispatcher: ToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools"""
        return TOOLS

    # Enum and type hints in the schemas are advisory; the dispatcher decides.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> CallToolResult:
        result = await dispatcher.dispatch(name, arguments)
        return to_call_tool_result(result)

    return server


async def serve(server: Server) -> None:
    """Run the MCP server"""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main() -> int:
    load_dotenv(override=False)
    configure_logging(os.getenv("GOOGLE_ADS_MCP_LOG_LEVEL", "INFO"))

    try:
        settings = load_settings()
        account = load_account(settings)
    except InitializationError as e:
        logger.error("initialization_failed", error=str(e))
        return 1

    server = build_server(ToolDispatcher(account, settings))
    logger.info("server_starting", server=SERVER_NAME, version=SERVER_VERSION, customer_id=settings.customer_id)

    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("server_interrupted")
    except Exception as e:
        logger.exception("server_crashed", error=str(e))
        return 1

    logger.info("server_stopped")
    return 0


def run_server() -> None:
    """
    Runs the MCP server.

    Serves as the entrypoint for the 'google-ads-mcp' command.
    """
    sys.exit(main())


if __name__ == "__main__":
    run_server()
