"""MCP server exposing Google Ads campaign management tools."""

__version__ = "1.1.0"
