"""Tool definitions advertised by the server."""
from mcp.types import Tool

from .export import EXPORT_FORMATS
from .gaql import METRIC_ORDER_FIELDS
from .security import CONVERSION_ACTION_CATEGORIES, CONVERSION_ACTION_TYPES

CAMPAIGN_STATUSES = ["ENABLED", "PAUSED", "REMOVED", "ALL"]

DEFAULT_DAYS = 30
DEFAULT_STATUS = "ENABLED"
DEFAULT_METRIC = "ctr"
DEFAULT_LIMIT = 5

DAYS_PROPERTY = {
    "type": "number",
    "description": "Number of days to look back (default: 30)",
    "default": DEFAULT_DAYS,
}


def _campaign_id_property(description: str = "The campaign ID") -> dict:
    return {"type": "string", "description": description}


TOOLS = [
    Tool(
        name="list_campaigns",
        description="Fetch Google Ads campaign performance data",
        inputSchema={
            "type": "object",
            "properties": {
                "days": DAYS_PROPERTY,
                "status": {
                    "type": "string",
                    "description": "Filter by campaign status (ENABLED, PAUSED, REMOVED, or ALL)",
                    "enum": CAMPAIGN_STATUSES,
                    "default": DEFAULT_STATUS,
                },
            },
        },
    ),
    Tool(
        name="get_campaign_details",
        description="Get detailed information about a specific campaign",
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_id": _campaign_id_property(),
                "days": DAYS_PROPERTY,
            },
            "required": ["campaign_id"],
        },
    ),
    Tool(
        name="get_performance_summary",
        description="Get overall account performance summary",
        inputSchema={
            "type": "object",
            "properties": {"days": DAYS_PROPERTY},
        },
    ),
    Tool(
        name="get_top_performers",
        description="Get top performing campaigns by specified metric",
        inputSchema={
            "type": "object",
            "properties": {
                "metric": {
                    "type": "string",
                    "description": "Metric to rank by",
                    "enum": list(METRIC_ORDER_FIELDS),
                    "default": DEFAULT_METRIC,
                },
                "limit": {
                    "type": "number",
                    "description": "Number of top campaigns to return (default: 5)",
                    "default": DEFAULT_LIMIT,
                },
                "days": DAYS_PROPERTY,
            },
        },
    ),
    Tool(
        name="pause_campaign",
        description="Pause a specific campaign",
        inputSchema={
            "type": "object",
            "properties": {"campaign_id": _campaign_id_property("The campaign ID to pause")},
            "required": ["campaign_id"],
        },
    ),
    Tool(
        name="enable_campaign",
        description="Enable/resume a paused campaign",
        inputSchema={
            "type": "object",
            "properties": {"campaign_id": _campaign_id_property("The campaign ID to enable")},
            "required": ["campaign_id"],
        },
    ),
    Tool(
        name="update_campaign_budget",
        description="Update the daily budget for a campaign",
        inputSchema={
            "type": "object",
            "properties": {
                "campaign_id": _campaign_id_property(),
                "budget_amount": {
                    "type": "number",
                    "description": "New daily budget in the account currency",
                },
            },
            "required": ["campaign_id", "budget_amount"],
        },
    ),
    Tool(
        name="create_responsive_display_ad",
        description="Create a Responsive Display Ad with Ad Controls (e.g., enable video creation)",
        inputSchema={
            "type": "object",
            "properties": {
                "ad_group_id": {
                    "type": "string",
                    "description": "The Ad Group ID where the ad will be created",
                },
                "headlines": {
                    "type": "array",
                    "description": "Array of headlines (max 5)",
                    "items": {"type": "string"},
                },
                "descriptions": {
                    "type": "array",
                    "description": "Array of descriptions (max 5)",
                    "items": {"type": "string"},
                },
                "enable_video_creation": {
                    "type": "boolean",
                    "description": "Set to true to enable video creation for the ad (default: false)",
                    "default": False,
                },
            },
            "required": ["ad_group_id", "headlines", "descriptions"],
        },
    ),
    Tool(
        name="create_conversion_action",
        description="Create a new Conversion Action (e.g., for website, phone calls)",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "The name of the new conversion action",
                },
                "type": {
                    "type": "string",
                    "description": "The type of conversion action (e.g., UPLOAD_CLICKS, WEBSITE, CLICK_TO_CALL)",
                    "enum": CONVERSION_ACTION_TYPES,
                },
                "category": {
                    "type": "string",
                    "description": "The category of the conversion (e.g., PURCHASE, LEAD, PAGE_VIEW)",
                    "enum": CONVERSION_ACTION_CATEGORIES,
                },
                "value": {
                    "type": "number",
                    "description": "Default value for the conversion in the account currency (default: 0)",
                    "default": 0,
                },
            },
            "required": ["name", "type", "category"],
        },
    ),
    Tool(
        name="get_conversion_actions",
        description="List all Conversion Actions for the account",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="export_report",
        description="Export campaign data to CSV or JSON format",
        inputSchema={
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "description": "Export format",
                    "enum": EXPORT_FORMATS,
                    "default": "csv",
                },
                "days": DAYS_PROPERTY,
            },
            "required": ["format"],
        },
    ),
]

TOOL_NAMES = [tool.name for tool in TOOLS]
TOOLS_BY_NAME = {tool.name: tool for tool in TOOLS}


def required_params(name: str) -> list:
    return list(TOOLS_BY_NAME[name].inputSchema.get("required", []))


def tool_properties(name: str) -> dict:
    return TOOLS_BY_NAME[name].inputSchema.get("properties", {})
