"""
Tool dispatcher.

Maps tool names to handlers, applies argument defaults and turns every
exception raised while running a tool into a failed ``ToolResult``.
"""
import time
from datetime import date
from typing import Any, Callable, Dict, Optional

import structlog

from . import formatting, gaql
from .account import AccountClient, ConversionActionDraft, DisplayAdDraft
from .catalog import (
    DEFAULT_DAYS,
    DEFAULT_LIMIT,
    DEFAULT_METRIC,
    DEFAULT_STATUS,
    TOOL_NAMES,
    required_params,
    tool_properties,
)
from .config import Settings
from .errors import InitializationError, RemoteCallError
from .export import render_report
from .models import CampaignRow, ConversionActionRow, PerformanceSummary, units_to_micros
from .results import ErrorKind, ToolResult
from .security import (
    CONVERSION_ACTION_CATEGORIES,
    CONVERSION_ACTION_TYPES,
    ValidationError,
    validate_ad_group_id,
    validate_budget_amount,
    validate_campaign_id,
    validate_choice,
    validate_conversion_action_name,
    validate_conversion_value,
    validate_days,
    validate_limit,
    validate_text_assets,
)

logger = structlog.get_logger(__name__)

HEADLINE_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 90


class ToolDispatcher:
    """Runs catalog tools against one account."""

    def __init__(
        self,
        account: AccountClient,
        settings: Settings,
        today: Callable[[], date] = date.today,
    ):
        self.account = account
        self.settings = settings
        self._today = today
        # Handler methods are named after the tools they run
        self._handlers = {name: getattr(self, name) for name in TOOL_NAMES}

    @property
    def symbol(self) -> str:
        return self.settings.currency_symbol

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Run tool ``name``; never raises."""
        try:
            return await self._run(name, arguments or {})
        except Exception as e:
            # Only a failing log sink gets here, so nothing is logged
            return ToolResult.failure(ErrorKind.INTERNAL, str(e))

    async def _run(self, name: str, arguments: Dict[str, Any]) -> ToolResult:
        start_time = time.time()
        log = logger.bind(tool=name)
        log.info("tool_called", arguments=arguments)

        handler = self._handlers.get(name)
        if handler is None:
            log.warning("unknown_tool")
            return ToolResult.failure(ErrorKind.UNKNOWN_OPERATION, f"Unknown tool: {name}")

        try:
            kwargs = self._bind_arguments(name, arguments)
            result = await handler(**kwargs)
        except ValidationError as e:
            result = ToolResult.failure(ErrorKind.INVALID_ARGUMENT, str(e))
        except InitializationError as e:
            result = ToolResult.failure(ErrorKind.INITIALIZATION, str(e))
        except RemoteCallError as e:
            result = ToolResult.failure(ErrorKind.REMOTE_CALL, str(e))
        except Exception as e:
            log.exception("tool_crashed")
            result = ToolResult.failure(ErrorKind.INTERNAL, str(e))

        duration_ms = round((time.time() - start_time) * 1000, 2)
        if result.is_error:
            log.error("tool_failed", kind=result.error.value, error=result.message, duration_ms=duration_ms)
        else:
            log.info(
                "tool_completed",
                not_found=result.not_found,
                result_chars=len(result.text),
                duration_ms=duration_ms,
            )
        return result

    def _bind_arguments(self, name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        for param in required_params(name):
            if arguments.get(param) is None:
                raise ValidationError(f"Missing required parameter: {param}")

        known = tool_properties(name)
        ignored = sorted(set(arguments) - set(known))
        if ignored:
            logger.debug("ignored_arguments", tool=name, arguments=ignored)
        return {k: v for k, v in arguments.items() if k in known}

    # ========================================================================
    # Read tools
    # ========================================================================

    async def list_campaigns(self, days: int = None, status: str = None) -> ToolResult:
        days = validate_days(days or DEFAULT_DAYS)
        status = status or DEFAULT_STATUS

        rows = self.account.search(gaql.campaigns_query(days, status, self._today()))
        campaigns = [CampaignRow.from_row(r) for r in rows]
        return ToolResult.success(formatting.format_campaign_list(campaigns, days, self.symbol))

    async def get_campaign_details(self, campaign_id: str = None, days: int = None) -> ToolResult:
        campaign_id = validate_campaign_id(campaign_id)
        days = validate_days(days or DEFAULT_DAYS)

        rows = self.account.search(gaql.campaign_details_query(campaign_id, days, self._today()))
        if not rows:
            return ToolResult.missing(formatting.campaign_not_found(campaign_id))

        campaign = CampaignRow.from_row(rows[0])
        return ToolResult.success(formatting.format_campaign_details(campaign, days, self.symbol))

    async def get_performance_summary(self, days: int = None) -> ToolResult:
        days = validate_days(days or DEFAULT_DAYS)

        rows = self.account.search(gaql.performance_summary_query(days, self._today()))
        summary = PerformanceSummary.from_rows(rows)
        return ToolResult.success(formatting.format_performance_summary(summary, days, self.symbol))

    async def get_top_performers(self, metric: str = None, limit: int = None, days: int = None) -> ToolResult:
        metric = str(metric or DEFAULT_METRIC)
        limit = validate_limit(limit or DEFAULT_LIMIT)
        days = validate_days(days or DEFAULT_DAYS)

        rows = self.account.search(gaql.top_performers_query(metric, limit, days, self._today()))
        campaigns = [CampaignRow.from_row(r) for r in rows[:limit]]
        return ToolResult.success(
            formatting.format_top_performers(campaigns, metric, limit, days, self.symbol)
        )

    async def get_conversion_actions(self) -> ToolResult:
        rows = self.account.search(gaql.conversion_actions_query())
        actions = [ConversionActionRow.from_row(r) for r in rows]
        return ToolResult.success(formatting.format_conversion_actions(actions))

    async def export_report(self, format: str = None, days: int = None) -> ToolResult:
        fmt = str(format or "csv").lower()
        days = validate_days(days or DEFAULT_DAYS)

        rows = self.account.search(gaql.campaigns_query(days, None, self._today()))
        campaigns = [CampaignRow.from_row(r) for r in rows]
        return ToolResult.success(render_report(campaigns, fmt, days))

    # ========================================================================
    # Mutating tools
    # ========================================================================

    async def pause_campaign(self, campaign_id: str = None) -> ToolResult:
        campaign_id = validate_campaign_id(campaign_id)
        self.account.update_campaign_status(campaign_id, "PAUSED")
        return ToolResult.success(formatting.campaign_paused(campaign_id))

    async def enable_campaign(self, campaign_id: str = None) -> ToolResult:
        campaign_id = validate_campaign_id(campaign_id)
        self.account.update_campaign_status(campaign_id, "ENABLED")
        return ToolResult.success(formatting.campaign_enabled(campaign_id))

    async def update_campaign_budget(self, campaign_id: str = None, budget_amount: float = None) -> ToolResult:
        campaign_id = validate_campaign_id(campaign_id)
        budget_amount = validate_budget_amount(budget_amount)

        rows = self.account.search(gaql.campaign_budget_query(campaign_id))
        if not rows:
            return ToolResult.missing(formatting.campaign_not_found(campaign_id))

        budget_id = str(rows[0].get("campaignBudget", {}).get("id", ""))
        if not budget_id:
            raise RemoteCallError(f"Campaign {campaign_id} has no campaign budget")

        self.account.update_campaign_budget_amount(budget_id, units_to_micros(budget_amount))
        return ToolResult.success(formatting.budget_updated(campaign_id, budget_amount, self.symbol))

    async def create_responsive_display_ad(
        self,
        ad_group_id: str = None,
        headlines: list = None,
        descriptions: list = None,
        enable_video_creation: bool = False,
    ) -> ToolResult:
        ad_group_id = validate_ad_group_id(ad_group_id)
        headlines = validate_text_assets(headlines, "Headlines", HEADLINE_MAX_LENGTH)
        descriptions = validate_text_assets(descriptions, "Descriptions", DESCRIPTION_MAX_LENGTH)

        placeholders = self.settings.placeholders
        draft = DisplayAdDraft(
            headlines=list(headlines),
            descriptions=list(descriptions),
            long_headline=placeholders.long_headline,
            business_name=placeholders.business_name,
            marketing_image_asset_id=placeholders.marketing_image_asset_id,
            square_marketing_image_asset_id=placeholders.square_marketing_image_asset_id,
            enable_video_creation=bool(enable_video_creation),
            final_url=placeholders.final_url,
        )
        resource_name = self.account.create_responsive_display_ad(ad_group_id, draft)
        return ToolResult.success(formatting.display_ad_created(ad_group_id, resource_name))

    async def create_conversion_action(
        self, name: str = None, type: str = None, category: str = None, value: float = None
    ) -> ToolResult:
        draft = ConversionActionDraft(
            name=validate_conversion_action_name(name),
            type=validate_choice(type, CONVERSION_ACTION_TYPES, "Conversion action type"),
            category=validate_choice(category, CONVERSION_ACTION_CATEGORIES, "Conversion action category"),
            default_value=validate_conversion_value(value or 0),
            currency_code=self.settings.currency_code,
        )
        resource_name = self.account.create_conversion_action(draft)
        return ToolResult.success(formatting.conversion_action_created(draft.name, resource_name))
