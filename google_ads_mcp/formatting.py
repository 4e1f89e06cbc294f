"""Text rendering for tool results."""
from typing import Iterable, List

from .models import CampaignRow, ConversionActionRow, PerformanceSummary

NO_CAMPAIGNS_FOUND = "No campaigns found matching the criteria."


def format_campaign_block(campaign: CampaignRow, symbol: str = "€") -> str:
    """Format campaign data for display"""
    return "\n".join([
        f"**{campaign.name}** (ID: {campaign.id})",
        f"Status: {campaign.status} | Type: {campaign.channel_type}",
        f"Budget: {symbol}{campaign.budget:.2f}/day",
        f"Spend: {symbol}{campaign.cost:.2f} | Clicks: {campaign.clicks:,}",
        f"Impressions: {campaign.impressions:,} | CTR: {campaign.ctr_percent:.2f}%",
        f"CPC: {symbol}{campaign.average_cpc:.3f} | Conversions: {campaign.conversions:.1f}",
    ])


def format_campaign_list(campaigns: List[CampaignRow], days: int, symbol: str = "€") -> str:
    if not campaigns:
        return NO_CAMPAIGNS_FOUND

    output = [
        f"# Google Ads Campaigns (Last {days} Days)\n",
        f"**Total Campaigns:** {len(campaigns)}\n",
    ]
    for campaign in campaigns:
        output.append("\n---\n")
        output.append(format_campaign_block(campaign, symbol))
    return "".join(output)


def format_campaign_details(campaign: CampaignRow, days: int, symbol: str = "€") -> str:
    output = [
        f"# Campaign Details: {campaign.name}\n",
        f"**ID:** {campaign.id}",
        f"**Status:** {campaign.status}",
        f"**Type:** {campaign.channel_type}",
        f"**Start Date:** {campaign.start_date or 'N/A'}",
        f"**End Date:** {campaign.end_date or 'N/A'}",
        "\n## Budget",
        f"Daily Budget: {symbol}{campaign.budget:.2f}",
        f"\n## Performance (Last {days} Days)",
        f"- **Spend:** {symbol}{campaign.cost:.2f}",
        f"- **Clicks:** {campaign.clicks:,}",
        f"- **Impressions:** {campaign.impressions:,}",
        f"- **CTR:** {campaign.ctr_percent:.2f}%",
        f"- **CPC:** {symbol}{campaign.average_cpc:.3f}",
        f"- **Conversions:** {campaign.conversions:.1f}",
        f"- **Conversion Value:** {symbol}{campaign.conversions_value:.2f}",
    ]

    if campaign.cost_per_conversion > 0:
        output.append(f"- **Cost per Conversion:** {symbol}{campaign.cost_per_conversion:.2f}")

    return "\n".join(output)


def format_performance_summary(summary: PerformanceSummary, days: int, symbol: str = "€") -> str:
    output = [
        f"# Account Performance Summary (Last {days} Days)\n",
        f"**Active Campaigns:** {summary.campaign_count}",
        "\n## Overall Metrics",
        f"- **Total Spend:** {symbol}{summary.cost:.2f}",
        f"- **Total Clicks:** {summary.clicks:,}",
        f"- **Total Impressions:** {summary.impressions:,}",
        f"- **Overall CTR:** {summary.ctr_percent:.2f}%",
        f"- **Average CPC:** {symbol}{summary.average_cpc:.3f}",
        f"- **Total Conversions:** {summary.conversions:.1f}",
        f"- **Total Conversion Value:** {symbol}{summary.conversions_value:.2f}",
    ]

    if summary.cost_per_conversion > 0:
        output.append(f"- **Cost per Conversion:** {symbol}{summary.cost_per_conversion:.2f}")

    return "\n".join(output)


def format_top_performers(
    campaigns: List[CampaignRow], metric: str, limit: int, days: int, symbol: str = "€"
) -> str:
    output = [f"# Top {limit} Performers by {metric.upper()} (Last {days} Days)\n"]

    for index, campaign in enumerate(campaigns, start=1):
        output.append(f"\n## {index}. {campaign.name}")
        output.append(f"- **CTR:** {campaign.ctr_percent:.2f}%")
        output.append(f"- **Clicks:** {campaign.clicks:,}")
        output.append(f"- **Impressions:** {campaign.impressions:,}")
        output.append(f"- **Spend:** {symbol}{campaign.cost:.2f}")
        output.append(f"- **Conversions:** {campaign.conversions:.1f}")

    return "\n".join(output)


def format_conversion_actions(actions: Iterable[ConversionActionRow]) -> str:
    output = ["# Google Ads Conversion Actions\n"]

    for action in actions:
        output.append("---")
        output.append(f"**Name:** {action.name}")
        output.append(f"**ID:** {action.id}")
        output.append(f"**Status:** {action.status}")
        output.append(f"**Type:** {action.type}")
        output.append(f"**Category:** {action.category}")

    return "\n".join(output)


def campaign_not_found(campaign_id: str) -> str:
    return f"Campaign {campaign_id} not found."


def campaign_paused(campaign_id: str) -> str:
    return f"✅ Campaign {campaign_id} has been paused successfully."


def campaign_enabled(campaign_id: str) -> str:
    return f"✅ Campaign {campaign_id} has been enabled successfully."


def budget_updated(campaign_id: str, amount: float, symbol: str = "€") -> str:
    return f"✅ Campaign {campaign_id} budget updated to {symbol}{amount:.2f}/day successfully."


def display_ad_created(ad_group_id: str, resource_name: str) -> str:
    return (
        f"✅ Responsive Display Ad created successfully in Ad Group {ad_group_id}. "
        f"Resource Name: {resource_name}"
    )


def conversion_action_created(name: str, resource_name: str) -> str:
    return f"✅ Conversion Action '{name}' created successfully. Resource Name: {resource_name}"
