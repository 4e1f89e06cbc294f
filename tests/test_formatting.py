"""Tests for micro-unit conversion and text rendering."""
import pytest

from conftest import campaign_row
from google_ads_mcp import formatting
from google_ads_mcp.models import (
    CampaignRow,
    ConversionActionRow,
    PerformanceSummary,
    micros_to_units,
    units_to_micros,
)


class TestMicros:
    @pytest.mark.parametrize("micros", [0, 1_000_000, 50_000_000, 123_000_000_000])
    def test_whole_units_round_trip(self, micros):
        assert units_to_micros(micros_to_units(micros)) == micros

    def test_rounds_to_nearest(self):
        assert units_to_micros(50.005) == 50_005_000
        assert units_to_micros(0.0000004) == 0
        assert units_to_micros(0.0000006) == 1

    def test_string_micros(self):
        assert micros_to_units("2500000") == 2.5

    def test_missing_micros(self):
        assert micros_to_units(None) == 0.0


class TestCampaignRow:
    def test_from_row(self):
        campaign = CampaignRow.from_row(campaign_row())

        assert campaign.id == "111"
        assert campaign.clicks == 1234
        assert campaign.budget == 50.0
        assert campaign.cost == pytest.approx(12.34567)

    def test_missing_metrics_default_to_zero(self):
        campaign = CampaignRow.from_row({"campaign": {"id": "5", "name": "Empty"}})

        assert campaign.clicks == 0
        assert campaign.cost == 0.0
        assert campaign.ctr_percent == 0.0
        assert campaign.channel_type == "UNSPECIFIED"


class TestCampaignBlock:
    def test_block(self):
        block = formatting.format_campaign_block(CampaignRow.from_row(campaign_row()))

        assert block == (
            "**Brand Search** (ID: 111)\n"
            "Status: ENABLED | Type: SEARCH\n"
            "Budget: €50.00/day\n"
            "Spend: €12.35 | Clicks: 1,234\n"
            "Impressions: 45,678 | CTR: 2.70%\n"
            "CPC: €0.010 | Conversions: 3.0"
        )

    def test_currency_symbol(self):
        block = formatting.format_campaign_block(CampaignRow.from_row(campaign_row()), "$")
        assert "Budget: $50.00/day" in block

    def test_empty_list(self):
        assert formatting.format_campaign_list([], 30) == "No campaigns found matching the criteria."

    def test_list_report(self):
        campaigns = [
            CampaignRow.from_row(campaign_row()),
            CampaignRow.from_row(campaign_row(campaign_id="222", name="Display")),
        ]

        text = formatting.format_campaign_list(campaigns, 14)

        assert text.startswith("# Google Ads Campaigns (Last 14 Days)\n**Total Campaigns:** 2\n")
        assert text.count("\n---\n") == 2
        assert "**Display** (ID: 222)" in text


class TestCampaignDetails:
    def test_details_with_cost_per_conversion(self):
        row = campaign_row(costPerConversion=4115223.33)
        row["campaign"]["startDate"] = "2024-06-01"

        text = formatting.format_campaign_details(CampaignRow.from_row(row), 30)

        assert text.startswith("# Campaign Details: Brand Search\n")
        assert "**Start Date:** 2024-06-01" in text
        assert "**End Date:** N/A" in text
        assert "Daily Budget: €50.00" in text
        assert "\n## Performance (Last 30 Days)" in text
        assert "- **Conversion Value:** €150.00" in text
        assert text.endswith("- **Cost per Conversion:** €4.12")

    def test_details_without_cost_per_conversion(self):
        text = formatting.format_campaign_details(CampaignRow.from_row(campaign_row()), 30)
        assert "Cost per Conversion" not in text


class TestPerformanceSummary:
    def test_aggregates(self):
        rows = [
            {"metrics": {"clicks": "100", "impressions": "1000", "costMicros": "20000000",
                         "conversions": 2.0, "conversionsValue": 100.0}},
            {"metrics": {"clicks": "50", "impressions": "1000", "costMicros": "10000000",
                         "conversions": 1.0, "conversionsValue": 50.0}},
        ]

        summary = PerformanceSummary.from_rows(rows)
        text = formatting.format_performance_summary(summary, 30)

        assert "**Active Campaigns:** 2" in text
        assert "- **Total Spend:** €30.00" in text
        assert "- **Total Clicks:** 150" in text
        assert "- **Total Impressions:** 2,000" in text
        assert "- **Overall CTR:** 7.50%" in text
        assert "- **Average CPC:** €0.200" in text
        assert "- **Total Conversions:** 3.0" in text
        assert "- **Total Conversion Value:** €150.00" in text
        assert "- **Cost per Conversion:** €10.00" in text

    def test_zero_impressions(self):
        summary = PerformanceSummary.from_rows([{"metrics": {}}])
        text = formatting.format_performance_summary(summary, 7)

        assert summary.ctr_percent == 0.0
        assert summary.average_cpc == 0.0
        assert "- **Overall CTR:** 0.00%" in text
        assert "Cost per Conversion" not in text

    def test_no_rows(self):
        summary = PerformanceSummary.from_rows([])
        assert summary.campaign_count == 0
        assert summary.cost_per_conversion == 0.0


class TestTopPerformers:
    def test_numbering(self):
        campaigns = [
            CampaignRow.from_row(campaign_row(campaign_id=str(i), name=f"Campaign {i}"))
            for i in range(1, 4)
        ]

        text = formatting.format_top_performers(campaigns, "clicks", 3, 7)

        assert text.startswith("# Top 3 Performers by CLICKS (Last 7 Days)\n")
        assert "\n## 1. Campaign 1" in text
        assert "\n## 3. Campaign 3" in text
        assert "- **Spend:** €12.35" in text


class TestConversionActions:
    def test_listing(self):
        rows = [{"conversionAction": {"id": "42", "name": "Purchase", "status": "ENABLED",
                                      "type": "WEBPAGE", "category": "PURCHASE"}}]

        text = formatting.format_conversion_actions(ConversionActionRow.from_row(r) for r in rows)

        assert text == (
            "# Google Ads Conversion Actions\n\n"
            "---\n"
            "**Name:** Purchase\n"
            "**ID:** 42\n"
            "**Status:** ENABLED\n"
            "**Type:** WEBPAGE\n"
            "**Category:** PURCHASE"
        )
