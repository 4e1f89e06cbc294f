"""
Read projections of Google Ads rows.

Rows come from ``json_format.MessageToDict``: keys are camelCase, int64
values are strings and fields left at their default value are omitted, so
every accessor falls back to zero.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

MICROS_PER_UNIT = 1_000_000


def micros_to_units(micros: Any) -> float:
    """Convert micro-units to display currency units."""
    return float(micros or 0) / MICROS_PER_UNIT


def units_to_micros(amount: float) -> int:
    """Convert display currency units to micro-units, rounding to nearest."""
    return int(round(amount * MICROS_PER_UNIT))


def _int(value: Any) -> int:
    return int(value or 0)


def _float(value: Any) -> float:
    return float(value or 0)


@dataclass(frozen=True)
class CampaignRow:
    id: str
    name: str
    status: str
    channel_type: str
    budget_micros: int = 0
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    average_cpc_micros: float = 0.0
    cost_micros: int = 0
    conversions: float = 0.0
    conversions_value: float = 0.0
    cost_per_conversion_micros: float = 0.0
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "CampaignRow":
        campaign = row.get("campaign", {})
        budget = row.get("campaignBudget", {})
        metrics = row.get("metrics", {})
        return cls(
            id=str(campaign.get("id", "")),
            name=campaign.get("name", ""),
            status=campaign.get("status", "UNSPECIFIED"),
            channel_type=campaign.get("advertisingChannelType", "UNSPECIFIED"),
            budget_micros=_int(budget.get("amountMicros")),
            clicks=_int(metrics.get("clicks")),
            impressions=_int(metrics.get("impressions")),
            ctr=_float(metrics.get("ctr")),
            average_cpc_micros=_float(metrics.get("averageCpc")),
            cost_micros=_int(metrics.get("costMicros")),
            conversions=_float(metrics.get("conversions")),
            conversions_value=_float(metrics.get("conversionsValue")),
            cost_per_conversion_micros=_float(metrics.get("costPerConversion")),
            start_date=campaign.get("startDate"),
            end_date=campaign.get("endDate"),
        )

    @property
    def budget(self) -> float:
        return micros_to_units(self.budget_micros)

    @property
    def cost(self) -> float:
        return micros_to_units(self.cost_micros)

    @property
    def average_cpc(self) -> float:
        return micros_to_units(self.average_cpc_micros)

    @property
    def cost_per_conversion(self) -> float:
        return micros_to_units(self.cost_per_conversion_micros)

    @property
    def ctr_percent(self) -> float:
        return self.ctr * 100


@dataclass(frozen=True)
class ConversionActionRow:
    id: str
    name: str
    status: str
    type: str
    category: str

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "ConversionActionRow":
        action = row.get("conversionAction", {})
        return cls(
            id=str(action.get("id", "")),
            name=action.get("name", ""),
            status=action.get("status", "UNSPECIFIED"),
            type=action.get("type", "UNSPECIFIED"),
            category=action.get("category", "UNSPECIFIED"),
        )


@dataclass(frozen=True)
class PerformanceSummary:
    campaign_count: int
    cost: float
    clicks: int
    impressions: int
    conversions: float
    conversions_value: float

    @classmethod
    def from_rows(cls, rows) -> "PerformanceSummary":
        campaigns = [CampaignRow.from_row(r) for r in rows]
        return cls(
            campaign_count=len(campaigns),
            cost=sum(c.cost for c in campaigns),
            clicks=sum(c.clicks for c in campaigns),
            impressions=sum(c.impressions for c in campaigns),
            conversions=sum(c.conversions for c in campaigns),
            conversions_value=sum(c.conversions_value for c in campaigns),
        )

    @property
    def ctr_percent(self) -> float:
        return self.clicks / self.impressions * 100 if self.impressions > 0 else 0.0

    @property
    def average_cpc(self) -> float:
        return self.cost / self.clicks if self.clicks > 0 else 0.0

    @property
    def cost_per_conversion(self) -> float:
        return self.cost / self.conversions if self.conversions > 0 else 0.0
