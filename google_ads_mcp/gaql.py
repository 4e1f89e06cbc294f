"""
GAQL query builder and the query templates used by the tools.

Queries are assembled from named fields and structured conditions. Literal
values are rendered by ``format_literal`` so ids and status names are never
pasted into the query text unescaped.
"""
import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, List, Optional, Tuple

FIELD_PATTERN = re.compile(r'^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)+$')
RESOURCE_PATTERN = re.compile(r'^[a-z][a-z0-9_]*$')
OPERATORS = ("=", "!=", ">", ">=", "<", "<=")

CAMPAIGN_FIELDS = [
    "campaign.id",
    "campaign.name",
    "campaign.status",
    "campaign.advertising_channel_type",
    "campaign_budget.amount_micros",
    "metrics.clicks",
    "metrics.impressions",
    "metrics.ctr",
    "metrics.average_cpc",
    "metrics.cost_micros",
    "metrics.conversions",
    "metrics.conversions_value",
]

CAMPAIGN_DETAIL_FIELDS = CAMPAIGN_FIELDS[:4] + [
    "campaign.start_date",
    "campaign.end_date",
] + CAMPAIGN_FIELDS[4:] + ["metrics.cost_per_conversion"]

SUMMARY_FIELDS = [
    "metrics.clicks",
    "metrics.impressions",
    "metrics.ctr",
    "metrics.average_cpc",
    "metrics.cost_micros",
    "metrics.conversions",
    "metrics.conversions_value",
]

TOP_PERFORMER_FIELDS = [
    "campaign.id",
    "campaign.name",
    "campaign.status",
    "metrics.clicks",
    "metrics.impressions",
    "metrics.ctr",
    "metrics.cost_micros",
    "metrics.conversions",
]

BUDGET_LOOKUP_FIELDS = [
    "campaign.id",
    "campaign.name",
    "campaign_budget.id",
    "campaign_budget.resource_name",
]

CONVERSION_ACTION_FIELDS = [
    "conversion_action.id",
    "conversion_action.name",
    "conversion_action.status",
    "conversion_action.type",
    "conversion_action.category",
]

METRIC_ORDER_FIELDS = {
    "ctr": "metrics.ctr",
    "conversions": "metrics.conversions",
    "cost": "metrics.cost_micros",
    "clicks": "metrics.clicks",
    "impressions": "metrics.impressions",
}
DEFAULT_ORDER_METRIC = "metrics.ctr"


def format_literal(value: Any) -> str:
    """Render a Python value as a GAQL literal."""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"
    raise ValueError(f"Unsupported GAQL literal: {value!r}")


def _check_field(name: str) -> str:
    if not FIELD_PATTERN.match(name):
        raise ValueError(f"Invalid GAQL field name: {name}")
    return name


def get_date_range(days: int, today: Optional[date] = None) -> Tuple[str, str]:
    """Inclusive range of the ``days`` complete days before ``today``."""
    end = (today or date.today()) - timedelta(days=1)
    start = end - timedelta(days=days - 1)
    return start.strftime("%Y-%m-%d"), end.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class Condition:
    field: str
    operator: str
    value: Any

    def render(self) -> str:
        return f"{self.field} {self.operator} {format_literal(self.value)}"


@dataclass(frozen=True)
class DateWindow:
    start: str
    end: str

    @classmethod
    def last_days(cls, days: int, today: Optional[date] = None) -> "DateWindow":
        start, end = get_date_range(days, today)
        return cls(start, end)

    def render(self) -> str:
        return f"segments.date BETWEEN {format_literal(self.start)} AND {format_literal(self.end)}"


@dataclass
class Query:
    resource: str
    fields: List[str]
    conditions: List[Any] = field(default_factory=list)
    order: Optional[Tuple[str, bool]] = None
    row_limit: Optional[int] = None

    def __post_init__(self):
        if not RESOURCE_PATTERN.match(self.resource):
            raise ValueError(f"Invalid GAQL resource: {self.resource}")
        if not self.fields:
            raise ValueError("A GAQL query needs at least one field")
        for name in self.fields:
            _check_field(name)

    def where(self, field_name: str, operator: str, value: Any) -> "Query":
        if operator not in OPERATORS:
            raise ValueError(f"Unsupported GAQL operator: {operator}")
        self.conditions.append(Condition(_check_field(field_name), operator, value))
        return self

    def during(self, window: DateWindow) -> "Query":
        self.conditions.append(window)
        return self

    def order_by(self, field_name: str, descending: bool = True) -> "Query":
        self.order = (_check_field(field_name), descending)
        return self

    def limit(self, n: int) -> "Query":
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"Invalid GAQL limit: {n!r}")
        self.row_limit = n
        return self

    def build(self) -> str:
        lines = ["SELECT", "  " + ",\n  ".join(self.fields), f"FROM {self.resource}"]
        for i, condition in enumerate(self.conditions):
            keyword = "WHERE" if i == 0 else "AND"
            lines.append(f"{keyword} {condition.render()}")
        if self.order:
            name, descending = self.order
            lines.append(f"ORDER BY {name} {'DESC' if descending else 'ASC'}")
        if self.row_limit is not None:
            lines.append(f"LIMIT {self.row_limit}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.build()


# ============================================================================
# Query templates
# ============================================================================

def campaigns_query(days: int, status: Optional[str] = None, today: Optional[date] = None) -> Query:
    """Non-removed campaigns in the window, highest spend first.

    ``status`` of None or ``"ALL"`` applies no extra status filter.
    """
    query = Query("campaign", list(CAMPAIGN_FIELDS)).where("campaign.status", "!=", "REMOVED")
    if status and status != "ALL":
        query.where("campaign.status", "=", status)
    return query.during(DateWindow.last_days(days, today)).order_by("metrics.cost_micros")


def campaign_details_query(campaign_id: str, days: int, today: Optional[date] = None) -> Query:
    return (
        Query("campaign", list(CAMPAIGN_DETAIL_FIELDS))
        .where("campaign.id", "=", int(campaign_id))
        .during(DateWindow.last_days(days, today))
    )


def performance_summary_query(days: int, today: Optional[date] = None) -> Query:
    return (
        Query("campaign", list(SUMMARY_FIELDS))
        .where("campaign.status", "!=", "REMOVED")
        .during(DateWindow.last_days(days, today))
    )


def top_performers_query(metric: str, limit: int, days: int, today: Optional[date] = None) -> Query:
    """Enabled campaigns ranked by ``metric``; unknown metrics rank by CTR."""
    order_field = METRIC_ORDER_FIELDS.get(metric, DEFAULT_ORDER_METRIC)
    return (
        Query("campaign", list(TOP_PERFORMER_FIELDS))
        .where("campaign.status", "=", "ENABLED")
        .during(DateWindow.last_days(days, today))
        .order_by(order_field)
        .limit(limit)
    )


def campaign_budget_query(campaign_id: str) -> Query:
    return Query("campaign", list(BUDGET_LOOKUP_FIELDS)).where("campaign.id", "=", int(campaign_id))


def conversion_actions_query() -> Query:
    return Query("conversion_action", list(CONVERSION_ACTION_FIELDS)).where(
        "conversion_action.status", "!=", "REMOVED"
    )
