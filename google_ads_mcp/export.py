"""Campaign report export (CSV / JSON)."""
import csv
import io
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .models import CampaignRow

REPORT_FIELDS = [
    "id",
    "name",
    "status",
    "type",
    "budget",
    "clicks",
    "impressions",
    "ctr",
    "cost",
    "cpc",
    "conversions",
    "conversion_value",
]

EXPORT_FORMATS = ["csv", "json"]


def to_record(campaign: CampaignRow) -> Dict[str, Any]:
    """Flatten a campaign into one report record keyed by REPORT_FIELDS."""
    return {
        "id": campaign.id,
        "name": campaign.name,
        "status": campaign.status,
        "type": campaign.channel_type,
        "budget": f"{campaign.budget:.2f}",
        "clicks": campaign.clicks,
        "impressions": campaign.impressions,
        "ctr": f"{campaign.ctr_percent:.2f}",
        "cost": f"{campaign.cost:.2f}",
        "cpc": f"{campaign.average_cpc:.3f}",
        "conversions": f"{campaign.conversions:.1f}",
        "conversion_value": f"{campaign.conversions_value:.2f}",
    }


def render_json(records: List[Dict[str, Any]], days: int, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    report = {
        "timestamp": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "period_days": days,
        "campaigns": records,
    }
    return f"```json\n{json.dumps(report, indent=2, ensure_ascii=False)}\n```"


def render_csv(records: List[Dict[str, Any]]) -> str:
    """CSV with a fixed header, present even when there are no records."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=REPORT_FIELDS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(records)
    table = buffer.getvalue().rstrip("\n")
    return f"```csv\n{table}\n```"


def render_report(campaigns: List[CampaignRow], fmt: str, days: int, now: Optional[datetime] = None) -> str:
    records = [to_record(c) for c in campaigns]
    if fmt == "json":
        return render_json(records, days, now)
    return render_csv(records)
