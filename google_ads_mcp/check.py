#!/usr/bin/env python3
"""Check Google Ads credentials by fetching a few campaigns."""
import argparse
import sys

from .account import load_account
from .config import load_settings
from .errors import GoogleAdsMCPError
from .gaql import Query
from .models import CampaignRow
from .server import configure_logging


def connection_check_query(limit: int) -> Query:
    return (
        Query("campaign", ["campaign.id", "campaign.name", "campaign.status"])
        .where("campaign.status", "!=", "REMOVED")
        .limit(limit)
    )


def check_connection(settings, limit: int = 5, account=None) -> bool:
    print("Testing Google Ads API connection...")
    print(f"[OK] Customer ID: {settings.customer_id}")

    try:
        account = account or load_account(settings)
        rows = account.search(connection_check_query(limit))
    except GoogleAdsMCPError as e:
        print(f"[ERROR] {e}")
        return False

    print(f"✅ Success! Found campaigns: {len(rows)}")
    for row in rows:
        campaign = CampaignRow.from_row(row)
        print(f"  - {campaign.name} (ID: {campaign.id}, Status: {campaign.status})")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Verify Google Ads API access")
    parser.add_argument("--limit", type=int, default=5, help="Campaigns to fetch (default: 5)")
    args = parser.parse_args(argv)

    configure_logging("WARNING")

    try:
        settings = load_settings()
    except GoogleAdsMCPError as e:
        print(f"[ERROR] {e}")
        return 1

    return 0 if check_connection(settings, args.limit) else 1


if __name__ == "__main__":
    sys.exit(main())
