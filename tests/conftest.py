"""
Pytest configuration for google-ads-mcp tests.
"""
from datetime import date

import pytest
import structlog

from google_ads_mcp.config import Credentials, Settings
from google_ads_mcp.dispatcher import ToolDispatcher

CUSTOMER_ID = "1234567890"
TODAY = date(2025, 1, 31)


class FakeAccount:
    """In-memory stand-in for GoogleAdsAccount.

    ``search_results`` is a queue: each search pops the next list of rows,
    an exhausted queue returns no rows.
    """

    def __init__(self, *search_results, customer_id: str = CUSTOMER_ID):
        self.customer_id = customer_id
        self.search_results = list(search_results)
        self.queries = []
        self.status_updates = []
        self.budget_updates = []
        self.created_ads = []
        self.created_conversion_actions = []
        self.error = None

    def _check(self):
        if self.error is not None:
            raise self.error

    def search(self, query):
        self.queries.append(str(query))
        self._check()
        return self.search_results.pop(0) if self.search_results else []

    def update_campaign_status(self, campaign_id, status):
        self._check()
        self.status_updates.append((campaign_id, status))
        return f"customers/{self.customer_id}/campaigns/{campaign_id}"

    def update_campaign_budget_amount(self, budget_id, amount_micros):
        self._check()
        self.budget_updates.append((budget_id, amount_micros))
        return f"customers/{self.customer_id}/campaignBudgets/{budget_id}"

    def create_responsive_display_ad(self, ad_group_id, draft):
        self._check()
        self.created_ads.append((ad_group_id, draft))
        return f"customers/{self.customer_id}/adGroupAds/{ad_group_id}~777"

    def create_conversion_action(self, draft):
        self._check()
        self.created_conversion_actions.append(draft)
        return f"customers/{self.customer_id}/conversionActions/888"


def campaign_row(
    campaign_id="111",
    name="Brand Search",
    status="ENABLED",
    channel="SEARCH",
    budget_micros="50000000",
    clicks="1234",
    impressions="45678",
    ctr=0.027,
    average_cpc=10004.59,
    cost_micros="12345670",
    conversions=3.0,
    conversions_value=150.0,
    **extra_metrics,
):
    """A campaign row shaped like json_format.MessageToDict output."""
    metrics = {
        "clicks": clicks,
        "impressions": impressions,
        "ctr": ctr,
        "averageCpc": average_cpc,
        "costMicros": cost_micros,
        "conversions": conversions,
        "conversionsValue": conversions_value,
    }
    metrics.update(extra_metrics)
    return {
        "campaign": {
            "resourceName": f"customers/{CUSTOMER_ID}/campaigns/{campaign_id}",
            "id": campaign_id,
            "name": name,
            "status": status,
            "advertisingChannelType": channel,
        },
        "campaignBudget": {
            "resourceName": f"customers/{CUSTOMER_ID}/campaignBudgets/9{campaign_id}",
            "amountMicros": budget_micros,
        },
        "metrics": metrics,
    }


@pytest.fixture
def settings():
    return Settings(
        credentials=Credentials(
            client_id="client-id",
            client_secret="client-secret",
            developer_token="dev-token",
            refresh_token="refresh-token",
            login_customer_id="4850172260",
        ),
        customer_id=CUSTOMER_ID,
    )


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def dispatcher(account, settings):
    return ToolDispatcher(account, settings, today=lambda: TODAY)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging config a test installed; it may hold a closed capture stream."""
    yield
    structlog.reset_defaults()


# Pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
