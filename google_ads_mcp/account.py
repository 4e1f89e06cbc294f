"""
Google Ads account handle.

``GoogleAdsAccount`` is the only place that talks to the ``google-ads``
library. It runs GAQL searches, returning rows as plain dicts, and applies the
handful of mutations the tools need. Library failures are re-raised as
``RemoteCallError``.
"""
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

import structlog
from google.ads.googleads.client import GoogleAdsClient
from google.ads.googleads.errors import GoogleAdsException
from google.auth.exceptions import RefreshError
from google.protobuf import field_mask_pb2, json_format

from .config import Settings
from .errors import InitializationError, RemoteCallError

logger = structlog.get_logger(__name__)

# Tool-facing names that differ from ConversionActionTypeEnum
CONVERSION_TYPE_ALIASES = {"WEBSITE": "WEBPAGE"}


@dataclass(frozen=True)
class DisplayAdDraft:
    headlines: List[str]
    descriptions: List[str]
    long_headline: str
    business_name: str
    marketing_image_asset_id: str
    square_marketing_image_asset_id: str
    enable_video_creation: bool = False
    final_url: Optional[str] = None


@dataclass(frozen=True)
class ConversionActionDraft:
    name: str
    type: str
    category: str
    default_value: float = 0.0
    currency_code: str = "EUR"


class AccountClient(Protocol):
    """What the dispatcher needs from an account."""

    customer_id: str

    def search(self, query: Any) -> List[Dict[str, Any]]: ...

    def update_campaign_status(self, campaign_id: str, status: str) -> str: ...

    def update_campaign_budget_amount(self, budget_id: str, amount_micros: int) -> str: ...

    def create_responsive_display_ad(self, ad_group_id: str, draft: DisplayAdDraft) -> str: ...

    def create_conversion_action(self, draft: ConversionActionDraft) -> str: ...


def _remote_error(ex: GoogleAdsException) -> RemoteCallError:
    error = ex.failure.errors[0] if ex.failure and ex.failure.errors else None
    message = error.message if error else str(ex)
    return RemoteCallError(
        f"Google Ads API Error: {message}",
        error_code=str(error.error_code) if error else None,
    )


class GoogleAdsAccount:
    """A single Google Ads customer account."""

    def __init__(self, client: GoogleAdsClient, customer_id: str):
        self.client = client
        self.customer_id = customer_id
        self._ga_service = client.get_service("GoogleAdsService")

    def search(self, query: Any) -> List[Dict[str, Any]]:
        """Execute GAQL query and return results as dicts"""
        query_text = str(query)
        start_time = time.time()
        logger.debug("gaql_query_started", customer_id=self.customer_id, query=query_text)

        try:
            response = self._ga_service.search(customer_id=self.customer_id, query=query_text)
            results = [json_format.MessageToDict(row._pb) for row in response]
        except GoogleAdsException as ex:
            err = _remote_error(ex)
            logger.error("gaql_query_failed", error=str(err), error_code=err.error_code)
            raise err from ex
        except RefreshError as ex:
            logger.error("gaql_query_failed", error=str(ex))
            raise RemoteCallError(f"Google Ads authentication failed: {ex}") from ex

        duration_ms = (time.time() - start_time) * 1000
        logger.info("gaql_query_executed", rows=len(results), duration_ms=round(duration_ms, 2))
        return results

    def _mutate(self, service_name: str, method_name: str, operation: Any) -> str:
        service = self.client.get_service(service_name)
        try:
            response = getattr(service, method_name)(
                customer_id=self.customer_id,
                operations=[operation],
            )
        except GoogleAdsException as ex:
            err = _remote_error(ex)
            logger.error("mutation_failed", service=service_name, error=str(err), error_code=err.error_code)
            raise err from ex
        except RefreshError as ex:
            logger.error("mutation_failed", service=service_name, error=str(ex))
            raise RemoteCallError(f"Google Ads authentication failed: {ex}") from ex

        resource_name = response.results[0].resource_name
        logger.info("mutation_applied", service=service_name, resource_name=resource_name)
        return resource_name

    def _set_update_mask(self, operation: Any, paths: List[str]) -> None:
        field_mask = field_mask_pb2.FieldMask(paths=paths)
        self.client.copy_from(operation.update_mask, field_mask)

    def update_campaign_status(self, campaign_id: str, status: str) -> str:
        """Set only the status of a campaign (ENABLED / PAUSED)."""
        campaign_service = self.client.get_service("CampaignService")
        operation = self.client.get_type("CampaignOperation")
        campaign = operation.update

        campaign.resource_name = campaign_service.campaign_path(self.customer_id, campaign_id)
        campaign.status = getattr(self.client.enums.CampaignStatusEnum, status)
        self._set_update_mask(operation, ["status"])

        return self._mutate("CampaignService", "mutate_campaigns", operation)

    def update_campaign_budget_amount(self, budget_id: str, amount_micros: int) -> str:
        """Set only the amount of a campaign budget."""
        budget_service = self.client.get_service("CampaignBudgetService")
        operation = self.client.get_type("CampaignBudgetOperation")
        budget = operation.update

        budget.resource_name = budget_service.campaign_budget_path(self.customer_id, budget_id)
        budget.amount_micros = amount_micros
        self._set_update_mask(operation, ["amount_micros"])

        return self._mutate("CampaignBudgetService", "mutate_campaign_budgets", operation)

    def _asset_path(self, asset_id: str) -> str:
        return self.client.get_service("AssetService").asset_path(self.customer_id, asset_id)

    def create_responsive_display_ad(self, ad_group_id: str, draft: DisplayAdDraft) -> str:
        """Create an enabled responsive display ad in an ad group."""
        client = self.client
        ad_group_service = client.get_service("AdGroupService")

        operation = client.get_type("AdGroupAdOperation")
        ad_group_ad = operation.create
        ad_group_ad.ad_group = ad_group_service.ad_group_path(self.customer_id, ad_group_id)
        ad_group_ad.status = client.enums.AdGroupAdStatusEnum.ENABLED

        ad = ad_group_ad.ad
        if draft.final_url:
            ad.final_urls.append(draft.final_url)

        display_ad = ad.responsive_display_ad
        for text in draft.headlines:
            headline = client.get_type("AdTextAsset")
            headline.text = text
            display_ad.headlines.append(headline)
        for text in draft.descriptions:
            description = client.get_type("AdTextAsset")
            description.text = text
            display_ad.descriptions.append(description)
        display_ad.long_headline.text = draft.long_headline
        display_ad.business_name = draft.business_name

        marketing_image = client.get_type("AdImageAsset")
        marketing_image.asset = self._asset_path(draft.marketing_image_asset_id)
        display_ad.marketing_images.append(marketing_image)

        square_image = client.get_type("AdImageAsset")
        square_image.asset = self._asset_path(draft.square_marketing_image_asset_id)
        display_ad.square_marketing_images.append(square_image)

        display_ad.control_spec.enable_autogen_video = draft.enable_video_creation

        return self._mutate("AdGroupAdService", "mutate_ad_group_ads", operation)

    def create_conversion_action(self, draft: ConversionActionDraft) -> str:
        """Create an enabled conversion action."""
        client = self.client
        operation = client.get_type("ConversionActionOperation")
        conversion_action = operation.create

        conversion_action.name = draft.name
        conversion_action.type_ = getattr(
            client.enums.ConversionActionTypeEnum, CONVERSION_TYPE_ALIASES.get(draft.type, draft.type)
        )
        conversion_action.category = getattr(client.enums.ConversionActionCategoryEnum, draft.category)
        conversion_action.status = client.enums.ConversionActionStatusEnum.ENABLED
        conversion_action.value_settings.default_value = draft.default_value
        conversion_action.value_settings.default_currency_code = draft.currency_code

        return self._mutate("ConversionActionService", "mutate_conversion_actions", operation)


def load_account(settings: Settings) -> GoogleAdsAccount:
    """Build the account handle for ``settings.customer_id``.

    Raises:
        InitializationError: If the client library rejects the configuration
    """
    try:
        client = GoogleAdsClient.load_from_dict(settings.credentials.to_client_config())
    except ValueError as e:
        raise InitializationError(str(e)) from e

    logger.info(
        "google_ads_client_initialized",
        customer_id=settings.customer_id,
        login_customer_id=settings.credentials.login_customer_id,
    )
    return GoogleAdsAccount(client, settings.customer_id)
