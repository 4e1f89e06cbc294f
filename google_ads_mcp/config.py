"""Configuration module for the Google Ads API client.

Credentials come from the ``GOOGLE_ADS_CONFIG`` environment variable (a JSON
object) or, when that is not set, from the google-ads.yaml file named by
``GOOGLE_ADS_YAML_PATH``. A ``.env`` file in the working directory is read
first but never overrides the real environment.
"""
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .errors import InitializationError

REQUIRED_FIELDS = [
    "client_id",
    "client_secret",
    "developer_token",
    "refresh_token",
    "login_customer_id",
]


@dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str
    developer_token: str
    refresh_token: str
    login_customer_id: str
    customer_id: Optional[str] = None

    def to_client_config(self) -> Dict[str, Any]:
        """Dict accepted by ``GoogleAdsClient.load_from_dict``."""
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "developer_token": self.developer_token,
            "refresh_token": self.refresh_token,
            "login_customer_id": self.login_customer_id,
            "use_proto_plus": True,
        }


@dataclass(frozen=True)
class AdPlaceholders:
    """Fixed values for display ad fields the tools do not expose."""
    business_name: str = "AutoTinder AI"
    long_headline: str = "A very long headline for the ad"
    marketing_image_asset_id: str = "ASSET_ID_1"
    square_marketing_image_asset_id: str = "ASSET_ID_2"
    final_url: Optional[str] = None


@dataclass(frozen=True)
class Settings:
    credentials: Credentials
    customer_id: str
    currency_code: str = "EUR"
    currency_symbol: str = "€"
    placeholders: AdPlaceholders = field(default_factory=AdPlaceholders)
    log_level: str = "INFO"


def normalize_customer_id(customer_id: Any) -> str:
    """Get the customer ID without hyphens."""
    return str(customer_id).strip().replace("-", "")


def _parse_credentials_blob(raw: str) -> Dict[str, Any]:
    try:
        config = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InitializationError(f"GOOGLE_ADS_CONFIG is not valid JSON: {e}")

    if not isinstance(config, dict):
        raise InitializationError("GOOGLE_ADS_CONFIG must be a JSON object")

    return config


def _read_yaml_credentials(config_path: str) -> Dict[str, Any]:
    path = Path(config_path)

    if not path.exists():
        raise InitializationError(f"Google Ads config file not found at: {path}")

    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InitializationError(f"Invalid YAML in config file: {e}")

    if not isinstance(config, dict):
        raise InitializationError(f"Google Ads config file must be a mapping: {path}")

    return config


def load_credentials(environ: Mapping[str, str]) -> Credentials:
    """
    Read and validate credential material.

    Args:
        environ: Environment mapping to read from

    Returns:
        Credentials with all required fields present

    Raises:
        InitializationError: If no credential source is configured, it cannot
            be parsed, or a required field is missing or empty
    """
    raw = environ.get("GOOGLE_ADS_CONFIG")
    yaml_path = environ.get("GOOGLE_ADS_YAML_PATH")

    if raw:
        config = _parse_credentials_blob(raw)
    elif yaml_path:
        config = _read_yaml_credentials(yaml_path)
    else:
        raise InitializationError("GOOGLE_ADS_CONFIG environment variable is required")

    for field_name in REQUIRED_FIELDS:
        if not config.get(field_name):
            raise InitializationError(f"Missing required field: {field_name}")

    customer_id = config.get("customer_id")
    return Credentials(
        client_id=str(config["client_id"]),
        client_secret=str(config["client_secret"]),
        developer_token=str(config["developer_token"]),
        refresh_token=str(config["refresh_token"]),
        login_customer_id=normalize_customer_id(config["login_customer_id"]),
        customer_id=normalize_customer_id(customer_id) if customer_id else None,
    )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build runtime settings from the environment.

    The customer ID override ``GOOGLE_ADS_CUSTOMER_ID`` takes precedence over
    the ``customer_id`` embedded in the credentials.

    Raises:
        InitializationError: If credentials or the customer ID are missing
    """
    if environ is None:
        load_dotenv(override=False)
        environ = os.environ

    credentials = load_credentials(environ)

    customer_id = environ.get("GOOGLE_ADS_CUSTOMER_ID") or credentials.customer_id
    if not customer_id:
        raise InitializationError("GOOGLE_ADS_CUSTOMER_ID environment variable is required")

    defaults = AdPlaceholders()
    placeholders = AdPlaceholders(
        business_name=environ.get("GOOGLE_ADS_BUSINESS_NAME", defaults.business_name),
        long_headline=environ.get("GOOGLE_ADS_LONG_HEADLINE", defaults.long_headline),
        marketing_image_asset_id=environ.get(
            "GOOGLE_ADS_MARKETING_IMAGE_ASSET_ID", defaults.marketing_image_asset_id
        ),
        square_marketing_image_asset_id=environ.get(
            "GOOGLE_ADS_SQUARE_MARKETING_IMAGE_ASSET_ID", defaults.square_marketing_image_asset_id
        ),
        final_url=environ.get("GOOGLE_ADS_FINAL_URL") or None,
    )

    return Settings(
        credentials=credentials,
        customer_id=normalize_customer_id(customer_id),
        currency_code=environ.get("GOOGLE_ADS_CURRENCY_CODE", "EUR"),
        currency_symbol=environ.get("GOOGLE_ADS_CURRENCY_SYMBOL", "€"),
        placeholders=placeholders,
        log_level=environ.get("GOOGLE_ADS_MCP_LOG_LEVEL", "INFO").upper(),
    )
