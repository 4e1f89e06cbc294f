"""Security module for input validation."""
from .validator import (
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

__all__ = [
    "CONVERSION_ACTION_CATEGORIES",
    "CONVERSION_ACTION_TYPES",
    "ValidationError",
    "validate_ad_group_id",
    "validate_budget_amount",
    "validate_campaign_id",
    "validate_choice",
    "validate_conversion_action_name",
    "validate_conversion_value",
    "validate_days",
    "validate_limit",
    "validate_text_assets",
]
