"""Input validation for Google Ads MCP Server."""
from typing import Any, List
import math
import re

from ..errors import ValidationError

CONVERSION_ACTION_TYPES = ["UPLOAD_CLICKS", "WEBSITE", "CLICK_TO_CALL", "WEBSITE_CALL"]
CONVERSION_ACTION_CATEGORIES = ["PURCHASE", "LEAD", "PAGE_VIEW", "SIGNUP", "OTHER"]

MAX_TEXT_ASSETS = 5


def _validate_numeric_id(value: Any, label: str) -> str:
    # Tool arguments may arrive as JSON numbers
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)

    if not value or not isinstance(value, str):
        raise ValidationError(f"{label} must be a non-empty string")

    value = value.strip()
    if not re.match(r'^\d+$', value):
        raise ValidationError(f"{label} must be numeric")

    return value


def validate_campaign_id(campaign_id: Any) -> str:
    """
    Validate campaign ID format.

    Args:
        campaign_id: Campaign ID to validate

    Returns:
        The normalized campaign ID

    Raises:
        ValidationError: If validation fails
    """
    return _validate_numeric_id(campaign_id, "Campaign ID")


def validate_ad_group_id(ad_group_id: Any) -> str:
    """
    Validate ad group ID format.

    Args:
        ad_group_id: Ad group ID to validate

    Returns:
        The normalized ad group ID

    Raises:
        ValidationError: If validation fails
    """
    return _validate_numeric_id(ad_group_id, "Ad group ID")


def _number(value: Any, label: str) -> float:
    # Schema types are advisory, so "7" counts as a number
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ValidationError(f"{label} must be a number")

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number")

    if not math.isfinite(value):
        raise ValidationError(f"{label} must be a finite number")

    return float(value)


def _whole_number(value: Any, label: str) -> int:
    value = _number(value, label)
    if value != int(value) or value < 1:
        raise ValidationError(f"{label} must be a positive whole number")

    return int(value)


def validate_days(days: Any) -> int:
    """Validate the look-back window in days."""
    return _whole_number(days, "Days")


def validate_limit(limit: Any) -> int:
    """Validate the number of rows to return."""
    return _whole_number(limit, "Limit")


def validate_budget_amount(budget: Any) -> float:
    """
    Validate daily budget amount.

    Args:
        budget: Daily budget in currency units

    Returns:
        The budget as a float

    Raises:
        ValidationError: If validation fails
    """
    budget = _number(budget, "Budget amount")
    if budget <= 0:
        raise ValidationError("Budget amount must be greater than 0")

    return budget


def validate_text_assets(texts: Any, label: str, max_length: int) -> List[str]:
    """
    Validate a list of ad text assets (headlines or descriptions).

    Args:
        texts: List of strings
        label: Human readable name used in error messages
        max_length: Maximum characters per entry

    Returns:
        The list of texts

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(texts, list):
        raise ValidationError(f"{label} must be a list")

    if len(texts) == 0:
        raise ValidationError(f"{label} list cannot be empty")

    if len(texts) > MAX_TEXT_ASSETS:
        raise ValidationError(f"Too many {label.lower()} (max: {MAX_TEXT_ASSETS})")

    for text in texts:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(f"Each entry in {label.lower()} must be a non-empty string")

        if len(text) > max_length:
            raise ValidationError(
                f"{label} entries must be at most {max_length} characters: {text}"
            )

    return texts


def validate_conversion_action_name(name: Any) -> str:
    """Validate the name of a new conversion action."""
    if not name or not isinstance(name, str):
        raise ValidationError("Conversion action name must be a non-empty string")

    if len(name) > 255:
        raise ValidationError("Conversion action name must be between 1 and 255 characters")

    return name


def validate_choice(value: Any, choices: List[str], label: str) -> str:
    """Validate that value is one of the allowed enum names."""
    if not value or not isinstance(value, str):
        raise ValidationError(f"{label} must be a non-empty string")

    value_upper = value.upper()
    if value_upper not in choices:
        raise ValidationError(f"{label} must be one of: {', '.join(choices)}")

    return value_upper


def validate_conversion_value(value: Any) -> float:
    """Validate the default value of a conversion action."""
    value = _number(value, "Conversion value")
    if value < 0:
        raise ValidationError("Conversion value cannot be negative")

    return value
