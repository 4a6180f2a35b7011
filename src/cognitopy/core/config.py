"""Configuration for Cognito user pool exports."""

import os
from typing import Any

import dotenv

from cognitopy.core.exceptions import ValidationError

# Export formats
EXPORT_FORMATS = ("json", "csv")
DEFAULT_EXPORT_FORMAT = "json"

# CSV header naming styles
HEADER_STYLES = ("cognito", "pinpoint")
DEFAULT_HEADER_STYLE = "cognito"

# CSV column configuration
DELIVERY_CHANNEL = "EMAIL"

COMMON_ATTRIBUTES = [
    "ChannelType",
    "cognito:username",
    "cognito:mfa_enabled",
    "updated_at",
]

GENERAL_ATTRIBUTES = [
    "name",
    "email",
    "email_verified",
    "phone_number",
    "phone_number_verified",
]

# Rendered as "false" instead of an empty field when missing
VERIFICATION_ATTRIBUTES = frozenset({"email_verified", "phone_number_verified"})

CUSTOM_ATTRIBUTE_PREFIX = "custom:"
CSV_LINE_TERMINATOR = "\r\n"
CSV_DELIMITER = ","

USER_POOL_ID_SEPARATOR = "_"


def check_env_file() -> None:
    """Check if .env file exists and load it."""
    env_path = ".env"
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def get_env_config() -> dict[str, Any]:
    """Get AWS client settings from environment variables.

    Environment variables:
        COGNITOPY_AWS_PROFILE: Named AWS profile (optional)
        COGNITOPY_ENDPOINT_URL: Alternative Cognito endpoint (optional)

    Returns:
        Dict[str, Any]: Configuration dictionary, unset values are None
    """
    check_env_file()

    return {
        "profile": os.getenv("COGNITOPY_AWS_PROFILE") or None,
        "endpoint_url": os.getenv("COGNITOPY_ENDPOINT_URL") or None,
    }


def region_from_user_pool_id(user_pool_id: str) -> str:
    """Derive the AWS region from a user pool id.

    Pool ids look like ``eu-west-1_AbCdEf123``; the region is everything
    before the first underscore.

    Raises:
        ValidationError: If the id does not contain a region prefix
    """
    region, separator, _ = user_pool_id.partition(USER_POOL_ID_SEPARATOR)
    if not separator or not region:
        raise ValidationError(
            "User pool id must look like <region>_<id>",
            field="user_pool_id",
            value=user_pool_id,
        )
    return region
