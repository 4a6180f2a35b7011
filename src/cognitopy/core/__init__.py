"""Core functionality for Cognito user exports."""

from cognitopy.core.config import (
    check_env_file,
    get_env_config,
    region_from_user_pool_id,
)
from cognitopy.core.exceptions import AuthConfigError, wrap_client_error

__all__ = [
    "AuthConfigError",
    "check_env_file",
    "get_env_config",
    "region_from_user_pool_id",
    "wrap_client_error",
]
