"""Cognito user pool export tool - Main Package."""

# CLI
from .cli import (
    cli,
    validate_export_format,
    validate_header_style,
    validate_import_file,
    validate_user_pool_id,
)
from .cli.main import main
from .core.cognito_client import CognitoClientManager, get_cognito_client
from .core.config import (
    COMMON_ATTRIBUTES,
    CUSTOM_ATTRIBUTE_PREFIX,
    GENERAL_ATTRIBUTES,
    get_env_config,
    region_from_user_pool_id,
)
from .core.exceptions import (
    APIError,
    AuthConfigError,
    CognitoPyError,
    FileOperationError,
    OperationNotImplementedError,
    RateLimitError,
    ValidationError,
)
from .core.sdk_operations import CognitoUserOperations, get_user_operations

# Models
from .models import (
    ClientConfig,
    ExportConfig,
    ExportResult,
    UserAttribute,
    UserPage,
    UserRecord,
)

# Operations
from .operations import (
    export_users,
    fetch_all_users,
    import_users,
    render_users_json,
)

# Utilities
from .utils import (
    ColumnSpec,
    build_column_specs,
    extract_custom_attribute_names,
    get_logger,
    render_users_csv,
    setup_logging,
    translate_header,
)

__version__ = "1.0.0"

__all__ = [
    # Core
    "CognitoClientManager",
    "CognitoUserOperations",
    "get_cognito_client",
    "get_user_operations",
    "get_env_config",
    "region_from_user_pool_id",
    "COMMON_ATTRIBUTES",
    "GENERAL_ATTRIBUTES",
    "CUSTOM_ATTRIBUTE_PREFIX",
    # Exceptions
    "CognitoPyError",
    "AuthConfigError",
    "ValidationError",
    "FileOperationError",
    "APIError",
    "RateLimitError",
    "OperationNotImplementedError",
    # Models
    "UserAttribute",
    "UserRecord",
    "UserPage",
    "ClientConfig",
    "ExportConfig",
    "ExportResult",
    # Operations
    "fetch_all_users",
    "export_users",
    "render_users_json",
    "import_users",
    # Utilities
    "ColumnSpec",
    "build_column_specs",
    "extract_custom_attribute_names",
    "render_users_csv",
    "translate_header",
    "get_logger",
    "setup_logging",
    # CLI
    "cli",
    "main",
    "validate_user_pool_id",
    "validate_export_format",
    "validate_header_style",
    "validate_import_file",
]
