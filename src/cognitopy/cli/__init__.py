"""CLI module for Cognito user exports."""

from .main import cli
from .validators import (
    validate_export_format,
    validate_header_style,
    validate_import_file,
    validate_user_pool_id,
)

__all__ = [
    "cli",
    "validate_export_format",
    "validate_header_style",
    "validate_import_file",
    "validate_user_pool_id",
]
