"""CLI argument validation utilities."""

from pathlib import Path

from ..core.config import (
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_HEADER_STYLE,
    EXPORT_FORMATS,
    HEADER_STYLES,
    region_from_user_pool_id,
)
from ..core.exceptions import FileOperationError, ValidationError
from ..utils.file_utils import has_extension, validate_file_path


def validate_user_pool_id(user_pool_id: str | None) -> str:
    """Validate the --user-pool-id option.

    Args:
        user_pool_id: Raw option value

    Returns:
        Stripped user pool id

    Raises:
        ValidationError: If the id is missing or has no region prefix
    """
    if not user_pool_id or not user_pool_id.strip():
        raise ValidationError(
            "Missing arguments: --user-pool-id is required!", field="user_pool_id"
        )
    user_pool_id = user_pool_id.strip()
    region_from_user_pool_id(user_pool_id)
    return user_pool_id


def validate_export_format(export_format: str | None) -> str:
    """Validate the --format option.

    Matching is case-insensitive; a missing or empty value means JSON.

    Raises:
        ValidationError: If the format is not JSON or CSV
    """
    if not export_format:
        return DEFAULT_EXPORT_FORMAT

    normalized = export_format.lower()
    if normalized not in EXPORT_FORMATS:
        raise ValidationError(
            "Invalid export format: only JSON and CSV are supported!",
            field="format",
            value=export_format,
        )
    return normalized


def validate_header_style(header_style: str | None) -> str:
    """Validate the --header-style option."""
    if not header_style:
        return DEFAULT_HEADER_STYLE

    normalized = header_style.lower()
    if normalized not in HEADER_STYLES:
        raise ValidationError(
            f"Header style must be one of: {', '.join(HEADER_STYLES)}",
            field="header_style",
            value=header_style,
        )
    return normalized


def validate_import_file(file_path: str | None) -> Path:
    """Validate the --file option of import-users.

    Raises:
        ValidationError: If the file is missing, unreadable or not a .csv file
    """
    if not file_path:
        raise ValidationError("Missing arguments: --file is required!", field="file")

    try:
        path = validate_file_path(file_path, "read")
    except FileOperationError as e:
        raise ValidationError(e.message, field="file", value=file_path) from e

    if not has_extension(path, "csv"):
        raise ValidationError(
            "The specified file is not in CSV format!", field="file", value=file_path
        )
    return path
