"""Utilities module for Cognito user exports."""

from .csv_utils import (
    ColumnSpec,
    attribute_extractor,
    build_column_specs,
    extract_custom_attribute_names,
    render_users_csv,
    translate_header,
)
from .file_utils import has_extension, validate_file_path, write_output_file
from .logging_utils import get_logger, log_operation, setup_logging

__all__ = [
    # CSV utilities
    "ColumnSpec",
    "attribute_extractor",
    "build_column_specs",
    "extract_custom_attribute_names",
    "render_users_csv",
    "translate_header",
    # File utilities
    "has_extension",
    "validate_file_path",
    "write_output_file",
    # Logging utilities
    "get_logger",
    "log_operation",
    "setup_logging",
]
