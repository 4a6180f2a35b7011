"""File operation utilities for Cognito user exports."""

import os
from pathlib import Path

from cognitopy.core.exceptions import FileOperationError


def validate_file_path(file_path: str, operation: str = "access") -> Path:
    """Validate a file path for the specified operation.

    Args:
        file_path: Path to validate
        operation: Type of operation (read, write, access)

    Returns:
        Path object if valid

    Raises:
        FileOperationError: If path is invalid for the operation
    """
    try:
        path = Path(file_path).resolve()
    except (OSError, ValueError) as e:
        raise FileOperationError(f"Invalid file path '{file_path}': {e}") from e

    if operation == "read":
        if not path.exists():
            raise FileOperationError(
                "The specified file does not exist", file_path=str(path)
            )
        if not path.is_file():
            raise FileOperationError("Path is not a file", file_path=str(path))
        if not os.access(path, os.R_OK):
            raise FileOperationError(
                "Permission denied reading file", file_path=str(path)
            )
    elif operation == "write":
        parent = path.parent
        if not parent.is_dir():
            raise FileOperationError(
                "Directory does not exist", file_path=str(parent)
            )
        if not os.access(parent, os.W_OK):
            raise FileOperationError(
                "Permission denied writing to directory", file_path=str(parent)
            )
        if path.exists() and not path.is_file():
            raise FileOperationError(
                "Path exists but is not a file", file_path=str(path)
            )

    return path


def has_extension(file_path: str | Path, extension: str) -> bool:
    """Check the text after the last dot, case-sensitively."""
    name = Path(file_path).name
    return "." in name and name.rsplit(".", 1)[1] == extension


def write_output_file(file_path: str | Path, content: str) -> Path:
    """Write an export file in a single call, replacing any existing file.

    The write is not atomic; an interrupted run can leave a truncated file.

    Args:
        file_path: Destination path
        content: Complete file content

    Returns:
        Path: The written path

    Raises:
        FileOperationError: If the file cannot be written
    """
    path = Path(file_path)
    try:
        # newline="" keeps CRLF row terminators untouched
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileOperationError(
            "Failed to write export file",
            file_path=str(path),
            operation="write",
            details=str(e),
        ) from e
    return path
