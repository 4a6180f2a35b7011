"""Operations for Cognito user exports."""

from .export_ops import (
    build_csv_export,
    export_users,
    fetch_all_users,
    render_users_json,
)
from .import_ops import import_users

__all__ = [
    "build_csv_export",
    "export_users",
    "fetch_all_users",
    "render_users_json",
    "import_users",
]
