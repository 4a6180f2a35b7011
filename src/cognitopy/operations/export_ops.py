"""Export operations for Cognito user pools."""

import json
from datetime import date, datetime
from typing import Any

from ..core.config import DEFAULT_HEADER_STYLE
from ..core.interfaces import UserDirectoryProtocol
from ..models.config import ExportConfig, ExportResult
from ..models.user import UserRecord
from ..utils.csv_utils import render_users_csv
from ..utils.file_utils import write_output_file
from ..utils.logging_utils import get_logger, log_operation

logger = get_logger(__name__)


def fetch_all_users(
    directory: UserDirectoryProtocol, user_pool_id: str
) -> tuple[list[dict[str, Any]], int]:
    """Read every page of the pool's user listing into memory.

    Pages are requested one after another, each with the token of the
    previous page, until a page comes back without a token. Remote errors
    propagate unchanged and abort the whole read.

    Args:
        directory: Source of ListUsers pages
        user_pool_id: Cognito user pool id

    Returns:
        Tuple[List[Dict[str, Any]], int]: (raw user records, number of pages)
    """
    records: list[dict[str, Any]] = []
    token: str | None = None
    pages = 0

    while True:
        page = directory.list_users(user_pool_id, token)
        pages += 1
        records.extend(page.records)
        logger.debug(
            f"Fetched page {pages} with {len(page.records)} users",
            extra={"user_pool_id": user_pool_id, "page": pages},
        )
        if not page.has_more:
            break
        token = page.next_token

    logger.info(
        f"Fetched {len(records)} users in {pages} page(s)",
        extra={"user_pool_id": user_pool_id},
    )
    return records, pages


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_users_json(records: list[dict[str, Any]]) -> str:
    """Serialize raw records as one compact JSON array."""
    return json.dumps(
        records, default=_json_default, ensure_ascii=False, separators=(",", ":")
    )


def build_csv_export(
    directory: UserDirectoryProtocol,
    user_pool_id: str,
    records: list[dict[str, Any]],
    header_style: str = DEFAULT_HEADER_STYLE,
) -> str:
    """Fetch the pool's CSV header and project the records onto it."""
    header = directory.get_csv_header(user_pool_id)
    users = [UserRecord.from_cognito_data(record) for record in records]
    return render_users_csv(users, header, header_style)


@log_operation("export_users")
def export_users(
    directory: UserDirectoryProtocol, config: ExportConfig
) -> ExportResult:
    """Export all users of a pool to ``<user_pool_id>.<format>``.

    The whole pool is held in memory before anything is written. An existing
    output file is overwritten.

    Args:
        directory: Source of ListUsers pages and the CSV header
        config: Export configuration with a validated format

    Returns:
        ExportResult: Written path and counts

    Raises:
        ValueError: If the export format is not json or csv
    """
    if config.export_format not in ("json", "csv"):
        raise ValueError(f"Unsupported export format: {config.export_format}")

    records, pages = fetch_all_users(directory, config.user_pool_id)

    if config.export_format == "json":
        content = render_users_json(records)
    else:
        content = build_csv_export(
            directory, config.user_pool_id, records, config.header_style
        )

    output_path = write_output_file(config.output_path, content)
    logger.info(
        f"Wrote {len(records)} users to {output_path}",
        extra={"user_pool_id": config.user_pool_id, "file_path": str(output_path)},
    )

    return ExportResult(
        output_path=output_path,
        export_format=config.export_format,
        user_count=len(records),
        page_count=pages,
    )
