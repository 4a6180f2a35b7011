"""Import operations for Cognito user pools."""

from pathlib import Path

from ..core.exceptions import OperationNotImplementedError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


def import_users(user_pool_id: str, csv_file: Path) -> None:
    """Import users from a CSV file into a pool.

    Not implemented; always raises without contacting the pool.

    Raises:
        OperationNotImplementedError: Always
    """
    logger.error(
        f"Import of {csv_file} into {user_pool_id} requested but not implemented",
        extra={"user_pool_id": user_pool_id, "file_path": str(csv_file)},
    )
    raise OperationNotImplementedError(
        "import-users", details="Importing users from CSV is not supported yet"
    )
