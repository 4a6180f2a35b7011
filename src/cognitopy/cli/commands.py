"""Command handlers for CLI operations."""

from pathlib import Path

import click

from ..core.config import get_env_config
from ..core.exceptions import wrap_client_error
from ..core.sdk_operations import get_user_operations
from ..models.config import ClientConfig, ExportConfig
from ..operations.export_ops import export_users
from ..operations.import_ops import import_users
from ..utils.display_utils import RED, RESET
from ..utils.logging_utils import get_logger
from ..utils.rich_utils import get_console, summary_table

logger = get_logger(__name__)


class OperationHandler:
    """Runs CLI operations and turns their outcome into an exit code.

    Any error raised while an operation runs is reported and mapped to a
    non-zero code; the cause is not encoded in the code itself.
    """

    def _build_client_config(
        self, user_pool_id: str, profile: str | None
    ) -> ClientConfig:
        env_config = get_env_config()
        return ClientConfig.for_user_pool(
            user_pool_id,
            profile=profile or env_config["profile"],
            endpoint_url=env_config["endpoint_url"],
        )

    def _handle_operation_error(self, error: Exception, operation_name: str) -> int:
        """Report an operation failure.

        Args:
            error: The exception that occurred
            operation_name: Name of the operation that failed

        Returns:
            int: Exit code for the failure
        """
        wrapped = wrap_client_error(error, operation_name)
        logger.error(
            f"{operation_name} failed: {wrapped}", extra={"operation": operation_name}
        )
        click.echo(f"{RED}{operation_name} failed: {wrapped}{RESET}", err=True)
        return 1

    def handle_export_users(
        self,
        user_pool_id: str,
        export_format: str,
        profile: str | None = None,
        header_style: str = "cognito",
    ) -> int:
        """Handle the export-users operation.

        Args:
            user_pool_id: Validated user pool id
            export_format: Validated format (json or csv)
            profile: Optional named AWS profile
            header_style: CSV header naming style

        Returns:
            int: 0 on success, 1 on any error
        """
        try:
            client_config = self._build_client_config(user_pool_id, profile)
            directory = get_user_operations(client_config)
            result = export_users(
                directory,
                ExportConfig(
                    user_pool_id=user_pool_id,
                    export_format=export_format,
                    header_style=header_style,
                ),
            )
        except Exception as e:
            return self._handle_operation_error(e, "Export users")

        get_console().print(
            summary_table(
                "Export Summary",
                {
                    "User pool": user_pool_id,
                    "Region": client_config.region,
                    "Format": result.export_format.upper(),
                    "Users": result.user_count,
                    "Pages": result.page_count,
                    "Output file": result.output_path,
                },
            )
        )
        return 0

    def handle_import_users(self, user_pool_id: str, csv_file: Path) -> int:
        """Handle the import-users operation (not implemented)."""
        try:
            import_users(user_pool_id, csv_file)
        except Exception as e:
            return self._handle_operation_error(e, "Import users")
        return 0
