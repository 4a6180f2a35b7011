"""Click-based CLI entry point for the cognitopy user export tool."""

import sys
from typing import Any, NoReturn

import click

from ..core.exceptions import ValidationError
from ..utils.display_utils import RED, RESET, YELLOW, print_error
from ..utils.rich_utils import install_rich_tracebacks
from .commands import OperationHandler
from .validators import (
    validate_export_format,
    validate_header_style,
    validate_import_file,
    validate_user_pool_id,
)

# Command and option names match case-insensitively (--Format, Export-Users)
CONTEXT_SETTINGS = {"token_normalize_func": lambda token: token.lower()}


class HelpOnUnknownGroup(click.Group):
    """Group that prints its help and exits 0 for an unknown subcommand."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help())
            ctx.exit(0)


def _abort_with_usage(ctx: click.Context, error: ValidationError) -> NoReturn:
    print_error(error.message)
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


@click.group(
    cls=HelpOnUnknownGroup,
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """cognitopy - export users from an AWS Cognito user pool.

    \b
    Usage
      $ cognitopy export-users --user-pool-id <user-pool-id> [--format <JSON/CSV>]
      $ cognitopy import-users --user-pool-id <user-pool-id> --file <csv-file>

    AWS credentials come from ~/.aws/credentials (see --profile) or the
    standard AWS environment variables.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("export-users")
@click.option("--user-pool-id", help="Cognito user pool id, e.g. eu-west-1_AbC123")
@click.option(
    "--format", "export_format", help="Export format: JSON or CSV (default: JSON)"
)
@click.option("--profile", help="Named AWS profile to use for credentials")
@click.option(
    "--header-style",
    help="CSV header names: cognito (default) or pinpoint",
)
@click.pass_context
def export_users_command(
    ctx: click.Context,
    user_pool_id: str | None,
    export_format: str | None,
    profile: str | None,
    header_style: str | None,
) -> None:
    """Export all users of a user pool to <user-pool-id>.<format>."""
    try:
        user_pool_id = validate_user_pool_id(user_pool_id)
        export_format = validate_export_format(export_format)
        header_style = validate_header_style(header_style)
    except ValidationError as e:
        _abort_with_usage(ctx, e)

    handler = OperationHandler()
    ctx.exit(
        handler.handle_export_users(user_pool_id, export_format, profile, header_style)
    )


@cli.command("import-users")
@click.option("--user-pool-id", help="Cognito user pool id, e.g. eu-west-1_AbC123")
@click.option("--file", "csv_file", help="CSV file with the users to import")
@click.pass_context
def import_users_command(
    ctx: click.Context, user_pool_id: str | None, csv_file: str | None
) -> None:
    """Import users from a CSV file (not implemented yet)."""
    try:
        user_pool_id = validate_user_pool_id(user_pool_id)
        path = validate_import_file(csv_file)
    except ValidationError as e:
        _abort_with_usage(ctx, e)

    handler = OperationHandler()
    ctx.exit(handler.handle_import_users(user_pool_id, path))


def main(args: Any = None) -> None:
    """Main entry point for the CLI application."""
    try:
        install_rich_tracebacks()
        cli(args=args)
    except KeyboardInterrupt:
        click.echo(f"\n{YELLOW}Operation interrupted by user.{RESET}")
        sys.exit(0)
    except Exception as e:
        click.echo(f"{RED}Unexpected error: {e}{RESET}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
