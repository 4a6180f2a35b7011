"""Display utilities for terminal output."""

import click

# Color constants for terminal output
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RESET = "\033[0m"


def print_error(message: str) -> None:
    """Print an error message to stderr.

    Args:
        message: Error message
    """
    click.echo(f"{RED}Error: {message}{RESET}", err=True)
