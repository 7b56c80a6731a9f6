"""
CLI Error Handling
==================

Provides consistent error handling and exit codes for the command-line
viewer.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the viewer."""
    SUCCESS = 0
    ERROR = 1            # Usage error, or tape file cannot be opened
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from mztape.errors import FileOpenError, MZTapeError, UsageError

    if isinstance(error, UsageError):
        click.echo(error.usage, err=True)
        sys.exit(ExitCode.ERROR)

    elif isinstance(error, FileOpenError):
        click.echo(f"Error: {error}", err=True)
        if verbose and error.reason:
            click.echo(f"  {error.reason}", err=True)
        sys.exit(ExitCode.ERROR)

    elif isinstance(error, MZTapeError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.ERROR)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
