"""
CLI Error Handling
==================

Consistent exit codes and error output for the command-line tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from supertiny.errors import SuperTinyError


class ExitCode(IntEnum):
    """Exit codes for the CLI."""
    SUCCESS = 0
    COMPILE_ERROR = 1    # Lexer, parser or tree-walker error
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised while compiling and exit.

    Compiler errors are already formatted with an "error:" prefix and
    are echoed unchanged.

    Raises:
        SystemExit: Always
    """
    if isinstance(error, SuperTinyError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.COMPILE_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
