"""
Unified CLI Error Handling
==========================

Maps exceptions raised while assembling to a diagnostic on stderr and a
process exit code.

| Exception                          | Exit code       |
|------------------------------------|-----------------|
| HackError (assembly failure)       | 1 BUILD_ERROR   |
| click.BadParameter, ValueError     | 2 INVALID_ARGS  |
| FileNotFoundError, PermissionError | 2 INVALID_ARGS  |
| anything else                      | 3 INTERNAL_ERROR|
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from hack_sdk.errors import HackError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Assembly error
    INVALID_ARGS = 2     # Invalid arguments or unreadable files (click uses 2 for usage errors)
    INTERNAL_ERROR = 3   # Unexpected internal error


# Checked in order; first match wins
_ARGUMENT_ERRORS = (click.BadParameter, FileNotFoundError, PermissionError, ValueError)


def exit_code_for(error: Exception) -> ExitCode:
    """Return the exit code a CLI tool should use for error."""
    if isinstance(error, HackError):
        return ExitCode.BUILD_ERROR
    if isinstance(error, _ARGUMENT_ERRORS):
        return ExitCode.INVALID_ARGS
    return ExitCode.INTERNAL_ERROR


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report error on stderr and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for build errors (e.g., "Assembly")

    Raises:
        SystemExit: Always
    """
    code = exit_code_for(error)

    if code == ExitCode.BUILD_ERROR:
        prefix = f"{error_type} error: " if error_type else "Error: "
        click.echo(f"{prefix}{error}", err=True)
    elif code == ExitCode.INVALID_ARGS:
        click.echo(f"Error: {error}", err=True)
    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()

    sys.exit(code)
