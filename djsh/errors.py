"""
Exception hierarchy for djsh.

    ShellError
    ├── ParseError        bad input, wrong builtin arguments
    ├── ResolutionError
    │   └── CommandNotFound
    └── ExecutionError    fork, chdir and file descriptor failures

Every ShellError is recovered at the iteration boundary of the REPL loop.
"""

import os

from djsh.config import ERROR_MESSAGE


class ShellError(Exception):
    """Base class for recoverable interpreter errors."""


class ParseError(ShellError):
    pass


class ResolutionError(ShellError):
    pass


class CommandNotFound(ResolutionError):
    def __init__(self, name):
        super().__init__(f"command not found: {name}")
        self.name = name


class ExecutionError(ShellError):
    pass


def report_error():
    """Write the one uniform diagnostic line to fd 2."""
    os.write(2, os.fsencode(ERROR_MESSAGE))
