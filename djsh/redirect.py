import os
import sys
from contextlib import contextmanager

import structlog

from djsh.config import REDIRECT_MODE
from djsh.errors import ExecutionError

STDOUT_FILENO = 1

logger = structlog.get_logger(__name__)


def _flush_stdout():
    try:
        sys.stdout.flush()
    except (AttributeError, ValueError):
        pass


def open_target(filename):
    """Open a redirect target write-only, creating or truncating it."""
    try:
        return os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, REDIRECT_MODE)
    except OSError as e:
        raise ExecutionError(f"cannot open {filename!r} for redirection: {e}") from e


@contextmanager
def redirect_stdout(filename):
    """
    Point fd 1 at `filename` for the duration of the block.

    The original descriptor is restored and the file closed when the block
    exits, whether or not the command inside it raised.
    """
    fd = open_target(filename)
    _flush_stdout()
    try:
        saved = os.dup(STDOUT_FILENO)
    except OSError as e:
        os.close(fd)
        raise ExecutionError(f"cannot save stdout: {e}") from e
    try:
        os.dup2(fd, STDOUT_FILENO)
    except OSError as e:
        os.close(saved)
        os.close(fd)
        raise ExecutionError(f"cannot redirect stdout: {e}") from e

    logger.debug("stdout redirected", target=filename)
    try:
        yield fd
    finally:
        _flush_stdout()
        os.dup2(saved, STDOUT_FILENO)
        os.close(saved)
        os.close(fd)
        logger.debug("stdout restored", target=filename)
