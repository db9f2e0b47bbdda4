import os
import sys
from enum import Enum

import structlog

from djsh.errors import ExecutionError, report_error

logger = structlog.get_logger(__name__)


class LaunchStrategy(Enum):
    """How the child replaces itself with the resolved program."""
    EXECL = "execlp"
    EXECV = "execvp"

    @classmethod
    def from_flag(cls, flag):
        """Map a startup flag like `-execvp` to a strategy, None if unknown."""
        for strategy in cls:
            if flag == "-" + strategy.value:
                return strategy
        return None

    def launch(self, path, name, args):
        if self is LaunchStrategy.EXECL:
            os.execl(path, os.path.basename(name), *args)
        else:
            os.execv(path, [name, *args])


def _flush_std():
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, ValueError):
            pass


def run_external(session, cmd):
    """
    Run a non-builtin command in a child process and wait for it.
    Returns the child's exit code. Raises CommandNotFound before forking
    when the name does not resolve.
    """
    path = session.path.resolve(cmd.name)

    # Anything still buffered would otherwise be written twice
    _flush_std()
    try:
        pid = os.fork()
    except OSError as e:
        raise ExecutionError(f"fork failed: {e}") from e

    if pid == 0:
        try:
            session.strategy.launch(path, cmd.name, cmd.args)
        except OSError as e:
            logger.debug("exec failed", path=path, error=str(e))
        finally:
            report_error()
            os._exit(1)

    _, status = os.waitpid(pid, 0)
    code = os.waitstatus_to_exitcode(status)
    logger.debug("child exited", command=cmd.name, pid=pid, code=code)
    return code
