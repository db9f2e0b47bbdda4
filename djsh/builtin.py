import os

import structlog

from djsh.config import MAX_HISTORY
from djsh.errors import ExecutionError, ParseError

STDOUT_FILENO = 1

logger = structlog.get_logger(__name__)


def write_out(text):
    """Write straight to fd 1 so output follows any active redirection."""
    os.write(STDOUT_FILENO, os.fsencode(text))


def builtin_exit(session, cmd):
    """Stop the interpreter with status 0"""
    if cmd.argc:
        raise ParseError("exit takes no arguments")
    session.stop(0)


def builtin_cd(session, cmd):
    """Change directory"""
    if cmd.argc != 1:
        raise ParseError(f"cd takes exactly one argument, got {cmd.argc}")
    try:
        os.chdir(cmd.args[0])
    except OSError as e:
        raise ExecutionError(f"cd: {e}") from e
    logger.debug("cwd changed", cwd=os.getcwd())


def builtin_path(session, cmd):
    """Show the search path, or replace it with the first argument"""
    if not cmd.args:
        current = session.path.get()
        if current is not None:
            write_out(current + "\n")
        return
    session.path.set(cmd.args[0])


def parse_history_count(raw):
    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(f"history: not a number: {raw!r}")
    n = int(raw)
    if n < 0 or n > MAX_HISTORY:
        raise ParseError(f"history: {n} outside 0..{MAX_HISTORY}")
    return n


def builtin_history(session, cmd):
    """Show command history"""
    n = parse_history_count(cmd.args[0]) if cmd.args else None
    entries = session.history.last(n)
    if entries:
        write_out("".join(entry + "\n" for entry in entries))


BUILTINS = {
    "exit": builtin_exit,
    "cd": builtin_cd,
    "path": builtin_path,
    "history": builtin_history,
}


def execute_builtin(session, cmd):
    """
    Execute a built-in command if the name matches.
    Returns True when the command was handled here.
    """
    handler = BUILTINS.get(cmd.name)
    if handler is None:
        return False
    logger.debug("builtin", name=cmd.name, args=cmd.args)
    handler(session, cmd)
    return True
