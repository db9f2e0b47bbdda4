import os
import sys
from contextlib import ExitStack

import structlog

from djsh.builtin import execute_builtin
from djsh.config import PROMPT
from djsh.errors import ExecutionError, ParseError, ShellError, report_error
from djsh.executor import run_external
from djsh.history import init_readline
from djsh.parser import parse_command, strip_line
from djsh.redirect import redirect_stdout
from djsh.session import Session

logger = structlog.get_logger(__name__)


class Shell:
    """
    The djsh REPL.

    Each pass prompts, reads a line, records it in history, tokenizes it,
    applies redirection if asked for, runs the builtin or external command
    and finally restores stdout. Errors never end the loop; only `exit` or
    end of input do.

    Example:
        >>> Shell(Session()).run()
    """

    def __init__(self, session=None):
        self.session = session if session is not None else Session()

    def report(self, error):
        logger.debug("command failed", kind=type(error).__name__, error=str(error))
        report_error()

    def dispatch(self, cmd):
        try:
            if not execute_builtin(self.session, cmd):
                run_external(self.session, cmd)
        except ShellError as e:
            self.report(e)

    def run_line(self, line):
        """Process one input line, already stripped of its terminator."""
        self.session.history.record(line)

        try:
            cmd = parse_command(line, self.session.max_args)
        except ParseError as e:
            self.report(e)
            return

        if cmd.redirect_error:
            # Still run the command, just without redirection
            self.report(ParseError("redirection without a target"))

        with ExitStack() as stack:
            if cmd.redirect is not None:
                try:
                    stack.enter_context(redirect_stdout(cmd.redirect))
                except ExecutionError as e:
                    self.report(e)
            self.dispatch(cmd)

    def read_line(self):
        """
        Prompt and read one line, None at end of input.

        Terminals go through input() so readline editing works. Anything else
        is read as bytes and decoded with surrogateescape, so lines that are
        not valid text still round-trip to history, arguments and files.
        """
        if sys.stdin.isatty():
            try:
                return input(PROMPT)
            except EOFError:
                return None
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        raw = sys.stdin.buffer.readline()
        if not raw:
            return None
        return os.fsdecode(raw)

    def run(self):
        """Main loop. Returns the interpreter's exit status."""
        init_readline(self.session.history.capacity)

        while self.session.running:
            try:
                line = self.read_line()
            except UnicodeDecodeError as e:
                self.report(e)
                continue
            if line is None:
                logger.debug("end of input")
                break

            try:
                self.run_line(strip_line(line))
            except MemoryError:
                report_error()
                return 1

        return self.session.exit_code
